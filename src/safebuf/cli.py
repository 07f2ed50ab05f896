from __future__ import annotations

import argparse
import sys

import structlog

from .core.constants import MAX_CAPACITY, MAX_INPUT_BYTES, PROJECT_VER, Policy
from .core.encoding import CODECS, transcode
from .core.errors import MalformedInput, OverflowDetected
from .selfcheck import self_check

def configure_logger():
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    return structlog.get_logger()

def _capacity(value: str) -> int:
    n = int(value)
    if not 0 <= n <= MAX_CAPACITY:
        raise argparse.ArgumentTypeError(f"capacity must be within 0..{MAX_CAPACITY}")
    return n

def _read_input(text):
    if text is not None:
        return text.encode("utf-8")
    data = sys.stdin.buffer.read(MAX_INPUT_BYTES + 1)
    if len(data) > MAX_INPUT_BYTES:
        raise ValueError(f"input too long: > {MAX_INPUT_BYTES}")
    return data

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"safebuf bounded transcoders {PROJECT_VER}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for direction in ("encode", "decode"):
        codecs = sorted(c for c, ops in CODECS.items() if direction in ops)
        p = subparsers.add_parser(direction, help=f"{direction.capitalize()} TEXT (or stdin) with a codec")
        p.add_argument("codec", choices=codecs)
        p.add_argument("text", nargs="?")
        p.add_argument("--capacity", type=_capacity, help="Fixed output buffer size (default: exact)")
        if direction == "decode":
            p.add_argument("--strict", action="store_true", help="b64 only: reject non-alphabet symbols")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP transcoding adapter")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    subparsers.add_parser("check", help="Run the transcoder self-check")
    return parser

def main(argv=None):
    logger = configure_logger()
    args = build_parser().parse_args(argv)

    if args.command == "check":
        try:
            self_check(logger)
        except RuntimeError as e:
            print(f"Error: {e}")
            return 1
        print("✓ Self-check passed")
        return 0

    if args.command == "serve":
        self_check(logger)
        import uvicorn
        from .service.app import build_app
        app = build_app(logger)
        logger.info("starting_service", host=args.host, port=args.port)
        uvicorn.run(app, host=args.host, port=args.port, log_config=None)
        return 0

    kwargs = {}
    if args.command == "decode" and args.codec == "b64" and args.strict:
        kwargs["policy"] = Policy.STRICT

    try:
        data = _read_input(args.text)
        out = transcode(args.codec, args.command, data, capacity=args.capacity, logger=logger, **kwargs)
    except OverflowDetected as e:
        logger.error("transcode_failed", codec=args.codec, status=e.status)
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except MalformedInput as e:
        logger.error("transcode_failed", codec=args.codec, status=e.status)
        print(f"Error: {e}", file=sys.stderr)
        return 3
    except Exception as e:
        logger.error("unexpected_error", error=str(e))
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 4

    sys.stdout.buffer.write(out)
    sys.stdout.buffer.flush()
    return 0
