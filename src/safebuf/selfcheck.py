from __future__ import annotations
import sys

from .core.b64 import b64_decode, b64_encode
from .core.encoding import CODECS, transcode
from .core.html import html_entity_encode
from .core.result import Status
from .core.url import url_decode, url_encode

GUARD = 0xA5
GUARD_LEN = 4

_LITERALS = [
    ("html", "encode", b'<b>"x"</b>', b"&#60;b&#62;&#34;x&#34;&#60;/b&#62;"),
    ("url", "encode", b"a b/c", b"a%20b%2fc"),
    ("url", "decode", b"a%20b%2Fc", b"a b/c"),
    ("b64", "encode", b"Man", b"TWFu"),
    ("b64", "encode", b"Ma", b"TWE="),
    ("b64", "encode", b"M", b"TQ=="),
    ("b64", "decode", b"TWFu", b"Man"),
    ("b64", "decode", b"TW-Fu", b"Man"),
]

_GUARDED = [
    ("html_entity_encode", html_entity_encode, b"<a href='#'>", 32),
    ("url_encode", url_encode, b"a b/c", 9),
    ("url_decode", url_decode, b"a%20b", 3),
    ("b64_encode", b64_encode, b"Man!", 8),
    ("b64_decode", b64_decode, b"TWFuIQ==", 4),
]

def overflow_guard_holds(fn, src: bytes, required: int, logger=None) -> bool:
    """Capacity one short of ``required`` must overflow without touching the guard."""
    capacity = required - 1
    buf = bytearray(capacity + GUARD_LEN)
    buf[capacity:] = bytes([GUARD]) * GUARD_LEN
    res = fn(buf, src, capacity=capacity, logger=logger)
    return res.status == Status.OVERFLOW and all(b == GUARD for b in buf[capacity:])

def _literal_ok(codec: str, direction: str, src: bytes, expected: bytes, logger) -> bool:
    try:
        return transcode(codec, direction, src, logger=logger) == expected
    except ValueError:
        return False

def self_check(logger):
    checks = []

    checks.append(("Python >= 3.9", sys.version_info >= (3, 9), "Python 3.9+ required"))

    for codec, direction, src, expected in _LITERALS:
        name = f"{codec} {direction} {src!r}"
        checks.append((name, _literal_ok(codec, direction, src, expected, logger), f"expected {expected!r}"))

    malformed = [url_decode(bytearray(4), s, logger=logger).status for s in (b"%2", b"%2g")]
    checks.append(("URL malformed escape", all(s == Status.MALFORMED for s in malformed), "Malformed escape accepted"))

    for name, fn, src, required in _GUARDED:
        checks.append((f"{name} overflow guard", overflow_guard_holds(fn, src, required, logger),
                       "Overflow not reported or guard overwritten"))

    registered = sum(len(v) for v in CODECS.values())
    checks.append(("Codec registry", registered == 5, f"expected 5 transcoders, found {registered}"))

    all_ok = True
    for name, ok, reason in checks:
        all_ok = all_ok and ok
        if ok:
            logger.info("self_check", check=name, status="OK")
        else:
            logger.error("self_check", check=name, status="FAILED", reason=reason)

    if not all_ok:
        raise RuntimeError("Self-check failed")

    logger.info("self_check_passed")
    return True
