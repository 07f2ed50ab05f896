from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple

from .b64 import b64_decode, b64_encode, b64_encoded_size
from .constants import HTML_ENTITIES, HTML_ENTITY_WIDTH, MAX_INPUT_BYTES, URL_ESCAPE_WIDTH, URL_UNRESERVED, Policy
from .html import html_entity_encode
from .url import url_decode, url_encode
from .validation import validate_bytes_length

def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)

def html_encoded_size(data) -> int:
    return sum(HTML_ENTITY_WIDTH if b in HTML_ENTITIES else 1 for b in _as_bytes(data))

def url_encoded_size(data) -> int:
    return sum(1 if b in URL_UNRESERVED else URL_ESCAPE_WIDTH for b in _as_bytes(data))

def url_decoded_size_bound(data) -> int:
    return len(_as_bytes(data))

def b64_decoded_size_bound(data) -> int:
    return 3 * (len(_as_bytes(data)) // 4)

def _b64_sized(data) -> int:
    return b64_encoded_size(len(_as_bytes(data)))

Transcoder = Tuple[Callable, Callable]

CODECS: Dict[str, Dict[str, Transcoder]] = {
    "html": {
        "encode": (html_entity_encode, html_encoded_size),
    },
    "url": {
        "encode": (url_encode, url_encoded_size),
        "decode": (url_decode, url_decoded_size_bound),
    },
    "b64": {
        "encode": (b64_encode, _b64_sized),
        "decode": (b64_decode, b64_decoded_size_bound),
    },
}

def transcode(codec: str, direction: str, data, capacity: Optional[int] = None, logger=None, **kwargs) -> bytes:
    """Run one transcoder over ``data`` with an exactly sized buffer.

    ``capacity`` replaces the computed size. Failures raise TranscodeError.
    """
    try:
        fn, sizer = CODECS[codec][direction]
    except KeyError:
        raise ValueError(f"Unknown operation: {codec} {direction}") from None

    src = _as_bytes(data)
    buf = bytearray(sizer(src) if capacity is None else capacity)
    n = fn(buf, src, logger=logger, **kwargs).unwrap()
    return bytes(buf[:n])

def html_escape(data) -> bytes:
    return transcode("html", "encode", data)

def url_quote(data) -> str:
    return transcode("url", "encode", data).decode("ascii")

def url_unquote(data) -> bytes:
    return transcode("url", "decode", data)

def b64e(b) -> str:
    """Encode bytes to padded base64 text."""
    return transcode("b64", "encode", b).decode("ascii")

def b64d(s, strict: bool = True) -> bytes:
    """Decode base64 text, rejecting foreign symbols unless ``strict`` is off."""
    raw = _as_bytes(s)
    validate_bytes_length(raw, "base64", 0, MAX_INPUT_BYTES)
    policy = Policy.STRICT if strict else Policy.SKIP_INVALID
    return transcode("b64", "decode", raw, policy=policy)
