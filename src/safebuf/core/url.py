from __future__ import annotations

from .buffer import OutputBuffer
from .constants import URL_ESCAPE_WIDTH, URL_HEX_DIGITS, URL_UNRESERVED
from .logsink import preview, resolve_logger
from .result import Result
from .validation import input_view

def _hex_value(c: int) -> int:
    if 0x30 <= c <= 0x39:
        return c - 0x30
    if 0x41 <= c <= 0x46:
        return c - 0x41 + 10
    if 0x61 <= c <= 0x66:
        return c - 0x61 + 10
    return -1

def url_decode(buf, src, length=None, *, capacity=None, logger=None) -> Result:
    """Decode ``%XX`` escapes from ``src`` into ``buf``.

    A ``%`` not followed by two hex digits is MALFORMED. OVERFLOW is
    reported when the buffer fills before the input is consumed.
    """
    log = resolve_logger(logger)
    data = input_view(src, length)
    out = OutputBuffer(buf, capacity)
    n = len(data)

    i = 0
    while i < n:
        if not out.reserve(1):
            log.error("buffer_overflow", codec="url_decode", capacity=out.capacity)
            return Result.overflow()

        c = data[i]
        if c != 0x25:
            out.put(c)
            i += 1
            continue

        if i + 2 >= n:
            log.warning("malformed_input", codec="url_decode", offset=i, reason="truncated_escape")
            return Result.malformed()
        hi, lo = _hex_value(data[i + 1]), _hex_value(data[i + 2])
        if hi < 0 or lo < 0:
            log.warning("malformed_input", codec="url_decode", offset=i, reason="non_hex_digit")
            return Result.malformed()

        out.put(16 * hi + lo)
        i += 3

    log.debug("url_decoded", preview=preview(out.written()), length=out.length)
    return Result.success(out.length)

def url_encode(buf, src, length=None, *, capacity=None, logger=None) -> Result:
    """Percent-escape every byte outside ``A-Za-z0-9-_.~`` using lowercase hex."""
    log = resolve_logger(logger)
    data = input_view(src, length)
    out = OutputBuffer(buf, capacity)

    for b in data:
        if b in URL_UNRESERVED:
            if not out.reserve(1):
                log.error("buffer_overflow", codec="url_encode", capacity=out.capacity)
                return Result.overflow()
            out.put(b)
            continue
        if not out.reserve(URL_ESCAPE_WIDTH):
            log.error("buffer_overflow", codec="url_encode", capacity=out.capacity)
            return Result.overflow()
        out.write(bytes((0x25, URL_HEX_DIGITS[b >> 4], URL_HEX_DIGITS[b & 15])))

    log.debug("url_encoded", preview=preview(out.written()), length=out.length)
    return Result.success(out.length)
