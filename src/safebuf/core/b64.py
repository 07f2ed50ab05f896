from __future__ import annotations

from .buffer import OutputBuffer
from .constants import B64_ALPHABET, B64_GROUP_IN, B64_GROUP_OUT, B64_PAD, POLICIES, Policy
from .logsink import preview, resolve_logger
from .result import Result
from .validation import input_view

_DECODE_TABLE = {c: i for i, c in enumerate(B64_ALPHABET)}
_DECODE_TABLE[B64_PAD] = 0

def b64_encoded_size(n: int) -> int:
    return B64_GROUP_OUT * -(-n // B64_GROUP_IN)

def b64_encode(buf, src, length=None, *, capacity=None, logger=None) -> Result:
    """Encode ``src`` as padded standard base64 into ``buf``.

    Each 4-byte group is reserved before it is written. On success the
    length is always ``4 * ceil(n / 3)``.
    """
    log = resolve_logger(logger)
    data = input_view(src, length)
    out = OutputBuffer(buf, capacity)
    n = len(data)

    for i in range(0, n, B64_GROUP_IN):
        if not out.reserve(B64_GROUP_OUT):
            log.error("buffer_overflow", codec="b64_encode", capacity=out.capacity)
            return Result.overflow()

        real = min(B64_GROUP_IN, n - i)
        v = data[i] << 16
        if real > 1:
            v |= data[i + 1] << 8
        if real > 2:
            v |= data[i + 2]

        out.write(bytes((
            B64_ALPHABET[(v >> 18) & 0x3F],
            B64_ALPHABET[(v >> 12) & 0x3F],
            B64_ALPHABET[(v >> 6) & 0x3F] if real > 1 else B64_PAD,
            B64_ALPHABET[v & 0x3F] if real > 2 else B64_PAD,
        )))

    total = b64_encoded_size(n)
    log.debug("b64_encoded", preview=preview(out.written()), length=total)
    return Result.success(total)

def b64_decode(buf, src, length=None, *, capacity=None, policy=Policy.SKIP_INVALID,
               stop_at_nul=False, logger=None) -> Result:
    """Decode base64 text from ``src`` into ``buf``.

    Bytes outside the alphabet are skipped under ``Policy.SKIP_INVALID``
    and reported as MALFORMED under ``Policy.STRICT``, which also rejects
    an incomplete final quad, a symbol after ``=``, more than two ``=`` in
    a quad and any quad after a padded one. Each complete quad yields three
    bytes, one fewer per trailing ``=`` (at most two); symbols left over
    after the last complete quad are dropped. With ``stop_at_nul`` scanning
    ends at the first zero byte.
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown base64 policy: {policy}")

    log = resolve_logger(logger)
    data = input_view(src, length)
    out = OutputBuffer(buf, capacity)

    acc = 0
    accepted = 0
    pad = 0
    padded = False
    skipped = 0

    for offset, c in enumerate(data):
        if c == 0 and stop_at_nul:
            break

        sextet = _DECODE_TABLE.get(c)
        if sextet is None:
            if policy == Policy.STRICT:
                log.warning("malformed_input", codec="b64_decode", offset=offset, reason="invalid_symbol")
                return Result.malformed()
            skipped += 1
            continue

        if policy == Policy.STRICT and (padded or (pad and c != B64_PAD) or (c == B64_PAD and pad == 2)):
            log.warning("malformed_input", codec="b64_decode", offset=offset, reason="misplaced_padding")
            return Result.malformed()

        pad = pad + 1 if c == B64_PAD else 0
        acc = ((acc << 6) | sextet) & 0xFFFFFF
        accepted += 1
        if accepted % B64_GROUP_OUT:
            continue

        count = B64_GROUP_IN - min(pad, 2)
        if not out.reserve(count):
            log.error("buffer_overflow", codec="b64_decode", capacity=out.capacity)
            return Result.overflow()
        out.write(acc.to_bytes(B64_GROUP_IN, "big")[:count])
        padded = padded or pad > 0
        pad = 0

    if accepted % B64_GROUP_OUT and policy == Policy.STRICT:
        log.warning("malformed_input", codec="b64_decode", offset=len(data), reason="incomplete_quad")
        return Result.malformed()

    log.debug("b64_decoded", preview=preview(out.written()), length=out.length, skipped=skipped)
    return Result.success(out.length)
