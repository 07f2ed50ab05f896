from __future__ import annotations

from .buffer import OutputBuffer
from .constants import HTML_ENTITIES
from .logsink import preview, resolve_logger
from .result import Result
from .validation import input_view

def html_entity_encode(buf, src, length=None, *, capacity=None, logger=None) -> Result:
    """Escape ``" # & ' + < >`` as ``&#NN;`` into ``buf``.

    Any other byte is copied unchanged. Returns OVERFLOW as soon as a unit
    does not fit; no partial entity is written.
    """
    log = resolve_logger(logger)
    data = input_view(src, length)
    out = OutputBuffer(buf, capacity)

    for b in data:
        entity = HTML_ENTITIES.get(b)
        if entity is None:
            if not out.reserve(1):
                log.error("buffer_overflow", codec="html_entity_encode", capacity=out.capacity)
                return Result.overflow()
            out.put(b)
            continue
        if not out.reserve(len(entity)):
            log.error("buffer_overflow", codec="html_entity_encode", capacity=out.capacity)
            return Result.overflow()
        out.write(entity)

    log.debug("html_entity_encoded", preview=preview(out.written()), length=out.length)
    return Result.success(out.length)
