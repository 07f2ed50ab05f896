from __future__ import annotations

import structlog

from .constants import MAX_LOG_PREVIEW, PROJECT_NAME

def resolve_logger(logger=None):
    if logger is not None:
        return logger
    return structlog.get_logger(PROJECT_NAME)

def preview(data) -> str:
    """Printable, bounded rendering of output bytes for log events."""
    raw = bytes(data[:MAX_LOG_PREVIEW])
    text = raw.decode("ascii", errors="backslashreplace").replace("\x00", "\\x00")
    if len(data) > MAX_LOG_PREVIEW:
        text += "..."
    return text
