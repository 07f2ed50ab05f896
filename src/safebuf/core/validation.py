from __future__ import annotations
from typing import Optional

def validate_bytes_length(data, name: str, min_len: int, max_len: int = None):
    if len(data) < min_len:
        raise ValueError(f"{name} too short: {len(data)} < {min_len}")
    if max_len and len(data) > max_len:
        raise ValueError(f"{name} too long: {len(data)} > {max_len}")

def _check_bound(value: int, name: str, limit: int):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")
    if value > limit:
        raise ValueError(f"{name} too large: {value} > {limit}")

def input_view(src, length: Optional[int] = None) -> memoryview:
    """Return a read-only byte view of exactly ``length`` bytes of ``src``.

    The source need not be NUL-terminated; bytes past ``length`` are never
    read.
    """
    if isinstance(src, str):
        raise TypeError("input must be bytes-like, not str")
    view = memoryview(src).cast("B")
    if length is None:
        return view.toreadonly()
    _check_bound(length, "length", len(view))
    return view[:length].toreadonly()

def output_view(buf, capacity: Optional[int] = None) -> memoryview:
    """Return a writable byte view limited to ``capacity`` bytes of ``buf``."""
    view = memoryview(buf).cast("B")
    if view.readonly:
        raise TypeError("output buffer must be writable")
    if capacity is None:
        return view
    _check_bound(capacity, "capacity", len(view))
    return view[:capacity]
