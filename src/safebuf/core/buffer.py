from __future__ import annotations
from typing import Optional

from .validation import output_view

class OutputBuffer:
    """Fixed-capacity writer over a caller-owned buffer.

    Every unit is reserved before it is written, so a write can never land
    past ``capacity``.
    """

    def __init__(self, buf, capacity: Optional[int] = None):
        self._view = output_view(buf, capacity)
        self.capacity = len(self._view)
        self.length = 0

    @property
    def remaining(self) -> int:
        return self.capacity - self.length

    def reserve(self, n: int) -> bool:
        return n <= self.remaining

    def write(self, unit) -> None:
        n = len(unit)
        if not self.reserve(n):
            raise OverflowError(f"write of {n} bytes exceeds remaining {self.remaining}")
        self._view[self.length:self.length + n] = unit
        self.length += n

    def put(self, byte: int) -> None:
        if not self.reserve(1):
            raise OverflowError("write of 1 byte exceeds remaining 0")
        self._view[self.length] = byte
        self.length += 1

    def written(self) -> bytes:
        return self._view[:self.length].tobytes()

def terminate(buf, length: int, capacity: Optional[int] = None) -> bool:
    """Append a zero byte after ``length`` payload bytes if room remains.

    The returned length of a transcoder never includes this byte. Returns
    False, writing nothing, when the buffer is full.
    """
    view = output_view(buf, capacity)
    if not 0 <= length < len(view):
        return False
    view[length] = 0
    return True
