from __future__ import annotations
from dataclasses import dataclass

from .errors import MalformedInput, OverflowDetected, TranscodeError

class Status:
    OK = "ok"
    OVERFLOW = "overflow"
    MALFORMED = "malformed"

@dataclass(frozen=True)
class Result:
    """Outcome of one transcoder call.

    ``length`` counts the meaningful bytes written on success and is 0 on
    failure; bytes left in the buffer by a failed call are never counted.
    """

    status: str
    length: int = 0

    @property
    def ok(self) -> bool:
        return self.status == Status.OK

    @classmethod
    def success(cls, length: int) -> "Result":
        return cls(Status.OK, length)

    @classmethod
    def overflow(cls) -> "Result":
        return cls(Status.OVERFLOW)

    @classmethod
    def malformed(cls) -> "Result":
        return cls(Status.MALFORMED)

    def unwrap(self) -> int:
        if self.status == Status.OK:
            return self.length
        if self.status == Status.OVERFLOW:
            raise OverflowDetected(self.status, "output buffer too small")
        if self.status == Status.MALFORMED:
            raise MalformedInput(self.status, "malformed input")
        raise TranscodeError(self.status)
