from __future__ import annotations


class TranscodeError(ValueError):
    """A transcoder reported a failure outcome."""

    def __init__(self, status: str, message: str = ""):
        self.status = status
        super().__init__(message or status)


class OverflowDetected(TranscodeError):
    pass


class MalformedInput(TranscodeError):
    pass
