"""Bounded byte-buffer transcoders: HTML entities, percent-encoding, base64."""

from .core.b64 import b64_decode, b64_encode
from .core.buffer import OutputBuffer, terminate
from .core.constants import Policy
from .core.errors import MalformedInput, OverflowDetected, TranscodeError
from .core.html import html_entity_encode
from .core.result import Result, Status
from .core.url import url_decode, url_encode

__all__ = [
    "html_entity_encode",
    "url_decode",
    "url_encode",
    "b64_encode",
    "b64_decode",
    "OutputBuffer",
    "terminate",
    "Policy",
    "Result",
    "Status",
    "TranscodeError",
    "OverflowDetected",
    "MalformedInput",
]
