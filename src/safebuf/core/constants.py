from __future__ import annotations
from typing import Literal

CODEC = Literal["html", "url", "b64"]

PROJECT_NAME = "safebuf"
PROJECT_VER = "1.0"

# Numeric character references for the reserved HTML bytes
HTML_ENTITIES = {
    ord('"'): b"&#34;",
    ord("#"): b"&#35;",
    ord("&"): b"&#38;",
    ord("'"): b"&#39;",
    ord("+"): b"&#43;",
    ord("<"): b"&#60;",
    ord(">"): b"&#62;",
}
HTML_ENTITY_WIDTH = 5

URL_UNRESERVED = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b"0123456789"
    b"-_.~"
)
URL_ESCAPE_WIDTH = 3
URL_HEX_DIGITS = b"0123456789abcdef"

B64_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
B64_PAD = ord("=")
B64_GROUP_IN = 3
B64_GROUP_OUT = 4

class Policy:
    SKIP_INVALID = "skip_invalid"
    STRICT = "strict"

POLICIES = {Policy.SKIP_INVALID, Policy.STRICT}

# Output buffer sizing for the CLI and HTTP adapter
DEFAULT_CAPACITY = 4 * 1024
MAX_CAPACITY = 1024 * 1024
MAX_INPUT_BYTES = 256 * 1024

MAX_LOG_PREVIEW = 64

OPERATIONS = {
    "html-encode": ("html", "encode"),
    "url-encode": ("url", "encode"),
    "url-decode": ("url", "decode"),
    "b64-encode": ("b64", "encode"),
    "b64-decode": ("b64", "decode"),
}
