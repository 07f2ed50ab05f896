"""
Shared pytest fixtures and configuration.
"""

import pytest
import structlog

GUARD = 0xA5
GUARD_LEN = 8


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() a CLI test performed."""
    yield
    structlog.reset_defaults()


class Guarded:
    """Output buffer with guard bytes after ``capacity``."""

    def __init__(self, capacity: int, fill: int = 0x00):
        self.capacity = capacity
        self.buf = bytearray([fill]) * capacity + bytearray([GUARD]) * GUARD_LEN

    def guard_intact(self) -> bool:
        return all(b == GUARD for b in self.buf[self.capacity:])

    def output(self, n: int) -> bytes:
        return bytes(self.buf[:n])


@pytest.fixture
def guarded():
    """Factory for guard-protected output buffers.

    Usage: ``g = guarded(8)`` then pass ``g.buf`` with ``capacity=g.capacity``.
    """
    return Guarded


@pytest.fixture
def sample_bytes():
    """Deterministic byte strings covering every byte value and odd lengths."""
    import random
    rng = random.Random(1337)
    samples = [b"", b"\x00", bytes(range(256)), b"hello world", "café ☃".encode("utf-8")]
    samples += [bytes(rng.randrange(256) for _ in range(n)) for n in (1, 2, 3, 4, 5, 31, 64, 100)]
    return samples
