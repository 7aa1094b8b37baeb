# tests/conftest.py
# Shared fixtures for the masscompare test suite.
# Files are built under pytest's tmp_path. Payloads are deterministic.

from pathlib import Path
from typing import Callable

import pytest


def payload(size: int, seed: int = 0) -> bytes:
    """
    Deterministic non-repeating-per-chunk byte pattern of the given size.

    The 251-byte period is prime, so chunk boundaries never line up with
    the pattern.
    """
    base = bytes((i * 7 + seed) % 256 for i in range(251))
    return (base * (size // 251 + 1))[:size]


def flip_byte(data: bytes, offset: int) -> bytes:
    """Return data with the byte at offset inverted."""
    mutated = bytearray(data)
    mutated[offset] ^= 0xFF
    return bytes(mutated)


@pytest.fixture
def write_file() -> Callable[[Path, bytes], str]:
    def _write(path: Path, data: bytes) -> str:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return str(path)
    return _write


@pytest.fixture
def dir_pair(tmp_path: Path):
    """Two empty sibling directories A and B."""
    dir_a = tmp_path / "A"
    dir_b = tmp_path / "B"
    dir_a.mkdir()
    dir_b.mkdir()
    return dir_a, dir_b
