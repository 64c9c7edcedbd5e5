"""Shared pytest fixtures for dumpx tests."""

from __future__ import annotations

import random

import pytest

from dumpx.formatter import HexFormatter


@pytest.fixture()
def formatter() -> HexFormatter:
    """A formatter with the default options (16 bytes, groups of 4, lowercase)."""
    return HexFormatter()


@pytest.fixture()
def all_bytes() -> bytes:
    """Every byte value once, in order."""
    return bytes(range(256))


@pytest.fixture()
def random_data() -> bytes:
    """~200 KB of random bytes, larger than a single read chunk."""
    rng = random.Random(42)
    return bytes(rng.getrandbits(8) for _ in range(200_003))


@pytest.fixture()
def hello_file(tmp_path):
    path = tmp_path / "hello.bin"
    path.write_bytes(b"Hello")
    return path
