"""pytest fixtures for create-dummy-file tests."""

import random
from pathlib import Path

import pytest


def expected_pattern(pattern: bytes, size: int) -> bytes:
    """Return ``size`` bytes of ``pattern`` repeated, computed the slow way."""
    return bytes(pattern[i % len(pattern)] for i in range(size))


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    return tmp_path / "dummy.bin"


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(20240705)
