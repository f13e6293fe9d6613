"""Deterministic string pair generators for performance benchmarks.

All generators produce fixed, reproducible strings. No random values.
Three tiers: 10, 100 and 1000 characters.
Each tier provides both "similar" and "dissimilar" pair generators.
"""

from __future__ import annotations

import pytest

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def generate_text(length: int, offset: int = 0) -> str:
    """Cycle through the alphabet starting at ``offset``."""
    return "".join(_ALPHABET[(i + offset) % len(_ALPHABET)] for i in range(length))


def _make_similar(length: int) -> tuple[str, str]:
    """Same text with every seventh character replaced."""
    left = generate_text(length)
    right = "".join("#" if i % 7 == 3 else ch for i, ch in enumerate(left))
    return left, right


def _make_dissimilar(length: int) -> tuple[str, str]:
    """Texts that share an alphabet but never align position by position."""
    return generate_text(length), generate_text(length, offset=13)[::-1]


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10_similar() -> tuple[str, str]:
    return _make_similar(10)


@pytest.fixture
def pair_10_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(10)


@pytest.fixture
def pair_100_similar() -> tuple[str, str]:
    return _make_similar(100)


@pytest.fixture
def pair_100_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(100)


@pytest.fixture
def pair_1000_similar() -> tuple[str, str]:
    """1000-character pair; quadratic metrics dominate this tier."""
    return _make_similar(1000)


@pytest.fixture
def pair_1000_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(1000)
