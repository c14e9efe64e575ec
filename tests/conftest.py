"""Pytest fixtures for rangemath tests."""

from __future__ import annotations

import random
from dataclasses import dataclass

import pytest

from rangemath import Inclusivity, Range


@dataclass(frozen=True)
class Span:
    """Plain range-shaped object that is not a Range."""

    minimum: int
    maximum: int
    inclusivity: Inclusivity = Inclusivity.MIN_INCLUSIVE_MAX_INCLUSIVE


def random_range(rng: random.Random, low: int = -20, high: int = 20) -> Range[int]:
    """Draw a range with random bounds and inclusivity.

    Bounds are drawn independently, so degenerate ranges occur too.
    """
    return Range(
        rng.randint(low, high),
        rng.randint(low, high),
        rng.choice(list(Inclusivity)),
    )


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random generator."""
    return random.Random(42)


@pytest.fixture
def range_pairs(rng: random.Random) -> list[tuple[Range[int], Range[int]]]:
    """Provide random pairs of integer ranges."""
    return [(random_range(rng), random_range(rng)) for _ in range(500)]


@pytest.fixture
def span_cls() -> type[Span]:
    """Provide the range-shaped dataclass."""
    return Span
