"""Test fixtures for generation tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from proptest_core.generation import Random, Shrinkable, make_random


def _chain(n: int) -> Shrinkable[int]:
    return Shrinkable(n, lambda: [_chain(n - 1)] if n > 0 else [])


@pytest.fixture
def random() -> Random:
    """Seeded randomness source."""
    return make_random(1234)


@pytest.fixture
def chain() -> Callable[[int], Shrinkable[int]]:
    """Factory for n -> n-1 -> ... -> 0 shrink chains."""
    return _chain
