"""Collection generators built from element generators.

Lengths are bounded by ``size``; every element is sampled at the same size,
in collection order. All collections shrink through
:class:`ShrinkableCollection`: removing elements first, simplifying
elements after, so minimization converges toward fewer and simpler
elements.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, TypeVar

from proptest_core.generation.generator import Generator, Random, combine
from proptest_core.generation.shrinkable import Shrinkable, ShrinkableCollection

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _entry_key(entry: tuple[Any, Any]) -> Any:
    return entry[0]


def _identity(value: Any) -> Any:
    return value


def _sample_distinct(
    element: Generator[Any],
    random: Random,
    size: int,
    count: int,
    key: Any,
) -> list[Shrinkable[Any]]:
    """Sample ``count`` elements, keeping the first of each distinct key."""
    elements: list[Shrinkable[Any]] = []
    seen: set[Hashable] = set()
    for _ in range(count):
        shrinkable = element(random, size)
        k = key(shrinkable.value)
        if k in seen:
            continue
        seen.add(k)
        elements.append(shrinkable)
    return elements


def lists(element: Generator[T]) -> Generator[list[T]]:
    """Lists of at most ``size`` elements."""

    def generate(random: Random, size: int) -> Shrinkable[list[T]]:
        length = int(random.integers(0, size, endpoint=True))
        return ShrinkableCollection([element(random, size) for _ in range(length)], list)

    return Generator(generate, f"lists({element.name})")


def non_empty_lists(element: Generator[T]) -> Generator[list[T]]:
    """Lists of at least one and at most ``max(size, 1)`` elements."""

    def generate(random: Random, size: int) -> Shrinkable[list[T]]:
        length = int(random.integers(1, max(size, 1), endpoint=True))
        return ShrinkableCollection(
            [element(random, size) for _ in range(length)], list, min_length=1
        )

    return Generator(generate, f"non_empty_lists({element.name})")


def sets(element: Generator[T]) -> Generator[frozenset[T]]:
    """Frozensets of at most ``size`` distinct elements.

    Duplicate samples are dropped; element shrinks that would collide with
    another element are skipped.
    """

    def generate(random: Random, size: int) -> Shrinkable[frozenset[T]]:
        count = int(random.integers(0, size, endpoint=True))
        elements = _sample_distinct(element, random, size, count, _identity)
        return ShrinkableCollection(elements, frozenset, distinct_key=_identity)

    return Generator(generate, f"sets({element.name})")


def dicts(key: Generator[K], value: Generator[V]) -> Generator[dict[K, V]]:
    """Dicts of at most ``size`` entries.

    Each entry is a combination of a key and a value, so an entry shrinks
    its key first, then its value. Entries with duplicate keys are dropped
    at sampling time and colliding key shrinks are skipped.
    """
    entry = combine([key, value], lambda k, v: (k, v))

    def generate(random: Random, size: int) -> Shrinkable[dict[K, V]]:
        count = int(random.integers(0, size, endpoint=True))
        entries = _sample_distinct(entry, random, size, count, _entry_key)
        return ShrinkableCollection(entries, dict, distinct_key=_entry_key)

    return Generator(generate, f"dicts({key.name}, {value.name})")


def tuples(*generators: Generator[Any]) -> Generator[tuple[Any, ...]]:
    """Fixed-length tuples, one position per generator."""
    return combine(generators, lambda *values: values)


__all__ = [
    "lists",
    "non_empty_lists",
    "sets",
    "dicts",
    "tuples",
]
