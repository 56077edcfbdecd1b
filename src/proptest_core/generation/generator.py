"""Generators and the core combinator library.

A ``Generator`` is a stateless recipe ``(random, size) -> Shrinkable``. It
consumes entropy only from the supplied randomness source, so calling it
twice with equally seeded sources and the same size yields equal values.

This module provides:
- ``simple``: lift a raw sampler and a raw one-step shrinker into a generator
- ``always``, ``choose``, ``one_of``, ``either``: constants and choices
- ``combine``: n-ary structural combination over a runtime-length list
- ``map_generator``, ``bind``: transformation and monadic sequencing
- ``make_random``, ``sample``: the boundary used by trial drivers
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, TypeAlias, TypeVar

import numpy as np

from proptest_core.errors import DuplicateValuesError
from proptest_core.generation.shrinkable import (
    Shrinkable,
    ShrinkableBind,
    ShrinkableCombination,
)

T = TypeVar("T")
U = TypeVar("U")

Random: TypeAlias = np.random.Generator
"""Randomness source: a NumPy bit-generator-backed stream."""

_SEED_BOUND = 2**63
"""Exclusive upper bound for seeds drawn for nested (bind) sources."""


def make_random(seed: int | None = None) -> Random:
    """Create a randomness source. Equal seeds give equal streams."""
    return np.random.default_rng(seed)


class Generator(Generic[T]):
    """A reusable recipe producing one ``Shrinkable`` per invocation.

    Generators are never mutated by combinators; they are shared freely.

    Attributes:
        name: Human-readable description used in ``repr``.
    """

    __slots__ = ("_generate", "name")

    def __init__(self, generate: Callable[[Random, int], Shrinkable[T]], name: str = ""):
        self._generate = generate
        self.name = name or getattr(generate, "__name__", "generator")

    def __call__(self, random: Random, size: int) -> Shrinkable[T]:
        if size < 0:
            raise ValueError(f"Size must be non-negative, got {size}")
        return self._generate(random, size)

    def map(self, transform: Callable[[T], U]) -> Generator[U]:
        """See :func:`map_generator`."""
        return map_generator(self, transform)

    def bind(self, derive: Callable[[T], Generator[U]]) -> Generator[U]:
        """See :func:`bind`."""
        return bind(self, derive)

    def __repr__(self) -> str:
        return f"Generator({self.name})"


def sample(generator: Generator[T], random: Random, size: int) -> Shrinkable[T]:
    """Draw one shrinkable value from ``generator``."""
    return generator(random, size)


# =============================================================================
# Primitive constructors
# =============================================================================


def simple(
    generate: Callable[[Random, int], T],
    shrink: Callable[[T], Iterable[T]],
    name: str = "",
) -> Generator[T]:
    """Create a generator from a raw sampler and a raw one-step shrinker.

    Each shrunk value is itself wrapped with ``shrink``, so multi-step
    shrink chains follow without ``shrink`` having to recurse.

    Args:
        generate: Samples a plain value from ``(random, size)``.
        shrink: Returns the one-step simpler values of a plain value.
        name: Optional description for ``repr``.
    """

    def lift(value: T) -> Shrinkable[T]:
        return Shrinkable(value, lambda: (lift(shrunk) for shrunk in shrink(value)))

    def generate_shrinkable(random: Random, size: int) -> Shrinkable[T]:
        return lift(generate(random, size))

    return Generator(generate_shrinkable, name or getattr(generate, "__name__", ""))


def always(value: T) -> Generator[T]:
    """Always produce ``value``, which has no shrink candidates."""

    def generate(random: Random, size: int) -> Shrinkable[T]:
        return Shrinkable(value)

    return Generator(generate, f"always({value!r})")


def _same_value(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b


def _find_duplicates(values: Sequence[Any]) -> list[Any]:
    duplicates: list[Any] = []
    for i, value in enumerate(values):
        if any(_same_value(value, earlier) for earlier in values[:i]) and not any(
            _same_value(value, d) for d in duplicates
        ):
            duplicates.append(value)
    return duplicates


def _choice(values: tuple[T, ...], index: int) -> Shrinkable[T]:
    def candidates() -> Iterable[Shrinkable[T]]:
        if index > 0:
            yield _choice(values, index - 1)

    return Shrinkable(values[index], candidates)


def choose(values: Sequence[T], *, _combinator: str = "choose") -> Generator[T]:
    """Choose one of ``values``; earlier entries are considered simpler.

    At a given size only the first ``size + 1`` entries are reachable
    (capped at the list length). A chosen value shrinks to the entry just
    before it.

    Raises:
        ValueError: If ``values`` is empty.
        DuplicateValuesError: If ``values`` contains duplicates.
    """
    options = tuple(values)
    if not options:
        raise ValueError(f"{_combinator}() requires at least one value")
    duplicates = _find_duplicates(options)
    if duplicates:
        raise DuplicateValuesError(tuple(duplicates), _combinator)

    def generate(random: Random, size: int) -> Shrinkable[T]:
        upper = min(size, len(options) - 1)
        return _choice(options, int(random.integers(0, upper, endpoint=True)))

    return Generator(generate, f"{_combinator}({len(options)} values)")


def one_of(generators: Sequence[Generator[T]]) -> Generator[T]:
    """Delegate to one of ``generators``.

    The generator is picked with :func:`choose`, so shrinking first moves
    toward earlier-listed generators, then shrinks within the selected one.
    """
    return choose(generators, _combinator="one_of").bind(lambda generator: generator)


def either(first: Generator[T], second: Generator[T], *rest: Generator[T]) -> Generator[T]:
    """Variadic spelling of :func:`one_of`."""
    return one_of([first, second, *rest])


# =============================================================================
# Combinators
# =============================================================================


def _check_arity(combiner: Callable[..., Any], arity: int) -> None:
    try:
        signature = inspect.signature(combiner)
    except (TypeError, ValueError):
        return
    try:
        signature.bind(*range(arity))
    except TypeError as e:
        raise TypeError(f"Combiner {combiner!r} cannot take {arity} positional values: {e}") from e


def combine(
    generators: Sequence[Generator[Any]],
    combiner: Callable[..., T],
) -> Generator[T]:
    """Combine the values of several generators into one.

    All generators are sampled with the same source and size, in position
    order. The result is a :class:`ShrinkableCombination`, which shrinks one
    position at a time.

    Args:
        generators: Component generators, one per position.
        combiner: Called with one positional argument per component value.

    Raises:
        TypeError: If ``combiner`` cannot accept ``len(generators)``
            positional arguments.
    """
    components = tuple(generators)
    _check_arity(combiner, len(components))

    def combine_values(values: list[Any]) -> T:
        return combiner(*values)

    def generate(random: Random, size: int) -> Shrinkable[T]:
        return ShrinkableCombination(
            [generator(random, size) for generator in components],
            combine_values,
        )

    return Generator(generate, f"combine({', '.join(g.name for g in components)})")


def map_generator(generator: Generator[T], transform: Callable[[T], U]) -> Generator[U]:
    """Apply a pure ``transform`` to every value of ``generator``.

    Equivalent to ``bind(generator, lambda v: always(transform(v)))`` but
    draws no extra entropy. Shrink candidates keep the source's count and
    order.
    """

    def generate(random: Random, size: int) -> Shrinkable[U]:
        return generator(random, size).map(transform)

    return Generator(generate, f"map({generator.name})")


def bind(generator: Generator[T], derive: Callable[[T], Generator[U]]) -> Generator[U]:
    """Sample an outer value, then sample the generator derived from it.

    One seed is drawn from ``random`` after the outer sample; the inner
    generator is sampled from a dedicated source with that seed, which lets
    outer shrinks re-sample a re-derived inner generator deterministically.
    See :class:`ShrinkableBind` for the shrink order.
    """

    def generate(random: Random, size: int) -> Shrinkable[U]:
        outer = generator(random, size)
        seed = int(random.integers(0, _SEED_BOUND))
        inner_generator = derive(outer.value)
        inner = inner_generator(make_random(seed), size)
        return ShrinkableBind(outer, derive, inner_generator, inner, seed, size)

    return Generator(generate, f"bind({generator.name})")


__all__ = [
    "Random",
    "Generator",
    "make_random",
    "sample",
    "simple",
    "always",
    "choose",
    "one_of",
    "either",
    "combine",
    "map_generator",
    "bind",
]
