"""Values bundled with their lazily computed shrink candidates.

A ``Shrinkable`` pairs a generated value with a thunk producing the
"one step simpler" alternatives of that value. Every call to ``shrink()``
starts a fresh iterator, so a candidate sequence can be restarted from
scratch, consumed partially, or be conceptually infinite overall while
staying finite at any prefix.

Compound nodes:
- ``ShrinkableCombination``: fixed-arity product of components; shrinks
  exactly one component position per candidate.
- ``ShrinkableCollection``: variable-length sequence of elements; tries
  element removal before element simplification.
- ``ShrinkableBind``: an outer value that selected the generator of an
  inner value; shrinks the outer dimension first, then the inner.

Correctness precondition for generator authors: every candidate must be
no more complex than its parent and the candidate tree must not cycle.
Nothing here checks it.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import numpy as np

if TYPE_CHECKING:
    from proptest_core.generation.generator import Generator

T = TypeVar("T")
U = TypeVar("U")


def _no_candidates() -> Iterable[Any]:
    return ()


class Shrinkable(Generic[T]):
    """A value plus a restartable, lazy sequence of simpler alternatives.

    Attributes:
        value: The generated value.
    """

    __slots__ = ("_value", "_candidates")

    def __init__(
        self,
        value: T,
        candidates: Callable[[], Iterable[Shrinkable[T]]] | None = None,
    ):
        """Initialize shrinkable.

        Args:
            value: The generated value.
            candidates: Thunk returning the one-step shrink candidates.
                Called anew on every ``shrink()``. ``None`` means the value
                is already maximally simple.
        """
        self._value = value
        self._candidates = candidates or _no_candidates

    @property
    def value(self) -> T:
        return self._value

    def shrink(self) -> Iterator[Shrinkable[T]]:
        """Start a fresh iteration over the one-step shrink candidates."""
        return iter(self._candidates())

    def map(self, transform: Callable[[T], U]) -> Shrinkable[U]:
        """Apply ``transform`` to this value and, lazily, to every candidate.

        The candidate count and order of the source are preserved.
        """
        return Shrinkable(
            transform(self.value),
            lambda: (candidate.map(transform) for candidate in self.shrink()),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class ShrinkableCombination(Shrinkable[T]):
    """A combination of an ordered list of component shrinkables.

    The combined value is recomputed from the component values on every
    access, so no two derived nodes share a mutable value.

    Shrinking holds all positions fixed except one: for position 0, then 1,
    and so on, one new combination is yielded per shrink candidate of that
    component.
    """

    __slots__ = ("fields", "combiner")

    def __init__(
        self,
        fields: Sequence[Shrinkable[Any]],
        combiner: Callable[[list[Any]], T],
    ):
        self.fields: tuple[Shrinkable[Any], ...] = tuple(fields)
        self.combiner = combiner

    @property
    def value(self) -> T:
        return self.combiner([field.value for field in self.fields])

    def shrink(self) -> Iterator[Shrinkable[T]]:
        for i, field in enumerate(self.fields):
            for shrunk in field.shrink():
                fields = list(self.fields)
                fields[i] = shrunk
                yield ShrinkableCombination(fields, self.combiner)


class ShrinkableCollection(Shrinkable[T]):
    """A variable-length collection of element shrinkables.

    Shrink order puts structural reduction before content reduction:
    1. Remove one element (each index, first to last), as long as more than
       ``min_length`` elements remain.
    2. Replace one element by each of its own shrink candidates (index
       order). When ``distinct_key`` is set, candidates whose key collides
       with another element's key are skipped, so set and dict shapes stay
       duplicate-free.

    Attributes:
        elements: Element shrinkables, in collection order.
        builder: Turns the list of element values into the collection.
        min_length: Removal candidates are withheld at this length.
        distinct_key: Maps an element value to the key that must stay unique.
    """

    __slots__ = ("elements", "builder", "min_length", "distinct_key")

    def __init__(
        self,
        elements: Sequence[Shrinkable[Any]],
        builder: Callable[[list[Any]], T],
        min_length: int = 0,
        distinct_key: Callable[[Any], Hashable] | None = None,
    ):
        self.elements: tuple[Shrinkable[Any], ...] = tuple(elements)
        self.builder = builder
        self.min_length = min_length
        self.distinct_key = distinct_key

    @property
    def value(self) -> T:
        return self.builder([element.value for element in self.elements])

    def _derive(self, elements: Sequence[Shrinkable[Any]]) -> ShrinkableCollection[T]:
        return ShrinkableCollection(elements, self.builder, self.min_length, self.distinct_key)

    def shrink(self) -> Iterator[Shrinkable[T]]:
        elements = self.elements

        if len(elements) > self.min_length:
            for i in range(len(elements)):
                yield self._derive(elements[:i] + elements[i + 1 :])

        for i, element in enumerate(elements):
            taken: set[Hashable] = set()
            if self.distinct_key is not None:
                taken = {self.distinct_key(e.value) for j, e in enumerate(elements) if j != i}
            for shrunk in element.shrink():
                if self.distinct_key is not None and self.distinct_key(shrunk.value) in taken:
                    continue
                yield self._derive(elements[:i] + (shrunk,) + elements[i + 1 :])


class ShrinkableBind(Shrinkable[T]):
    """Result of sequencing an outer sample into a derived inner generator.

    The inner value was sampled from a dedicated source seeded with
    ``seed``. Candidates, in order:
    1. For each outer candidate, the inner generator is re-derived. If it is
       the same generator object, the current inner shrinkable is kept;
       otherwise the new generator is re-sampled from a fresh source built
       from ``seed`` at the original ``size``.
    2. Each inner candidate, with the outer value held fixed.

    Each candidate reduces the (outer, inner) pair lexicographically.
    """

    __slots__ = ("outer", "derive", "inner_generator", "inner", "seed", "size")

    def __init__(
        self,
        outer: Shrinkable[Any],
        derive: Callable[[Any], Generator[T]],
        inner_generator: Generator[T],
        inner: Shrinkable[T],
        seed: int,
        size: int,
    ):
        self.outer = outer
        self.derive = derive
        self.inner_generator = inner_generator
        self.inner = inner
        self.seed = seed
        self.size = size

    @property
    def value(self) -> T:
        return self.inner.value

    def shrink(self) -> Iterator[Shrinkable[T]]:
        for outer in self.outer.shrink():
            inner_generator = self.derive(outer.value)
            if inner_generator is self.inner_generator:
                inner = self.inner
            else:
                inner = inner_generator(np.random.default_rng(self.seed), self.size)
            yield ShrinkableBind(outer, self.derive, inner_generator, inner, self.seed, self.size)

        for inner in self.inner.shrink():
            yield ShrinkableBind(
                self.outer, self.derive, self.inner_generator, inner, self.seed, self.size
            )


__all__ = [
    "Shrinkable",
    "ShrinkableCombination",
    "ShrinkableCollection",
    "ShrinkableBind",
]
