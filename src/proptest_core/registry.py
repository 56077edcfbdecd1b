"""Default-generator registry keyed by type tags.

Maps a :class:`TypeTag` to the generator used when a property argument of
that type is not given an explicit generator. The process-wide registry is
seeded with built-in defaults at import time; ``register_default`` calls
made afterwards override them.

The registry is a convenience cache of common instantiations: it never
derives a generator for an unregistered parameterized type. Callers that
need, say, ``list[list[int]]`` build it with the combinators and pass it
explicitly (or register it).

Registration is expected to happen during setup, before trials run
concurrently.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from numbers import Real
from typing import Any

from proptest_core.errors import MissingGeneratorError
from proptest_core.generation.collections import dicts, lists, sets
from proptest_core.generation.generator import Generator, one_of
from proptest_core.generation.primitives import (
    big_integers,
    booleans,
    datetimes,
    floats,
    integers,
    letters_or_digits,
    none,
    timedeltas,
)
from proptest_core.types import BIG_INT, TypeTag

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Registry mapping type tags to default generators.

    Accepts anything :meth:`TypeTag.of` understands as a key: plain classes,
    generic aliases such as ``list[int]``, or explicit tags such as
    ``BIG_INT``.
    """

    def __init__(self, name: str = "default", with_builtins: bool = False):
        """Initialize registry.

        Args:
            name: Registry name for logging
            with_builtins: Seed the registry with the built-in defaults
        """
        self.name = name
        self._lock = threading.RLock()
        self._generators: dict[TypeTag, Generator[Any]] = {}
        self._lookup_count = 0
        self._miss_count = 0
        if with_builtins:
            seed_builtin_defaults(self)

    def set_default(self, tp: Any, generator: Generator[Any]) -> TypeTag:
        """Register ``generator`` for ``tp``, replacing any existing entry.

        Returns:
            The tag the generator was stored under.
        """
        tag = TypeTag.of(tp)
        with self._lock:
            replaced = tag in self._generators
            self._generators[tag] = generator
        logger.debug(
            f"Registry '{self.name}': {'overrode' if replaced else 'registered'} "
            f"default for {tag} -> {generator!r}"
        )
        return tag

    def default_for(self, tp: Any) -> Generator[Any]:
        """Return the registered generator for ``tp``.

        Raises:
            MissingGeneratorError: If nothing is registered for ``tp``.
        """
        tag = TypeTag.of(tp)
        with self._lock:
            self._lookup_count += 1
            generator = self._generators.get(tag)
            if generator is None:
                self._miss_count += 1
        if generator is None:
            raise MissingGeneratorError(tag)
        return generator

    def unregister(self, tp: Any) -> bool:
        """Remove the entry for ``tp``.

        Returns:
            True if an entry was removed
        """
        tag = TypeTag.of(tp)
        with self._lock:
            return self._generators.pop(tag, None) is not None

    def __contains__(self, tp: Any) -> bool:
        tag = TypeTag.of(tp)
        with self._lock:
            return tag in self._generators

    def tags(self) -> list[TypeTag]:
        """Snapshot of the registered tags, in registration order."""
        with self._lock:
            return list(self._generators)

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "name": self.name,
                "generator_count": len(self._generators),
                "lookup_count": self._lookup_count,
                "miss_count": self._miss_count,
            }


def seed_builtin_defaults(registry: GeneratorRegistry) -> None:
    """Populate ``registry`` with the built-in default generators."""
    scalars: dict[Any, Generator[Any]] = {
        None: none(),
        bool: booleans(),
        int: integers(),
        float: floats(),
        Real: one_of([integers(), floats()]),
        BIG_INT: big_integers(),
        datetime: datetimes(),
        timedelta: timedeltas(),
        str: letters_or_digits(),
    }
    for tp, generator in scalars.items():
        registry.set_default(tp, generator)

    for tp in (bool, int, float, Real, BIG_INT, datetime, timedelta, str):
        registry.set_default(TypeTag(list, (TypeTag.of(tp),)), lists(scalars[tp]))

    for tp in (int, str, BIG_INT):
        registry.set_default(TypeTag(frozenset, (TypeTag.of(tp),)), sets(scalars[tp]))
        registry.set_default(TypeTag(set, (TypeTag.of(tp),)), sets(scalars[tp]).map(set))

    for key, values in (
        (int, (bool, int, float, Real, BIG_INT, datetime, timedelta)),
        (BIG_INT, (int, float, Real, BIG_INT, datetime, timedelta)),
        (str, (int,)),
    ):
        for value in values:
            tag = TypeTag(dict, (TypeTag.of(key), TypeTag.of(value)))
            registry.set_default(tag, dicts(scalars[key], scalars[value]))


# Global default registry, seeded before any override
_default_registry = GeneratorRegistry("global", with_builtins=True)


def default_registry() -> GeneratorRegistry:
    return _default_registry


def register_default(
    tp: Any,
    generator: Generator[Any],
    registry: GeneratorRegistry | None = None,
) -> TypeTag:
    """Register a default generator in the default or specified registry."""
    reg = registry or _default_registry
    return reg.set_default(tp, generator)


def lookup_default(tp: Any, registry: GeneratorRegistry | None = None) -> Generator[Any]:
    """Look up a default generator in the default or specified registry.

    Raises:
        MissingGeneratorError: If nothing is registered for ``tp``.
    """
    reg = registry or _default_registry
    return reg.default_for(tp)


def default_for_argument(
    tp: Any,
    argument_index: int,
    arity: int,
    registry: GeneratorRegistry | None = None,
) -> Generator[Any]:
    """Look up the default generator for one argument of a property.

    Raises:
        MissingGeneratorError: Carrying the argument position and arity.
    """
    try:
        return lookup_default(tp, registry)
    except MissingGeneratorError as e:
        raise MissingGeneratorError(e.type_tag, argument_index, arity) from e


__all__ = [
    "GeneratorRegistry",
    "seed_builtin_defaults",
    "default_registry",
    "register_default",
    "lookup_default",
    "default_for_argument",
]
