"""Generators for primitive value types.

Numeric generators sample magnitudes bounded by ``size`` and shrink toward
zero (or toward the in-range value closest to zero): first by halving the
distance, then by ever smaller moves down to a single step. Temporal generators are integer offsets
from a fixed origin, mapped to ``datetime``/``timedelta``.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from datetime import datetime, timedelta, timezone

from proptest_core.generation.collections import lists
from proptest_core.generation.generator import (
    Generator,
    Random,
    always,
    choose,
    simple,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""Origin that generated datetimes shrink toward."""

_MICROS_PER_HOUR = 3_600_000_000
_MICROS_PER_DAY = 24 * _MICROS_PER_HOUR

_LIMB_BITS = 32
"""Bits contributed per limb when building arbitrary-precision integers."""

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = LOWERCASE.upper()
DIGITS = "0123456789"


def _shrink_toward(value: int, target: int) -> Iterator[int]:
    """Halve the distance to ``target``, then close in on ``value``.

    After the midpoint, candidates move ``distance // 4``, ``distance // 8``,
    ... toward ``target`` and end with a single step, so a failure threshold
    anywhere between ``target`` and ``value`` is reached in a logarithmic
    number of accepted steps.
    """
    if value == target:
        return
    sign = 1 if value > target else -1
    distance = abs(value - target)
    previous = target + sign * (distance // 2)
    yield previous
    delta = distance // 4
    while delta > 0:
        candidate = value - sign * delta
        if candidate != previous:
            yield candidate
            previous = candidate
        delta //= 2
    stepped = value - sign
    if stepped != previous:
        yield stepped


def _shrink_int(value: int) -> Iterator[int]:
    return _shrink_toward(value, 0)


def none() -> Generator[None]:
    return always(None)


def booleans() -> Generator[bool]:
    """``False`` or ``True``; ``True`` shrinks to ``False``."""
    return choose([False, True])


def integers() -> Generator[int]:
    """Integers in ``[-size, size]``, shrinking toward zero."""

    def generate(random: Random, size: int) -> int:
        return int(random.integers(-size, size, endpoint=True))

    return simple(generate, _shrink_int, "integers")


def integers_in_range(low: int, high: int) -> Generator[int]:
    """Integers in ``[low, high]``.

    Values shrink toward the in-range value closest to zero. Sampling covers
    at most ``size`` on each side of that target.

    Raises:
        ValueError: If ``low > high``.
    """
    if low > high:
        raise ValueError(f"Empty integer range [{low}, {high}]")
    target = min(max(0, low), high)

    def generate(random: Random, size: int) -> int:
        lower = max(low, target - size)
        upper = min(high, target + size)
        return int(random.integers(lower, upper, endpoint=True))

    def shrink(value: int) -> Iterator[int]:
        return _shrink_toward(value, target)

    return simple(generate, shrink, f"integers_in_range({low}, {high})")


def non_negative_integers() -> Generator[int]:
    return integers().map(abs)


def positive_integers() -> Generator[int]:
    return non_negative_integers().map(lambda n: n + 1)


def big_integers() -> Generator[int]:
    """Integers whose magnitude may exceed 64 bits.

    The number of 32-bit limbs grows with ``size``; at size 0 the value is 0.
    """

    def generate(random: Random, size: int) -> int:
        limbs = int(random.integers(0, max(1, size // 8) + 1))
        magnitude = 0
        for limb in random.integers(0, 2**_LIMB_BITS, size=limbs, dtype="uint64"):
            magnitude = (magnitude << _LIMB_BITS) | int(limb)
        if size < 8:
            magnitude %= size + 1
        return -magnitude if random.integers(0, 2) else magnitude

    return simple(generate, _shrink_int, "big_integers")


def _shrink_float(value: float) -> Iterator[float]:
    if not math.isfinite(value) or value == 0.0:
        return
    truncated = float(math.trunc(value))
    if truncated != value:
        yield truncated
        return
    for shrunk in _shrink_int(int(value)):
        yield float(shrunk)


def floats() -> Generator[float]:
    """Floats in ``[-size, size]``.

    A fractional value shrinks to its integer part first; integral values
    then shrink toward zero like integers.
    """

    def generate(random: Random, size: int) -> float:
        return float(random.uniform(-size, size))

    return simple(generate, _shrink_float, "floats")


def datetimes() -> Generator[datetime]:
    """UTC datetimes within ``size`` days of the Unix epoch."""

    def generate(random: Random, size: int) -> int:
        bound = size * _MICROS_PER_DAY
        return int(random.integers(-bound, bound, endpoint=True))

    offsets = simple(generate, _shrink_int, "datetime_offsets")
    return offsets.map(lambda micros: EPOCH + timedelta(microseconds=micros))


def timedeltas() -> Generator[timedelta]:
    """Signed time spans of at most ``size`` hours, shrinking toward zero."""

    def generate(random: Random, size: int) -> int:
        bound = size * _MICROS_PER_HOUR
        return int(random.integers(-bound, bound, endpoint=True))

    spans = simple(generate, _shrink_int, "timedelta_micros")
    return spans.map(lambda micros: timedelta(microseconds=micros))


def characters(alphabet: Sequence[str]) -> Generator[str]:
    """Single characters of ``alphabet``; earlier characters are simpler."""
    return choose(list(alphabet), _combinator="characters")


def strings(alphabet: Sequence[str]) -> Generator[str]:
    """Strings over ``alphabet`` of length at most ``size``."""
    return lists(characters(alphabet)).map("".join)


def letters() -> Generator[str]:
    return strings(LOWERCASE + UPPERCASE)


def digits() -> Generator[str]:
    return strings(DIGITS)


def letters_or_digits() -> Generator[str]:
    return strings(LOWERCASE + UPPERCASE + DIGITS)


__all__ = [
    "EPOCH",
    "none",
    "booleans",
    "integers",
    "integers_in_range",
    "non_negative_integers",
    "positive_integers",
    "big_integers",
    "floats",
    "datetimes",
    "timedeltas",
    "characters",
    "strings",
    "letters",
    "digits",
    "letters_or_digits",
]
