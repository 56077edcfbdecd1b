"""Tests for primitive value generators."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from proptest_core.errors import DuplicateValuesError
from proptest_core.generation import (
    EPOCH,
    big_integers,
    booleans,
    characters,
    datetimes,
    digits,
    floats,
    integers,
    integers_in_range,
    letters,
    letters_or_digits,
    make_random,
    non_negative_integers,
    none,
    positive_integers,
    strings,
    timedeltas,
)
from proptest_core.generation.primitives import _shrink_float, _shrink_int, _shrink_toward
from proptest_core.verification import minimize

seeds = st.integers(min_value=0, max_value=2**32 - 1)
sizes = st.integers(min_value=0, max_value=200)


def _always_fails(_: object) -> bool:
    return False


# =============================================================================
# Shrink step Tests
# =============================================================================


class TestIntegerShrinkSteps:
    """Tests for the halve-then-step integer shrinker."""

    def test_positive(self) -> None:
        assert list(_shrink_int(37)) == [18, 28, 33, 35, 36]

    def test_negative(self) -> None:
        assert list(_shrink_int(-37)) == [-18, -28, -33, -35, -36]

    def test_halving_comes_first_and_step_last(self) -> None:
        candidates = list(_shrink_int(1000))
        assert candidates[0] == 500
        assert candidates[-1] == 999
        assert candidates == sorted(set(candidates))

    def test_small_values_deduplicated(self) -> None:
        assert list(_shrink_int(1)) == [0]
        assert list(_shrink_int(2)) == [1]
        assert list(_shrink_int(-1)) == [0]

    def test_zero_is_minimal(self) -> None:
        assert list(_shrink_int(0)) == []

    def test_toward_target(self) -> None:
        assert list(_shrink_toward(15, 5)) == [10, 13, 14]
        assert list(_shrink_toward(-20, -3)) == [-11, -16, -18, -19]
        assert list(_shrink_toward(5, 5)) == []

    def test_huge_values(self) -> None:
        value = 2**100 + 1
        candidates = list(_shrink_int(value))
        assert candidates[0] == 2**99
        assert candidates[-1] == 2**100
        assert len(candidates) <= 101


class TestFloatShrinkSteps:
    """Tests for the float shrinker."""

    def test_fraction_truncated_first(self) -> None:
        assert list(_shrink_float(2.5)) == [2.0]
        assert list(_shrink_float(-0.5)) == [0.0]

    def test_integral_shrinks_like_int(self) -> None:
        assert list(_shrink_float(4.0)) == [2.0, 3.0]

    def test_zero_and_non_finite(self) -> None:
        assert list(_shrink_float(0.0)) == []
        assert list(_shrink_float(math.nan)) == []
        assert list(_shrink_float(math.inf)) == []


# =============================================================================
# Numeric Generator Tests
# =============================================================================


class TestIntegers:
    """Tests for integer generators."""

    @given(seed=seeds, size=sizes)
    @settings(max_examples=100)
    def test_bounded_by_size(self, seed: int, size: int) -> None:
        value = integers()(make_random(seed), size).value
        assert isinstance(value, int)
        assert -size <= value <= size

    def test_size_zero(self) -> None:
        assert integers()(make_random(0), 0).value == 0

    def test_covers_both_signs(self) -> None:
        values = {integers()(make_random(seed), 10).value for seed in range(100)}
        assert any(v < 0 for v in values)
        assert any(v > 0 for v in values)

    def test_minimizes_to_zero(self) -> None:
        shrinkable = integers()(make_random(5), 1000)
        assert minimize(_always_fails, shrinkable).value == 0

    @given(seed=seeds, size=sizes)
    @settings(max_examples=50)
    def test_in_range(self, seed: int, size: int) -> None:
        value = integers_in_range(5, 20)(make_random(seed), size).value
        assert 5 <= value <= 20

    def test_in_range_shrinks_to_bound_nearest_zero(self) -> None:
        g = integers_in_range(5, 20)
        shrinkable = g(make_random(1), 50)
        assert minimize(_always_fails, shrinkable).value == 5

        g = integers_in_range(-20, -3)
        shrinkable = g(make_random(1), 50)
        assert minimize(_always_fails, shrinkable).value == -3

    def test_in_range_spanning_zero(self) -> None:
        shrinkable = integers_in_range(-4, 4)(make_random(2), 50)
        assert minimize(_always_fails, shrinkable).value == 0

    def test_empty_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="Empty integer range"):
            integers_in_range(3, 2)

    @given(seed=seeds, size=sizes)
    @settings(max_examples=50)
    def test_non_negative_and_positive(self, seed: int, size: int) -> None:
        assert non_negative_integers()(make_random(seed), size).value >= 0
        assert positive_integers()(make_random(seed), size).value >= 1


class TestBigIntegers:
    """Tests for arbitrary-precision integers."""

    def test_size_zero_is_zero(self) -> None:
        assert big_integers()(make_random(4), 0).value == 0

    def test_small_sizes_bounded(self) -> None:
        for seed in range(30):
            assert abs(big_integers()(make_random(seed), 5).value) <= 5

    def test_exceeds_64_bits(self) -> None:
        values = [big_integers()(make_random(seed), 200).value for seed in range(50)]
        assert any(abs(v) > 2**64 for v in values)

    def test_minimizes_to_zero(self) -> None:
        shrinkable = next(
            s
            for s in (big_integers()(make_random(seed), 200) for seed in range(100))
            if abs(s.value) > 2**64
        )
        assert minimize(_always_fails, shrinkable).value == 0

    def test_minimizes_to_threshold(self) -> None:
        shrinkable = next(
            s
            for s in (big_integers()(make_random(seed), 100) for seed in range(200))
            if s.value > 2**65
        )
        result = minimize(lambda n: n < 2**64, shrinkable, max_steps=2_000)
        assert result.exhausted
        assert result.value == 2**64

    def test_negative_threshold(self) -> None:
        shrinkable = next(
            s
            for s in (big_integers()(make_random(seed), 100) for seed in range(200))
            if s.value < -(2**65)
        )
        result = minimize(lambda n: n > -(2**40), shrinkable, max_steps=2_000)
        assert result.exhausted
        assert result.value == -(2**40)


class TestFloats:
    """Tests for float generators."""

    @given(seed=seeds, size=sizes)
    @settings(max_examples=100)
    def test_bounded_by_size(self, seed: int, size: int) -> None:
        value = floats()(make_random(seed), size).value
        assert isinstance(value, float)
        assert -size <= value <= size

    def test_minimizes_to_zero(self) -> None:
        shrinkable = floats()(make_random(9), 100)
        assert minimize(_always_fails, shrinkable).value == 0.0

    def test_minimizes_to_integral_boundary(self) -> None:
        shrinkable = next(
            s for s in (floats()(make_random(seed), 100) for seed in range(100)) if s.value > 10
        )
        assert minimize(lambda x: x < 10, shrinkable).value == 10.0


# =============================================================================
# Other Scalar Tests
# =============================================================================


class TestScalars:
    """Tests for none, booleans and temporal generators."""

    def test_none(self) -> None:
        shrinkable = none()(make_random(0), 10)
        assert shrinkable.value is None
        assert list(shrinkable.shrink()) == []

    def test_booleans(self) -> None:
        assert booleans()(make_random(0), 0).value is False
        values = {booleans()(make_random(seed), 10).value for seed in range(50)}
        assert values == {False, True}

    def test_true_shrinks_to_false(self) -> None:
        true = next(
            s for s in (booleans()(make_random(seed), 1) for seed in range(50)) if s.value
        )
        assert [c.value for c in true.shrink()] == [False]

    @given(seed=seeds, size=sizes)
    @settings(max_examples=50)
    def test_datetimes_bounded(self, seed: int, size: int) -> None:
        value = datetimes()(make_random(seed), size).value
        assert isinstance(value, datetime)
        assert value.tzinfo == timezone.utc
        assert abs(value - EPOCH) <= timedelta(days=size)

    def test_datetimes_shrink_to_epoch(self) -> None:
        shrinkable = datetimes()(make_random(3), 30)
        assert minimize(_always_fails, shrinkable).value == EPOCH

    def test_datetimes_minimize_to_threshold(self) -> None:
        cutoff = EPOCH + timedelta(days=3)
        shrinkable = next(
            s
            for s in (datetimes()(make_random(seed), 30) for seed in range(200))
            if s.value > EPOCH + timedelta(days=10)
        )
        result = minimize(lambda dt: dt < cutoff, shrinkable, max_steps=2_000)
        assert result.exhausted
        assert result.value == cutoff

    @given(seed=seeds, size=sizes)
    @settings(max_examples=50)
    def test_timedeltas_bounded(self, seed: int, size: int) -> None:
        value = timedeltas()(make_random(seed), size).value
        assert isinstance(value, timedelta)
        assert abs(value) <= timedelta(hours=size)

    def test_timedeltas_shrink_to_zero(self) -> None:
        shrinkable = timedeltas()(make_random(3), 30)
        assert minimize(_always_fails, shrinkable).value == timedelta(0)

    def test_timedeltas_minimize_to_threshold(self) -> None:
        shrinkable = next(
            s
            for s in (timedeltas()(make_random(seed), 20) for seed in range(200))
            if s.value > timedelta(hours=5)
        )
        result = minimize(lambda td: td < timedelta(hours=1), shrinkable, max_steps=2_000)
        assert result.exhausted
        assert result.value == timedelta(hours=1)

    def test_negative_timedeltas_minimize_to_threshold(self) -> None:
        shrinkable = next(
            s
            for s in (timedeltas()(make_random(seed), 20) for seed in range(200))
            if s.value < -timedelta(hours=5)
        )
        result = minimize(lambda td: td > -timedelta(minutes=30), shrinkable, max_steps=2_000)
        assert result.exhausted
        assert result.value == -timedelta(minutes=30)


# =============================================================================
# Character and String Tests
# =============================================================================


class TestStrings:
    """Tests for character and string generators."""

    def test_characters_from_alphabet(self) -> None:
        values = {characters("xyz")(make_random(seed), 10).value for seed in range(50)}
        assert values == {"x", "y", "z"}

    def test_duplicate_alphabet_rejected(self) -> None:
        with pytest.raises(DuplicateValuesError) as exc_info:
            characters("abca")
        assert exc_info.value.combinator == "characters"

    @given(seed=seeds, size=sizes)
    @settings(max_examples=50)
    def test_strings_bounded(self, seed: int, size: int) -> None:
        value = strings("ab")(make_random(seed), size).value
        assert isinstance(value, str)
        assert len(value) <= size
        assert set(value) <= {"a", "b"}

    def test_named_alphabets(self) -> None:
        for seed in range(20):
            word = letters()(make_random(seed), 30).value
            assert word == "" or word.isalpha()
            assert all(c.isdigit() for c in digits()(make_random(seed), 30).value)
            assert all(c.isalnum() for c in letters_or_digits()(make_random(seed), 30).value)

    def test_string_minimizes_to_single_char(self) -> None:
        shrinkable = next(
            s
            for s in (strings("abc")(make_random(seed), 20) for seed in range(100))
            if "c" in s.value
        )
        assert minimize(lambda text: "c" not in text, shrinkable).value == "c"
