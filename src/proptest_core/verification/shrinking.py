"""Shrink search: from a failing sample to a locally minimal one.

Greedy depth-first descent over the shrink-candidate tree. Starting from a
failing shrinkable, the candidates of the current best are scanned in the
order they are produced; the first candidate that also fails becomes the new
current best and the scan restarts from its own candidates. When a full scan
finds no failing candidate, the current best is reported.

The result is a local minimum with respect to one-step shrinks, not a
global one. Termination relies on generators only producing candidates that
are simpler than their parent (see :mod:`proptest_core.generation.shrinkable`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from proptest_core.generation.shrinkable import Shrinkable

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyOutcome:
    """Result of evaluating a property on one value.

    Attributes:
        passed: Whether the property held.
        error: Exception raised by the property, if any.
    """

    passed: bool
    error: Exception | None = None

    @property
    def detail(self) -> str:
        if self.error is None:
            return "property returned False" if not self.passed else "property held"
        return f"{type(self.error).__name__}: {self.error}"


def evaluate_property(prop: Callable[[T], Any], value: T) -> PropertyOutcome:
    """Evaluate ``prop`` on ``value``.

    ``False`` and any raised ``Exception`` count as failures; ``None`` (an
    assertion-style property that returned normally) counts as a pass.
    """
    try:
        result = prop(value)
    except Exception as e:
        return PropertyOutcome(passed=False, error=e)
    return PropertyOutcome(passed=True if result is None else bool(result))


@dataclass
class ShrinkResult(Generic[T]):
    """Outcome of a shrink search.

    Attributes:
        shrinkable: The minimized failing shrinkable.
        outcome: Property outcome for the minimized value.
        steps: Number of accepted shrink steps.
        candidates_tried: Number of property evaluations on candidates.
        exhausted: False if the search stopped at ``max_steps`` before
            reaching a local minimum.
    """

    shrinkable: Shrinkable[T]
    outcome: PropertyOutcome
    steps: int = 0
    candidates_tried: int = 0
    exhausted: bool = True

    @property
    def value(self) -> T:
        return self.shrinkable.value


def minimize(
    prop: Callable[[T], Any],
    failing: Shrinkable[T],
    initial_outcome: PropertyOutcome | None = None,
    max_steps: int | None = None,
) -> ShrinkResult[T]:
    """Search the shrink tree of ``failing`` for a locally minimal failure.

    Args:
        prop: The property; see :func:`evaluate_property` for what fails.
        failing: A shrinkable whose value fails ``prop``.
        initial_outcome: Known outcome for ``failing.value``; evaluated if
            omitted.
        max_steps: Optional cap on accepted steps (``None`` = unbounded).

    Returns:
        ShrinkResult with the minimized shrinkable and search statistics.

    Raises:
        ValueError: If ``failing.value`` satisfies the property, or
            ``max_steps`` is negative.
    """
    if max_steps is not None and max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")

    outcome = initial_outcome or evaluate_property(prop, failing.value)
    if outcome.passed:
        raise ValueError("Cannot shrink a value that satisfies the property")

    current = failing
    steps = 0
    tried = 0

    while max_steps is None or steps < max_steps:
        for candidate in current.shrink():
            tried += 1
            candidate_outcome = evaluate_property(prop, candidate.value)
            if not candidate_outcome.passed:
                current, outcome = candidate, candidate_outcome
                steps += 1
                logger.debug(f"Shrink step {steps}: {current.value!r} ({outcome.detail})")
                break
        else:
            logger.info(f"Shrinking finished after {steps} steps, {tried} candidates tried")
            return ShrinkResult(current, outcome, steps, tried, exhausted=True)

    logger.info(f"Shrinking stopped at step limit {max_steps}, {tried} candidates tried")
    return ShrinkResult(current, outcome, steps, tried, exhausted=False)


def shrink_search(prop: Callable[[T], Any], failing: Shrinkable[T]) -> Shrinkable[T]:
    """Return the minimized failing shrinkable reachable from ``failing``."""
    return minimize(prop, failing).shrinkable


__all__ = [
    "PropertyOutcome",
    "evaluate_property",
    "ShrinkResult",
    "minimize",
    "shrink_search",
]
