"""Trial driver: sample, check, and shrink on failure.

Draws ``num_runs`` samples at growing sizes, evaluates the property on each,
and on the first failure hands the failing shrinkable to the shrink search.
This is the synchronous boundary the generation core is built for; how a
counterexample is presented is up to the caller (``for_all`` raises an
``AssertionError`` so any test runner reports it).
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import numpy as np

from proptest_core.generation.generator import Generator, combine, make_random
from proptest_core.registry import GeneratorRegistry, default_for_argument
from proptest_core.verification.shrinking import PropertyOutcome, evaluate_property, minimize

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExploreConfig:
    """How many samples to draw and at which sizes.

    Attributes:
        num_runs: Number of samples to check.
        initial_size: Size used for the first sample.
        speed: Size increase per run.
        seed: Seed of the randomness source (random if None).
        max_shrink_steps: Cap on accepted shrink steps (None = unbounded).
    """

    num_runs: int = 100
    initial_size: int = 10
    speed: int = 1
    seed: int | None = None
    max_shrink_steps: int | None = None

    def __post_init__(self) -> None:
        if self.num_runs <= 0:
            raise ValueError(f"num_runs must be positive, got {self.num_runs}")
        if self.initial_size < 0:
            raise ValueError(f"initial_size must be non-negative, got {self.initial_size}")
        if self.speed < 0:
            raise ValueError(f"speed must be non-negative, got {self.speed}")
        if self.max_shrink_steps is not None and self.max_shrink_steps < 0:
            raise ValueError(
                f"max_shrink_steps must be non-negative, got {self.max_shrink_steps}"
            )

    def size_for_run(self, run: int) -> int:
        return self.initial_size + run * self.speed


@dataclass
class Counterexample:
    """A failing input, before and after shrinking.

    Attributes:
        summary: Human-readable description of the failure.
        original: The first failing value that was sampled.
        minimized: The locally minimal failing value.
        failure: Property outcome for the minimized value.
        original_failure: Property outcome for the original value.
        shrink_steps: Number of accepted shrink steps.
        run: Zero-based index of the run that failed.
        size: Size the failing value was sampled at.
        seed: Seed that reproduces the exploration.
    """

    summary: str
    original: Any
    minimized: Any
    failure: PropertyOutcome
    original_failure: PropertyOutcome
    shrink_steps: int
    run: int
    size: int
    seed: int


@dataclass
class ExplorationResult:
    """Outcome of exploring a property.

    Attributes:
        runs: Number of samples checked (including the failing one).
        seed: Seed of the randomness source.
        counterexample: The shrunk failure, or None if every run passed.
    """

    runs: int
    seed: int
    counterexample: Counterexample | None = None

    @property
    def passed(self) -> bool:
        return self.counterexample is None


def explore(
    generator: Generator[T],
    prop: Callable[[T], Any],
    config: ExploreConfig | None = None,
) -> ExplorationResult:
    """Check ``prop`` against samples of ``generator``.

    Args:
        generator: Produces the inputs.
        prop: Returns False or raises to signal failure.
        config: Run count, sizes and seed (defaults if None).

    Returns:
        ExplorationResult; its counterexample is shrunk when present.
    """
    config = config or ExploreConfig()
    seed = config.seed if config.seed is not None else int(np.random.SeedSequence().entropy)
    random = make_random(seed)

    for run in range(config.num_runs):
        size = config.size_for_run(run)
        shrinkable = generator(random, size)
        outcome = evaluate_property(prop, shrinkable.value)
        logger.debug(f"Run {run} (size {size}): {'ok' if outcome.passed else 'failed'}")
        if outcome.passed:
            continue

        original = shrinkable.value
        result = minimize(prop, shrinkable, outcome, config.max_shrink_steps)
        summary = (
            f"Property failed after {run + 1} run(s) (seed {seed}, size {size}). "
            f"Original input: {original!r}. "
            f"Shrunk input after {result.steps} step(s): {result.value!r}. "
            f"Failure: {result.outcome.detail}"
        )
        logger.warning(summary)
        counterexample = Counterexample(
            summary=summary,
            original=original,
            minimized=result.value,
            failure=result.outcome,
            original_failure=outcome,
            shrink_steps=result.steps,
            run=run,
            size=size,
            seed=seed,
        )
        return ExplorationResult(runs=run + 1, seed=seed, counterexample=counterexample)

    return ExplorationResult(runs=config.num_runs, seed=seed)


def for_all(
    *arguments: Any,
    config: ExploreConfig | None = None,
    registry: GeneratorRegistry | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., None]]:
    """Decorator turning a function into an explored property test.

    Each positional entry of ``arguments`` is either a ``Generator`` or a
    type whose default generator is looked up when the decorator is
    applied. Generated values are passed as the trailing positional
    arguments of the decorated function.

    Raises:
        MissingGeneratorError: At decoration time, naming the argument
            position, if a type has no registered default.

    Example:
        @for_all(int, lists(integers()))
        def test_insert_grows(n, xs):
            assert len([*xs, n]) == len(xs) + 1
    """
    arity = len(arguments)
    generators = [
        argument
        if isinstance(argument, Generator)
        else default_for_argument(argument, index, arity, registry)
        for index, argument in enumerate(arguments)
    ]
    inputs = combine(generators, lambda *values: values)

    def decorator(func: Callable[..., Any]) -> Callable[..., None]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> None:
            def prop(values: tuple[Any, ...]) -> Any:
                return func(*args, *values, **kwargs)

            result = explore(inputs, prop, config)
            counterexample = result.counterexample
            if counterexample is not None:
                raise AssertionError(counterexample.summary) from counterexample.failure.error

        # Hide the generated parameters from signature-inspecting runners
        signature = inspect.signature(func)
        parameters = list(signature.parameters.values())
        kept = parameters[: max(0, len(parameters) - arity)]
        wrapper.__signature__ = signature.replace(  # type: ignore[attr-defined]
            parameters=kept, return_annotation=None
        )
        return wrapper

    return decorator


__all__ = [
    "ExploreConfig",
    "Counterexample",
    "ExplorationResult",
    "explore",
    "for_all",
]
