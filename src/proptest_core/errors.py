"""Configuration errors raised by the generation core.

Both errors are raised before any sampling happens: a missing default
generator halts the trial driver during argument resolution, and
malformed combinator input fails while the generator is being built.
Property failures are not errors; they are reported as counterexamples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from proptest_core.types import TypeTag


@dataclass
class MissingGeneratorError(LookupError):
    """No generator was registered for a requested type.

    Attributes:
        type_tag: The tag that was looked up.
        argument_index: Zero-based position of the argument that needed it,
            if known.
        arity: Total number of arguments of the property, if known.
    """

    type_tag: TypeTag
    argument_index: int | None = None
    arity: int | None = None

    def __str__(self) -> str:
        if self.argument_index is None:
            return f"No generator registered for type {self.type_tag}"
        position = f"argument {self.argument_index + 1}"
        if self.arity is not None:
            position = f"{position} of {self.arity}"
        return (
            f"No generator found for {position} (type {self.type_tag}). "
            f"Register one with register_default() or pass a generator explicitly."
        )


@dataclass
class DuplicateValuesError(ValueError):
    """A choice combinator was given values that are not distinct.

    Attributes:
        duplicates: The repeated values, in first-seen order.
        combinator: Name of the combinator that rejected the input.
    """

    duplicates: tuple[Any, ...] = field(default=())
    combinator: str = "choose"

    def __str__(self) -> str:
        shown = ", ".join(repr(d) for d in self.duplicates)
        return f"The values given to {self.combinator}() contain duplicates: {shown}"


__all__ = [
    "MissingGeneratorError",
    "DuplicateValuesError",
]
