"""
Foundation Types for the property-testing core.

Type descriptors used as registry keys. A ``TypeTag`` is an explicitly
constructed value: two tags are equal iff they denote the same
parameterized type, so ``list[int]`` and ``list[bool]`` never collide and
``bool`` stays distinct from ``int`` even though ``bool`` subclasses it.

Tags may carry a ``label`` to tell apart semantic types that share a
runtime class (e.g. bounded machine-size ints vs. arbitrary-precision
ints, which are both ``int`` in Python).
"""

from __future__ import annotations

import types
import typing
from dataclasses import dataclass, field
from typing import Any

_NONE_TYPE = type(None)


@dataclass(frozen=True)
class TypeTag:
    """Identity token for one (possibly parameterized) type.

    Attributes:
        origin: The runtime class (``list``, ``dict``, ``int``, ...).
        args: Tags of the type arguments, in order.
        label: Optional discriminator for types sharing an origin.
    """

    origin: type
    args: tuple[TypeTag, ...] = field(default=())
    label: str = ""

    @classmethod
    def of(cls, tp: Any, label: str = "") -> TypeTag:
        """Build a tag from a type, a generic alias, or an existing tag.

        ``typing.List[int]`` and ``list[int]`` produce equal tags. ``None``
        is accepted as shorthand for ``type(None)``.

        Raises:
            TypeError: If ``tp`` does not describe a type.
        """
        if isinstance(tp, TypeTag):
            if label and label != tp.label:
                return cls(tp.origin, tp.args, label)
            return tp
        if tp is None:
            return cls(_NONE_TYPE, (), label)

        origin = typing.get_origin(tp)
        if origin is types.UnionType:
            # ``int | None`` and ``Optional[int]`` denote the same type
            origin = typing.Union
        if origin is not None:
            args = tuple(cls.of(arg) for arg in typing.get_args(tp))
            return cls(origin, args, label)

        if isinstance(tp, type):
            return cls(tp, (), label)

        raise TypeError(f"Cannot build a type tag from {tp!r}")

    def __str__(self) -> str:
        if self.origin is _NONE_TYPE:
            name = "None"
        else:
            name = getattr(self.origin, "__name__", repr(self.origin))
        if self.label:
            name = f"{name}<{self.label}>"
        if self.args:
            name = f"{name}[{', '.join(str(a) for a in self.args)}]"
        return name


BIG_INT = TypeTag.of(int, label="big")
"""Tag for arbitrary-precision integers (magnitudes beyond 64 bits)."""


__all__ = [
    "TypeTag",
    "BIG_INT",
]
