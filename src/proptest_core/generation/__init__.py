"""Generation and shrinking algebra.

This module provides:
- ``Shrinkable`` values carrying lazy, restartable shrink candidates
- ``Generator`` recipes and the combinator library (choice, combine, map, bind)
- Primitive generators (booleans, numbers, temporal values, strings)
- Collection generators (lists, sets, dicts, tuples)
"""

from __future__ import annotations

from .collections import dicts, lists, non_empty_lists, sets, tuples
from .generator import (
    Generator,
    Random,
    always,
    bind,
    choose,
    combine,
    either,
    make_random,
    map_generator,
    one_of,
    sample,
    simple,
)
from .primitives import (
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
    non_negative_integers,
    none,
    positive_integers,
    strings,
    timedeltas,
)
from .shrinkable import (
    Shrinkable,
    ShrinkableBind,
    ShrinkableCollection,
    ShrinkableCombination,
)

__all__ = [
    # Core types
    "Shrinkable",
    "ShrinkableCombination",
    "ShrinkableCollection",
    "ShrinkableBind",
    "Generator",
    "Random",
    "make_random",
    "sample",
    # Combinators
    "simple",
    "always",
    "choose",
    "one_of",
    "either",
    "combine",
    "map_generator",
    "bind",
    # Primitives
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
    # Collections
    "lists",
    "non_empty_lists",
    "sets",
    "dicts",
    "tuples",
]
