"""
proptest-core -- Generation, shrinking and minimization for property-based testing.

Generators | Shrinkable values | Combinators | Default registry | Shrink search

Minimal dependencies (NumPy). Pure Python.
"""

from proptest_core._version import __version__
from proptest_core.errors import DuplicateValuesError, MissingGeneratorError
from proptest_core.generation import (
    Generator,
    Shrinkable,
    ShrinkableCombination,
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
from proptest_core.registry import (
    GeneratorRegistry,
    default_for_argument,
    lookup_default,
    register_default,
)
from proptest_core.types import BIG_INT, TypeTag
from proptest_core.verification import (
    ExploreConfig,
    explore,
    for_all,
    minimize,
    shrink_search,
)

# NOTE: Full subpackage APIs are accessible via direct imports:
#   from proptest_core.generation import integers, lists, dicts, ...
#   from proptest_core.verification import Counterexample, ShrinkResult, ...

__all__ = [
    "__version__",
    # Core types
    "Shrinkable",
    "ShrinkableCombination",
    "Generator",
    "TypeTag",
    "BIG_INT",
    # Combinators
    "simple",
    "always",
    "choose",
    "one_of",
    "either",
    "combine",
    "map_generator",
    "bind",
    # Sampling & shrinking
    "make_random",
    "sample",
    "minimize",
    "shrink_search",
    # Registry
    "GeneratorRegistry",
    "register_default",
    "lookup_default",
    "default_for_argument",
    # Trial driver
    "ExploreConfig",
    "explore",
    "for_all",
    # Errors
    "MissingGeneratorError",
    "DuplicateValuesError",
]
