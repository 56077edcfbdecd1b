"""Minimization and trial driving.

This module provides:
- Greedy shrink search for locally minimal counterexamples
- Property evaluation (False or a raised exception means failure)
- A trial driver that samples at growing sizes and shrinks on failure
"""

from __future__ import annotations

from proptest_core.verification.explorer import (
    Counterexample,
    ExplorationResult,
    ExploreConfig,
    explore,
    for_all,
)
from proptest_core.verification.shrinking import (
    PropertyOutcome,
    ShrinkResult,
    evaluate_property,
    minimize,
    shrink_search,
)

__all__ = [
    # --- Shrink search ---
    "PropertyOutcome",
    "ShrinkResult",
    "evaluate_property",
    "minimize",
    "shrink_search",
    # --- Trial driver ---
    "ExploreConfig",
    "Counterexample",
    "ExplorationResult",
    "explore",
    "for_all",
]
