"""Counterexample Shrinking -- from a random failure to a minimal one.

Demonstrates sampling from generators, running the shrink search on a
failing sample, and exploring a property end to end.
"""

from proptest_core import ExploreConfig, explore, make_random, minimize
from proptest_core.generation import integers, lists, simple

# =============================================================
# Example 1: Shrinking a single integer
# =============================================================
print("=== Integer Shrinking ===")


def halve_then_step(n: int) -> list[int]:
    if n == 0:
        return []
    candidates = [int(n / 2)]
    if n - 1 not in candidates:
        candidates.append(n - 1)
    return candidates


fixed = simple(lambda random, size: 37, halve_then_step)
failing = fixed(make_random(0), 0)

result = minimize(lambda n: n < 10, failing)
print(f"Original: {failing.value}")
print(f"Minimized: {result.value} after {result.steps} steps")

# =============================================================
# Example 2: Exploring a list property
# =============================================================
print("\n=== List Property ===")

# Claim: no list contains a number above 5 (false for large enough sizes)
outcome = explore(
    lists(integers()),
    lambda xs: all(x <= 5 for x in xs),
    ExploreConfig(num_runs=200, seed=42),
)
print(f"Passed: {outcome.passed}")
if outcome.counterexample is not None:
    print(f"Original: {outcome.counterexample.original}")
    print(f"Minimized: {outcome.counterexample.minimized}")
    print(f"Summary: {outcome.counterexample.summary}")

print("\nDone.")
