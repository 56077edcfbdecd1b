"""Custom Generators -- combinators and the default registry.

Demonstrates building a record generator with combine(), choosing among
alternatives with one_of(), and registering defaults so for_all() can
resolve arguments by type.
"""

from dataclasses import dataclass

from proptest_core import (
    ExploreConfig,
    MissingGeneratorError,
    combine,
    explore,
    for_all,
    lookup_default,
    one_of,
    register_default,
)
from proptest_core.generation import always, integers_in_range, letters, lists


@dataclass
class User:
    name: str
    age: int


# =============================================================
# Example 1: Combining generators into a record
# =============================================================
print("=== Record Generator ===")

users = combine([letters(), integers_in_range(0, 120)], User)

result = explore(users, lambda u: u.age < 100 or len(u.name) > 0, ExploreConfig(seed=7))
print(f"Passed: {result.passed}")
if result.counterexample is not None:
    print(f"Minimized: {result.counterexample.minimized}")

# =============================================================
# Example 2: Alternatives
# =============================================================
print("\n=== Alternatives ===")

ages = one_of([always(0), integers_in_range(18, 65), integers_in_range(66, 120)])
result = explore(ages, lambda age: age != 18, ExploreConfig(seed=3))
print(f"Minimized age: {result.counterexample.minimized if result.counterexample else None}")

# =============================================================
# Example 3: Default registry
# =============================================================
print("\n=== Default Registry ===")

try:
    lookup_default(User)
except MissingGeneratorError as e:
    print(f"Before registration: {e}")

register_default(User, users)
register_default(list[User], lists(users))


@for_all(list[User], config=ExploreConfig(num_runs=50, seed=1))
def check_ages_are_bounded(people: list[User]) -> None:
    assert all(0 <= person.age <= 120 for person in people)


check_ages_are_bounded()
print("Registered generators resolved and property held")

print("\nDone.")
