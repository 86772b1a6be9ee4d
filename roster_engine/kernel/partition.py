"""
Roster Kernel — Team Partitioning

Splits a member list into N groups.

  distribute             — shuffle, then deal floor(M/N) to every group and one
                           extra to the first M mod N groups (default)
  distribute_sequential  — no shuffle, member i goes to group i mod N

Both guarantee every member lands in exactly one group and group sizes
differ by at most one.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

STRATEGIES: set[str] = {"random", "balanced", "sequential"}
DEFAULT_STRATEGY = "random"


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def shuffle(items: Sequence[T], rng: RandomSource | None = None) -> list[T]:
    """
    Fisher–Yates shuffle. Returns a new list; the input is never modified.

    Pass a seeded `random.Random` as rng for reproducible output.
    """
    source = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = source.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def _check_counts(member_count: int, team_count: int) -> None:
    if isinstance(team_count, bool) or not isinstance(team_count, int):
        raise ValueError(f"team_count must be an int, got {type(team_count).__name__}")
    if team_count < 1:
        raise ValueError(f"team_count must be at least 1, got {team_count}")
    if team_count > member_count:
        raise ValueError(f"team_count {team_count} exceeds member count {member_count}")


def distribute(
    members: Sequence[T],
    team_count: int,
    rng: RandomSource | None = None,
) -> list[list[T]]:
    """
    Randomized balanced split of `members` into `team_count` groups.

    Raises ValueError unless 1 <= team_count <= len(members).
    """
    _check_counts(len(members), team_count)

    shuffled = shuffle(members, rng)
    base, remainder = divmod(len(shuffled), team_count)
    logger.debug(
        "distribute: members=%d teams=%d base=%d remainder=%d",
        len(shuffled),
        team_count,
        base,
        remainder,
    )

    teams: list[list[T]] = []
    start = 0
    for team_index in range(team_count):
        size = base + (1 if team_index < remainder else 0)
        teams.append(shuffled[start : start + size])
        start += size
    return teams


def distribute_sequential(members: Sequence[T], team_count: int) -> list[list[T]]:
    """Deterministic striping: member i goes to group i mod team_count."""
    _check_counts(len(members), team_count)

    teams: list[list[T]] = [[] for _ in range(team_count)]
    for index, member in enumerate(members):
        teams[index % team_count].append(member)
    return teams


def distribute_with_strategy(
    members: Sequence[T],
    team_count: int,
    strategy: str = DEFAULT_STRATEGY,
    rng: RandomSource | None = None,
) -> list[list[T]]:
    """
    Split using a named strategy.

    "random" and "balanced" are the same randomized balanced split;
    "sequential" stripes members in input order.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown strategy: {strategy!r}")
    if strategy == "sequential":
        return distribute_sequential(members, team_count)
    return distribute(members, team_count, rng)
