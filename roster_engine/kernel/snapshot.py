"""
Roster Kernel — Result Snapshot

Shapes a finished split into the {teams, metadata} payload handed to the
persistence writer. The kernel does not know where or how it is stored.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from roster_engine.kernel.partition import DEFAULT_STRATEGY, RandomSource, distribute_with_strategy
from roster_engine.kernel.types import AppState, Name, now_iso


def build_snapshot(
    state: AppState,
    teams: Sequence[Sequence[Name | str]],
    strategy: str = DEFAULT_STRATEGY,
) -> dict[str, Any]:
    return {
        "teams": [[str(member) for member in team] for team in teams],
        "metadata": {
            "teamCount": len(teams),
            "totalMembers": state.total_members,
            "strategy": strategy,
            "createdAt": now_iso(),
        },
    }


def split_state(
    state: AppState,
    strategy: str = DEFAULT_STRATEGY,
    rng: RandomSource | None = None,
) -> dict[str, Any]:
    """
    Split the roster held in `state` into its configured number of teams.

    Requires a confirmed team count; raises ValueError otherwise, or when
    fewer members than teams have been entered.
    """
    if not state.is_team_count_confirmed:
        raise ValueError("team count must be confirmed before splitting")
    teams = distribute_with_strategy(list(state.members), state.team_count, strategy, rng)
    return build_snapshot(state, teams, strategy)
