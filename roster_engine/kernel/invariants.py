"""
Roster Kernel — State Invariants

check_invariants(state) returns a list of human-readable violations;
an empty list means the state is consistent. Nothing here raises.
"""

from __future__ import annotations

from roster_engine.kernel.types import AppState


def check_invariants(state: AppState) -> list[str]:
    violations: list[str] = []

    if state.total_members < 0:
        violations.append(f"total_members is negative: {state.total_members}")
    if state.team_count < 0:
        violations.append(f"team_count is negative: {state.team_count}")

    if state.is_total_confirmed:
        if state.total_members <= 0:
            violations.append("total confirmed but total_members is not positive")
        if len(state.members) > state.total_members:
            violations.append(
                f"{len(state.members)} members exceed confirmed total {state.total_members}"
            )

    if state.is_team_count_confirmed and not 1 <= state.team_count <= state.total_members:
        violations.append(
            f"team count {state.team_count} confirmed outside 1..{state.total_members}"
        )

    seen: set[tuple[str, int | str | None]] = set()
    for member in state.members:
        key = (member.base, member.suffix)
        if key in seen:
            violations.append(f"duplicate member {member.display!r}")
        seen.add(key)

    return violations
