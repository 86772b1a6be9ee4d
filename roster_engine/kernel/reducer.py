"""
Roster Kernel — Reducer

Pure function: (state, action) → ReduceResult
No side effects. No IO. Deterministic.

Rejected actions (blank names, out-of-range indexes, counts that would break
an invariant) come back with applied=False and the input state untouched.
Callers of the store only see that the state did not change.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from roster_engine.kernel.dedup import apply_dedup, collapse_singleton
from roster_engine.kernel.types import (
    ADD_MEMBER,
    CONFIRM_TEAM_COUNT,
    CONFIRM_TOTAL_MEMBERS,
    DELETE_MEMBER,
    EDIT_MEMBER,
    ERROR,
    RESET_STATE,
    RESET_TOTAL_MEMBERS,
    SET_TEAM_COUNT,
    SET_TOTAL_MEMBERS,
    Action,
    AppState,
    ReduceResult,
    parse_name,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def empty_state() -> AppState:
    """The initial state: no members, nothing confirmed."""
    return AppState()


def reduce(state: AppState, action: Action) -> ReduceResult:
    """
    Apply one action to the current state.
    Returns new state + applied flag + error.

    Pure function. AppState is frozen, so every accepted action produces a
    new instance and the input is never modified.
    """
    handler = _HANDLERS.get(action.type)
    if handler is None:
        return ReduceResult(
            state=state,
            applied=False,
            error=f"UNKNOWN_ACTION: {action.type}",
        )
    return handler(state, action)


def replay(actions: list[Action]) -> AppState:
    """
    Rebuild state from scratch by reducing over all actions.
    Rejections are skipped.
    """
    state = empty_state()
    for action in actions:
        result = reduce(state, action)
        if result.applied:
            state = result.state
    return state


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _reject(state: AppState, code: str, msg: str) -> ReduceResult:
    return ReduceResult(state=state, applied=False, error=f"{code}: {msg}")


def _ok(state: AppState) -> ReduceResult:
    return ReduceResult(state=state, applied=True)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _clean_name(value: Any) -> str | None:
    """Trimmed name, or None when missing or blank."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


def _valid_index(state: AppState, index: Any) -> bool:
    return _is_int(index) and 0 <= index < len(state.members)


# ---------------------------------------------------------------------------
# Member handlers
# ---------------------------------------------------------------------------


def _handle_add_member(state: AppState, action: Action) -> ReduceResult:
    name = _clean_name(action.payload.get("name"))
    if name is None:
        return _reject(state, "BLANK_NAME", "member name is empty")
    if len(state.members) >= state.total_members:
        return _reject(
            state,
            "ROSTER_FULL",
            f"{len(state.members)} of {state.total_members} members already added",
        )

    return _ok(replace(state, members=apply_dedup(name, state.members)))


def _handle_delete_member(state: AppState, action: Action) -> ReduceResult:
    index = action.payload.get("index")
    if not _valid_index(state, index):
        return _reject(state, "INDEX_OUT_OF_RANGE", f"no member at index {index!r}")

    deleted = state.members[index]
    remaining = state.members[:index] + state.members[index + 1 :]
    return _ok(replace(state, members=collapse_singleton(remaining, deleted.base)))


def _handle_edit_member(state: AppState, action: Action) -> ReduceResult:
    p = action.payload
    index = p.get("index")
    if not _valid_index(state, index):
        return _reject(state, "INDEX_OUT_OF_RANGE", f"no member at index {index!r}")
    text = _clean_name(p.get("name"))
    if text is None:
        return _reject(state, "BLANK_NAME", "member name is empty")

    new_name = parse_name(text)
    if state.members[index] == new_name:
        return _ok(state)

    for i, member in enumerate(state.members):
        if i != index and member.display == new_name.display:
            return _reject(state, "DUPLICATE_NAME", f"{new_name.display!r} is already in the roster")

    members = list(state.members)
    members[index] = new_name
    return _ok(replace(state, members=tuple(members)))


# ---------------------------------------------------------------------------
# Count handlers
# ---------------------------------------------------------------------------


def _handle_set_total_members(state: AppState, action: Action) -> ReduceResult:
    count = action.payload.get("count")
    if not _is_int(count) or count < 1:
        return _reject(state, "INVALID_COUNT", f"total members must be a positive int, got {count!r}")
    if state.is_total_confirmed and count < len(state.members):
        return _reject(
            state,
            "BELOW_ROSTER",
            f"{len(state.members)} members already added, cannot lower total to {count}",
        )
    if state.is_team_count_confirmed and count < state.team_count:
        return _reject(
            state,
            "BELOW_TEAM_COUNT",
            f"{state.team_count} teams confirmed, cannot lower total to {count}",
        )
    return _ok(replace(state, total_members=count))


def _handle_confirm_total_members(state: AppState, action: Action) -> ReduceResult:
    if state.total_members <= 0:
        return _reject(state, "INVALID_COUNT", "total members must be set before confirming")
    if len(state.members) > state.total_members:
        return _reject(
            state,
            "BELOW_ROSTER",
            f"{len(state.members)} members exceed total of {state.total_members}",
        )
    return _ok(replace(state, is_total_confirmed=True))


def _handle_reset_total_members(state: AppState, action: Action) -> ReduceResult:
    return _ok(empty_state())


def _handle_set_team_count(state: AppState, action: Action) -> ReduceResult:
    count = action.payload.get("count")
    if not _is_int(count) or count < 1:
        return _reject(state, "INVALID_COUNT", f"team count must be a positive int, got {count!r}")
    if state.is_team_count_confirmed and count > state.total_members:
        return _reject(
            state,
            "TEAM_COUNT_OUT_OF_RANGE",
            f"team count {count} exceeds total members {state.total_members}",
        )
    return _ok(replace(state, team_count=count))


def _handle_confirm_team_count(state: AppState, action: Action) -> ReduceResult:
    if not 1 <= state.team_count <= state.total_members:
        return _reject(
            state,
            "TEAM_COUNT_OUT_OF_RANGE",
            f"team count {state.team_count} must be between 1 and {state.total_members}",
        )
    return _ok(replace(state, is_team_count_confirmed=True))


# ---------------------------------------------------------------------------
# Misc handlers
# ---------------------------------------------------------------------------


def _handle_reset_state(state: AppState, action: Action) -> ReduceResult:
    return _ok(empty_state())


def _handle_error(state: AppState, action: Action) -> ReduceResult:
    # Observability only: accepted so it shows up in logs, state untouched
    return _ok(state)


# ---------------------------------------------------------------------------
# Handler registry
# ---------------------------------------------------------------------------

_HANDLERS: dict[str, Any] = {
    ADD_MEMBER: _handle_add_member,
    DELETE_MEMBER: _handle_delete_member,
    EDIT_MEMBER: _handle_edit_member,
    SET_TOTAL_MEMBERS: _handle_set_total_members,
    CONFIRM_TOTAL_MEMBERS: _handle_confirm_total_members,
    RESET_TOTAL_MEMBERS: _handle_reset_total_members,
    SET_TEAM_COUNT: _handle_set_team_count,
    CONFIRM_TEAM_COUNT: _handle_confirm_team_count,
    RESET_STATE: _handle_reset_state,
    ERROR: _handle_error,
}
