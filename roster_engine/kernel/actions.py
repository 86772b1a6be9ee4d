"""
Roster Kernel — Action Construction

Factory functions for creating well-formed actions.
Used by the UI layer to talk to the store, and by tests to build actions
concisely.
"""

from __future__ import annotations

from typing import Any

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
    TIME_TRAVEL,
    Action,
    now_iso,
)


def make_action(type: str, payload: dict[str, Any] | None = None) -> Action:
    """Build an Action from a tag and an optional payload."""
    return Action(type=type, payload=payload or {})


def add_member(name: str) -> Action:
    return make_action(ADD_MEMBER, {"name": name})


def delete_member(index: int) -> Action:
    return make_action(DELETE_MEMBER, {"index": index})


def edit_member(index: int, name: str) -> Action:
    return make_action(EDIT_MEMBER, {"index": index, "name": name})


def set_total_members(count: int) -> Action:
    return make_action(SET_TOTAL_MEMBERS, {"count": count})


def confirm_total_members() -> Action:
    return make_action(CONFIRM_TOTAL_MEMBERS)


def reset_total_members() -> Action:
    return make_action(RESET_TOTAL_MEMBERS)


def set_team_count(count: int) -> Action:
    return make_action(SET_TEAM_COUNT, {"count": count})


def confirm_team_count() -> Action:
    return make_action(CONFIRM_TEAM_COUNT)


def reset_state() -> Action:
    return make_action(RESET_STATE)


def time_travel(index: int) -> Action:
    """Restore the state recorded at history `index`. Never recorded itself."""
    return make_action(TIME_TRAVEL, {"index": index})


def error_action(error: BaseException, original: Action) -> Action:
    """
    Wrap a failure raised while handling `original`.

    Dispatched by the error-containment middleware for observability;
    the reducer accepts it without touching state.
    """
    return make_action(
        ERROR,
        {
            "error": f"{type(error).__name__}: {error}",
            "original_action": original,
            "timestamp": now_iso(),
        },
    )
