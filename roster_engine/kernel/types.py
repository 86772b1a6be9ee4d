"""
Roster Kernel — Shared Types

Data classes used across dedup, partition, reducer, history and store.
These are the contracts that bind the kernel together.

All of them are frozen: a state handed out by the store can be compared with
`==` for change detection and cannot be mutated by callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any

# ---------------------------------------------------------------------------
# Action tags
# ---------------------------------------------------------------------------

ADD_MEMBER = "ADD_MEMBER"
DELETE_MEMBER = "DELETE_MEMBER"
EDIT_MEMBER = "EDIT_MEMBER"
SET_TOTAL_MEMBERS = "SET_TOTAL_MEMBERS"
CONFIRM_TOTAL_MEMBERS = "CONFIRM_TOTAL_MEMBERS"
RESET_TOTAL_MEMBERS = "RESET_TOTAL_MEMBERS"
SET_TEAM_COUNT = "SET_TEAM_COUNT"
CONFIRM_TEAM_COUNT = "CONFIRM_TEAM_COUNT"
RESET_STATE = "RESET_STATE"

# Internal pseudo-actions, handled by middleware rather than by user intent
TIME_TRAVEL = "@@HISTORY/TIME_TRAVEL"
ERROR = "@@ERROR"

DEFAULT_HISTORY_LIMIT = 50


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Name:
    """
    A roster entry: base name plus an optional disambiguating suffix.

    suffix is a positive int for generated suffixes ("Kim-2") or free text
    for user-chosen ones ("Kim-backend"). Display form joins them with "-".
    """

    base: str
    suffix: int | str | None = None

    @property
    def display(self) -> str:
        if self.suffix is None:
            return self.base
        return f"{self.base}-{self.suffix}"

    @property
    def numeric_suffix(self) -> int | None:
        if isinstance(self.suffix, int):
            return self.suffix
        return None

    def with_suffix(self, suffix: int | str | None) -> Name:
        return Name(base=self.base, suffix=suffix)

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class AppState:
    """
    The roster's current state.

    members is a tuple so a snapshot returned by the store is read-only all
    the way down.
    """

    members: tuple[Name, ...] = ()
    total_members: int = 0
    is_total_confirmed: bool = False
    team_count: int = 0
    is_team_count_confirmed: bool = False

    @property
    def member_names(self) -> list[str]:
        return [m.display for m in self.members]

    def to_dict(self) -> dict[str, Any]:
        """Browser wire form (camelCase keys, members as display strings)."""
        return {
            "members": self.member_names,
            "totalMembers": self.total_members,
            "isTotalConfirmed": self.is_total_confirmed,
            "teamCount": self.team_count,
            "isTeamCountConfirmed": self.is_team_count_confirmed,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> AppState:
        return cls(
            members=tuple(parse_name(m) for m in d.get("members", [])),
            total_members=d.get("totalMembers", 0),
            is_total_confirmed=d.get("isTotalConfirmed", False),
            team_count=d.get("teamCount", 0),
            is_team_count_confirmed=d.get("isTeamCountConfirmed", False),
        )


@dataclass(frozen=True)
class Action:
    """
    A tagged request for a state change. The reducer reads `type` and `payload`.

    The payload is wrapped in a read-only mapping on construction.
    """

    type: str
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": dict(self.payload)}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> Action:
        """Build from the plain {type, payload} form. A non-mapping payload is dropped."""
        payload = d.get("payload")
        if not isinstance(payload, Mapping):
            payload = {}
        return cls(type=d.get("type"), payload=payload)


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded dispatch: the action and the state it produced."""

    action: Action
    state: AppState
    timestamp: str  # ISO 8601 UTC


@dataclass
class ReduceResult:
    """
    Result of applying one action to a state.
    The reducer never raises for bad input; it always returns one of these.
    """

    state: AppState
    applied: bool
    error: str | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_name(text: str) -> Name:
    """
    Parse a display string back into a Name.

    The tail after the last "-" becomes the suffix: an int when it is a
    positive number, free text otherwise.

      "Kim"          → Name("Kim")
      "Kim-2"        → Name("Kim", 2)
      "Jean-Luc-3"   → Name("Jean-Luc", 3)
      "Kim-backend"  → Name("Kim", "backend")
    """
    text = text.strip()
    base, sep, tail = text.rpartition("-")
    if not sep or not base.strip() or not tail.strip():
        return Name(base=text)
    base, tail = base.strip(), tail.strip()
    if tail.isdigit() and int(tail) > 0:
        return Name(base=base, suffix=int(tail))
    return Name(base=base, suffix=tail)


def now_iso() -> str:
    """Current UTC time as ISO 8601 string."""
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
