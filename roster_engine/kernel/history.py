"""
Roster Kernel — History Buffer

Bounded log of (action, resulting state) pairs with a time-travel pointer.

Linear undo/redo: after travelling back to entry k, the next recorded
action drops entries k+1.. before it is appended. Oldest entries are
evicted once the buffer exceeds its limit.
"""

from __future__ import annotations

from roster_engine.kernel.types import (
    DEFAULT_HISTORY_LIMIT,
    Action,
    AppState,
    HistoryEntry,
    now_iso,
)


class HistoryBuffer:
    """Recorded dispatches, oldest first."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"history limit must be at least 1, got {limit}")
        self.limit = limit
        self._entries: list[HistoryEntry] = []
        self._pointer = -1

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    @property
    def pointer(self) -> int:
        """Index of the entry matching live state, -1 when empty."""
        return self._pointer

    def append(self, action: Action, state: AppState) -> HistoryEntry:
        # Discard the undone future before recording a new branch
        del self._entries[self._pointer + 1 :]

        entry = HistoryEntry(action=action, state=state, timestamp=now_iso())
        self._entries.append(entry)

        overflow = len(self._entries) - self.limit
        if overflow > 0:
            del self._entries[:overflow]

        self._pointer = len(self._entries) - 1
        return entry

    def travel(self, index: int) -> HistoryEntry:
        """
        Move the pointer to `index` and return that entry.
        Raises IndexError for negative or out-of-range indexes.
        """
        if not 0 <= index < len(self._entries):
            raise IndexError(f"history index {index} out of range 0..{len(self._entries) - 1}")
        self._pointer = index
        return self._entries[index]

    def clear(self) -> None:
        self._entries.clear()
        self._pointer = -1
