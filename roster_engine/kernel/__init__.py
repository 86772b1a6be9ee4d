"""
Roster Kernel — the pure core.

Components:
  dedup       — duplicate name resolution ("Kim" → "Kim-1", "Kim-2")
  partition   — balanced team splitting
  reducer     — (state, action) → state  (pure, deterministic)
  history     — bounded undo/redo log
  middleware  — logging, history, error containment, invariant checks
  store       — dispatch / get_state / subscribe
"""

from roster_engine.kernel.dedup import resolve_name
from roster_engine.kernel.history import HistoryBuffer
from roster_engine.kernel.partition import distribute, distribute_sequential, distribute_with_strategy
from roster_engine.kernel.reducer import empty_state, reduce, replay
from roster_engine.kernel.snapshot import build_snapshot, split_state
from roster_engine.kernel.store import Store, create_store
from roster_engine.kernel.types import Action, AppState, Name

__all__ = [
    "Action",
    "AppState",
    "Name",
    "resolve_name",
    "distribute",
    "distribute_sequential",
    "distribute_with_strategy",
    "reduce",
    "replay",
    "empty_state",
    "HistoryBuffer",
    "Store",
    "create_store",
    "build_snapshot",
    "split_state",
]
