"""
Roster Kernel — Middleware Pipeline

Each middleware wraps the rest of the chain:

    ErrorContainment → Logging → InvariantCheck → History → reducer

Stages run in registration order on the way in and unwind in reverse on the
way out. The terminal step applies the reducer and commits the new state to
the store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from functools import partial
from typing import TYPE_CHECKING

from roster_engine.kernel.actions import error_action
from roster_engine.kernel.history import HistoryBuffer
from roster_engine.kernel.invariants import check_invariants
from roster_engine.kernel.types import ERROR, TIME_TRAVEL, Action

if TYPE_CHECKING:
    from roster_engine.kernel.store import Store

logger = logging.getLogger(__name__)

NextFn = Callable[[Action], Action]


class Middleware:
    """
    Base interceptor. Subclasses override handle() and call next(action)
    to continue down the chain; not calling it short-circuits the reducer.
    """

    def handle(self, store: Store, action: Action, next: NextFn) -> Action:
        return next(action)


class Pipeline:
    """Runs an ordered list of middlewares around a terminal step."""

    def __init__(self, middlewares: Sequence[Middleware], terminal: NextFn) -> None:
        self.middlewares = list(middlewares)
        self._terminal = terminal

    def run(self, store: Store, action: Action) -> Action:
        return self._call(store, 0, action)

    def _call(self, store: Store, index: int, action: Action) -> Action:
        if index >= len(self.middlewares):
            return self._terminal(action)
        return self.middlewares[index].handle(store, action, partial(self._call, store, index + 1))


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


class LoggingMiddleware(Middleware):
    """Logs each action with the state before and after. No state effect."""

    def __init__(self, level: int = logging.DEBUG) -> None:
        self.level = level

    def handle(self, store: Store, action: Action, next: NextFn) -> Action:
        if not logger.isEnabledFor(self.level):
            return next(action)

        logger.log(self.level, "action %s payload=%r", action.type, dict(action.payload))
        logger.log(self.level, "  before: %r", store.get_state().to_dict())
        result = next(action)
        logger.log(self.level, "  after:  %r", store.get_state().to_dict())
        return result


class HistoryMiddleware(Middleware):
    """
    Records every state-changing action into the history buffer and serves
    TIME_TRAVEL by restoring a recorded state directly.
    """

    def __init__(self, history: HistoryBuffer) -> None:
        self.history = history

    def handle(self, store: Store, action: Action, next: NextFn) -> Action:
        if action.type == TIME_TRAVEL:
            self._travel(store, action)
            return action

        before = store.get_state()
        result = next(action)
        after = store.get_state()
        if after != before:
            self.history.append(action, after)
        return result

    def _travel(self, store: Store, action: Action) -> None:
        index = action.payload.get("index")
        if isinstance(index, bool) or not isinstance(index, int):
            logger.warning("time travel: index must be an int, got %r", index)
            return
        try:
            entry = self.history.travel(index)
        except IndexError as e:
            logger.warning("time travel: %s", e)
            return
        store.replace_state(entry.state)


class ErrorContainmentMiddleware(Middleware):
    """
    Keeps exceptions from escaping dispatch.

    A failure is logged, re-dispatched as an @@ERROR action carrying the
    detail and the original action, and the original action is returned.
    A failure while handling @@ERROR itself is logged only.
    """

    def handle(self, store: Store, action: Action, next: NextFn) -> Action:
        try:
            return next(action)
        except Exception as e:
            action_type = getattr(action, "type", type(action).__name__)
            logger.exception("dispatch failed for %s", action_type)
            if action_type != ERROR:
                store.dispatch(error_action(e, action))
            return action


class InvariantCheckMiddleware(Middleware):
    """Checks state invariants after the reducer runs. Warn-only."""

    def handle(self, store: Store, action: Action, next: NextFn) -> Action:
        result = next(action)
        for violation in check_invariants(store.get_state()):
            logger.warning("invariant violated after %s: %s", action.type, violation)
        return result


def default_middlewares(history: HistoryBuffer) -> list[Middleware]:
    return [
        ErrorContainmentMiddleware(),
        LoggingMiddleware(),
        InvariantCheckMiddleware(),
        HistoryMiddleware(history),
    ]
