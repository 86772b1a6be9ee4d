"""
Roster Kernel — Store

Owns the current AppState. Every change goes through dispatch(), which runs
the middleware pipeline around the reducer and then notifies subscribers
synchronously, in registration order.

There is no module-level store: build one with create_store() and hand it
to whatever needs it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from roster_engine.kernel.actions import time_travel
from roster_engine.kernel.history import HistoryBuffer
from roster_engine.kernel.middleware import Middleware, Pipeline, default_middlewares
from roster_engine.kernel.reducer import empty_state, reduce
from roster_engine.kernel.types import DEFAULT_HISTORY_LIMIT, Action, AppState, ReduceResult

logger = logging.getLogger(__name__)

Reducer = Callable[[AppState, Action], ReduceResult]
Listener = Callable[[Any, Any], None]
Selector = Callable[[AppState], Any]


class _Subscription:
    __slots__ = ("listener", "selector")

    def __init__(self, listener: Listener, selector: Selector | None) -> None:
        self.listener = listener
        self.selector = selector

    def notify(self, new_state: AppState, prev_state: AppState) -> None:
        if self.selector is None:
            self.listener(new_state, prev_state)
            return
        selected_new = self.selector(new_state)
        selected_prev = self.selector(prev_state)
        if selected_new != selected_prev:
            self.listener(selected_new, selected_prev)


class Store:
    """
    Dispatch/reducer state container.

    dispatch() never raises for reducer or middleware failures as long as
    an ErrorContainmentMiddleware is in the chain (the default). Exceptions
    raised by subscribers are not caught.
    """

    def __init__(
        self,
        reducer: Reducer = reduce,
        initial_state: AppState | None = None,
        middlewares: Sequence[Middleware] | None = None,
        history: HistoryBuffer | None = None,
    ) -> None:
        self._reducer = reducer
        self._state = initial_state if initial_state is not None else empty_state()
        self._subscriptions: list[_Subscription] = []
        self.history = history if history is not None else HistoryBuffer()
        if middlewares is None:
            middlewares = default_middlewares(self.history)
        self._pipeline = Pipeline(middlewares, self._apply)

    def get_state(self) -> AppState:
        """Current state. Frozen, so callers cannot change it in place."""
        return self._state

    def dispatch(self, action: Action | Mapping[str, Any]) -> Action:
        """
        Run `action` through the pipeline and notify subscribers.

        A plain {type, payload} mapping is accepted and converted to an Action,
        which is what gets returned.
        """
        if isinstance(action, Mapping):
            action = Action.from_dict(action)
        prev_state = self._state
        self._pipeline.run(self, action)
        self._notify(prev_state)
        return action

    def subscribe(self, listener: Listener, selector: Selector | None = None) -> Callable[[], None]:
        """
        Register listener(new, prev). With a selector, the listener receives
        the selected slices and fires only when they compare unequal.

        Returns an unsubscribe callable that is safe to call more than once.
        """
        subscription = _Subscription(listener, selector)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return unsubscribe

    def time_travel(self, index: int) -> Action:
        return self.dispatch(time_travel(index))

    def replace_state(self, state: AppState) -> None:
        """
        Swap live state without running the reducer.

        Reserved for middleware (time travel); subscribers are notified by
        the enclosing dispatch.
        """
        self._state = state

    # -----------------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------------

    def _apply(self, action: Action) -> Action:
        result = self._reducer(self._state, action)
        if result.applied:
            self._state = result.state
        else:
            logger.debug("rejected %s: %s", action.type, result.error)
        return action

    def _notify(self, prev_state: AppState) -> None:
        new_state = self._state
        for subscription in list(self._subscriptions):
            subscription.notify(new_state, prev_state)


def create_store(
    initial_state: AppState | None = None,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
    middlewares: Sequence[Middleware] | None = None,
) -> Store:
    """Build a store with the default pipeline and a fresh history buffer."""
    history = HistoryBuffer(limit=history_limit)
    return Store(
        initial_state=initial_state,
        middlewares=middlewares,
        history=history,
    )
