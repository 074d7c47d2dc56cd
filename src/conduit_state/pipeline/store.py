from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from conduit_state.core.models import Action
from conduit_state.pipeline.interfaces import Forward, Middleware
from conduit_state.reducers.root import Reducer, reduce_app
from conduit_state.reducers.state import AppState

logger = logging.getLogger(__name__)

Listener = Callable[[Action, AppState], None]


def _bind(stage: Middleware, forward: Forward) -> Forward:
    def _handle(action: Action) -> Any:
        return stage.handle(action, forward)

    return _handle


class Store:
    """
    Holds the application state and runs actions through the middleware chain.

    Every action that reaches the end of the chain is applied to the reducer
    immediately and in arrival order. Stages may dispatch back into the store
    while handling an action; the nested action runs to completion first.
    """

    def __init__(self, reducer: Reducer = reduce_app, initial_state: Optional[AppState] = None) -> None:
        self._reducer = reducer
        self._state = initial_state if initial_state is not None else AppState()
        self._listeners: list[Listener] = []
        self._stages: tuple[Middleware, ...] = ()
        self._chain: Forward = self._reduce

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def stages(self) -> Sequence[Middleware]:
        return self._stages

    def apply_middleware(self, *stages: Middleware) -> None:
        chain: Forward = self._reduce
        for stage in reversed(stages):
            chain = _bind(stage, chain)
        self._stages = tuple(stages)
        self._chain = chain
        logger.debug("store.middleware_applied stages=%s", [type(s).__name__ for s in stages])

    def dispatch(self, action: Action) -> Any:
        return self._chain(action)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _reduce(self, action: Action) -> Action:
        self._state = self._reducer(self._state, action)
        for listener in list(self._listeners):
            try:
                listener(action, self._state)
            except Exception:
                logger.exception("store.listener_failed type=%s", action.type.value)
        return action
