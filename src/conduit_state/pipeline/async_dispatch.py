"""
Turns actions carrying an awaitable payload into a START/END lifecycle.

The stage never cancels the underlying work. Instead it snapshots the view
generation when the action is dispatched and compares it again when the work
settles: if the user has navigated away in the meantime, the result is dropped
and only the balancing ASYNC_END is emitted.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import replace
from typing import Any, Optional

from conduit_state.core.errors import OperationFailure
from conduit_state.core.generation import ViewGeneration
from conduit_state.core.models import Action, ActionType
from conduit_state.pipeline.interfaces import Dispatch, Forward

logger = logging.getLogger(__name__)


def _settle(future: asyncio.Future, result: Optional[Action]) -> None:
    if not future.done():
        future.set_result(result)


class AsyncDispatchMiddleware:
    def __init__(self, *, dispatch: Dispatch, generation: ViewGeneration) -> None:
        self._dispatch = dispatch
        self._generation = generation

    def handle(self, action: Action, forward: Forward) -> Any:
        if not inspect.isawaitable(action.payload):
            return forward(action)

        loop = asyncio.get_running_loop()
        operation = asyncio.ensure_future(action.payload)

        self._dispatch(Action(type=ActionType.ASYNC_START, subtype=action.type))
        dispatched_generation = self._generation.current()
        settled: asyncio.Future[Optional[Action]] = loop.create_future()

        def _on_done(done: asyncio.Future) -> None:
            try:
                self._on_settled(
                    done,
                    action=action,
                    forward=forward,
                    dispatched_generation=dispatched_generation,
                    settled=settled,
                )
            except Exception as exc:
                logger.exception("pipeline.settle_failed type=%s", action.type.value)
                if not settled.done():
                    settled.set_exception(exc)

        operation.add_done_callback(_on_done)
        return settled

    def _on_settled(
        self,
        operation: asyncio.Future,
        *,
        action: Action,
        forward: Forward,
        dispatched_generation: int,
        settled: asyncio.Future,
    ) -> None:
        # END is unconditional so that in-flight counters always balance.
        self._dispatch(Action(type=ActionType.ASYNC_END, subtype=action.type))

        current_generation = self._generation.current()
        if current_generation != dispatched_generation:
            logger.debug(
                "pipeline.stale_result type=%s dispatched_generation=%s current_generation=%s",
                action.type.value,
                dispatched_generation,
                current_generation,
            )
            if not operation.cancelled():
                # Marks the exception retrieved; dropped failures are not reported.
                operation.exception()
            _settle(settled, None)
            return

        result_action = self._result_action(action, operation)
        forward(result_action)
        _settle(settled, result_action)

    def _result_action(self, action: Action, operation: asyncio.Future) -> Action:
        if operation.cancelled():
            logger.warning("pipeline.operation_cancelled type=%s", action.type.value)
            return replace(action, payload=None, error=True)

        exc = operation.exception()
        if exc is None:
            return replace(action, payload=operation.result(), error=False)
        if isinstance(exc, OperationFailure):
            return replace(action, payload=exc.payload, error=True)

        logger.warning(
            "pipeline.operation_failed type=%s error=%s",
            action.type.value,
            type(exc).__name__,
        )
        return replace(action, payload=None, error=True)
