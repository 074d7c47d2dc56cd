"""
Scripted sessions: feed a list of steps through a runtime and report the state.

A step is a mapping. `navigate: true` advances the view generation,
`settle: true` waits for all in-flight operations, anything else is an action.
An action step with `delay_seconds` is dispatched with an awaitable payload that
resolves after the delay (or fails with `OperationFailure` when `fail: true`).
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml

from conduit_state.core.errors import OperationFailure
from conduit_state.core.models import Action
from conduit_state.pipeline.factory import StateRuntime
from conduit_state.reducers.state import AppState

logger = logging.getLogger(__name__)

_ACTION_FIELDS = frozenset(f.name for f in dataclasses.fields(Action))


async def _resolve_later(payload: Any, *, delay_seconds: float, fail: bool) -> Any:
    await asyncio.sleep(delay_seconds)
    if fail:
        raise OperationFailure(payload)
    return payload


def action_from_step(step: Mapping[str, Any]) -> Action:
    fields = dict(step)
    delay_seconds = fields.pop("delay_seconds", None)
    fail = bool(fields.pop("fail", False))

    unknown = set(fields) - _ACTION_FIELDS
    if unknown:
        raise ValueError(f"Unknown action fields in step: {sorted(unknown)}")
    if "type" not in fields:
        raise ValueError("Action step is missing 'type'")

    if delay_seconds is not None:
        fields["payload"] = _resolve_later(
            fields.get("payload"),
            delay_seconds=float(delay_seconds),
            fail=fail,
        )
    elif fail:
        raise ValueError("'fail' requires 'delay_seconds'")
    return Action(**fields)


def load_script(path: str | Path) -> list[Mapping[str, Any]]:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, Mapping):
        data = data.get("steps")
    if not isinstance(data, list):
        raise ValueError(f"Replay script must be a list of steps: {path}")
    return data


async def run_script(runtime: StateRuntime, steps: Sequence[Mapping[str, Any]]) -> AppState:
    in_flight: list[asyncio.Future] = []

    async def _settle() -> None:
        if in_flight:
            await asyncio.gather(*in_flight)
            in_flight.clear()

    for index, step in enumerate(steps):
        if not isinstance(step, Mapping):
            raise ValueError(f"Step {index} must be a mapping, got: {type(step).__name__}")
        if step.get("navigate"):
            runtime.generation.advance()
            continue
        if step.get("settle"):
            await _settle()
            continue

        result = runtime.store.dispatch(action_from_step(step))
        if isinstance(result, asyncio.Future):
            in_flight.append(result)

    await _settle()
    logger.info("replay.completed steps=%d generation=%d", len(steps), runtime.generation.current())
    return runtime.store.state


def state_to_dict(state: AppState) -> dict[str, Any]:
    return dataclasses.asdict(state)
