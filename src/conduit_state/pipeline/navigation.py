from __future__ import annotations

from typing import Any

from conduit_state.core.generation import ViewGeneration
from conduit_state.core.models import PAGE_UNLOADED_TYPES, Action
from conduit_state.pipeline.interfaces import Forward


class NavigationMiddleware:
    """Advances the view generation whenever a page is unloaded."""

    def __init__(self, *, generation: ViewGeneration) -> None:
        self._generation = generation

    def handle(self, action: Action, forward: Forward) -> Any:
        if action.type in PAGE_UNLOADED_TYPES:
            self._generation.advance()
        return forward(action)
