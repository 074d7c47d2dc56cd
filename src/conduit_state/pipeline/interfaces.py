from __future__ import annotations

from typing import Any, Callable, Protocol

from conduit_state.core.models import Action

Forward = Callable[[Action], Any]
Dispatch = Callable[[Action], Any]


class Middleware(Protocol):
    """
    One stage of the dispatch pipeline.

    A stage decides whether and what to forward. It returns whatever it wants
    the caller of `Store.dispatch` to receive, usually the result of `forward`.
    """

    def handle(self, action: Action, forward: Forward) -> Any:
        ...
