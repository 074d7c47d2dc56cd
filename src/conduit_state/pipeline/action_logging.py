from __future__ import annotations

import logging
from typing import Any

from conduit_state.core.models import Action
from conduit_state.pipeline.interfaces import Forward

logger = logging.getLogger(__name__)


class ActionLoggingMiddleware:
    def __init__(self, *, level: int = logging.DEBUG) -> None:
        self._level = level

    def handle(self, action: Action, forward: Forward) -> Any:
        if logger.isEnabledFor(self._level):
            logger.log(
                self._level,
                "pipeline.action type=%s subtype=%s error=%s",
                action.type.value,
                action.subtype.value if action.subtype is not None else None,
                action.error,
            )
        return forward(action)
