from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ViewGeneration:
    """
    Identifies the current navigational context.

    The counter starts at 0 and only ever moves forward. Work started under one
    generation is considered stale once the counter has advanced past it.
    """

    def __init__(self, initial: int = 0) -> None:
        if initial < 0:
            raise ValueError(f"Generation must be non-negative, got: {initial}")
        self._value = initial

    def current(self) -> int:
        return self._value

    def advance(self) -> int:
        self._value += 1
        logger.debug("generation.advanced value=%s", self._value)
        return self._value
