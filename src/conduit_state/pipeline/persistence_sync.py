from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from conduit_state.core.models import Action, ActionType
from conduit_state.persistence.interfaces import DEFAULT_TOKEN_KEY, EMPTY_TOKEN, KeyValueStore
from conduit_state.pipeline.interfaces import Forward

logger = logging.getLogger(__name__)


def _token(payload: Any) -> Optional[str]:
    if not isinstance(payload, Mapping):
        return None
    user = payload.get("user")
    if not isinstance(user, Mapping):
        return None
    return user.get("token") or None


class PersistenceSyncMiddleware:
    """Mirrors the session token into the key/value store, then forwards unchanged."""

    def __init__(self, *, storage: KeyValueStore, token_key: str = DEFAULT_TOKEN_KEY) -> None:
        self._storage = storage
        self._token_key = token_key

    def handle(self, action: Action, forward: Forward) -> Any:
        if action.type in (ActionType.LOGIN, ActionType.REGISTER):
            token = None if action.error else _token(action.payload)
            if token is not None:
                self._storage.set(self._token_key, token)
                logger.info("persistence.token_saved type=%s key=%s", action.type.value, self._token_key)
        elif action.type == ActionType.LOGOUT:
            self._storage.set(self._token_key, EMPTY_TOKEN)
            logger.info("persistence.token_cleared key=%s", self._token_key)
        return forward(action)
