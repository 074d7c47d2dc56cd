from __future__ import annotations

import logging
from typing import Any, Optional

from conduit_state.core.models import Action, ActionType
from conduit_state.persistence.interfaces import EMPTY_TOKEN, KeyValueStore

logger = logging.getLogger(__name__)


def restore_session(storage: KeyValueStore, *, token_key: str, payload: Optional[Any] = None) -> Action:
    """
    Build the APP_LOAD action from whatever token survived the last session.

    `payload` is the (optional) current-user response; pass an awaitable to let
    the async dispatch stage resolve it.
    """
    token = storage.get(token_key)
    if token == EMPTY_TOKEN:
        token = None
    logger.info("session.restore has_token=%s", token is not None)
    return Action(type=ActionType.APP_LOAD, token=token, payload=payload)
