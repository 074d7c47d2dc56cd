from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional

from conduit_state.core.models import Action, ActionType
from conduit_state.reducers.state import AuthState

logger = logging.getLogger(__name__)

AUTH_FORM_FIELDS = frozenset({"email", "username", "password"})
_AUTH_REQUESTS = (ActionType.LOGIN, ActionType.REGISTER)
_USER_FIELDS = ("email", "username", "token")


def _result_errors(payload: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(payload, Mapping):
        return payload.get("errors")
    return None


def reduce_auth(state: Optional[AuthState], action: Action) -> AuthState:
    if state is None:
        state = AuthState()

    match action.type:
        case ActionType.LOGIN | ActionType.REGISTER:
            if action.error:
                return replace(state, in_progress=False, errors=_result_errors(action.payload))
            user = action.payload.get("user") if isinstance(action.payload, Mapping) else None
            merged = {k: user[k] for k in _USER_FIELDS if isinstance(user, Mapping) and k in user}
            return replace(state, in_progress=False, errors=None, **merged)
        case ActionType.LOGIN_PAGE_UNLOADED | ActionType.REGISTER_PAGE_UNLOADED:
            return AuthState()
        case ActionType.ASYNC_START:
            if action.subtype in _AUTH_REQUESTS:
                return replace(state, in_progress=True)
            return state
        case ActionType.UPDATE_FIELD_AUTH:
            if action.key not in AUTH_FORM_FIELDS:
                logger.warning("auth.unknown_field key=%s", action.key)
                return state
            return replace(state, **{action.key: action.value})
        case _:
            return state
