from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Optional

from conduit_state.core.models import Action, ActionType
from conduit_state.reducers.state import CommonState


def _user(payload: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(payload, Mapping) and isinstance(payload.get("user"), Mapping):
        return payload["user"]
    return None


def reduce_common(state: Optional[CommonState], action: Action) -> CommonState:
    if state is None:
        state = CommonState()

    match action.type:
        case ActionType.APP_LOAD:
            return replace(
                state,
                token=action.token or None,
                app_loaded=True,
                current_user=_user(action.payload),
            )
        case ActionType.REDIRECT:
            return replace(state, redirect_to=None)
        case ActionType.LOGOUT:
            return replace(state, redirect_to="/", token=None, current_user=None)
        case ActionType.LOGIN | ActionType.REGISTER:
            if action.error:
                return state
            user = _user(action.payload)
            return replace(
                state,
                redirect_to="/",
                token=user.get("token") if user else None,
                current_user=user,
            )
        case ActionType.ARTICLE_SUBMITTED:
            if action.error or not isinstance(action.payload, Mapping):
                return state
            article = action.payload.get("article") or {}
            return replace(state, redirect_to=f"/article/{article.get('slug', '')}")
        case ActionType.DELETE_ARTICLE:
            return replace(state, redirect_to="/")
        case _:
            return state
