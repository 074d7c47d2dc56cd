from __future__ import annotations

from typing import Callable, Optional

from conduit_state.core.models import Action
from conduit_state.reducers.article_list import reduce_article_list
from conduit_state.reducers.auth import reduce_auth
from conduit_state.reducers.common import reduce_common
from conduit_state.reducers.editor import reduce_editor
from conduit_state.reducers.state import AppState

Reducer = Callable[[Optional[AppState], Action], AppState]


def reduce_app(state: Optional[AppState], action: Action) -> AppState:
    """Run every slice reducer; returns the same object when no slice changed."""
    if state is None:
        state = AppState()

    auth = reduce_auth(state.auth, action)
    editor = reduce_editor(state.editor, action)
    article_list = reduce_article_list(state.article_list, action)
    common = reduce_common(state.common, action)

    if (
        auth is state.auth
        and editor is state.editor
        and article_list is state.article_list
        and common is state.common
    ):
        return state
    return AppState(auth=auth, editor=editor, article_list=article_list, common=common)
