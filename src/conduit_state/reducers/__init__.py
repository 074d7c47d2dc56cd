"""Pure state-transition functions, one per slice, and the root reducer."""

from conduit_state.reducers.article_list import reduce_article_list
from conduit_state.reducers.auth import reduce_auth
from conduit_state.reducers.common import reduce_common
from conduit_state.reducers.editor import reduce_editor
from conduit_state.reducers.root import Reducer, reduce_app
from conduit_state.reducers.state import (
    AppState,
    ArticleListState,
    AuthState,
    CommonState,
    EditorState,
)

__all__ = [
    "AppState",
    "ArticleListState",
    "AuthState",
    "CommonState",
    "EditorState",
    "Reducer",
    "reduce_app",
    "reduce_article_list",
    "reduce_auth",
    "reduce_common",
    "reduce_editor",
]
