from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional

from conduit_state.core.models import Action, ActionType
from conduit_state.reducers.state import EditorState

logger = logging.getLogger(__name__)

EDITOR_FORM_FIELDS = frozenset({"title", "description", "body", "tag_input"})


def _loaded_editor(payload: Any) -> EditorState:
    article = payload.get("article") if isinstance(payload, Mapping) else None
    if not isinstance(article, Mapping):
        return EditorState(
            article_slug="",
            title="",
            description="",
            body="",
            tag_input="",
            tag_list=(),
        )
    return EditorState(
        article_slug=article.get("slug", ""),
        title=article.get("title", ""),
        description=article.get("description", ""),
        body=article.get("body", ""),
        tag_input="",
        tag_list=tuple(article.get("tagList") or ()),
    )


def _remove_first(tags: tuple[str, ...], tag: Optional[str]) -> tuple[str, ...]:
    if tag not in tags:
        return tags
    idx = tags.index(tag)
    return tags[:idx] + tags[idx + 1 :]


def reduce_editor(state: Optional[EditorState], action: Action) -> EditorState:
    if state is None:
        state = EditorState()

    match action.type:
        case ActionType.EDITOR_PAGE_LOADED:
            return _loaded_editor(action.payload)
        case ActionType.EDITOR_PAGE_UNLOADED:
            return EditorState()
        case ActionType.ARTICLE_SUBMITTED:
            errors = None
            if action.error and isinstance(action.payload, Mapping):
                errors = action.payload.get("errors")
            return replace(state, in_progress=None, errors=errors)
        case ActionType.ASYNC_START:
            if action.subtype == ActionType.ARTICLE_SUBMITTED:
                return replace(state, in_progress=True)
            return state
        case ActionType.ADD_TAG:
            tags = state.tag_list or ()
            return replace(state, tag_list=tags + (state.tag_input or "",), tag_input="")
        case ActionType.REMOVE_TAG:
            tags = state.tag_list or ()
            remaining = _remove_first(tags, action.tag)
            if remaining is tags:
                return state
            return replace(state, tag_list=remaining)
        case ActionType.UPDATE_FIELD_EDITOR:
            if action.key not in EDITOR_FORM_FIELDS:
                logger.warning("editor.unknown_field key=%s", action.key)
                return state
            return replace(state, **{action.key: action.value})
        case _:
            return state
