"""
Article listing view: home feed, profile articles and profile favorites.

The view has three selection axes (page, tag filter, tab) plus a per-article
favorite overlay. Tag and tab are mutually exclusive selectors; any change of
listing criteria resets the page to 0.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence, get_args

from conduit_state.core.models import Action, ActionType, Article, TabKind
from conduit_state.reducers.state import ArticleListState

logger = logging.getLogger(__name__)

_TAB_KINDS = frozenset(get_args(TabKind))


def _listing(result: Any) -> tuple[tuple[Article, ...], int]:
    if not isinstance(result, Mapping):
        return (), 0
    return tuple(result.get("articles") or ()), int(result.get("articlesCount") or 0)


def _combined_part(payload: Any, index: int) -> Any:
    # Page loads resolve several requests at once: [tags|profile, articles].
    if isinstance(payload, Sequence) and not isinstance(payload, (str, bytes)) and len(payload) > index:
        return payload[index]
    return None


def _apply_favorite(articles: tuple[Article, ...], updated: Mapping[str, Any]) -> tuple[Article, ...]:
    slug = updated.get("slug")
    out: list[Article] = []
    for article in articles:
        if article.get("slug") == slug:
            article = {
                **article,
                "favorited": updated.get("favorited", article.get("favorited")),
                "favoritesCount": updated.get("favoritesCount", article.get("favoritesCount")),
            }
        out.append(article)
    return tuple(out)


def reduce_article_list(state: Optional[ArticleListState], action: Action) -> ArticleListState:
    if state is None:
        state = ArticleListState()

    match action.type:
        case ActionType.ARTICLE_FAVORITED | ActionType.ARTICLE_UNFAVORITED:
            if action.error or not isinstance(action.payload, Mapping):
                return state
            updated = action.payload.get("article")
            if not isinstance(updated, Mapping) or not state.articles:
                return state
            return replace(state, articles=_apply_favorite(state.articles, updated))
        case ActionType.SET_PAGE:
            if action.error:
                return state
            articles, count = _listing(action.payload)
            return replace(state, articles=articles, articles_count=count, current_page=action.page)
        case ActionType.APPLY_TAG_FILTER:
            if action.error:
                return state
            if not isinstance(action.tag, str) or not action.tag:
                logger.warning("article_list.invalid_tag tag=%r", action.tag)
                return state
            articles, count = _listing(action.payload)
            return replace(
                state,
                articles=articles,
                articles_count=count,
                tab=None,
                tag=action.tag,
                current_page=0,
            )
        case ActionType.CHANGE_TAB:
            if action.error:
                return state
            if action.tab not in _TAB_KINDS:
                logger.warning("article_list.invalid_tab tab=%r", action.tab)
                return state
            articles, count = _listing(action.payload)
            return replace(
                state,
                articles=articles,
                articles_count=count,
                tab=action.tab,
                tag=None,
                current_page=0,
            )
        case ActionType.HOME_PAGE_LOADED:
            if action.error:
                return state
            tags_result = _combined_part(action.payload, 0)
            articles, count = _listing(_combined_part(action.payload, 1))
            tags = tags_result.get("tags") if isinstance(tags_result, Mapping) else None
            return replace(
                state,
                tags=tuple(tags or ()),
                articles=articles,
                articles_count=count,
                current_page=0,
                tab=action.tab,
            )
        case ActionType.PROFILE_PAGE_LOADED | ActionType.PROFILE_FAVORITES_PAGE_LOADED:
            if action.error:
                return state
            articles, count = _listing(_combined_part(action.payload, 1))
            return replace(state, articles=articles, articles_count=count, current_page=0)
        case ActionType.HOME_PAGE_UNLOADED | ActionType.PROFILE_PAGE_UNLOADED | ActionType.PROFILE_FAVORITES_PAGE_UNLOADED:
            return ArticleListState()
        case _:
            return state
