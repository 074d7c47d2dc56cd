from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Optional, TypedDict

TabKind = Literal["all", "feed"]


class ActionType(str, Enum):
    APP_LOAD = "APP_LOAD"
    REDIRECT = "REDIRECT"
    ARTICLE_SUBMITTED = "ARTICLE_SUBMITTED"
    SETTINGS_SAVED = "SETTINGS_SAVED"
    DELETE_ARTICLE = "DELETE_ARTICLE"
    SETTINGS_PAGE_UNLOADED = "SETTINGS_PAGE_UNLOADED"
    HOME_PAGE_LOADED = "HOME_PAGE_LOADED"
    HOME_PAGE_UNLOADED = "HOME_PAGE_UNLOADED"
    ARTICLE_PAGE_LOADED = "ARTICLE_PAGE_LOADED"
    ARTICLE_PAGE_UNLOADED = "ARTICLE_PAGE_UNLOADED"
    ADD_COMMENT = "ADD_COMMENT"
    DELETE_COMMENT = "DELETE_COMMENT"
    ARTICLE_FAVORITED = "ARTICLE_FAVORITED"
    ARTICLE_UNFAVORITED = "ARTICLE_UNFAVORITED"
    SET_PAGE = "SET_PAGE"
    APPLY_TAG_FILTER = "APPLY_TAG_FILTER"
    CHANGE_TAB = "CHANGE_TAB"
    PROFILE_PAGE_LOADED = "PROFILE_PAGE_LOADED"
    PROFILE_PAGE_UNLOADED = "PROFILE_PAGE_UNLOADED"
    PROFILE_FAVORITES_PAGE_LOADED = "PROFILE_FAVORITES_PAGE_LOADED"
    PROFILE_FAVORITES_PAGE_UNLOADED = "PROFILE_FAVORITES_PAGE_UNLOADED"
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    REGISTER = "REGISTER"
    LOGIN_PAGE_UNLOADED = "LOGIN_PAGE_UNLOADED"
    REGISTER_PAGE_UNLOADED = "REGISTER_PAGE_UNLOADED"
    ASYNC_START = "ASYNC_START"
    ASYNC_END = "ASYNC_END"
    EDITOR_PAGE_LOADED = "EDITOR_PAGE_LOADED"
    EDITOR_PAGE_UNLOADED = "EDITOR_PAGE_UNLOADED"
    ADD_TAG = "ADD_TAG"
    REMOVE_TAG = "REMOVE_TAG"
    UPDATE_FIELD_AUTH = "UPDATE_FIELD_AUTH"
    UPDATE_FIELD_EDITOR = "UPDATE_FIELD_EDITOR"
    FOLLOW_USER = "FOLLOW_USER"
    UNFOLLOW_USER = "UNFOLLOW_USER"


PAGE_UNLOADED_TYPES: frozenset[ActionType] = frozenset(
    t for t in ActionType if t.value.endswith("_PAGE_UNLOADED")
)


class Article(TypedDict, total=False):
    """Server article shape. Only the keys the reducers touch are listed."""

    slug: str
    title: str
    description: str
    body: str
    tagList: list[str]
    favorited: bool
    favoritesCount: int


@dataclass(frozen=True, slots=True)
class Action:
    """
    An immutable message flowing through the pipeline.

    `payload` is either plain data or an awaitable still in flight. Only the
    async dispatch stage looks inside awaitables; everything downstream sees
    resolved data.
    """

    type: ActionType
    payload: Any = None
    error: bool = False
    key: Optional[str] = None
    value: Any = None
    tag: Optional[str] = None
    page: Optional[int] = None
    tab: Optional[TabKind] = None
    subtype: Optional[ActionType] = None
    token: Optional[str] = None

    def __post_init__(self) -> None:
        # Accepts raw strings (from scripts and config) but only from the closed set.
        if not isinstance(self.type, ActionType):
            object.__setattr__(self, "type", ActionType(self.type))
        if self.subtype is not None and not isinstance(self.subtype, ActionType):
            object.__setattr__(self, "subtype", ActionType(self.subtype))
