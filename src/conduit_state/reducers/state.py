from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from conduit_state.core.models import Article, TabKind

FieldErrors = Mapping[str, Sequence[str]]


@dataclass(frozen=True, slots=True)
class AuthState:
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    in_progress: Optional[bool] = None
    errors: Optional[FieldErrors] = None


@dataclass(frozen=True, slots=True)
class EditorState:
    """
    Article editor form.

    `in_progress` is None both before the first submit and after a submit has
    settled; True only while a submit is in flight.
    """

    article_slug: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    body: Optional[str] = None
    tag_input: Optional[str] = None
    tag_list: Optional[tuple[str, ...]] = None
    in_progress: Optional[bool] = None
    errors: Optional[FieldErrors] = None


@dataclass(frozen=True, slots=True)
class ArticleListState:
    articles: Optional[tuple[Article, ...]] = None
    articles_count: Optional[int] = None
    current_page: Optional[int] = None
    tab: Optional[TabKind] = None
    tag: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None


@dataclass(frozen=True, slots=True)
class CommonState:
    app_name: str = "conduit"
    token: Optional[str] = None
    current_user: Optional[Mapping[str, Any]] = None
    app_loaded: bool = False
    redirect_to: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AppState:
    auth: AuthState = field(default_factory=AuthState)
    editor: EditorState = field(default_factory=EditorState)
    article_list: ArticleListState = field(default_factory=ArticleListState)
    common: CommonState = field(default_factory=CommonState)
