import unittest

from conduit_state.core.models import Action, ActionType
from conduit_state.reducers.article_list import reduce_article_list
from conduit_state.reducers.state import ArticleListState


def _articles(*slugs: str) -> list[dict]:
    return [{"slug": s, "title": s.title(), "favorited": False, "favoritesCount": i} for i, s in enumerate(slugs)]


class ArticleListLoadTests(unittest.TestCase):
    def test_home_page_loaded(self) -> None:
        action = Action(
            type=ActionType.HOME_PAGE_LOADED,
            tab="all",
            payload=[{"tags": ["python", "asyncio"]}, {"articles": _articles("a", "b"), "articlesCount": 2}],
        )
        state = reduce_article_list(ArticleListState(current_page=3), action)
        self.assertEqual(state.tags, ("python", "asyncio"))
        self.assertEqual([a["slug"] for a in state.articles], ["a", "b"])
        self.assertEqual(state.articles_count, 2)
        self.assertEqual(state.current_page, 0)
        self.assertEqual(state.tab, "all")

    def test_home_page_loaded_without_payload(self) -> None:
        state = reduce_article_list(None, Action(type=ActionType.HOME_PAGE_LOADED, tab="all", payload=None))
        self.assertEqual(state.tags, ())
        self.assertEqual(state.articles, ())
        self.assertEqual(state.articles_count, 0)

    def test_profile_variants_loaded(self) -> None:
        for kind in (ActionType.PROFILE_PAGE_LOADED, ActionType.PROFILE_FAVORITES_PAGE_LOADED):
            with self.subTest(kind=kind):
                action = Action(
                    type=kind,
                    payload=[{"profile": {"username": "alice"}}, {"articles": _articles("p"), "articlesCount": 3}],
                )
                state = reduce_article_list(None, action)
                self.assertEqual(len(state.articles), 1)
                self.assertEqual(state.articles_count, 3)
                self.assertEqual(state.current_page, 0)

    def test_unload_variants_reset(self) -> None:
        state = ArticleListState(articles=tuple(_articles("a")), articles_count=10, tags=("python",), current_page=2)
        for kind in (
            ActionType.HOME_PAGE_UNLOADED,
            ActionType.PROFILE_PAGE_UNLOADED,
            ActionType.PROFILE_FAVORITES_PAGE_UNLOADED,
        ):
            with self.subTest(kind=kind):
                self.assertEqual(reduce_article_list(state, Action(type=kind)), ArticleListState())

    def test_failed_load_leaves_state(self) -> None:
        state = ArticleListState(articles=tuple(_articles("a")), articles_count=1)
        result = reduce_article_list(state, Action(type=ActionType.SET_PAGE, page=2, error=True, payload=None))
        self.assertIs(result, state)


class ArticleListSelectionTests(unittest.TestCase):
    def test_set_page(self) -> None:
        action = Action(
            type=ActionType.SET_PAGE,
            page=2,
            payload={"articles": _articles("c", "d"), "articlesCount": 20},
        )
        state = reduce_article_list(ArticleListState(articles=(), current_page=0, tag="python"), action)
        self.assertEqual(len(state.articles), 2)
        self.assertEqual(state.articles_count, 20)
        self.assertEqual(state.current_page, 2)
        self.assertEqual(state.tag, "python")

    def test_apply_tag_filter_clears_tab(self) -> None:
        action = Action(
            type=ActionType.APPLY_TAG_FILTER,
            tag="python",
            payload={"articles": _articles("py"), "articlesCount": 1},
        )
        state = reduce_article_list(ArticleListState(tab="all", current_page=4), action)
        self.assertEqual(state.tag, "python")
        self.assertIsNone(state.tab)
        self.assertEqual(len(state.articles), 1)
        self.assertEqual(state.current_page, 0)

    def test_change_tab_clears_tag(self) -> None:
        action = Action(
            type=ActionType.CHANGE_TAB,
            tab="feed",
            payload={"articles": _articles("f"), "articlesCount": 5},
        )
        state = reduce_article_list(ArticleListState(tab="all", tag="python", current_page=2), action)
        self.assertEqual(state.tab, "feed")
        self.assertIsNone(state.tag)
        self.assertEqual(state.current_page, 0)
        self.assertEqual(state.articles_count, 5)

    def test_tag_and_tab_stay_exclusive(self) -> None:
        listing = {"articles": [], "articlesCount": 0}
        sequence = [
            Action(type=ActionType.CHANGE_TAB, tab="feed", payload=listing),
            Action(type=ActionType.APPLY_TAG_FILTER, tag="python", payload=listing),
            Action(type=ActionType.CHANGE_TAB, tab="all", payload=listing),
            Action(type=ActionType.APPLY_TAG_FILTER, tag="asyncio", payload=listing),
        ]
        state = None
        for action in sequence:
            state = reduce_article_list(state, action)
            self.assertEqual(sum(v is not None for v in (state.tab, state.tag)), 1)

    def test_missing_or_invalid_selector_is_ignored(self) -> None:
        listing = {"articles": _articles("x"), "articlesCount": 1}
        state = ArticleListState(tab="all", current_page=2)
        for action in (
            Action(type=ActionType.APPLY_TAG_FILTER, tag=None, payload=listing),
            Action(type=ActionType.APPLY_TAG_FILTER, tag="", payload=listing),
            Action(type=ActionType.CHANGE_TAB, tab=None, payload=listing),
            Action(type=ActionType.CHANGE_TAB, tab="trending", payload=listing),  # type: ignore[arg-type]
        ):
            with self.subTest(action=action):
                with self.assertLogs("conduit_state.reducers.article_list", level="WARNING"):
                    result = reduce_article_list(state, action)
                self.assertIs(result, state)
                self.assertEqual(sum(v is not None for v in (result.tab, result.tag)), 1)


class ArticleListFavoriteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = ArticleListState(articles=tuple(_articles("a", "b", "c")))

    def test_favorited_updates_only_matching_slug(self) -> None:
        action = Action(
            type=ActionType.ARTICLE_FAVORITED,
            payload={"article": {"slug": "b", "title": "B", "favorited": True, "favoritesCount": 7}},
        )
        state = reduce_article_list(self.state, action)
        self.assertEqual([a["slug"] for a in state.articles], ["a", "b", "c"])
        self.assertTrue(state.articles[1]["favorited"])
        self.assertEqual(state.articles[1]["favoritesCount"], 7)
        self.assertEqual(state.articles[0], self.state.articles[0])
        self.assertEqual(state.articles[2], self.state.articles[2])

    def test_unfavorited(self) -> None:
        favored = reduce_article_list(
            self.state,
            Action(type=ActionType.ARTICLE_FAVORITED, payload={"article": {"slug": "a", "favorited": True, "favoritesCount": 1}}),
        )
        state = reduce_article_list(
            favored,
            Action(type=ActionType.ARTICLE_UNFAVORITED, payload={"article": {"slug": "a", "favorited": False, "favoritesCount": 0}}),
        )
        self.assertFalse(state.articles[0]["favorited"])
        self.assertEqual(state.articles[0]["favoritesCount"], 0)
        self.assertEqual(len(state.articles), 3)

    def test_favorite_keeps_other_article_fields(self) -> None:
        state = reduce_article_list(
            self.state,
            Action(type=ActionType.ARTICLE_FAVORITED, payload={"article": {"slug": "c", "favorited": True, "favoritesCount": 9}}),
        )
        self.assertEqual(state.articles[2]["title"], "C")

    def test_favorite_without_loaded_list_is_identity(self) -> None:
        state = ArticleListState()
        action = Action(type=ActionType.ARTICLE_FAVORITED, payload={"article": {"slug": "a", "favorited": True}})
        self.assertIs(reduce_article_list(state, action), state)

    def test_unknown_action_is_identity(self) -> None:
        self.assertIs(reduce_article_list(self.state, Action(type=ActionType.FOLLOW_USER)), self.state)


if __name__ == "__main__":
    unittest.main()
