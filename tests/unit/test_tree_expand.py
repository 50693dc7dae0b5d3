"""Unit tests for the initial expand rule."""

from __future__ import annotations

from bubble_explorer.tree.expand import join_path, should_expand
from bubble_explorer.tree.filtering import search_document


def test_join_path() -> None:
    assert join_path(("a", "0", "b")) == "a.0.b"
    assert join_path(()) == ""


class TestWithoutSearch:
    def test_only_root_expands(self) -> None:
        assert should_expand((), [], searching=False) is True
        assert should_expand(("a",), [], searching=False) is False
        assert should_expand(("a", "b"), [("a", "b")], searching=False) is False


class TestWithSearch:
    MATCHES = [("a", "b", "c")]

    def test_ancestors_of_a_match_expand(self) -> None:
        assert should_expand((), self.MATCHES, searching=True)
        assert should_expand(("a",), self.MATCHES, searching=True)
        assert should_expand(("a", "b"), self.MATCHES, searching=True)

    def test_match_itself_expands(self) -> None:
        assert should_expand(("a", "b", "c"), self.MATCHES, searching=True)

    def test_unrelated_paths_stay_collapsed(self) -> None:
        assert not should_expand(("x",), self.MATCHES, searching=True)
        assert not should_expand(("a", "c"), self.MATCHES, searching=True)
        assert not should_expand(("a", "b", "c", "d"), self.MATCHES, searching=True)

    def test_no_matches_expands_nothing(self) -> None:
        assert not should_expand((), [], searching=True)

    def test_joined_string_prefix_not_segment_prefix(self) -> None:
        # "a.bc" starts with "a.b", so ("a", "b") expands for a match at ("a", "bc")
        assert should_expand(("a", "b"), [("a", "bc")], searching=True)
        assert should_expand(("a",), [("ab",)], searching=True)

    def test_with_search_result(self) -> None:
        result = search_document({"pages": {"p1": {"name": "Home"}}, "other": {"x": 1}}, "home")
        assert should_expand(("pages",), result.matches, result.searching)
        assert should_expand(("pages", "p1"), result.matches, result.searching)
        assert not should_expand(("other",), result.matches, result.searching)
