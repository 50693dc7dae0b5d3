"""Unit tests for the nesting depth guard."""

from __future__ import annotations

import pytest

from bubble_explorer.exceptions import DocumentTooDeepError
from bubble_explorer.tree.limits import check_depth, measure_depth


class TestMeasureDepth:
    def test_scalar(self) -> None:
        assert measure_depth("x") == 0
        assert measure_depth(None) == 0

    def test_empty_containers(self) -> None:
        assert measure_depth({}) == 1
        assert measure_depth([]) == 1

    def test_nested(self) -> None:
        assert measure_depth({"a": {"b": [1]}}) == 3
        assert measure_depth([[], [[["x"]]], {}]) == 4

    def test_very_deep_document(self) -> None:
        doc: object = "leaf"
        for _ in range(5000):
            doc = {"k": doc}
        assert measure_depth(doc) == 5000


class TestCheckDepth:
    def test_within_limit_returns_depth(self) -> None:
        assert check_depth({"a": {"b": 1}}, 2) == 2

    def test_over_limit_raises(self) -> None:
        with pytest.raises(DocumentTooDeepError) as exc_info:
            check_depth({"a": {"b": {"c": 1}}}, 2)
        assert exc_info.value.depth == 3
        assert exc_info.value.limit == 2
