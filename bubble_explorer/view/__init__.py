"""Terminal views of document trees."""

from bubble_explorer.view.tree_view import build_tree_view, summarize, truncate

__all__ = ["build_tree_view", "summarize", "truncate"]
