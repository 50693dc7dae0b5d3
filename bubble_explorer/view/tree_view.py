"""Render document trees as rich ``Tree`` renderables."""

from __future__ import annotations

import json
from dataclasses import dataclass

from rich.text import Text
from rich.tree import Tree

from bubble_explorer.config import DEFAULT_MAX_STRING_LENGTH
from bubble_explorer.tree.expand import should_expand
from bubble_explorer.tree.filtering import SearchResult
from bubble_explorer.tree.nodes import (
    KeyPath,
    MappingNode,
    Node,
    SequenceNode,
    StringLeaf,
    is_container,
)

ROOT_LABEL = "root"


@dataclass
class _RenderState:
    matches: list[KeyPath]
    searching: bool
    term: str
    max_string_length: int


def truncate(value: str, limit: int) -> str:
    """Shorten ``value`` to at most ``limit`` characters, ending in an ellipsis."""
    if len(value) <= limit:
        return value
    return value[: limit - 1] + "…"


def summarize(node: MappingNode | SequenceNode) -> str:
    """Short description of a container, e.g. ``{…} 3 keys``."""
    count = len(node.entries)
    if isinstance(node, MappingNode):
        return f"{{…}} {count} {'key' if count == 1 else 'keys'}"
    return f"[…] {count} {'item' if count == 1 else 'items'}"


def _leaf_text(node: Node, state: _RenderState) -> Text:
    if isinstance(node, StringLeaf):
        shown = json.dumps(truncate(node.value, state.max_string_length), ensure_ascii=False)
        return Text(shown, style="tree.string")
    return Text(json.dumps(node.value), style="tree.primitive")


def _label(key: str, node: Node, state: _RenderState) -> Text:
    label = Text(key, style="tree.key")
    if isinstance(node, (MappingNode, SequenceNode)):
        label.append(" ")
        label.append(summarize(node), style="tree.summary")
    else:
        label.append(": ")
        label.append_text(_leaf_text(node, state))
    if state.searching and state.term:
        label.highlight_words([state.term], style="tree.match", case_sensitive=False)
    return label


def _add_children(
    branch: Tree, node: MappingNode | SequenceNode, path: KeyPath, state: _RenderState
) -> None:
    for key, child in node.entries:
        child_path = (*path, key)
        child_branch = branch.add(_label(key, child, state))
        if is_container(child) and should_expand(child_path, state.matches, state.searching):
            _add_children(child_branch, child, child_path, state)


def build_tree_view(
    result: SearchResult,
    term: str = "",
    *,
    max_string_length: int = DEFAULT_MAX_STRING_LENGTH,
    root_label: str = ROOT_LABEL,
) -> Tree:
    """Build a rich Tree for a search result.

    Containers start expanded or collapsed according to
    :func:`~bubble_explorer.tree.expand.should_expand`; collapsed containers
    show only their summary.

    Args:
        result: Output of :func:`~bubble_explorer.tree.filtering.search_document`.
        term: Normalized term, highlighted in keys and values.
        max_string_length: Truncation limit for string leaves.
        root_label: Label of the root node.
    """
    state = _RenderState(
        matches=list(result.matches),
        searching=result.searching,
        term=term,
        max_string_length=max_string_length,
    )
    node = result.node
    tree = Tree(_label(root_label, node, state), guide_style="tree.summary")
    if is_container(node) and should_expand((), state.matches, state.searching):
        _add_children(tree, node, (), state)
    return tree
