"""Case-insensitive substring filtering of document trees.

The filter walks a document and produces two things at once: a pruned copy
that keeps only branches containing a match, and the ordered list of key
paths where the term matched. Both are deterministic for a given
``(document, term)`` pair.

Matching rules:
    - a string leaf matches when its lowercased text contains the term
    - numbers, booleans and null never match by value
    - a container entry matches when its lowercased key contains the term;
      the entry is then kept with its full, unfiltered subtree

Match paths are emitted depth-first: the matches found inside an entry come
before that entry's own key match. An entry whose key and string value both
match therefore appears twice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from bubble_explorer.tree.nodes import (
    KeyPath,
    MappingNode,
    Node,
    SequenceNode,
    StringLeaf,
    from_python,
    to_python,
)

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of a document search.

    Attributes:
        tree: The pruned document (or the original one when not searching).
        node: The same tree as nodes. Pruned sequences keep their original
            indices here, which is what match paths refer to.
        matches: Key paths where the term matched, in depth-first order.
        searching: Whether a non-empty term was applied.
    """

    tree: Any
    node: Node = field(default_factory=MappingNode)
    matches: list[KeyPath] = field(default_factory=list)
    searching: bool = False


def normalize_term(raw: str | None) -> str:
    """Trim and lowercase raw user input into a search term."""
    if raw is None:
        return ""
    return raw.strip().lower()


def filter_node(node: Node, term: str, path: KeyPath = ()) -> tuple[Node | None, list[KeyPath]]:
    """Filter ``node`` by ``term``.

    Args:
        node: Document fragment to filter.
        term: Non-empty, already lowercased search term.
        path: Key path of ``node`` within the whole document.

    Returns:
        Tuple of (pruned node or None when nothing matched, match paths).
    """
    if isinstance(node, StringLeaf):
        if term in node.value.lower():
            return node, [path]
        return None, []

    if not isinstance(node, (MappingNode, SequenceNode)):
        return None, []

    kept: list[tuple[str, Node]] = []
    matches: list[KeyPath] = []

    for key, child in node.entries:
        child_path = (*path, key)
        key_matches = term in key.lower()
        filtered, child_matches = filter_node(child, term, child_path)
        matches.extend(child_matches)

        if key_matches:
            kept.append((key, child))
            matches.append(child_path)
        elif filtered is not None:
            kept.append((key, filtered))

    if not kept:
        return None, matches

    return type(node)(tuple(kept)), matches


def search_document(document: Any, term: str) -> SearchResult:
    """Search a parsed document for ``term``.

    An empty term returns the document itself, untouched, with no matches.
    A missing document, or one with nothing matching, yields an empty dict
    so there is always something to render.

    Args:
        document: Parsed JSON value.
        term: Normalized search term (see :func:`normalize_term`).

    Returns:
        SearchResult with the pruned tree and ordered match paths.
    """
    if not term:
        return SearchResult(tree=document, node=from_python(document))

    if document is None:
        return SearchResult(tree={}, searching=True)

    pruned, matches = filter_node(from_python(document), term)
    logger.debug("Search for %r: %d match paths", term, len(matches))

    if pruned is None:
        return SearchResult(tree={}, matches=matches, searching=True)

    return SearchResult(tree=to_python(pruned), node=pruned, matches=matches, searching=True)
