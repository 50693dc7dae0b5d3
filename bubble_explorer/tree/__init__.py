"""Document tree model, search filter and expand rules."""

from bubble_explorer.tree.expand import join_path, should_expand
from bubble_explorer.tree.filtering import (
    SearchResult,
    filter_node,
    normalize_term,
    search_document,
)
from bubble_explorer.tree.limits import check_depth, measure_depth
from bubble_explorer.tree.nodes import (
    KeyPath,
    MappingNode,
    Node,
    PrimitiveLeaf,
    SequenceNode,
    StringLeaf,
    from_python,
    to_python,
)

__all__ = [
    "KeyPath",
    "MappingNode",
    "Node",
    "PrimitiveLeaf",
    "SearchResult",
    "SequenceNode",
    "StringLeaf",
    "check_depth",
    "filter_node",
    "from_python",
    "join_path",
    "measure_depth",
    "normalize_term",
    "search_document",
    "should_expand",
    "to_python",
]
