"""Initial expand state for tree views."""

from __future__ import annotations

from collections.abc import Iterable

from bubble_explorer.tree.nodes import KeyPath


def join_path(path: Iterable[str]) -> str:
    return ".".join(path)


def should_expand(key_path: KeyPath, matches: Iterable[KeyPath], searching: bool) -> bool:
    """Decide whether the node at ``key_path`` starts expanded.

    Without an active search only the root starts expanded. With one, a node
    expands when some match path, dot-joined, starts with the node's own
    dot-joined path.

    The prefix test runs on the joined strings, not on path segments, so a
    match at ``("a", "bc")`` also expands ``("a", "b")`` because ``"a.bc"``
    starts with ``"a.b"``. Existing views depend on that, keep it.
    """
    if not searching:
        return len(key_path) == 0

    prefix = join_path(key_path)
    return any(join_path(match).startswith(prefix) for match in matches)

