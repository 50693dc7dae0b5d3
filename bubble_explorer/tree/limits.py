"""Nesting depth guard applied before filtering untrusted documents."""

from __future__ import annotations

import logging
from typing import Any

from bubble_explorer.exceptions import DocumentTooDeepError

logger = logging.getLogger(__name__)


def measure_depth(document: Any) -> int:
    """Return the nesting depth of a parsed JSON value.

    Scalars have depth 0; a container adds one level over its deepest child.
    Walks with an explicit stack so arbitrarily deep input cannot exhaust
    the interpreter stack.
    """
    deepest = 0
    stack: list[tuple[Any, int]] = [(document, 0)]
    while stack:
        value, depth = stack.pop()
        if isinstance(value, dict):
            children = value.values()
        elif isinstance(value, (list, tuple)):
            children = value
        else:
            deepest = max(deepest, depth)
            continue
        deepest = max(deepest, depth + 1)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def check_depth(document: Any, limit: int) -> int:
    """Raise DocumentTooDeepError if ``document`` nests deeper than ``limit``.

    Returns:
        The measured depth.
    """
    depth = measure_depth(document)
    logger.debug("Document depth %d (limit %d)", depth, limit)
    if depth > limit:
        raise DocumentTooDeepError(depth, limit)
    return depth
