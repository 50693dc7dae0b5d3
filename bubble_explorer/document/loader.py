"""Load Bubble.io export files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from bubble_explorer.config import DEFAULT_MAX_FILE_SIZE_MB
from bubble_explorer.exceptions import (
    DocumentDecodeError,
    DocumentNotFoundError,
    DocumentParseError,
    DocumentTooLargeError,
)

logger = logging.getLogger(__name__)

ACCEPTED_SUFFIXES: frozenset[str] = frozenset({".bubble", ".json"})


def has_accepted_suffix(path: Path) -> bool:
    """Return True for ``.bubble`` and ``.json`` files."""
    return path.suffix.lower() in ACCEPTED_SUFFIXES


def load_document(
    path: Path,
    max_size_bytes: int = DEFAULT_MAX_FILE_SIZE_MB * 1024 * 1024,
) -> Any:
    """Read and parse an export file.

    Args:
        path: File to load.
        max_size_bytes: Files larger than this are rejected before reading.

    Returns:
        The parsed JSON value.

    Raises:
        DocumentNotFoundError: If the path is not an existing file.
        DocumentTooLargeError: If the file exceeds ``max_size_bytes``.
        DocumentDecodeError: If the file is not valid UTF-8.
        DocumentParseError: If the text is not valid JSON or nests too deeply
            for the parser.
    """
    if not path.is_file():
        raise DocumentNotFoundError(path)

    size = path.stat().st_size
    if size > max_size_bytes:
        raise DocumentTooLargeError(path, size, max_size_bytes)

    try:
        # utf-8-sig tolerates a BOM, which some exporters prepend
        content = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(path, str(e)) from e
    except OSError as e:
        raise DocumentDecodeError(path, e.strerror or str(e)) from e

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise DocumentParseError(path, str(e)) from e
    except RecursionError as e:
        raise DocumentParseError(path, "nesting too deep to parse") from e

    logger.debug("Loaded %s (%d bytes)", path, size)
    return document
