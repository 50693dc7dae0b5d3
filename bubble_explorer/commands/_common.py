"""Helpers shared by the document commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.markup import escape

from bubble_explorer.config import Config
from bubble_explorer.document.loader import has_accepted_suffix, load_document
from bubble_explorer.exceptions import DocumentError, DocumentTooLargeError
from bubble_explorer.utils.output import error, verbose, warning

EXIT_DOCUMENT_ERROR = 1
EXIT_SECTION_NOT_FOUND = 2
EXIT_OUTPUT_ERROR = 3


def load_or_exit(path: Path, config: Config) -> Any:
    """Load a document, turning ingestion failures into an error and exit 1."""
    if not has_accepted_suffix(path):
        warning(f"{escape(path.name)} is not a .bubble or .json file, trying anyway")

    try:
        document = load_document(path, config.max_file_size_bytes)
    except DocumentTooLargeError as e:
        error(escape(str(e)), hint="Raise limits.max_file_size_mb in the config file")
        raise SystemExit(EXIT_DOCUMENT_ERROR)
    except DocumentError as e:
        error(escape(str(e)))
        raise SystemExit(EXIT_DOCUMENT_ERROR)

    verbose(f"Loaded {escape(str(path))}")
    return document
