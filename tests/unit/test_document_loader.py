"""Unit tests for export file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from bubble_explorer.document.loader import has_accepted_suffix, load_document
from bubble_explorer.exceptions import (
    DocumentDecodeError,
    DocumentError,
    DocumentNotFoundError,
    DocumentParseError,
    DocumentTooLargeError,
)


def test_loads_bubble_file(sample_document_path: Path, sample_document: dict) -> None:
    assert load_document(sample_document_path) == sample_document


def test_loads_file_with_bom(temp_dir: Path) -> None:
    path = temp_dir / "bom.json"
    path.write_bytes(b'\xef\xbb\xbf{"a": 1}')
    assert load_document(path) == {"a": 1}


def test_missing_file(temp_dir: Path) -> None:
    with pytest.raises(DocumentNotFoundError):
        load_document(temp_dir / "nope.bubble")


def test_directory_is_not_a_document(temp_dir: Path) -> None:
    with pytest.raises(DocumentNotFoundError):
        load_document(temp_dir)


def test_too_large(temp_dir: Path) -> None:
    path = temp_dir / "big.json"
    path.write_text('{"data": "' + "x" * 200 + '"}')
    with pytest.raises(DocumentTooLargeError) as exc_info:
        load_document(path, max_size_bytes=100)
    assert exc_info.value.limit == 100
    assert exc_info.value.size > 100


def test_too_large_message_mentions_limit_in_megabytes(temp_dir: Path) -> None:
    error = DocumentTooLargeError(temp_dir / "x.json", 60 * 1024 * 1024, 50 * 1024 * 1024)
    assert "Maximum size is 50 MB" in str(error)


def test_invalid_utf8(temp_dir: Path) -> None:
    path = temp_dir / "binary.json"
    path.write_bytes(b'{"a": "\xff\xfe"}')
    with pytest.raises(DocumentDecodeError):
        load_document(path)


def test_invalid_json(temp_dir: Path) -> None:
    path = temp_dir / "broken.json"
    path.write_text('{"a": ')
    with pytest.raises(DocumentParseError) as exc_info:
        load_document(path)
    assert isinstance(exc_info.value, DocumentError)
    assert exc_info.value.path == path


@pytest.mark.parametrize(
    ("name", "accepted"),
    [("app.bubble", True), ("app.JSON", True), ("app.txt", False), ("app", False)],
)
def test_has_accepted_suffix(name: str, accepted: bool) -> None:
    assert has_accepted_suffix(Path(name)) is accepted


def test_nesting_beyond_parser_limit(temp_dir: Path) -> None:
    path = temp_dir / "deep.json"
    path.write_text("[" * 100000 + "]" * 100000)
    with pytest.raises(DocumentParseError) as exc_info:
        load_document(path)
    assert "nesting too deep" in str(exc_info.value)
