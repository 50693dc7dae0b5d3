"""Shared pytest fixtures."""

from __future__ import annotations

import json
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[limits]
max_file_size_mb = 10
max_depth = 64

[display]
colored_output = false
""")
    return config_path


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A small Bubble.io-style export."""
    return {
        "option_sets": {
            "os1": {"display": "Order Status", "values": {"v1": {"display": "Paid"}}},
            "os2": {"display": "Role"},
            "os3": {"values": {}},
        },
        "user_types": {
            "user": {"display": "User"},
            "invoice": {"name": "Invoice", "display": "Inv"},
        },
        "pages": {
            "p1": {"name": "index", "elements": [{"type": "Text", "label": "Welcome"}]},
            "p2": {"name": "checkout"},
        },
        "element_definitions": {"e1": {"name": "Header"}},
        "api": {
            "w1": {"properties": {"wf_name": "send_invoice"}},
            "w2": {"properties": {}},
            "w3": {"type": "custom"},
        },
        "settings": {"client_safe": {"app_name": "Demo Shop", "version": 3, "live": True}},
    }


@pytest.fixture
def sample_document_path(temp_dir: Path, sample_document: dict[str, Any]) -> Path:
    """Write the sample export to disk as a .bubble file."""
    path = temp_dir / "app.bubble"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path
