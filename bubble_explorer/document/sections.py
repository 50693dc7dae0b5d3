"""Extract named sections (option sets, pages, workflows...) from an export."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from bubble_explorer.exceptions import SectionNotFoundError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dataclass
class Section:
    """A named list extracted from the document.

    Attributes:
        title: Display title, e.g. "Option Sets".
        names: Names found in the section, in document order.
        raw: The document subtree the section was read from (None if absent).
    """

    title: str
    names: list[str] = field(default_factory=list)
    raw: Any = None

    @property
    def slug(self) -> str:
        """Lowercase title with whitespace runs replaced by underscores."""
        return _WHITESPACE.sub("_", self.title.lower())

    @property
    def count(self) -> int:
        return len(self.names)

    def export_data(self) -> Any:
        """Data written on export: the raw subtree, or the names if it is empty."""
        return self.raw or self.names


def _values(container: Any) -> list[Any]:
    """Values of a mapping (in order) or items of a list; nothing otherwise."""
    if isinstance(container, dict):
        return list(container.values())
    if isinstance(container, list):
        return container
    return []


def _as_name(value: Any) -> str | None:
    if not value:
        return None
    return value if isinstance(value, str) else str(value)


def _field_names(document: dict[str, Any], key: str, getter: Callable[[Any], Any]) -> list[str]:
    names: list[str] = []
    for item in _values(document.get(key)):
        if not isinstance(item, dict):
            continue
        name = _as_name(getter(item))
        if name is not None:
            names.append(name)
    return names


def _workflow_name(item: dict[str, Any]) -> Any:
    properties = item.get("properties")
    if not isinstance(properties, dict):
        return None
    return properties.get("wf_name")


def extract_sections(document: Any) -> list[Section]:
    """Extract every named section from a parsed export.

    Missing or malformed containers produce empty sections instead of errors.

    Returns:
        Sections in display order.
    """
    if not isinstance(document, dict):
        logger.debug("Document root is %s, no sections", type(document).__name__)
        document = {}

    def field_getter(name: str) -> Callable[[Any], Any]:
        return lambda item: item.get(name)

    sections = [
        Section(
            "Option Sets",
            _field_names(document, "option_sets", field_getter("display")),
            document.get("option_sets"),
        ),
        Section(
            "Data Types",
            _field_names(
                document, "user_types", lambda item: item.get("name") or item.get("display")
            ),
            document.get("user_types"),
        ),
        Section(
            "Pages",
            _field_names(document, "pages", field_getter("name")),
            document.get("pages"),
        ),
        Section(
            "Reusable Elements",
            _field_names(document, "element_definitions", field_getter("name")),
            document.get("element_definitions"),
        ),
        # Workflow names live under "api"; the raw data is the "workflows" key
        Section(
            "Workflows",
            _field_names(document, "api", _workflow_name),
            document.get("workflows"),
        ),
        Section(
            "API Names",
            _field_names(document, "api", _workflow_name),
            document.get("api"),
        ),
    ]

    for section in sections:
        logger.debug("Section %s: %d names", section.title, section.count)

    return sections


def find_section(sections: list[Section], name: str) -> Section:
    """Look up a section by title or slug, case-insensitively.

    Raises:
        SectionNotFoundError: If no section matches.
    """
    wanted = name.strip().lower()
    for section in sections:
        if wanted in (section.title.lower(), section.slug):
            return section
    raise SectionNotFoundError(name)
