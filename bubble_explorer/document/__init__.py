"""Export file loading and named-section extraction."""

from bubble_explorer.document.loader import has_accepted_suffix, load_document
from bubble_explorer.document.sections import Section, extract_sections, find_section

__all__ = [
    "Section",
    "extract_sections",
    "find_section",
    "has_accepted_suffix",
    "load_document",
]
