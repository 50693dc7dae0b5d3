"""Print the names of one section, one per line."""

from __future__ import annotations

from pathlib import Path

import click

from bubble_explorer.cli import Context, pass_context
from bubble_explorer.commands._common import EXIT_SECTION_NOT_FOUND, load_or_exit
from bubble_explorer.document.sections import extract_sections, find_section
from bubble_explorer.exceptions import SectionNotFoundError
from bubble_explorer.utils.output import error


@click.command("names")
@click.argument("document", type=click.Path(path_type=Path))
@click.argument("section")
@pass_context
def cli(ctx: Context, document: Path, section: str) -> None:
    """Print the names in SECTION of DOCUMENT, one per line.

    SECTION is a title ("Option Sets") or slug ("option_sets"), matched
    case-insensitively. Output is plain text, suitable for piping to a
    clipboard tool.

    \b
    Examples:
      bubble-explorer names my-app.bubble pages
      bubble-explorer names my-app.bubble "data types" | xclip -selection clipboard
    """
    sections = extract_sections(load_or_exit(document, ctx.get_config()))

    try:
        found = find_section(sections, section)
    except SectionNotFoundError as e:
        error(str(e), hint="Available: " + ", ".join(s.slug for s in sections))
        raise SystemExit(EXIT_SECTION_NOT_FOUND)

    if found.names:
        click.echo("\n".join(found.names))
