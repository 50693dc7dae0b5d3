"""Export one section of a document as a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.markup import escape

from bubble_explorer.cli import Context, pass_context
from bubble_explorer.commands._common import (
    EXIT_OUTPUT_ERROR,
    EXIT_SECTION_NOT_FOUND,
    load_or_exit,
)
from bubble_explorer.document.sections import extract_sections, find_section
from bubble_explorer.exceptions import SectionNotFoundError
from bubble_explorer.utils.output import error, success


@click.command("export")
@click.argument("document", type=click.Path(path_type=Path))
@click.argument("section")
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write <section>.json into",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite an existing export file",
)
@pass_context
def cli(ctx: Context, document: Path, section: str, output: Path, force: bool) -> None:
    """Write SECTION of DOCUMENT to OUTPUT/<section>.json.

    The file holds the section's raw data from the export. When the export
    has no raw data for the section, the list of names is written instead.

    \b
    Examples:
      bubble-explorer export my-app.bubble option_sets
      bubble-explorer export my-app.bubble "API Names" -o ./exports
    """
    sections = extract_sections(load_or_exit(document, ctx.get_config()))

    try:
        found = find_section(sections, section)
    except SectionNotFoundError as e:
        error(str(e), hint="Available: " + ", ".join(s.slug for s in sections))
        raise SystemExit(EXIT_SECTION_NOT_FOUND)

    target = output / f"{found.slug}.json"
    if target.exists() and not force:
        error(f"Output file already exists: {escape(str(target))}", hint="Use --force to overwrite")
        raise SystemExit(EXIT_OUTPUT_ERROR)

    try:
        output.mkdir(parents=True, exist_ok=True)
        target.write_text(
            json.dumps(found.export_data(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        error(f"Failed to write export file: {escape(str(e))}")
        raise SystemExit(EXIT_OUTPUT_ERROR)

    success(f"Exported {found.title} to {escape(str(target))}")
