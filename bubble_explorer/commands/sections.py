"""Summarize the named sections of an export."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from bubble_explorer.cli import Context, pass_context
from bubble_explorer.commands._common import load_or_exit
from bubble_explorer.document.sections import extract_sections
from bubble_explorer.utils.output import console, create_table, success


@click.command("sections")
@click.argument("document", type=click.Path(path_type=Path))
@click.option(
    "--names",
    "show_names",
    is_flag=True,
    default=False,
    help="List the names found in each section",
)
@pass_context
def cli(ctx: Context, document: Path, show_names: bool) -> None:
    """Show the named sections found in DOCUMENT and how many entries each has.

    \b
    Sections:
      Option Sets, Data Types, Pages, Reusable Elements, Workflows, API Names

    \b
    Examples:
      bubble-explorer sections my-app.bubble
      bubble-explorer sections my-app.bubble --names
    """
    data = load_or_exit(document, ctx.get_config())
    sections = extract_sections(data)

    if not ctx.quiet:
        success("Parse Results")

    table = create_table(show_header=True, header_style="bold")
    table.add_column("Section", style="section.title")
    table.add_column("Slug")
    table.add_column("Count", justify="right", style="section.count")
    for section in sections:
        table.add_row(section.title, section.slug, str(section.count))
    console.print(table)

    if not show_names:
        return

    for section in sections:
        if not section.names:
            continue
        console.print()
        console.print(f"[section.title]{escape(section.title)}[/section.title]")
        for name in section.names:
            console.print(f"  {escape(name)}", highlight=False)
