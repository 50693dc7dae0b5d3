"""Search the document tree and show only the matching branches."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.markup import escape

from bubble_explorer.cli import Context, pass_context
from bubble_explorer.commands._common import EXIT_DOCUMENT_ERROR, load_or_exit
from bubble_explorer.exceptions import DocumentTooDeepError
from bubble_explorer.tree.expand import join_path
from bubble_explorer.tree.filtering import normalize_term, search_document
from bubble_explorer.tree.limits import check_depth
from bubble_explorer.utils.output import console, debug, error, info, pager_print
from bubble_explorer.view.tree_view import build_tree_view


@click.command("search")
@click.argument("document", type=click.Path(path_type=Path))
@click.argument("term", nargs=-1)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help=(
        "Print the pruned tree and match paths as JSON. Match paths keep the "
        "original array indices; arrays in the tree are renumbered from 0"
    ),
)
@click.option(
    "--paths",
    "show_paths",
    is_flag=True,
    default=False,
    help="Print only the dot-joined match paths, one per line",
)
@pass_context
def cli(
    ctx: Context,
    document: Path,
    term: tuple[str, ...],
    as_json: bool,
    show_paths: bool,
) -> None:
    """Search DOCUMENT for TERM and show the branches that contain it.

    Matching is a case-insensitive substring test against every key and
    every string value. A matching key keeps its whole subtree. Numbers,
    booleans and nulls are never matched by value.

    Branches holding a match start expanded; everything else is collapsed
    to a one-line summary. Without TERM the whole document is shown with
    only the root expanded.

    \b
    Examples:
      # Branches mentioning "invoice"
      bubble-explorer search my-app.bubble invoice

    \b
      # Machine-readable result
      bubble-explorer search my-app.bubble "sign up" --json
    """
    config = ctx.get_config()
    data = load_or_exit(document, config)

    try:
        depth = check_depth(data, config.max_depth)
    except DocumentTooDeepError as e:
        error(str(e), hint="Raise limits.max_depth in the config file")
        raise SystemExit(EXIT_DOCUMENT_ERROR)

    debug(f"Document depth {depth} (limit {config.max_depth})")
    search_term = normalize_term(" ".join(term))
    result = search_document(data, search_term)

    if as_json:
        payload = {
            "tree": result.tree,
            "matches": [list(match) for match in result.matches],
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if show_paths:
        for match in result.matches:
            click.echo(join_path(match))
        return

    tree = build_tree_view(
        result,
        search_term,
        max_string_length=config.max_string_length,
    )
    with console.capture() as capture:
        console.print(tree)
    pager_print(capture.get())

    if result.searching and not ctx.quiet:
        shown = escape(search_term)
        if result.matches:
            info(f"{len(result.matches)} matches for '{shown}'")
        else:
            info(f"No matches for '{shown}'")
