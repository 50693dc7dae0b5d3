"""Initialize configuration file for bubble-explorer."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import click

from bubble_explorer.cli import Context, pass_context
from bubble_explorer.config import get_default_config_path
from bubble_explorer.utils.output import error, info, success


def _load_example_config() -> str:
    """Load the example configuration from package data."""
    return resources.files("bubble_explorer").joinpath("config.example.toml").read_text()


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/bubble-explorer/config.toml)",
)
@pass_context
def cli(ctx: Context, force: bool, output: Path | None) -> None:
    """Create a new configuration file with default settings.

    Creates a configuration file at the default location
    (~/.config/bubble-explorer/config.toml) or at a custom path
    specified with --output.

    Examples:

    \b
      # Create config at default location
      bubble-explorer init-config

    \b
      # Overwrite existing config
      bubble-explorer init-config --force
    """
    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
        config_path.write_text(_load_example_config())
        config_path.chmod(0o600)
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1)

    success(f"Created config file: {config_path}")
    info("Edit this file to customize your settings.")
