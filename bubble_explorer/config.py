"""Configuration management for bubble-explorer."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from bubble_explorer.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)

DEFAULT_MAX_FILE_SIZE_MB = 50
DEFAULT_MAX_DEPTH = 256
DEFAULT_MAX_STRING_LENGTH = 120


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "bubble-explorer" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        max_file_size_mb: Largest document (in MiB) accepted for loading.
        max_depth: Maximum nesting depth searched. Deeper documents are
            rejected before the tree filter runs.
        colored_output: Whether to use colored terminal output.
        max_string_length: Leaf strings longer than this are truncated
            in rendered trees. Exports are never truncated.
        config_path: Path where config was loaded from (None if defaults).
    """

    max_file_size_mb: int = DEFAULT_MAX_FILE_SIZE_MB
    max_depth: int = DEFAULT_MAX_DEPTH
    colored_output: bool = True
    max_string_length: int = DEFAULT_MAX_STRING_LENGTH
    config_path: Path | None = None

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        if self.max_file_size_mb <= 0:
            warnings.append(
                f"limits.max_file_size_mb={self.max_file_size_mb} must be positive, "
                f"using {DEFAULT_MAX_FILE_SIZE_MB}"
            )
            self.max_file_size_mb = DEFAULT_MAX_FILE_SIZE_MB

        if self.max_depth <= 0:
            warnings.append(
                f"limits.max_depth={self.max_depth} must be positive, using {DEFAULT_MAX_DEPTH}"
            )
            self.max_depth = DEFAULT_MAX_DEPTH
        elif self.max_depth > 900:
            # Past this the tree filter would run into Python's recursion limit
            warnings.append(
                f"limits.max_depth={self.max_depth} is close to the interpreter "
                f"recursion limit; deeply nested documents may fail"
            )

        if self.max_string_length < 8:
            warnings.append(
                f"display.max_string_length={self.max_string_length} is below minimum 8"
            )
            self.max_string_length = 8

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: bubble-explorer init-config"
        )
        return config, warnings + config.validate()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _require_int(key: str, value: Any) -> int:
    # bool is an int subclass; TOML true/false is never a valid size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigValidationError(key, value, "must be an integer")
    return value


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [limits] section
    limits = data.get("limits", {})
    if "max_file_size_mb" in limits:
        config.max_file_size_mb = _require_int(
            "limits.max_file_size_mb", limits["max_file_size_mb"]
        )

    if "max_depth" in limits:
        config.max_depth = _require_int("limits.max_depth", limits["max_depth"])

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    if "max_string_length" in display:
        config.max_string_length = _require_int(
            "display.max_string_length", display["max_string_length"]
        )

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "limits": {
            "max_file_size_mb": config.max_file_size_mb,
            "max_depth": config.max_depth,
        },
    }

    # Build [display] section (only if non-default values)
    display_data: dict[str, Any] = {}
    if not config.colored_output:
        display_data["colored_output"] = False
    if config.max_string_length != DEFAULT_MAX_STRING_LENGTH:
        display_data["max_string_length"] = config.max_string_length
    if display_data:
        data["display"] = display_data

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
