"""Unit tests for configuration."""

from pathlib import Path

import pytest

from bubble_explorer.config import Config, load_config, save_config
from bubble_explorer.exceptions import ConfigParseError, ConfigValidationError


def test_default_config() -> None:
    """Test that default config has sensible values."""
    config = Config()
    assert config.colored_output is True
    assert config.max_file_size_mb == 50
    assert config.max_file_size_bytes == 50 * 1024 * 1024
    assert config.max_depth == 256


def test_load_missing_config(temp_dir: Path) -> None:
    """Test loading when config file doesn't exist."""
    config, warnings = load_config(temp_dir / "nonexistent.toml")

    assert config == Config()
    assert any("init-config" in w for w in warnings)


def test_load_valid_config(sample_config: Path) -> None:
    """Test loading a valid config file."""
    config, warnings = load_config(sample_config)

    assert config.max_file_size_mb == 10
    assert config.max_depth == 64
    assert config.colored_output is False
    assert config.max_string_length == 120
    assert config.config_path == sample_config.resolve()
    assert warnings == []


def test_load_invalid_toml(temp_dir: Path) -> None:
    """Test loading invalid TOML raises error."""
    config_path = temp_dir / "invalid.toml"
    config_path.write_text("this is not valid [ toml")

    with pytest.raises(ConfigParseError):
        load_config(config_path)


@pytest.mark.parametrize(
    ("content", "key"),
    [
        ('[display]\ncolored_output = "not a boolean"\n', "display.colored_output"),
        ('[limits]\nmax_depth = "deep"\n', "limits.max_depth"),
        ("[limits]\nmax_file_size_mb = true\n", "limits.max_file_size_mb"),
        ("[display]\nmax_string_length = 1.5\n", "display.max_string_length"),
    ],
)
def test_config_validation_invalid_type(temp_dir: Path, content: str, key: str) -> None:
    """Test that invalid types raise validation error."""
    config_path = temp_dir / "bad_types.toml"
    config_path.write_text(content)

    with pytest.raises(ConfigValidationError) as exc_info:
        load_config(config_path)
    assert exc_info.value.key == key


def test_out_of_range_values_warn_and_reset() -> None:
    config = Config(max_file_size_mb=0, max_depth=-1, max_string_length=2)
    warnings = config.validate()

    assert len(warnings) == 3
    assert config.max_file_size_mb == 50
    assert config.max_depth == 256
    assert config.max_string_length == 8


def test_depth_near_recursion_limit_warns() -> None:
    config = Config(max_depth=5000)
    warnings = config.validate()

    assert len(warnings) == 1
    assert config.max_depth == 5000


def test_save_and_reload(temp_dir: Path) -> None:
    config_path = temp_dir / "nested" / "config.toml"
    save_config(Config(max_depth=32, colored_output=False, max_string_length=60), config_path)

    loaded, warnings = load_config(config_path)
    assert loaded.max_depth == 32
    assert loaded.colored_output is False
    assert loaded.max_string_length == 60
    assert loaded.max_file_size_mb == 50


def test_save_omits_default_display(temp_dir: Path) -> None:
    config_path = temp_dir / "config.toml"
    save_config(Config(), config_path)

    content = config_path.read_text()
    assert "[limits]" in content
    assert "[display]" not in content
