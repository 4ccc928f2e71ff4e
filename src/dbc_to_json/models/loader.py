"""Configuration file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from dbc_to_json.models.config import ConverterConfig


class ConfigError(Exception):
    """Error during configuration file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize ConfigError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON file and return the raw dictionary.

    Args:
    ----
        path: Path to the YAML or JSON file.

    Returns:
    -------
        Parsed dictionary from the file.

    Raises:
    ------
        ConfigError: If the file cannot be loaded or parsed.

    """
    if not path.exists():
        raise ConfigError(f"File not found: {path}", path)

    if not path.is_file():
        raise ConfigError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise ConfigError(
            f"Unsupported file extension: {suffix}. Use .yaml, .yml, or .json",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parsing error: {e}", path) from e
    except OSError as e:
        raise ConfigError(f"File read error: {e}", path) from e

    if data is None:
        raise ConfigError("File is empty", path)

    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    return data


def load_config(path: Path) -> ConverterConfig:
    """Load and validate a converter configuration file.

    Args:
    ----
        path: Path to the configuration file.

    Returns:
    -------
        Validated ConverterConfig instance.

    Raises:
    ------
        ConfigError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    data = load_yaml_file(path)
    return ConverterConfig.model_validate(data)

