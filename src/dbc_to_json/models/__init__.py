"""Pydantic models for converter configuration."""

from dbc_to_json.models.config import DEFAULT_ALLOWED_ATTRIBUTES, ConverterConfig
from dbc_to_json.models.loader import (
    ConfigError,
    load_config,
    load_yaml_file,
)

__all__ = [
    "ConfigError",
    "ConverterConfig",
    "DEFAULT_ALLOWED_ATTRIBUTES",
    "load_config",
    "load_yaml_file",
]
