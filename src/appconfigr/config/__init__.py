"""Configuration loading for appconfigr.

Main components:
- AppConfigr / Builder: locate, substitute, parse and validate config files
- load_config: one-call helper
- ConfigFormat: pluggable text formats (YAML default, JSON)
- flatten_pydantic_errors: readable validation messages
"""

from appconfigr.config.formats import FORMATS, JSON, YAML, ConfigFormat, get_format
from appconfigr.config.loader import (
    AppConfigr,
    Builder,
    default_file_name,
    load_config,
)
from appconfigr.config.validator import flatten_pydantic_errors

__all__ = [
    "AppConfigr",
    "Builder",
    "ConfigFormat",
    "FORMATS",
    "JSON",
    "YAML",
    "default_file_name",
    "flatten_pydantic_errors",
    "get_format",
    "load_config",
]
