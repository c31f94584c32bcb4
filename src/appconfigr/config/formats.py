"""Text formats that turn substituted configuration text into Python data."""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import yaml

from appconfigr.lib.errors import ConfigError


@dataclass(frozen=True)
class ConfigFormat:
    """A named parser from text to plain Python data.

    Attributes:
        name: Short identifier used by the CLI and ``with_format``
        parse: Callable turning a document into dicts, lists and scalars.
            Parse errors propagate unchanged.
    """

    name: str
    parse: Callable[[str], Any]

    def load(self, text: str) -> Any:
        """Parse ``text``; empty documents become an empty dict."""
        if not text.strip():
            return {}
        content = self.parse(text)
        return content if content is not None else {}


YAML = ConfigFormat("yaml", yaml.safe_load)
JSON = ConfigFormat("json", json.loads)

FORMATS: dict[str, ConfigFormat] = {fmt.name: fmt for fmt in (YAML, JSON)}


def get_format(fmt: "ConfigFormat | str") -> ConfigFormat:
    """Return a format instance for a ``ConfigFormat`` or registered name.

    Raises:
        ValueError: If fmt is None
        ConfigError: If fmt is an unknown format name
    """
    if fmt is None:
        raise ValueError("Format must not be None")
    if isinstance(fmt, ConfigFormat):
        return fmt

    key = fmt.lower()
    if key == "yml":
        key = "yaml"
    try:
        return FORMATS[key]
    except KeyError:
        raise ConfigError(
            "format",
            f"Unknown format '{fmt}'. Supported formats: {', '.join(FORMATS)}",
        ) from None
