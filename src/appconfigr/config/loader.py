"""Configuration loader for appconfigr.

This module provides the AppConfigr class, which loads typed configuration
objects from files in a base directory after expanding ``${name}``
placeholders in the raw text.

Example:
    >>> config = (
    ...     AppConfigr.from_directory("config")
    ...     .with_resolver(from_properties().with_fallback(from_environment()))
    ...     .build()
    ...     .get_config(DatabaseConfig)
    ... )

loads ``config/database-config.conf``.
"""

import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

from pydantic import TypeAdapter

from appconfigr import properties
from appconfigr.config.formats import YAML, ConfigFormat, get_format
from appconfigr.lib.errors import ConfigError, FileNotFoundError
from appconfigr.variables.resolvers import VariableResolver, default_resolver
from appconfigr.variables.substitution import substitute

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_SUB_DIRECTORY = "config"
DEFAULT_SUFFIX = ".conf"

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def default_file_name(config_type: type) -> str:
    """Derive the configuration file name for a type.

    The type name is converted from UpperCamel to lower-hyphen (every
    upper-case letter after the first starts a new word) and ``.conf`` is
    appended: ``SampleConfig`` becomes ``sample-config.conf``.
    """
    name = getattr(config_type, "__name__", None)
    if not name:
        raise ValueError(f"Cannot derive a file name from {config_type!r}")
    return _WORD_BOUNDARY.sub("-", name).lower() + DEFAULT_SUFFIX


@lru_cache(maxsize=128)
def _type_adapter(config_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(config_type)


class AppConfigr:
    """Access point for all configuration files in one directory.

    Instances are created through a ``Builder`` obtained from
    ``from_directory`` or ``from_default_directory`` and are immutable, so a
    single instance can be shared between threads.
    """

    def __init__(
        self,
        base_path: Path,
        config_format: ConfigFormat,
        resolver: VariableResolver,
    ) -> None:
        self._base_path = base_path
        self._format = config_format
        self._resolver = resolver

    @property
    def base_path(self) -> Path:
        """Directory configuration files are looked up in."""
        return self._base_path

    @property
    def format(self) -> ConfigFormat:
        """Format used to parse substituted text."""
        return self._format

    @property
    def resolver(self) -> VariableResolver:
        """Resolver chain used for placeholder expansion."""
        return self._resolver

    @staticmethod
    def from_directory(path: str | os.PathLike[str]) -> "Builder":
        """Start building a loader for configuration files under ``path``.

        Raises:
            ValueError: If path is None
        """
        if path is None:
            raise ValueError("Configuration directory must not be None")
        return Builder(Path(path))

    @staticmethod
    def from_default_directory() -> "Builder":
        """Start building a loader for ``<user.dir>/config``.

        ``user.dir`` is the process property seeded with the working
        directory at import time.
        """
        user_dir = properties.get_property("user.dir") or os.getcwd()
        default_path = Path(os.path.normpath(Path(user_dir, DEFAULT_SUB_DIRECTORY)))
        return AppConfigr.from_directory(default_path.absolute())

    def resolve_path(self, config_type: type | None, file_name: str | None = None) -> Path:
        """Return the absolute path for a configuration file.

        Raises:
            ValueError: If neither a type nor a file name is given
            FileNotFoundError: If the path is missing or not a regular file
        """
        if file_name is None:
            if config_type is None:
                raise ValueError("Either a configuration type or a file name is required")
            file_name = default_file_name(config_type)

        path = (self._base_path / file_name).absolute()
        logger.debug(f"Resolved configuration file {file_name!r} to {path}")

        if not path.is_file():
            raise FileNotFoundError(
                str(path),
                f"Configuration file '{file_name}' not found in {self._base_path}. "
                "Please ensure the file exists and is a regular file.",
            )
        return path

    def render(self, file_name: str, config_type: type | None = None) -> str:
        """Read a configuration file and return its substituted text.

        Raises:
            FileNotFoundError: If the file does not exist
            VariableResolutionError: If a placeholder cannot be resolved
        """
        path = self.resolve_path(config_type, file_name)
        raw_text = path.read_text(encoding="utf-8")
        return substitute(raw_text, self._resolver)

    def get_config(self, config_type: type[T], file_name: str | None = None) -> T:
        """Load a configuration file and validate it into ``config_type``.

        Args:
            config_type: Target type; anything pydantic can validate
                (``BaseModel`` subclasses, dataclasses, ``TypedDict``)
            file_name: File name relative to the base directory. Derived
                from the type name when omitted.

        Returns:
            Validated instance of ``config_type``

        Raises:
            ValueError: If config_type is None
            FileNotFoundError: If the file does not exist
            VariableResolutionError: If a placeholder cannot be resolved
            pydantic.ValidationError: If the parsed data does not fit the type
        """
        if config_type is None:
            raise ValueError("Configuration type must not be None")

        path = self.resolve_path(config_type, file_name)
        raw_text = path.read_text(encoding="utf-8")
        substituted = substitute(raw_text, self._resolver)
        content = self._format.load(substituted)

        config = _type_adapter(config_type).validate_python(content)
        logger.info(f"Loaded {getattr(config_type, '__name__', config_type)} from {path}")
        return config

    def __repr__(self) -> str:
        return (
            f"AppConfigr(base_path={str(self._base_path)!r}, "
            f"format={self._format.name!r}, resolver={self._resolver!r})"
        )


class Builder:
    """Fluent builder for ``AppConfigr``.

    Defaults: YAML format, properties-then-environment resolver chain and a
    directory check at build time.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._check_directory = True
        self._format: ConfigFormat = YAML
        self._resolver: VariableResolver = default_resolver()

    def no_check(self) -> "Builder":
        """Skip the check that the base path is an existing directory.

        A missing directory then surfaces as ``FileNotFoundError`` when the
        first configuration is requested.
        """
        self._check_directory = False
        return self

    def with_format(self, config_format: ConfigFormat | str) -> "Builder":
        """Replace the format used to parse configuration files.

        Args:
            config_format: A ``ConfigFormat`` or a registered name
                (``"yaml"``, ``"json"``)

        Raises:
            ValueError: If config_format is None
            ConfigError: If the format name is unknown
        """
        self._format = get_format(config_format)
        return self

    def with_resolver(self, resolver: VariableResolver) -> "Builder":
        """Replace the resolver chain used for placeholders.

        Raises:
            ValueError: If resolver is None
        """
        if resolver is None:
            raise ValueError("The given variable resolver must not be None")
        self._resolver = resolver
        return self

    def build(self) -> AppConfigr:
        """Validate the settings and create the loader.

        Raises:
            ConfigError: If the base path is not an existing directory and
                the check was not suppressed
        """
        if self._check_directory and not self._path.is_dir():
            raise ConfigError(
                "directory",
                f"The given path is not a valid directory [{self._path}]. "
                "This check can be suppressed by calling no_check() on the builder.",
            )
        return AppConfigr(self._path, self._format, self._resolver)


def load_config(
    config_type: type[T],
    file_name: str | None = None,
    directory: str | os.PathLike[str] | None = None,
    config_format: ConfigFormat | str = YAML,
    resolver: VariableResolver | None = None,
) -> T:
    """Load one configuration in a single call.

    Args:
        config_type: Target type
        file_name: File name; derived from the type when omitted
        directory: Base directory; ``<user.dir>/config`` when omitted
        config_format: Format instance or name
        resolver: Resolver chain; properties-then-environment when omitted

    Returns:
        Validated instance of ``config_type``
    """
    if directory is None:
        builder = AppConfigr.from_default_directory()
    else:
        builder = AppConfigr.from_directory(directory)

    builder.with_format(config_format)
    if resolver is not None:
        builder.with_resolver(resolver)
    return builder.build().get_config(config_type, file_name)
