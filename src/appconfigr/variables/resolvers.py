"""Variable resolvers used to expand placeholders in configuration files.

A resolver maps a variable name to a ``Resolution``: either ``Resolved``
carrying the value or ``Unresolved`` carrying a diagnostic that names the
variable and the source that was asked. ``resolve`` never raises for unknown
names; ``get`` is the entry point that turns an ``Unresolved`` outcome into a
``VariableResolutionError``.

Resolvers compose with ``with_fallback``::

    resolver = from_properties().with_fallback(from_environment())
    resolver.get("DB_HOST")

tries the process properties first and the environment second. When both
fail the error message lists both diagnostics in that order.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

from appconfigr import properties
from appconfigr.lib.errors import VariableResolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolved:
    """Successful resolution carrying the variable value."""

    value: str


@dataclass(frozen=True)
class Unresolved:
    """Failed resolution carrying a human-readable reason."""

    message: str


Resolution = Resolved | Unresolved


def unresolved_message(name: str, source: str) -> str:
    """Build the standard diagnostic for a name missing from ``source``."""
    return f"[{name}] can not be resolved from the {source}."


class VariableResolver(ABC):
    """Base class for all variable resolvers.

    Subclasses implement ``resolve`` and must report a missing variable as an
    ``Unresolved`` outcome instead of raising.
    """

    @abstractmethod
    def resolve(self, name: str) -> Resolution:
        """Resolve ``name`` to a ``Resolved`` or ``Unresolved`` outcome."""

    def get(self, name: str) -> str:
        """Return the value for ``name``.

        Args:
            name: Variable name to resolve

        Returns:
            The resolved value

        Raises:
            ValueError: If name is None or empty
            VariableResolutionError: If the variable cannot be resolved
        """
        if not name:
            raise ValueError("Variable name must not be None or empty")

        result = self.resolve(name)
        if isinstance(result, Resolved):
            return result.value
        raise VariableResolutionError(name, result.message)

    def with_fallback(self, fallback: "VariableResolver") -> "VariableResolver":
        """Return a resolver that tries ``self`` first, then ``fallback``.

        Neither operand is modified.

        Raises:
            ValueError: If fallback is None
        """
        if fallback is None:
            raise ValueError("Fallback resolver must not be None")
        return FallbackResolver(self, fallback)


class EnvironmentResolver(VariableResolver):
    """Resolves variables from environment variables.

    Matching follows the platform: case-sensitive on POSIX, case-insensitive
    on Windows when reading ``os.environ``.
    """

    source = "environment variables"

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Create an environment resolver.

        Args:
            environ: Mapping to read instead of ``os.environ`` (read lazily
                on every lookup when omitted)
        """
        self._environ = environ

    def resolve(self, name: str) -> Resolution:
        environ = os.environ if self._environ is None else self._environ
        value = environ.get(name)
        if value is not None:
            return Resolved(value)
        return Unresolved(unresolved_message(name, self.source))

    def __repr__(self) -> str:
        return "EnvironmentResolver()"


class PropertyResolver(VariableResolver):
    """Resolves variables from the process property table.

    Lookups are exact and case-sensitive.
    """

    source = "system properties"

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        """Create a property resolver.

        Args:
            values: Mapping to read instead of the process property table
        """
        self._values = values

    def resolve(self, name: str) -> Resolution:
        if self._values is None:
            value = properties.get_property(name)
        else:
            value = self._values.get(name)
        if value is not None:
            return Resolved(value)
        return Unresolved(unresolved_message(name, self.source))

    def __repr__(self) -> str:
        return "PropertyResolver()"


class MappingResolver(VariableResolver):
    """Resolves variables from a caller-supplied mapping.

    Useful for custom sources (secrets files, CLI overrides) and as a test
    double that avoids touching real process state.
    """

    def __init__(self, values: Mapping[str, str], source: str = "given mapping") -> None:
        if values is None:
            raise ValueError("Mapping for MappingResolver must not be None")
        self._values = dict(values)
        self.source = source

    def resolve(self, name: str) -> Resolution:
        value = self._values.get(name)
        if value is not None:
            return Resolved(str(value))
        return Unresolved(unresolved_message(name, self.source))

    def __repr__(self) -> str:
        return f"MappingResolver(source={self.source!r})"


class FallbackResolver(VariableResolver):
    """Asks ``primary`` first and ``fallback`` only when primary fails.

    When both fail the diagnostics are joined with a single space, primary
    first, so chains built with repeated ``with_fallback`` calls report every
    source in resolution order.
    """

    def __init__(self, primary: VariableResolver, fallback: VariableResolver) -> None:
        self.primary = primary
        self.fallback = fallback

    def resolve(self, name: str) -> Resolution:
        result = self.primary.resolve(name)
        if isinstance(result, Resolved):
            return result

        logger.debug(f"Falling back for '{name}': {result.message}")
        fallback_result = self.fallback.resolve(name)
        if isinstance(fallback_result, Resolved):
            return fallback_result
        return Unresolved(f"{result.message} {fallback_result.message}")

    def __repr__(self) -> str:
        return f"FallbackResolver({self.primary!r}, {self.fallback!r})"


def from_environment() -> VariableResolver:
    """Return a resolver backed by ``os.environ``."""
    return EnvironmentResolver()


def from_properties() -> VariableResolver:
    """Return a resolver backed by the process property table."""
    return PropertyResolver()


def from_mapping(
    values: Mapping[str, str], source: str = "given mapping"
) -> VariableResolver:
    """Return a resolver backed by ``values``.

    Args:
        values: Variable names mapped to their values
        source: Name of the source used in diagnostics
    """
    return MappingResolver(values, source=source)


def default_resolver() -> VariableResolver:
    """Return the default chain: process properties, then environment."""
    return from_properties().with_fallback(from_environment())
