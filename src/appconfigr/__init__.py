"""appconfigr - typed configuration files with ${variable} expansion.

Configuration files are read from a base directory, ``${name}`` placeholders
are expanded through a chain of variable resolvers (process properties,
environment variables or custom sources) and the result is parsed (YAML by
default) and validated into a typed object.

Main features:
- Property-then-environment resolution with combined diagnostics
- Custom resolvers composed with ``with_fallback``
- pydantic models, dataclasses and TypedDicts as configuration types
- ``appconfigr`` command line for rendering and checking files
"""

from appconfigr.config.loader import AppConfigr, load_config
from appconfigr.lib.errors import (
    AppConfigrError,
    ConfigError,
    FileNotFoundError,
    VariableResolutionError,
)
from appconfigr.variables.resolvers import (
    VariableResolver,
    from_environment,
    from_mapping,
    from_properties,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AppConfigr",
    "AppConfigrError",
    "ConfigError",
    "FileNotFoundError",
    "VariableResolutionError",
    "VariableResolver",
    "from_environment",
    "from_mapping",
    "from_properties",
    "load_config",
]
