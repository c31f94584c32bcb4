"""Placeholder scanning, variable resolution and text substitution."""

from appconfigr.variables.expressions import Expression, find, iter_expressions
from appconfigr.variables.resolvers import (
    EnvironmentResolver,
    FallbackResolver,
    MappingResolver,
    PropertyResolver,
    Resolution,
    Resolved,
    Unresolved,
    VariableResolver,
    default_resolver,
    from_environment,
    from_mapping,
    from_properties,
)
from appconfigr.variables.substitution import substitute

__all__ = [
    "Expression",
    "find",
    "iter_expressions",
    "EnvironmentResolver",
    "FallbackResolver",
    "MappingResolver",
    "PropertyResolver",
    "Resolution",
    "Resolved",
    "Unresolved",
    "VariableResolver",
    "default_resolver",
    "from_environment",
    "from_mapping",
    "from_properties",
    "substitute",
]
