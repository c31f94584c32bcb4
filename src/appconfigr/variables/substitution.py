"""Placeholder substitution over raw configuration text."""

import logging

from appconfigr.variables.expressions import find
from appconfigr.variables.resolvers import VariableResolver

logger = logging.getLogger(__name__)


def substitute(text: str, resolver: VariableResolver) -> str:
    """Replace every ``${name}`` placeholder in ``text`` with its value.

    Each distinct name is resolved once, in order of first appearance. All
    values are resolved before any text is rewritten, so a failing variable
    leaves no partial result behind. Then, in the same order, every literal
    occurrence of ``${name}`` in the current working text is replaced with
    its value. Matching is plain string matching, so dots in names and
    backslashes in values carry no special meaning. Text without
    placeholders is returned unchanged.

    Args:
        text: Raw configuration text
        resolver: Resolver (or resolver chain) supplying values

    Returns:
        Text with every recognised placeholder replaced

    Raises:
        ValueError: If text or resolver is None
        VariableResolutionError: On the first variable that cannot be resolved
    """
    if resolver is None:
        raise ValueError("Resolver must not be None")

    expressions = find(text)
    if not expressions:
        return text

    distinct = list(dict.fromkeys(expressions))
    values = [(expression, resolver.get(expression.name)) for expression in distinct]

    for expression, value in values:
        text = text.replace(expression.literal, value)

    logger.debug(
        f"Substituted {len(expressions)} placeholder(s) "
        f"for {len(values)} distinct variable(s)"
    )
    return text
