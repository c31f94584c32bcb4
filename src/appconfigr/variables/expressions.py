"""Placeholder scanning for raw configuration text.

A placeholder is ``${`` followed by one or more of ``[A-Za-z0-9_.]`` and a
closing ``}``. Anything else (unclosed braces, empty names, hyphens,
whitespace) is not a placeholder and is left alone by substitution.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

VAR_PATTERN = re.compile(r"\$\{(?P<name>[A-Za-z0-9_.]+)\}")


@dataclass(frozen=True)
class Expression:
    """A single ``${name}`` occurrence found in configuration text.

    Equality and hashing use only ``name``, so repeated references to the same
    variable compare equal.
    """

    name: str

    @property
    def literal(self) -> str:
        """Exact bracketed form as it appears in the source text."""
        return "${" + self.name + "}"

    def __str__(self) -> str:
        return self.literal


def iter_expressions(text: str) -> Iterator[Expression]:
    """Lazily yield expressions in ``text`` from left to right.

    Raises:
        ValueError: If text is None
    """
    if text is None:
        raise ValueError("Text to scan must not be None")
    return (Expression(match.group("name")) for match in VAR_PATTERN.finditer(text))


def find(text: str) -> list[Expression]:
    """Return every expression in ``text`` in source order.

    Duplicates are kept: a name referenced three times yields three equal
    expressions.

    Example:
        >>> [e.name for e in find("${test}, ${blub}")]
        ['test', 'blub']
    """
    return list(iter_expressions(text))
