"""Terminal detection utilities."""

import os
import sys


def is_tty() -> bool:
    """Check if stdout is an interactive terminal that accepts colors.

    Honors the ``NO_COLOR`` convention: when it is set to any non-empty
    value, output is treated as plain text.

    Returns:
        True if colored output should be used, False otherwise.
    """
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()
