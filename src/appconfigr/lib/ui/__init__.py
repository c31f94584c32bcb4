"""Terminal output helpers for the appconfigr command line.

- TTY detection for adaptive output formatting
- Colored status labels with graceful degradation
"""

from appconfigr.lib.ui.colors import status_label
from appconfigr.lib.ui.terminal import is_tty

__all__ = [
    "is_tty",
    "status_label",
]
