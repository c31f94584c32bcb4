"""Colored resolution labels for the ``vars`` command.

Colors are only applied when stdout is a terminal, so redirected output and
CI logs stay plain.
"""

from appconfigr.lib.ui.terminal import is_tty

_GREEN = "\033[92m"
_RED = "\033[91m"
_RESET = "\033[0m"


def status_label(resolved: bool, force_tty: bool | None = None) -> str:
    """Return ``ok`` in green or ``missing`` in red.

    Args:
        resolved: Whether the variable resolved.
        force_tty: Override TTY detection (for testing). None uses auto-detection.

    Returns:
        The label, wrapped in a color code only in TTY mode.
    """
    label, color = ("ok", _GREEN) if resolved else ("missing", _RED)
    use_colors = force_tty if force_tty is not None else is_tty()
    if not use_colors:
        return label
    return f"{color}{label}{_RESET}"
