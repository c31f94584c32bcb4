"""Process-wide property table.

Properties are plain string key/value pairs shared by the whole process. They
are read by ``PropertyResolver`` and can be set programmatically or from the
command line (``appconfigr render -D name=value``). The table is seeded with a
few runtime facts when the module is imported:

- ``user.dir``: working directory at import time
- ``user.home``: home directory of the current user
- ``os.name``: platform name as reported by ``platform.system()``
- ``python.version``: interpreter version
- ``file.separator`` / ``path.separator`` / ``line.separator``
"""

import os
import platform
import threading
from collections.abc import Generator, Mapping
from contextlib import contextmanager
from pathlib import Path

_lock = threading.RLock()


def _seed() -> dict[str, str]:
    return {
        "user.dir": os.getcwd(),
        "user.home": str(Path.home()),
        "os.name": platform.system(),
        "python.version": platform.python_version(),
        "file.separator": os.sep,
        "path.separator": os.pathsep,
        "line.separator": os.linesep,
    }


_properties: dict[str, str] = _seed()


def get_property(name: str, default: str | None = None) -> str | None:
    """Return the value of a property, or ``default`` when it is not set.

    Lookup is exact and case-sensitive.
    """
    with _lock:
        return _properties.get(name, default)


def set_property(name: str, value: str) -> str | None:
    """Set a property and return its previous value.

    Raises:
        ValueError: If name is empty or value is None
    """
    if not name:
        raise ValueError("Property name must not be empty")
    if value is None:
        raise ValueError(f"Value for property '{name}' must not be None")
    with _lock:
        previous = _properties.get(name)
        _properties[name] = str(value)
        return previous


def clear_property(name: str) -> str | None:
    """Remove a property and return the value it had, if any."""
    with _lock:
        return _properties.pop(name, None)


def get_properties() -> dict[str, str]:
    """Return a snapshot copy of the whole property table."""
    with _lock:
        return dict(_properties)


@contextmanager
def override_properties(
    values: Mapping[str, str] | None = None, **kwargs: str
) -> Generator[dict[str, str]]:
    """Temporarily set properties, restoring the previous table on exit.

    Property names usually contain dots, so they are normally passed through
    ``values``; keyword arguments are accepted for simple names.

    Example:
        >>> with override_properties({"db.host": "localhost"}):
        ...     get_property("db.host")
        'localhost'

    Yields:
        Snapshot of the table with the overrides applied
    """
    overrides = dict(values or {}, **kwargs)
    for name, value in overrides.items():
        if not name:
            raise ValueError("Property name must not be empty")
        if value is None:
            raise ValueError(f"Value for property '{name}' must not be None")
    with _lock:
        saved = dict(_properties)
    try:
        with _lock:
            for name, value in overrides.items():
                _properties[name] = str(value)
            snapshot = dict(_properties)
        yield snapshot
    finally:
        with _lock:
            _properties.clear()
            _properties.update(saved)
