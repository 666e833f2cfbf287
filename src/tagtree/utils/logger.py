"""Logging helpers for tagtree.

All library loggers live under the ``tagtree`` namespace, so one level
setting controls every module. The library only logs at DEBUG (style
registrations and finished renders) and installs no handlers.

Example:
    >>> import logging
    >>> from tagtree.utils.logger import log_level
    >>> with log_level(logging.DEBUG):
    ...     html = render(node)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

ROOT_LOGGER = "tagtree"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, namespaced under ``tagtree.``.

    Example:
        >>> get_logger("mymodule").name
        'tagtree.mymodule'
        >>> get_logger("tagtree.printer").name
        'tagtree.printer'
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


@contextmanager
def log_level(level: int) -> Iterator[logging.Logger]:
    """Temporarily set the level of the whole ``tagtree`` logger tree.

    The previous level is restored on exit, including on exceptions.
    """
    root = logging.getLogger(ROOT_LOGGER)
    previous = root.level
    root.setLevel(level)
    try:
        yield root
    finally:
        root.setLevel(previous)
