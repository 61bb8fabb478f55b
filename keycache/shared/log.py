"""
Shared logger setup.
"""
import logging

from keycache.shared.config import LOG_NAME

_root = logging.getLogger(LOG_NAME)
_root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for the given module name."""
    if name == LOG_NAME or name.startswith(LOG_NAME + "."):
        return logging.getLogger(name)
    return _root.getChild(name)
