"""Logging setup for the tw-matcher CLI.

Library modules only call logging.getLogger(__name__). The CLI calls
configure_logging() once; repeated calls adjust the level and never add a
second handler.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'

_handler: logging.Handler | None = None


def configure_logging(level: str | int = 'WARNING') -> logging.Logger:
    """Send tw_matcher logs to stderr at the given level."""
    global _handler

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f'Unknown log level: {level!r}')
        level = resolved

    root = logging.getLogger('tw_matcher')
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
        root.propagate = False
    root.setLevel(level)
    return root
