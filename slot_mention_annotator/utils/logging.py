"""
Logging configuration for the slot mention annotator
"""

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[str, int, None], verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    if level is None:
        return logging.WARNING
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    level: Union[str, int, None] = None,
    verbose: bool = False,
    format_string: Optional[str] = None
) -> None:
    """
    Route log records to stderr; stdout is reserved for the JSON result.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR) or number; WARNING if omitted
        verbose: If True, log at DEBUG regardless of ``level``
        format_string: Custom format string for log messages
    """
    logging.basicConfig(
        level=_resolve_level(level, verbose),
        format=format_string or DEFAULT_FORMAT,
        stream=sys.stderr,
        force=True,
    )
