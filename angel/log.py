"""Error reporting for the engine."""

from __future__ import annotations

import logging

logger = logging.getLogger("angel")


def print_error(title: str, error: object) -> None:
    """Log an error message made of a title followed by the error text."""
    logger.error("%s%s", title, error)