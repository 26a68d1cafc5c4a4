"""
Logging configuration shared by the server and the CLI tools.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LEVEL = logging.INFO

logger = logging.getLogger(__name__)


def parse_level(value: Optional[str]) -> Optional[int]:
    """
    Turn a level name ("debug", "INFO") or number ("10") into a logging level.

    Returns None when the value is not a level logging knows about.
    """
    if value is None or not value.strip():
        return DEFAULT_LEVEL

    name = value.strip().upper()
    if name.isdigit():
        return int(name)

    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for names it has never seen
    return level if isinstance(level, int) else None


def configure_logging(value: Optional[str] = None) -> int:
    """
    Configure the root logger from `value`, or the LOG_LEVEL env var.

    An unrecognised level falls back to INFO with a warning instead of failing.

    Returns:
        The level that was applied.
    """
    if value is None:
        value = os.getenv("LOG_LEVEL")

    level = parse_level(value)
    logging.basicConfig(level=level or DEFAULT_LEVEL, format=LOG_FORMAT)

    if level is None:
        logger.warning(
            f"Unknown log level '{value}', using {logging.getLevelName(DEFAULT_LEVEL)}"
        )
        return DEFAULT_LEVEL
    return level
