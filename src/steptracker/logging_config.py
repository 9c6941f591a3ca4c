"""
Logging bootstrap for the steptracker command line.

Library modules only create module loggers; call setup_logging() once from
an entry point to configure the root logger.
"""

import logging
from typing import Optional

from steptracker.config import get_log_level

__all__ = ["setup_logging"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name such as "INFO". Falls back to STEPTRACKER_LOG_LEVEL.
    """
    log_level = (level or get_log_level()).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING), format=LOG_FORMAT)
