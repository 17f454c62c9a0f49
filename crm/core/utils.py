"""
Utility helpers shared across services/scripts.
"""

import logging
from datetime import datetime

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Installs a stream handler on the root logger using CRM_LOG_LEVEL when no
    level is given. Calling it twice keeps the first handler.
    """
    name = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)


def local_now() -> datetime:
    """Timezone-aware current time in the machine's local zone."""
    return datetime.now().astimezone()
