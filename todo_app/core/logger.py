import logging
import sys
from typing import Optional

from todo_app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Send log records to stdout at the configured level.

    SQL statements are only logged when DATABASE_ECHO is on, and the
    aiosqlite driver's per-call debug chatter is always suppressed.
    """
    level = getattr(logging, settings.log_level.upper())

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    logging.getLogger("todo_app").setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Repository modules pass __name__, so their loggers sit under "todo_app"."""
    return logging.getLogger(name or "todo_app")


setup_logging()
