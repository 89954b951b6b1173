"""
Logging configuration.

All package modules log through ``logging.getLogger(__name__)``; this module
installs one formatter on the root logger so every record shares the same
millisecond timestamp format.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.localization.core.config import LoggingConfig

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class UnifiedFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ct = datetime.fromtimestamp(record.created)
        return ct.strftime(datefmt or LOG_DATE_FORMAT) + f".{int(record.msecs):03d}"


def setup_logging(
    level: str = "INFO", log_file: str | None = None, fmt: str = LOG_FORMAT
) -> None:
    """
    Configure the root logger.

    Args:
        level: DEBUG, INFO, WARNING, or ERROR
        log_file: Optional file path for persistent logs
        fmt: Record format string
    """
    formatter = UnifiedFormatter(fmt=fmt, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def configure_logging(config: LoggingConfig) -> None:
    """Configure logging from the ``logging`` settings section."""
    setup_logging(level=config.level, log_file=config.file, fmt=config.format)
