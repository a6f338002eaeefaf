"""Logging configuration for the short-link service."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

LOGGER_NAME = "short_link"

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line. Messages carry raw URLs, so they are
    serialized with json.dumps rather than spliced into a format string."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Attach stdout (and optionally file) handlers to the service logger.

    Calling it again replaces the handlers instead of stacking them.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional log file path
        json_format: Emit JSON lines instead of plain text

    Returns:
        The ``short_link`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
