"""Logging configuration.

Everything under the ``pomotasks`` namespace goes through one logger that
``setup_logging`` wires to the console (plain or JSON lines) and, optionally,
to a file.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "pomotasks"
PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure the ``pomotasks`` logger and return it.

    Calling it again replaces the previous handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.getLevelName(log_level.upper())
    logger.setLevel(level if isinstance(level, int) else logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    formatter = JSONFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger
