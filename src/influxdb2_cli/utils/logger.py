"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "influxdb2_cli"
_LOG_FILE = "influxdb2.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _has_file_handler(logger: logging.Logger, log_path: Path) -> bool:
    return any(
        isinstance(handler, RotatingFileHandler)
        and Path(handler.baseFilename) == log_path
        for handler in logger.handlers
    )


def get_logger() -> logging.Logger:
    """Return the package logger, attaching the rotating file handler on first call.

    Module loggers created with ``logging.getLogger(__name__)`` inside the
    package are children of this logger and end up in the same file.
    Handlers a host application has already attached are left in place.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = (log_dir / _LOG_FILE).absolute()

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if not _has_file_handler(logger, log_path):
        handler = RotatingFileHandler(
            log_path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
