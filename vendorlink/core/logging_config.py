"""
Logging setup for the VendorLink backend.

One console handler on the root logger, an optional ``logs/vendorlink.log``
file handler and per-package levels. Three line formats are available:
``simple``, ``detailed`` (default) and ``json``.

Environment:
    VENDORLINK_LOG_LEVEL   console level (read through the settings model)
    LOG_FORMAT             simple | detailed | json
    LOG_FILE_DIR           directory of the log file
    ENABLE_FILE_LOGGING    true/1/yes to also write the log file
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional

_TRUTHY = ("true", "1", "yes")


def _console_level_from_settings() -> str:
    # Imported lazily: the settings module itself logs through this one
    try:
        from vendorlink.server.core.config import settings

        return settings.log_level
    except Exception:
        return os.getenv("VENDORLINK_LOG_LEVEL", "INFO")


LOG_LEVEL = _console_level_from_settings().upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "detailed")
LOG_FILE_DIR = os.getenv("LOG_FILE_DIR", "logs")
ENABLE_FILE_LOGGING = os.getenv("ENABLE_FILE_LOGGING", "false").lower() in _TRUTHY
LOG_FILE_NAME = "vendorlink.log"

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)
FORMATS: Dict[str, str] = {"simple": SIMPLE_FORMAT, "detailed": DETAILED_FORMAT, "json": JSON_FORMAT}

MODULE_LOG_LEVELS: Dict[str, str] = {
    "vendorlink": "INFO",
    "vendorlink.server.api": "DEBUG",
    "vendorlink.server.services": "DEBUG",
    "vendorlink.server.auth": "INFO",
    "vendorlink.core.database": "INFO",
    # Chatty dependencies
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "asyncpg": "WARNING",
    "httpx": "WARNING",
    "authlib": "WARNING",
    "httpcore": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


def _attach(root: logging.Logger, handler: logging.Handler, level, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    (Re)configure the root logger. Safe to call more than once.

    Args:
        log_level: Console level, defaults to ``VENDORLINK_LOG_LEVEL``
        log_format: ``simple``, ``detailed`` or ``json``; unknown names fall back to ``detailed``
        enable_file: Also write the log file when ``ENABLE_FILE_LOGGING`` is on
    """
    console_level = (log_level or LOG_LEVEL).upper()
    format_name = log_format or LOG_FORMAT
    formatter = logging.Formatter(FORMATS.get(format_name, DETAILED_FORMAT), datefmt="%Y-%m-%d %H:%M:%S")

    root = logging.getLogger()
    # Handlers decide what is emitted
    root.setLevel(logging.DEBUG)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    _attach(root, logging.StreamHandler(), console_level, formatter)

    write_file = enable_file and ENABLE_FILE_LOGGING
    if write_file:
        log_dir = Path(LOG_FILE_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        _attach(root, logging.FileHandler(log_dir / LOG_FILE_NAME), logging.DEBUG, formatter)

    for name, level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    root.info(f"Logging configured: level={console_level}, format={format_name}, file_logging={write_file}")


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` (pass ``__name__``)."""
    return logging.getLogger(name)
