"""
Logging configuration for the roster server.

Provides structured logging with different levels for development, testing, and production.
Module loggers are grouped under a small `roster.*` hierarchy.
"""

import logging
import logging.config
import sys
from typing import Dict, Any

from server.src.core.config import settings

ROOT_LOGGER = "roster"

# Module prefix -> logger name, most specific first
LOGGER_NAMES = (
    ("server.src.core.database", "roster.database"),
    ("server.src.services.player_repository", "roster.database"),
    ("server.src.api", "roster.players"),
    ("server.src.services", "roster.services"),
)


def get_log_level() -> str:
    """Get the log level from settings."""
    return settings.LOG_LEVEL.upper()


def get_logging_config() -> Dict[str, Any]:
    """
    Get the logging configuration dictionary.

    Production uses JSON output; development and testing use human-readable lines.
    """
    log_level = get_log_level()

    if settings.ENVIRONMENT.lower() == "production":
        formatter_class = "pythonjsonlogger.json.JsonFormatter"
        formatter_format = "%(asctime)s %(name)s %(levelname)s %(message)s"
    else:
        formatter_class = "logging.Formatter"
        formatter_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    roster_loggers = {
        name: {
            "level": log_level,
            "handlers": ["console", "error_console"],
            "propagate": False,
        }
        for name in {ROOT_LOGGER, *(logger_name for _, logger_name in LOGGER_NAMES)}
    }
    quiet = {"handlers": ["console"], "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "class": formatter_class,
                "format": formatter_format,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "class": formatter_class,
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "default",
                "stream": sys.stdout,
            },
            "error_console": {
                "class": "logging.StreamHandler",
                "level": "ERROR",
                "formatter": "detailed",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            **roster_loggers,
            # SQL statements are only wanted when DATABASE_ECHO is set
            "sqlalchemy.engine": {"level": "WARNING", **quiet},
            "aiosqlite": {"level": "WARNING", **quiet},
            "uvicorn": {"level": "INFO", **quiet},
            "uvicorn.access": {"level": "INFO", **quiet},
        },
        "root": {
            "level": log_level,
            "handlers": ["console", "error_console"],
        },
    }


def setup_logging() -> None:
    """
    Configure logging for the application.

    Called once when the app module is imported.
    """
    logging.config.dictConfig(get_logging_config())

    logging.getLogger(ROOT_LOGGER).info(
        "Logging configured",
        extra={
            "log_level": get_log_level(),
            "environment": settings.ENVIRONMENT,
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get the roster logger for a module.

    Args:
        name: The module name, typically __name__

    Returns:
        `roster.database`, `roster.players` or `roster.services` for modules
        in those areas, otherwise `roster` itself
    """
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)

    for prefix, logger_name in LOGGER_NAMES:
        if name == prefix or name.startswith(prefix + "."):
            return logging.getLogger(logger_name)
    return logging.getLogger(ROOT_LOGGER)
