"""Logging configuration shared by the API, Celery workers and Alembic."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Server loggers that must propagate to root instead of owning handlers
PROPAGATING_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "celery")

# Third-party loggers that are never more verbose than INFO
QUIET_LOGGERS = ("urllib3", "httpx", "httpcore", "google_genai", "sqlalchemy.engine")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").strip().lower() in {"1", "true", "yes"}


def parse_level(level: str) -> int:
    """Convert a level name such as "debug" to its numeric value.

    :param level: Level name, case-insensitive.
    :returns: Numeric logging level.
    :raises ValueError: If the name is not a logging level.
    """
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def configure_logging(level: str | None = None) -> int:
    """Send all application logs to a single stdout handler.

    Env vars:
      - LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
      - LOG_UVICORN_ACCESS: log every HTTP request (default false)
      - LOG_SQL: log SQL statements at INFO (default false)

    :param level: Level name overriding LOG_LEVEL.
    :returns: The numeric level applied to the root logger.
    :raises ValueError: If the level name is invalid.
    """
    level_name = level or os.environ.get("LOG_LEVEL", "INFO")
    numeric_level = parse_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    for name in PROPAGATING_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    if not _env_flag("LOG_UVICORN_ACCESS"):
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    quiet_level = max(numeric_level, logging.INFO)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    if _env_flag("LOG_SQL"):
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    logging.getLogger(__name__).info(f"Logging configured: level={level_name.upper()}")
    return numeric_level
