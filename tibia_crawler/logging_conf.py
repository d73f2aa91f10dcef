"""Logging configuration built around structlog JSON logging."""

from __future__ import annotations

import logging.config
from pathlib import Path
from typing import Any

import structlog

_LOGGING_INITIALISED = False

# log file name -> minimum level written to it
LOG_FILES = {"crawler.log": "INFO", "error.log": "ERROR"}


def logging_dict(level: str, log_dir: Path | None = None) -> dict[str, Any]:
    """Build the dictConfig for the ``tibia_crawler`` logger tree.

    Events always go to stderr; with ``log_dir`` they are also written to
    each file in ``LOG_FILES``.
    """
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "json",
            "stream": "ext://sys.stderr",
        }
    }
    if log_dir is not None:
        for filename, file_level in LOG_FILES.items():
            handlers[Path(filename).stem] = {
                "class": "logging.FileHandler",
                "level": file_level,
                "filename": str(log_dir / filename),
                "formatter": "json",
                "encoding": "utf-8",
            }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            }
        },
        "handlers": handlers,
        "loggers": {
            "tibia_crawler": {
                "handlers": list(handlers),
                "level": level,
                "propagate": False,
            },
        },
    }


def configure_logging(verbose: bool = False, log_dir: Path | None = None) -> structlog.BoundLogger:
    """Configure structlog + stdlib handlers once and return the app logger."""

    global _LOGGING_INITIALISED
    if not _LOGGING_INITIALISED:
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
        logging.config.dictConfig(logging_dict("DEBUG" if verbose else "INFO", log_dir))
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        _LOGGING_INITIALISED = True
    return structlog.get_logger("tibia_crawler")


def component_logger(component: str) -> structlog.BoundLogger:
    """Return a logger bound to one crawler component."""

    return structlog.get_logger(f"tibia_crawler.{component}").bind(component=component)


__all__ = ["LOG_FILES", "component_logger", "configure_logging", "logging_dict"]
