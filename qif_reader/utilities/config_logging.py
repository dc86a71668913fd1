# qif_reader/utilities/config_logging.py
from __future__ import annotations

import copy
from typing import Any

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "INFO",
            "handlers": ["console"],
        },
        "qif_reader": {"level": "INFO", "propagate": True},
    },
}


def build_logging_config(level: str = "INFO", log_file: str | None = None) -> dict[str, Any]:
    """
    Return a copy of :data:`LOGGING` tuned for one CLI run.

    ``level`` applies to the console handler and the ``qif_reader`` logger.
    When ``log_file`` is given a rotating file handler with the verbose
    formatter is attached to the root logger at DEBUG.
    """
    level = level.upper()
    config = copy.deepcopy(LOGGING)
    config["handlers"]["console"]["level"] = level
    config["loggers"]["qif_reader"]["level"] = level
    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": log_file,
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        }
        config["loggers"][""]["handlers"].append("file")
        config["loggers"][""]["level"] = "DEBUG"
        config["loggers"]["qif_reader"]["level"] = "DEBUG"
    return config
