from __future__ import annotations

import logging
from logging.config import dictConfig

LOGGER_NAME = "file_share"


def configure_logging(level: str = "INFO") -> None:
    """Attach a console handler to the application's logger tree."""
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                LOGGER_NAME: {
                    "handlers": ["console"],
                    "level": level.upper(),
                    "propagate": False,
                },
            },
        }
    )
    logging.getLogger(LOGGER_NAME).debug("Logging configured at %s", level.upper())
