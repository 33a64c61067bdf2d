"""
Logging configuration.

Human-readable console output on stderr. The level comes from
``settings.LOG_LEVEL`` unless the caller passes one explicitly.
"""
import logging.config

from accountboard.config import settings


def get_logging_config(level: str | None = None) -> dict:
    """Build a ``logging.config.dictConfig`` dictionary."""
    log_level = (level or settings.LOG_LEVEL).upper()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "[{asctime}] {levelname} {name} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "accountboard": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": True,
            },
            "sqlalchemy.engine": {
                "level": "INFO" if settings.DEBUG else "WARNING",
            },
        },
    }


def configure_logging(level: str | None = None) -> None:
    logging.config.dictConfig(get_logging_config(level))
