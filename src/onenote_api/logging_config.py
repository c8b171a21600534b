"""Structured JSON logging configuration.

Configures Python stdlib logging to emit JSON with log-aggregator-friendly
field names. The library itself never calls this; applications embedding the
client call it once at startup.

Usage:
    from onenote_api.logging_config import configure_logging
    configure_logging()
"""

import copy
import logging
import logging.config

from onenote_api.config import get_settings

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "onenote-api-client",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str | None = None) -> dict:
    """Apply structured JSON logging configuration.

    The root level comes from ``level`` or, when omitted, from the
    ``log_level`` setting. Returns the applied config dict.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = (level or get_settings().log_level).upper()
    logging.config.dictConfig(config)
    return config
