"""Logging configuration for processes embedding the core.

The core only ever calls ``logging.getLogger(__name__)``; the host process
decides where records go by calling ``configure_logging`` once at startup.
Structured JSON (python-json-logger) is the default, with ``severity`` /
``timestamp`` / ``logger`` field names. ``POTION_JSON_LOGS=false`` switches
to a plain one-line text format for local work.
"""

import copy
import logging
import logging.config

from potion.config import get_settings

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
            "static_fields": {"service": "potion"},
        },
        "plain": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
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


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Apply the logging configuration to the root logger.

    ``level`` and ``json_logs`` default to ``Settings.log_level`` and
    ``Settings.json_logs``.
    """
    settings = get_settings()
    if json_logs is None:
        json_logs = settings.json_logs
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = (level or settings.log_level).upper()
    config["handlers"]["console"]["formatter"] = "json" if json_logs else "plain"
    logging.config.dictConfig(config)
