"""
Logging configuration
"""

import json
import logging
import logging.config
from datetime import datetime, timezone

from .config import Settings, settings as default_settings

PACKAGE_LOGGER = "cinema_registry"


class JSONFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger, message, call site."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "where": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def build_log_config(settings: Settings) -> dict:
    formatter = "json" if settings.LOG_FORMAT == "json" else "text"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {"format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s"},
            "json": {"()": JSONFormatter},
        },
        "handlers": {
            # stderr keeps the console UI's stdout clean
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "level": settings.LOG_LEVEL,
                "handlers": ["stderr"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings | None = None) -> None:
    logging.config.dictConfig(build_log_config(settings or default_settings))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
