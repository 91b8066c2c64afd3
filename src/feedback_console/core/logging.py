"""Process-wide logging for the API and the console.

Everything goes through one stream handler. Application modules log under
the ``feedback_console`` namespace; the console's outgoing API calls are
already reported by the page handlers, so ``httpx`` only surfaces warnings.
"""

from __future__ import annotations

import logging
import logging.config

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str) -> None:
    log_level = level.upper()

    loggers: dict[str, dict] = {
        name: {"handlers": ["default"], "level": log_level, "propagate": False}
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
    }
    loggers["feedback_console"] = {"level": log_level}
    for name in QUIET_LOGGERS:
        loggers[name] = {"handlers": ["default"], "level": "WARNING", "propagate": False}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": DEFAULT_LOG_FORMAT},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                }
            },
            "root": {"handlers": ["default"], "level": log_level},
            "loggers": loggers,
        }
    )
