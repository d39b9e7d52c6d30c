# ledger_helper/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any

LOG_FILE = Path("logs") / "ledger_helper.log"

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "brief": {"format": "%(levelname)s %(name)s: %(message)s"},
        "detailed": {
            "format": "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "brief",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": str(LOG_FILE),
            "maxBytes": 1_000_000,
            "backupCount": 3,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # per-record parse messages are DEBUG; keep them in the file only
        "ledger_helper": {"level": "DEBUG", "propagate": True},
        "pandas": {"level": "WARNING", "propagate": True},
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console", "file"],
    },
}


def configure_logging(log_file: Path | None = None, console_level: str = "INFO") -> None:
    """
    Apply :data:`LOGGING`, creating the log directory first.

    ``log_file`` overrides the rotating file handler's target.
    """
    config = copy.deepcopy(LOGGING)
    target = Path(log_file) if log_file is not None else LOG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    config["handlers"]["file"]["filename"] = str(target)
    config["handlers"]["console"]["level"] = console_level
    logging.config.dictConfig(config)
