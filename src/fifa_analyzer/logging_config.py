import logging
import logging.config
from typing import Any, Dict, Optional

## Package logger: loader, store and API all log under it.
APP_LOGGER = "fifa_analyzer"


def build_logging_config(
    level: str = "INFO",
    access_log: bool = True,
    app_level: Optional[str] = None,
) -> Dict[str, Any]:
    """
    dictConfig for the API server and the import command.

    app_level overrides the level of the fifa_analyzer loggers only, so import
    and search logging can be turned up without flooding uvicorn's output.
    Access lines stay at INFO unless access_log is off.
    """
    level = level.upper()
    app_level = (app_level or level).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                "datefmt": "%H:%M:%S",
            },
            ## uvicorn formats the access line itself.
            "access_line": {"format": "%(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "default"},
            "access": {"class": "logging.StreamHandler", "formatter": "access_line"},
        },
        "loggers": {
            APP_LOGGER: {"level": app_level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {
                "level": "INFO" if access_log else "WARNING",
                "handlers": ["access"],
                "propagate": False,
            },
        },
        "root": {"level": level, "handlers": ["console"]},
    }


def setup_logging(
    level: str = "INFO", access_log: bool = True, app_level: Optional[str] = None
) -> None:
    logging.config.dictConfig(build_logging_config(level, access_log, app_level))
