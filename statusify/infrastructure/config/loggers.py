import logging.config
from typing import Any
from typing import Final

from statusify.infrastructure.types import LogHandler
from statusify.infrastructure.types import LogLevel

LOGGER_STATUSIFY: Final[str] = "statusify"

# Third-party loggers never follow the application level.
LIBRARY_LOG_LEVELS: Final[dict[str, LogLevel]] = {
    "uvicorn": "INFO",
    "sqlalchemy.engine": "WARNING",
    "httpx": "WARNING",
}


def build_handler_conf(name: LogHandler) -> dict[str, Any]:
    match name:
        case "console":
            return {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "stream": "ext://sys.stdout",
            }
        case "rich":
            return {
                "class": "rich.logging.RichHandler",
                "formatter": "rich",
                "markup": False,
                "rich_tracebacks": True,
            }
        case "null":
            return {"class": "logging.NullHandler"}


def build_logging_conf(level: LogLevel, handlers: list[LogHandler], propagate: bool = False) -> dict[str, Any]:
    """Builds a fresh `dictConfig` mapping, declaring only the requested handlers.

    A new mapping is returned on each call since `dictConfig` consumes some of its keys.
    """
    loggers: dict[str, dict[str, Any]] = {
        name: {"level": library_level, "handlers": list(handlers), "propagate": False}
        for name, library_level in LIBRARY_LOG_LEVELS.items()
    }
    loggers[LOGGER_STATUSIFY] = {"level": level, "handlers": list(handlers), "propagate": propagate}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            },
            # Rich renders the time and level itself.
            "rich": {"format": "%(message)s", "datefmt": "[%X]"},
        },
        "handlers": {name: build_handler_conf(name) for name in handlers},
        "loggers": loggers,
        "root": {"level": "INFO", "handlers": list(handlers)},
    }


def configure_loggers(level: LogLevel, handlers: list[LogHandler], propagate: bool = False) -> None:
    """Configures the application's loggers based on the provided level and handlers.

    The level and propagation only apply to the application's logger. The handlers
    are shared by every declared logger, root included.
    """
    logging.config.dictConfig(build_logging_conf(level, handlers, propagate=propagate))
