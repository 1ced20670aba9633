"""
Logging Configuration - Shared Layer

Structured logging for the API. Records emitted through structlog and through
the standard library (uvicorn, pymongo) share the same processor chain, so the
output is JSON in production and a readable console layout elsewhere.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from labs.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at INFO level
_QUIET_LOGGERS = ("pymongo", "urllib3", "multipart")


def _bootstrap_config() -> Dict[str, Optional[str]]:
    """
    Read logging options straight from the environment.

    Used while the settings object is not available yet (module import time).
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "environment": os.environ.get("ENVIRONMENT"),
    }


def _pre_chain(timestamper: Processor) -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer_for(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure stdlib logging and structlog together.

    Call it once at import time of the application module and again after
    the settings are loaded (see `update_logging_from_settings`).

    Args:
        level: Log level name, falls back to LOG_LEVEL then INFO.
        format_string: Format used for records that bypass structlog.
        file_path: Optional file that receives a copy of every record.
        environment: Deployment environment, selects the renderer.
    """
    bootstrap = _bootstrap_config()

    log_level = (level or bootstrap["level"] or "INFO").upper()
    log_file = file_path or bootstrap["file_path"]
    env_name = environment or bootstrap["environment"] or "development"
    numeric_level = getattr(logging, log_level, logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    formatter = structlog.stdlib.ProcessorFormatter(
        fmt=format_string or bootstrap["format"],
        foreign_pre_chain=_pre_chain(timestamper),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer_for(env_name),
        ],
    )

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(timestamper),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s file=%s environment=%s",
        log_level,
        log_file,
        env_name,
    )


def _plain(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def update_logging_from_settings(settings: Any) -> None:
    """
    Re-apply the logging configuration from the application settings.

    Args:
        settings: `AppSettings` instance (or any object exposing `logging`
            and `environment` attributes).
    """
    try:
        configure_logging(
            level=_plain(settings.logging.level),
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=_plain(settings.environment),
        )
    except (AttributeError, OSError) as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
