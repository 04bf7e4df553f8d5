"""Structlog-based logging configuration for birdlog.

Modules log through the standard ``logging.getLogger(__name__)``; this module
configures the process-wide handlers and the structlog processor chain.

Supports different deployment targets:
- Docker: stdout with JSON output
- Development: human-readable console output, JSON on request
- Production: JSON unless configured otherwise
"""

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import structlog

from birdlog import __version__
from birdlog.config.models import BirdLogConfig


def is_docker_environment() -> bool:
    """Check if running in a Docker container."""
    return os.path.exists("/.dockerenv") or os.environ.get("DOCKER_CONTAINER") == "true"


def is_development_environment() -> bool:
    """Check whether BIRDLOG_ENV selects development mode."""
    return os.environ.get("BIRDLOG_ENV", "production") == "development"


def get_deployment_environment() -> str:
    """Get deployment environment name."""
    if is_docker_environment():
        return "docker"
    elif is_development_environment():
        return "development"
    else:
        return "production"


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _use_json_output(config: BirdLogConfig) -> bool:
    """Decide between JSON and console rendering."""
    if is_development_environment():
        return os.environ.get("BIRDLOG_JSON_LOGS", "false").lower() == "true"
    if config.logging.json_logs is not None:
        return config.logging.json_logs
    return True


def _configure_processors(config: BirdLogConfig) -> list:
    """Configure structlog processors based on config and environment."""
    extra_fields = {
        "service": "birdlog",
        "version": __version__,
        "deployment": get_deployment_environment(),
        **config.logging.extra_fields,  # Allow config to override/add fields
    }

    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(extra_fields),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    if _use_json_output(config):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    return processors


def _configure_handlers(config: BirdLogConfig) -> None:
    """Route standard-library logging to stdout at the configured level."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    # Lines are already rendered by structlog
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))


def configure_structlog(config: BirdLogConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The BirdLogConfig instance containing logging settings.
    """
    processors = _configure_processors(config)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config)

    logger = structlog.get_logger(__name__)
    logger.info(
        "Structured logging configured",
        version=__version__,
        log_level=config.logging.level,
        environment=get_deployment_environment(),
        json_output=_use_json_output(config),
    )
