"""Structlog configuration and logger setup.

All events go through the standard library logger named ``lingua`` and
carry ``library="lingua"``, so a host application can filter or silence
them without touching its own loggers.

Usage:
    from lingua.logging import get_module_logger

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Any, MutableMapping, Optional

import structlog
from structlog.stdlib import BoundLogger

from lingua.settings import get_settings

LIBRARY_NAME = "lingua"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def add_library_name(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor tagging every event with the library name."""
    event_dict.setdefault("library", LIBRARY_NAME)
    return event_dict


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the ``lingua`` logger.

    The level is set on the ``lingua`` standard library logger only; the
    root logger is given a plain handler if the host has not set one up.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        json_output: Optional override for JSON rendering. Defaults to
            settings.LOG_JSON if not provided.

    Returns:
        Logger for the ``lingua`` namespace
    """
    library_logger = logging.getLogger(LIBRARY_NAME)

    # Silence lingua under pytest, leave pytest's own capture alone
    if _is_test_environment():
        library_logger.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                add_library_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        return structlog.stdlib.get_logger(LIBRARY_NAME)

    settings = get_settings()
    render_json = json_output if json_output is not None else settings.LOG_JSON

    processors = [
        structlog.contextvars.merge_contextvars,
        add_library_name,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if render_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    library_logger.setLevel(
        getattr(logging, effective_log_level.upper(), logging.INFO)
    )
    logging.basicConfig(format="%(message)s")

    return structlog.stdlib.get_logger(LIBRARY_NAME)


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling lingua module.

    Binds ``library``, ``component`` (last part of the module name) and
    ``module_path``.

    Returns:
        Logger bound with the caller's module context

    Example:
        # In lingua/loader.py
        logger = get_module_logger()
        # context: {"library": "lingua", "component": "loader",
        #           "module_path": "lingua.loader"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None

    if module is None:
        return logger.bind(library=LIBRARY_NAME, component="unknown")

    module_name = module.__name__
    return logger.bind(
        library=LIBRARY_NAME,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
