"""Structlog configuration and logger setup.

This module provides the logging configuration for phrasebook. It
configures structlog with callsite and exception processors, and renders
either a human friendly console line (development) or JSON (production).

Usage:
    from phrasebook.logging import configure_logging, get_module_logger

    # Configure logging at startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - phrasebook.configuration.Settings
    - phrasebook.logging.levels
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from phrasebook.configuration import Settings, settings
from phrasebook.logging.formatters import add_level_symbol, add_uptime
from phrasebook.logging.levels import (
    TRACE,
    LogLevel,
    resolve_verbosity,
    to_stdlib_level,
)


class PhrasebookLogger(BoundLogger):
    """BoundLogger with ``trace`` and ``success`` methods.

    ``trace`` logs at the TRACE level (verbosity 5) with the stack attached.
    ``success`` logs at INFO under the level name "success".
    """

    def trace(self, event: Optional[str] = None, *args, **kw):
        kw.setdefault("stack_info", True)
        return self._emit(TRACE, "trace", event, args, kw)

    def success(self, event: Optional[str] = None, *args, **kw):
        return self._emit(logging.INFO, "success", event, args, kw)

    def _emit(self, level: int, method_name: str, event, args, kw):
        if not self._logger.isEnabledFor(level):
            return None
        if args:
            kw["positional_args"] = args
        try:
            args, kw = self._process_event(method_name, event, kw)
        except structlog.DropEvent:
            return None
        return self._logger.log(level, *args, **kw)


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: LogLevel = None,
    is_production: Optional[bool] = None,
    config: Optional[Settings] = None,
) -> PhrasebookLogger:
    """Configure structured logging.

    Configures structlog with:
    - Context variable merging
    - File/line/function context
    - Exception formatting with stack traces
    - Uptime and level symbol columns on the development console
    - Test environment detection for log suppression

    Args:
        log_level: Optional override for the level (name such as "debug" or a
            verbosity 0-5). Defaults to ``--loglevel`` on the command line, then
            settings.LOG_LEVEL, then warn in production and info otherwise.
        is_production: Optional override for production mode. Controls JSON
            vs console output.
        config: Settings to read. Defaults to the settings singleton.

    Returns:
        Configured logger instance

    Example:
        logger = configure_logging()
        logger = configure_logging(log_level="debug", is_production=False)
    """
    config = config or settings

    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Minimal processors so loggers still work; nothing is emitted
        # because the root logger level is above CRITICAL
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=PhrasebookLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else config.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ],
            additional_ignores=["phrasebook.logging.setup"],
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(add_uptime())
        processors.append(add_level_symbol())
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=PhrasebookLogger,
        cache_logger_on_first_use=True,
    )

    verbosity = resolve_verbosity(log_level, config=config)
    logging.basicConfig(
        format="%(message)s",
        level=to_stdlib_level(verbosity),
        force=True,
    )

    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import)
logger: PhrasebookLogger = configure_logging()


def get_logger(name: Optional[str] = None) -> PhrasebookLogger:
    """Get a logger instance with automatic context detection.

    Args:
        name: Optional logger name (typically __name__ in calling module)

    Returns:
        Configured logger instance with context
    """
    if name:
        return logger.bind(logger_name=name)

    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        return logger.bind(logger_name=module.__name__)

    return logger.bind(logger_name="unknown")


def get_module_logger() -> PhrasebookLogger:
    """Get a logger for the calling module with full path context.

    Example:
        # In phrasebook/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "phrasebook.i18n.loader"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return logger.bind(component=parts[-1], module_path=module_name)

    return logger.bind(component="unknown")
