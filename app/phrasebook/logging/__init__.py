"""Structured logging infrastructure.

This package provides the logging configuration for phrasebook using
structlog, plus npm style level names and console processors.

Public API:
    - configure_logging(): Initialize logging
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - PhrasebookLogger: BoundLogger with trace() and success()
    - set_level(): Change the root verbosity (0-5 or a level name)
    - get_level(): Read the root verbosity

Formatters:
    - add_uptime(): Processor to add process uptime
    - add_level_symbol(): Processor to add a level symbol

Example:
    from phrasebook.logging import configure_logging, get_module_logger

    configure_logging(log_level="debug")

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from phrasebook.logging.formatters import (
    add_level_symbol,
    add_uptime,
    is_unicode_supported,
)
from phrasebook.logging.levels import (
    LOG_LEVEL_NAMES,
    TRACE,
    get_level,
    parse_log_level,
    set_level,
)
from phrasebook.logging.setup import (
    PhrasebookLogger,
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    # Setup
    "PhrasebookLogger",
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Levels
    "LOG_LEVEL_NAMES",
    "TRACE",
    "get_level",
    "parse_log_level",
    "set_level",
    # Formatters
    "add_level_symbol",
    "add_uptime",
    "is_unicode_supported",
]
