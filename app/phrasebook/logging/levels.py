"""Log level names and verbosity resolution.

Verbosity runs from 0 (silent) to 5 (trace). npm style level words are
accepted as aliases so ``--loglevel verbose`` works as expected:

    0 silent
    1 error
    2 warn
    3 notice, http, info, success
    4 debug, verbose
    5 trace, silly

Usage:
    from phrasebook.logging.levels import set_level, get_level

    set_level("debug")
    get_level()  # => 4
"""

import logging
from typing import Optional, Sequence, Union

from phrasebook.configuration import Settings, settings
from phrasebook.utils.argv import argv

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_LEVEL_NAMES: dict[str, int] = {
    "silent": 0,
    "error": 1,
    "warn": 2,
    "warning": 2,
    "notice": 3,
    "http": 3,
    "info": 3,
    "success": 3,
    "debug": 4,
    "verbose": 4,
    "trace": 5,
    "silly": 5,
}

VERBOSITY_TO_LEVEL: dict[int, int] = {
    0: logging.CRITICAL + 1,
    1: logging.ERROR,
    2: logging.WARNING,
    3: logging.INFO,
    4: logging.DEBUG,
    5: TRACE,
}

LogLevel = Union[int, str, bool, None]


def default_verbosity(is_production: bool) -> int:
    """Return the default verbosity: warn in production, info otherwise."""
    return 2 if is_production else 3


def parse_log_level(level: LogLevel, default: int) -> int:
    """Convert a level name, number or flag to a verbosity between 0 and 5.

    Args:
        level: Level name (e.g., "warn"), number 0-5, numeric string, or a
            bool. A bool means "use the default".
        default: Verbosity to use when ``level`` is not recognised.

    Returns:
        Verbosity between 0 and 5.
    """
    if level is None or isinstance(level, bool):
        return default
    if isinstance(level, str):
        name = level.strip().lower()
        if name in LOG_LEVEL_NAMES:
            return LOG_LEVEL_NAMES[name]
    try:
        value = float(level)
    except (TypeError, ValueError):
        return default
    if value.is_integer() and 0 <= value <= 5:
        return int(value)
    return default


def to_stdlib_level(verbosity: int) -> int:
    """Map a verbosity to a standard library logging level."""
    return VERBOSITY_TO_LEVEL[verbosity]


def from_stdlib_level(level: int) -> int:
    """Map a standard library logging level back to a verbosity."""
    return max(
        (verbosity for verbosity, value in VERBOSITY_TO_LEVEL.items() if value >= level),
        default=0,
    )


def resolve_verbosity(
    level: LogLevel = None,
    args: Optional[Sequence[str]] = None,
    config: Optional[Settings] = None,
) -> int:
    """Work out the verbosity to run with.

    Precedence is the explicit ``level``, then ``--loglevel`` on the command
    line, then ``LOG_LEVEL`` from settings, then the environment default.

    Args:
        level: Explicit level, if any.
        args: Command line to scan. Defaults to ``sys.argv[1:]``.
        config: Settings to read. Defaults to the settings singleton.

    Returns:
        Verbosity between 0 and 5.
    """
    config = config or settings
    default = default_verbosity(config.is_production)
    if level is not None:
        return parse_log_level(level, default)
    cli_level = argv("--loglevel", args)
    if not isinstance(cli_level, bool):
        return parse_log_level(cli_level, default)
    if config.LOG_LEVEL:
        return parse_log_level(config.LOG_LEVEL, default)
    return default


def set_level(level: LogLevel, args: Optional[Sequence[str]] = None) -> int:
    """Set the root logging level.

    Args:
        level: Level name or number 0-5. -1 resets to the level given on the
            command line (or the configured default).
        args: Command line to scan when resetting.

    Returns:
        The verbosity now in effect.
    """
    if level in (-1, "-1") and not isinstance(level, bool):
        verbosity = resolve_verbosity(args=args)
    else:
        verbosity = parse_log_level(level, resolve_verbosity(args=args))
    logging.root.setLevel(to_stdlib_level(verbosity))
    return verbosity


def get_level() -> int:
    """Return the current verbosity (0-5) of the root logger."""
    return from_stdlib_level(logging.root.level)
