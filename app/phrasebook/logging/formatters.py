"""Console processors for structured logging.

Processors add the uptime and a level symbol to each log entry so the
development console output reads like::

    0:00:00.071 ⚠ file_download_failed

Usage:
    from phrasebook.logging.formatters import add_uptime, add_level_symbol
"""

import os
import sys
import time
from typing import Any, Mapping, Optional

_PROCESS_STARTED_AT = time.monotonic()

LEVEL_SYMBOLS_UNICODE: dict[str, str] = {
    "trace": "☰",  # Trigram for heaven
    "debug": "●",  # Black circle
    "info": "ℹ",  # Information source
    "success": "✔",  # Heavy check mark
    "warning": "⚠",  # Warning sign
    "error": "✖",  # Heavy multiplication x
    "critical": "✖",
}

# Code page 437 characters only
LEVEL_SYMBOLS_FALLBACK: dict[str, str] = {
    "trace": "≡",
    "debug": "•",
    "info": "i",
    "success": "√",
    "warning": "‼",
    "error": "x",
    "critical": "x",
}

_UNICODE_TERMINALS = frozenset({"vscode", "Terminus-Sublime"})
_UNICODE_TERMS = frozenset({"xterm-256color", "alacritty"})


def is_unicode_supported(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
    encoding: Optional[str] = None,
) -> bool:
    """Check whether the console can display Unicode symbols.

    Args:
        environ: Environment to inspect. Defaults to ``os.environ``.
        platform: Platform name. Defaults to ``sys.platform``.
        encoding: Output encoding. Defaults to ``sys.stdout.encoding``.

    Returns:
        True if Unicode symbols are safe to print.
    """
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform
    if encoding is None:
        encoding = getattr(sys.stdout, "encoding", None) or ""

    if encoding and not encoding.lower().replace("-", "").startswith("utf"):
        return False

    if platform != "win32":
        # Linux console (kernel)
        return environ.get("TERM") != "linux"

    return (
        bool(environ.get("WT_SESSION"))
        or bool(environ.get("TERMINUS_SUBLIME"))
        or environ.get("ConEmuTask") == "{cmd::Cmder}"
        or environ.get("TERM_PROGRAM") in _UNICODE_TERMINALS
        or environ.get("TERM") in _UNICODE_TERMS
        or environ.get("TERMINAL_EMULATOR") == "JetBrains-JediTerm"
    )


def format_uptime(seconds: float) -> str:
    """Format elapsed seconds as ``h:mm:ss.sss`` (e.g., 65:05:01.321)."""
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{int(hours)}:{int(minutes):02d}:{secs:06.3f}"


def add_uptime(started_at: Optional[float] = None):
    """Create a processor that adds process uptime to log entries.

    Args:
        started_at: ``time.monotonic()`` reading to measure from. Defaults to
            the time this module was imported.

    Returns:
        A structlog processor function.
    """
    origin = _PROCESS_STARTED_AT if started_at is None else started_at

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["uptime"] = format_uptime(time.monotonic() - origin)
        return event_dict

    return processor


def add_level_symbol(unicode: Optional[bool] = None):
    """Create a processor that adds a symbol for the entry's level.

    Args:
        unicode: Force Unicode (True) or code page 437 (False) symbols.
            Detected with is_unicode_supported() when omitted.

    Returns:
        A structlog processor function.
    """
    if unicode is None:
        unicode = is_unicode_supported()
    symbols = LEVEL_SYMBOLS_UNICODE if unicode else LEVEL_SYMBOLS_FALLBACK

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        level = str(event_dict.get("level", method_name)).lower()
        symbol = symbols.get(level)
        if symbol is not None:
            event_dict["symbol"] = symbol
        return event_dict

    return processor
