"""Unit tests for phrasebook.logging.levels module."""

import logging

import pytest

from phrasebook.logging.levels import (
    LOG_LEVEL_NAMES,
    TRACE,
    default_verbosity,
    from_stdlib_level,
    get_level,
    parse_log_level,
    resolve_verbosity,
    set_level,
    to_stdlib_level,
)


@pytest.mark.unit
class TestParseLogLevel:
    """Test suite for parse_log_level."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("silent", 0),
            ("error", 1),
            ("warn", 2),
            ("notice", 3),
            ("http", 3),
            ("info", 3),
            ("success", 3),
            ("debug", 4),
            ("verbose", 4),
            ("trace", 5),
            ("silly", 5),
        ],
    )
    def test_names(self, name, expected):
        """npm style names map to verbosities."""
        assert parse_log_level(name, 3) == expected
        assert LOG_LEVEL_NAMES[name] == expected

    def test_names_are_case_insensitive(self):
        """Names are matched regardless of case and padding."""
        assert parse_log_level(" DEBUG ", 3) == 4

    @pytest.mark.parametrize("level,expected", [(0, 0), (5, 5), ("2", 2), (4.0, 4)])
    def test_numbers(self, level, expected):
        """Numbers 0-5 and numeric strings are accepted."""
        assert parse_log_level(level, 3) == expected

    @pytest.mark.parametrize("level", [True, False, None, "loud", 6, -2, "2.5"])
    def test_unrecognised_uses_default(self, level):
        """Bools and unknown values fall back to the default."""
        assert parse_log_level(level, 2) == 2


@pytest.mark.unit
class TestVerbosityMapping:
    """Test suite for verbosity to stdlib level mapping."""

    def test_default_verbosity(self):
        """Production defaults to warn, development to info."""
        assert default_verbosity(True) == 2
        assert default_verbosity(False) == 3

    @pytest.mark.parametrize(
        "verbosity,level",
        [
            (0, logging.CRITICAL + 1),
            (1, logging.ERROR),
            (2, logging.WARNING),
            (3, logging.INFO),
            (4, logging.DEBUG),
            (5, TRACE),
        ],
    )
    def test_round_trip(self, verbosity, level):
        """Each verbosity maps to a stdlib level and back."""
        assert to_stdlib_level(verbosity) == level
        assert from_stdlib_level(level) == verbosity

    def test_trace_level_registered(self):
        """TRACE has a name in the logging module."""
        assert logging.getLevelName(TRACE) == "TRACE"


@pytest.mark.unit
class TestResolveVerbosity:
    """Test suite for resolve_verbosity precedence."""

    def test_explicit_level_first(self, mock_settings):
        """An explicit level beats the command line and settings."""
        mock_settings.LOG_LEVEL = "error"
        assert resolve_verbosity("debug", ["--loglevel", "silent"], mock_settings) == 4

    def test_command_line_second(self, mock_settings):
        """--loglevel beats settings."""
        mock_settings.LOG_LEVEL = "error"
        assert resolve_verbosity(None, ["--loglevel", "trace"], mock_settings) == 5

    def test_settings_third(self, mock_settings):
        """settings.LOG_LEVEL is used when nothing else is given."""
        mock_settings.LOG_LEVEL = "error"
        assert resolve_verbosity(None, [], mock_settings) == 1

    def test_environment_default(self, mock_settings):
        """The environment default applies last."""
        assert resolve_verbosity(None, [], mock_settings) == 3
        mock_settings.is_production = True
        assert resolve_verbosity(None, [], mock_settings) == 2

    def test_loglevel_without_value(self, mock_settings):
        """A bare --loglevel flag is ignored."""
        assert resolve_verbosity(None, ["--loglevel"], mock_settings) == 3


@pytest.mark.unit
@pytest.mark.usefixtures("restore_root_level")
class TestSetLevel:
    """Test suite for set_level and get_level."""

    def test_set_level_by_name(self):
        """set_level() accepts names and updates the root logger."""
        assert set_level("debug", args=[]) == 4
        assert logging.root.level == logging.DEBUG
        assert get_level() == 4

    def test_set_level_by_number(self):
        """set_level() accepts numbers."""
        set_level(0, args=[])
        assert logging.root.level == logging.CRITICAL + 1
        assert get_level() == 0

    def test_reset_reads_command_line(self):
        """-1 resets to the level given on the command line."""
        set_level("error", args=[])
        assert set_level(-1, args=["--loglevel", "verbose"]) == 4
        assert get_level() == 4

    def test_unknown_uses_resolved_default(self):
        """An unknown level uses the resolved default."""
        assert set_level("nonsense", args=["--loglevel", "warn"]) == 2
