"""Exceptions raised by the phrase translation system."""


class PhrasebookError(Exception):
    """Base class for phrasebook errors."""


class SourceReadError(PhrasebookError):
    """A locale definition file could not be read or parsed.

    Attributes:
        path: Path of the file that failed to load.
        reason: Short description of the failure.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load locale file {path}: {reason}")
