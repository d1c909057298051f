"""Phrase models for the i18n system.

Defines the per-locale phrase store, its entries with provenance, the
ordered usage log and the locale source descriptors.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Set, Union

FALLBACK_SOURCE = "fallback"
WILDCARD_LOCALE = "*"

# Longest first so "_qty" wins over "_"
MARKER_PREFIXES = ("_qty", "_knd", "_ins", "_")
SEPARATOR = "_"


def base_phrase(phrase_key: str) -> str:
    """Derive a readable phrase from a phrase key.

    Strips one leading marker token and turns the remaining separators into
    spaces.

    Args:
        phrase_key: Key such as "_a_test_phrase" or "_qty_length".

    Returns:
        Readable phrase (e.g., "a test phrase", " length").
    """
    for prefix in MARKER_PREFIXES:
        if phrase_key.startswith(prefix):
            phrase_key = phrase_key[len(prefix) :]
            break
    return phrase_key.replace(SEPARATOR, " ")


@dataclass(frozen=True)
class TraceRecord:
    """One contribution to a phrase's value.

    Attributes:
        value: Value supplied by the source.
        source: Source label ("<file>:<locale>" or "fallback").
    """

    value: str
    source: str

    def render(self) -> str:
        """Return the trace line, with forward slashes in the source."""
        source = self.source.replace("\\", "/")
        return f"{self.value} ({source})\n"


@dataclass
class PhraseEntry:
    """Resolved value of a phrase and every source that set it.

    The value is always that of the last trace record.
    """

    trace: List[TraceRecord]

    @property
    def value(self) -> str:
        return self.trace[-1].value

    @classmethod
    def create(cls, value: str, source: str) -> "PhraseEntry":
        return cls(trace=[TraceRecord(value=value, source=source)])

    def override(self, value: str, source: str) -> None:
        self.trace.append(TraceRecord(value=value, source=source))


class PhraseStore:
    """In-memory mapping of phrase key to PhraseEntry for one locale."""

    def __init__(self):
        self._entries: Dict[str, PhraseEntry] = {}

    def __contains__(self, phrase_key: object) -> bool:
        return phrase_key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, phrase_key: str) -> Optional[PhraseEntry]:
        return self._entries.get(phrase_key)

    def resolve(self, phrase_key: str) -> str:
        """Return the phrase value, synthesizing a fallback if unknown.

        Args:
            phrase_key: Phrase to resolve.

        Returns:
            The stored value, or a value derived from the key itself.
        """
        entry = self._entries.get(phrase_key)
        if entry is None:
            entry = PhraseEntry.create(base_phrase(phrase_key), FALLBACK_SOURCE)
            self._entries[phrase_key] = entry
        return entry.value

    def record_override(self, phrase_key: str, value: str, source: str) -> None:
        """Set a phrase value from a source. The last call for a key wins.

        Args:
            phrase_key: Phrase being set.
            value: New value.
            source: Source label recorded in the trace.
        """
        entry = self._entries.get(phrase_key)
        if entry is None:
            self._entries[phrase_key] = PhraseEntry.create(value, source)
        else:
            entry.override(value, source)

    def trace_of(self, phrase_key: str) -> str:
        """Render every source of a phrase, oldest first, one per line."""
        self.resolve(phrase_key)
        return "".join(record.render() for record in self._entries[phrase_key].trace)


class OrderedPhraseLog:
    """Set of phrases that remembers first-seen order."""

    def __init__(self):
        self._order: List[str] = []
        self._seen: Set[str] = set()

    def add(self, phrase: str) -> None:
        if phrase not in self._seen:
            self._seen.add(phrase)
            self._order.append(phrase)

    def clear(self) -> None:
        self._order.clear()
        self._seen.clear()

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)


@dataclass(frozen=True)
class GlobOptions:
    """Options applied when expanding a locale source pattern.

    Attributes:
        root_dir: Directory the pattern is resolved against. Matched paths
            are joined back onto it.
        recursive: Whether "**" matches across directories.
        include_hidden: Whether wildcards match names starting with ".".
    """

    root_dir: Optional[str] = None
    recursive: bool = True
    include_hidden: bool = False


@dataclass(frozen=True)
class LocaleSource:
    """A glob descriptor naming locale definition files.

    Attributes:
        pattern: One glob pattern, or several expanded in order.
        options: Glob options shared by every pattern.
    """

    pattern: Union[str, Sequence[str]]
    options: GlobOptions = field(default_factory=GlobOptions)

    @property
    def patterns(self) -> List[str]:
        if isinstance(self.pattern, str):
            return [self.pattern]
        return list(self.pattern)
