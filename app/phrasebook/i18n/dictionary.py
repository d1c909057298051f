"""Dictionary for looking up phrases in a single locale."""

from typing import List, Optional, Sequence

from phrasebook.i18n.loader import LocaleFileLoader, resolve_sources
from phrasebook.i18n.models import LocaleSource, OrderedPhraseLog, PhraseStore
from phrasebook.logging import get_module_logger

logger = get_module_logger()


class Dictionary:
    """Phrases for one locale, loaded from an ordered list of sources.

    Files are loaded in the order the sources resolve to. A later file
    overrides the value an earlier file gave a phrase, and the trace keeps
    both.

    Attributes:
        sources: Locale sources the dictionary was loaded from.
    """

    def __init__(
        self,
        locale: str,
        sources: Sequence[LocaleSource],
        is_logging: bool = False,
        loader: Optional[LocaleFileLoader] = None,
    ):
        """Load every file matched by ``sources`` for ``locale``.

        Args:
            locale: A single locale in BCP 47 format (e.g., "en-US").
            sources: Locale sources, in load order.
            is_logging: Whether lookups are logged from the start.
            loader: Loader to read files with.

        Raises:
            SourceReadError: If a matched file cannot be read or parsed.
        """
        self._locale = locale
        self._is_logging = is_logging
        self._log = OrderedPhraseLog()
        self._phrases = PhraseStore()
        self.sources = list(sources)

        loader = loader or LocaleFileLoader()
        files = resolve_sources(self.sources)
        for file_path in files:
            loader.load(file_path, locale, self._phrases)

        logger.debug(
            "dictionary_loaded",
            locale=locale,
            file_count=len(files),
            phrase_count=len(self._phrases),
        )

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def is_logging(self) -> bool:
        return self._is_logging

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._phrases

    def start_logging(self) -> None:
        """Start logging each lookup made on this dictionary."""
        self._is_logging = True

    def stop_logging(self) -> None:
        """Stop logging lookups. The log is kept; use clear_log() to empty it."""
        self._is_logging = False

    def clear_log(self) -> None:
        self._log.clear()

    def get_log(self) -> List[str]:
        """Return the phrases looked up, once each, in the order first seen."""
        return list(self._log)

    def lookup(self, phrase: str) -> str:
        """Translate a phrase.

        Args:
            phrase: Phrase key to look up.

        Returns:
            The translated phrase, or one derived from the key when no source
            defines it.
        """
        if self._is_logging:
            self._log.add(phrase)
        return self._phrases.resolve(phrase)

    def trace(self, phrase: str) -> str:
        """Explain which sources set a phrase.

        Args:
            phrase: Phrase key to trace.

        Returns:
            One line per source, "<value> (<source>)", each overriding the
            lines before it.
        """
        self.lookup(phrase)
        return self._phrases.trace_of(phrase)
