"""Translation of phrases across multiple locales.

Dictionaries are created on first use of a locale and cached until the
locale is dropped.
"""

from typing import Dict, List, Optional, Sequence

from phrasebook.i18n.dictionary import Dictionary
from phrasebook.i18n.loader import LocaleFileLoader
from phrasebook.i18n.models import LocaleSource, OrderedPhraseLog
from phrasebook.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Service for translating phrases in any number of locales.

    Usage:
        translator = Translator([LocaleSource("locales/*.locale.json")])
        translator.lookup("en-US", "_metre")  # => "meter"

    Attributes:
        sources: Locale sources, in load order. Later files override earlier
            ones.
        dictionaries: Dictionaries created so far, by locale, in creation
            order.
    """

    def __init__(
        self,
        sources: Sequence[LocaleSource],
        loader: Optional[LocaleFileLoader] = None,
    ):
        """Initialize Translator. No file is read until a locale is used.

        Args:
            sources: Locale sources to load each dictionary from.
            loader: Loader handed to every dictionary.
        """
        self.sources = list(sources)
        self.loader = loader or LocaleFileLoader()
        self.dictionaries: Dict[str, Dictionary] = {}
        self._is_logging = False

    @property
    def is_logging(self) -> bool:
        return self._is_logging

    @property
    def loaded_locales(self) -> List[str]:
        return list(self.dictionaries)

    def start_logging(self) -> None:
        """Start logging lookups in every locale, including ones created later."""
        self._is_logging = True
        for dictionary in self.dictionaries.values():
            dictionary.start_logging()

    def stop_logging(self) -> None:
        """Stop logging lookups. Logs are kept; use clear_log() to empty them."""
        self._is_logging = False
        for dictionary in self.dictionaries.values():
            dictionary.stop_logging()

    def clear_log(self, locale: Optional[str] = None) -> None:
        """Clear the log of one locale, or of every locale if omitted."""
        if locale is None:
            for dictionary in self.dictionaries.values():
                dictionary.clear_log()
        elif locale in self.dictionaries:
            self.dictionaries[locale].clear_log()

    def get_log(self, locale: Optional[str] = None) -> List[str]:
        """Get the phrases looked up, once each, in the order first seen.

        Args:
            locale: Locale to get the log for. When omitted the logs of every
                locale are combined, so a phrase looked up in several locales
                appears once.

        Returns:
            List of phrases. Empty for a locale that was never used.
        """
        if locale is not None:
            dictionary = self.dictionaries.get(locale)
            return dictionary.get_log() if dictionary else []

        combined = OrderedPhraseLog()
        for dictionary in self.dictionaries.values():
            for phrase in dictionary.get_log():
                combined.add(phrase)
        return list(combined)

    def lookup(self, locale: str, phrase: str) -> str:
        """Translate a phrase into a locale.

        Args:
            locale: Locale in BCP 47 format.
            phrase: Phrase key to look up.

        Returns:
            Translated phrase.

        Raises:
            SourceReadError: If the locale is new and a source file fails to
                load.
        """
        return self._get_dictionary(locale).lookup(phrase)

    def trace(self, locale: str, phrase: str) -> str:
        """Explain which sources set a phrase in a locale, one line per source."""
        return self._get_dictionary(locale).trace(phrase)

    def drop_locale(self, locale: str) -> None:
        """Discard the cached dictionary for a locale.

        The next lookup reloads it from every source file. Its log and traces
        are lost.
        """
        if self.dictionaries.pop(locale, None) is not None:
            logger.debug("dropped_locale", locale=locale)

    def _get_dictionary(self, locale: str) -> Dictionary:
        dictionary = self.dictionaries.get(locale)
        if dictionary is None:
            dictionary = self._add_dictionary(locale)
        return dictionary

    def _add_dictionary(self, locale: str) -> Dictionary:
        logger.debug("adding_dictionary", locale=locale)
        dictionary = Dictionary(
            locale,
            self.sources,
            is_logging=self._is_logging,
            loader=self.loader,
        )
        self.dictionaries[locale] = dictionary
        return dictionary
