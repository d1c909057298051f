"""i18n system - phrase translation with provenance tracing.

Looks up phrases per locale from layered locale definition files, follows
parent locales, records which file set each value, and derives a readable
value from the phrase key when no file defines it.

Main components:
- models: PhraseStore, PhraseEntry, TraceRecord, LocaleSource, GlobOptions
- loader: LocaleFileLoader and source resolution
- dictionary: Dictionary for a single locale
- translator: Translator over many locales
- factory: create_translator() from settings
"""

from phrasebook.i18n.dictionary import Dictionary
from phrasebook.i18n.exceptions import PhrasebookError, SourceReadError
from phrasebook.i18n.factory import create_translator
from phrasebook.i18n.loader import LocaleFileLoader, resolve_sources
from phrasebook.i18n.models import (
    GlobOptions,
    LocaleSource,
    OrderedPhraseLog,
    PhraseEntry,
    PhraseStore,
    TraceRecord,
    base_phrase,
)
from phrasebook.i18n.translator import Translator

__all__ = [
    "Dictionary",
    "GlobOptions",
    "LocaleFileLoader",
    "LocaleSource",
    "OrderedPhraseLog",
    "PhraseEntry",
    "PhraseStore",
    "PhrasebookError",
    "SourceReadError",
    "TraceRecord",
    "Translator",
    "base_phrase",
    "create_translator",
    "resolve_sources",
]
