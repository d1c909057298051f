"""Locale definition file loading.

Locale files share one layout, in JSON or YAML:

    locales:
      "*":
        phrases: {_metre: metre}
      en-GB:
        phrases: {_imperial_gallons: Gallons}
      en-US:
        parent: en-GB
        phrases: {_metre: meter}

For a target locale the wildcard block is applied first, then the target
block. Each block applies its parent chain before its own phrases.
"""

import glob
import json
import os
from typing import Any, Dict, Iterable, List, Set

import yaml

from phrasebook.i18n.exceptions import SourceReadError
from phrasebook.i18n.models import WILDCARD_LOCALE, LocaleSource, PhraseStore
from phrasebook.logging import get_module_logger

logger = get_module_logger()


def resolve_source(source: LocaleSource) -> List[str]:
    """Expand one source descriptor to the files it matches.

    Matches from every pattern of the descriptor are de-duplicated and
    sorted.

    Args:
        source: Descriptor to expand.

    Returns:
        Normalised file paths, joined onto ``root_dir`` when one is set.
    """
    options = source.options
    matches: Set[str] = set()
    for pattern in source.patterns:
        found = glob.glob(
            pattern,
            root_dir=options.root_dir,
            recursive=options.recursive,
            include_hidden=options.include_hidden,
        )
        for match in found:
            if options.root_dir:
                match = os.path.join(options.root_dir, match)
            if os.path.isfile(match):
                matches.add(os.path.normpath(match))
    files = sorted(matches)
    logger.debug(
        "locale_source_resolved",
        patterns=source.patterns,
        root_dir=options.root_dir,
        file_count=len(files),
    )
    return files


def resolve_sources(sources: Iterable[LocaleSource]) -> List[str]:
    """Expand descriptors to files in load order: descriptor order, then match order."""
    files: List[str] = []
    for source in sources:
        files.extend(resolve_source(source))
    return files


def read_locale_file(file_path: str) -> Dict[str, Any]:
    """Read and parse a locale file, returning its ``locales`` mapping.

    Files ending in ``.json`` are parsed as JSON, anything else as YAML.

    Raises:
        SourceReadError: If the file cannot be read, cannot be parsed, or has
            no ``locales`` mapping.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            if file_path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        logger.error("locale_file_read_error", file=file_path, error=str(e))
        raise SourceReadError(file_path, str(e)) from e
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error("locale_file_parse_error", file=file_path, error=str(e))
        raise SourceReadError(file_path, f"invalid structured data: {e}") from e

    locales = data.get("locales") if isinstance(data, dict) else None
    if not isinstance(locales, dict):
        logger.error("locale_file_missing_locales", file=file_path)
        raise SourceReadError(file_path, "missing 'locales' mapping")
    return locales


def _locale_block(locales: Dict[str, Any], key: str, file_path: str) -> Dict[str, Any]:
    """Return the block for ``key``. An empty block (``en-US:`` in YAML) is ``{}``.

    Raises:
        SourceReadError: If the block is not a mapping.
    """
    block = locales[key]
    if block is None:
        return {}
    if not isinstance(block, dict):
        logger.error("locale_block_invalid", file=file_path, locale_key=key)
        raise SourceReadError(file_path, f"locale '{key}' must be a mapping")
    return block


class LocaleFileLoader:
    """Feeds the phrases one locale sees in a locale file into a PhraseStore."""

    def load(self, file_path: str, target_locale: str, store: PhraseStore) -> None:
        """Apply the wildcard and ``target_locale`` blocks of a file.

        Args:
            file_path: Locale file to read.
            target_locale: Locale being loaded (e.g., "en-US").
            store: Store receiving the phrases.

        Raises:
            SourceReadError: If the file cannot be read or parsed, or a locale
                block, its parent or its phrases have the wrong shape.
        """
        logger.debug("load_phrases", file=file_path, locale=target_locale)
        locales = read_locale_file(file_path)
        logger.debug("locales_found", file=file_path, locale_count=len(locales))

        applied: Set[str] = set()
        for locale_key in (WILDCARD_LOCALE, target_locale):
            logger.debug("inspecting_locale", file=file_path, locale_key=locale_key)
            for key in self._parent_chain(locales, locale_key, file_path):
                if key in applied:
                    continue
                applied.add(key)
                self._apply_phrases(locales, key, file_path, store)

    def _parent_chain(
        self, locales: Dict[str, Any], locale_key: str, file_path: str
    ) -> List[str]:
        """Return ``locale_key`` and its ancestors in the file, oldest first.

        The walk stops at a missing parent, or at a key already in the chain.
        """
        chain: List[str] = []
        key = locale_key
        while key in locales:
            if key in chain:
                logger.warning(
                    "locale_parent_cycle_detected",
                    file=file_path,
                    locale_key=locale_key,
                    chain=chain,
                )
                break
            chain.append(key)
            parent = _locale_block(locales, key, file_path).get("parent")
            if parent is None:
                break
            if not isinstance(parent, str):
                logger.error("locale_parent_invalid", file=file_path, locale_key=key)
                raise SourceReadError(
                    file_path, f"parent of locale '{key}' must be a string"
                )
            if parent not in locales:
                logger.debug(
                    "locale_parent_missing",
                    file=file_path,
                    locale_key=key,
                    parent=parent,
                )
                break
            key = parent
        chain.reverse()
        return chain

    def _apply_phrases(
        self,
        locales: Dict[str, Any],
        key: str,
        file_path: str,
        store: PhraseStore,
    ) -> None:
        phrases = _locale_block(locales, key, file_path).get("phrases")
        if not phrases:
            return
        if not isinstance(phrases, dict):
            logger.error("locale_phrases_invalid", file=file_path, locale_key=key)
            raise SourceReadError(
                file_path, f"phrases of locale '{key}' must be a mapping"
            )
        source = f"{file_path}:{key}"
        logger.debug("phrases_found", source=source, phrase_count=len(phrases))
        for phrase_key, value in phrases.items():
            store.record_override(phrase_key, str(value), source)
