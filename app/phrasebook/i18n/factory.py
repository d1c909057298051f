"""Factory functions for creating i18n components.

Builds translators from the configured locale patterns.
"""

from typing import Optional, Sequence

from phrasebook.configuration import Settings, settings as default_settings
from phrasebook.i18n.models import GlobOptions, LocaleSource
from phrasebook.i18n.translator import Translator
from phrasebook.logging import get_module_logger

logger = get_module_logger()


def sources_from_settings(settings: Optional[Settings] = None) -> list[LocaleSource]:
    """Build one LocaleSource per configured pattern, in configured order."""
    config = (settings or default_settings).i18n
    options = GlobOptions(root_dir=config.LOCALE_ROOT_DIR)
    return [
        LocaleSource(pattern=pattern, options=options)
        for pattern in config.LOCALE_PATTERNS
    ]


def create_translator(
    sources: Optional[Sequence[LocaleSource]] = None,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        sources: Locale sources (default: settings.i18n.LOCALE_PATTERNS
            resolved against settings.i18n.LOCALE_ROOT_DIR)
        settings: Settings to read (default: the settings singleton)

    Returns:
        Translator: Configured translator instance. No file is read until a
        locale is first used.

    Usage:
        # Use configured patterns
        translator = create_translator()

        # Custom sources
        translator = create_translator(
            sources=[LocaleSource("*.locale.json", GlobOptions(root_dir="/opt/locales"))]
        )
    """
    config = settings or default_settings
    if sources is None:
        sources = sources_from_settings(config)

    translator = Translator(sources)
    if config.i18n.LOG_LOOKUPS:
        translator.start_logging()

    logger.info(
        "translator_created",
        source_count=len(translator.sources),
        is_logging=translator.is_logging,
    )
    return translator
