"""phrasebook - argument inspection, leveled logging and phrase translation.

Example:
    from phrasebook import LocaleSource, Translator

    translator = Translator([LocaleSource("locales/*.locale.json")])
    translator.lookup("en-US", "_metre")  # => "meter"
"""

from phrasebook.configuration import settings
from phrasebook.i18n import LocaleSource, Translator
from phrasebook.logging import get_logger
from phrasebook.utils import argv

__all__ = ["LocaleSource", "Translator", "argv", "get_logger", "settings"]
