"""General purpose helpers."""

from phrasebook.utils.argv import argv

__all__ = ["argv"]
