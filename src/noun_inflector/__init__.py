"""
noun_inflector
==============

Does: Convert English nouns between singular and plural, and tell whether a noun
      is uncountable, singular or plural.
Returns: The five public functions plus the rule-table error types.
"""

from noun_inflector.inflection import (
    is_plural,
    is_singular,
    is_uncountable,
    to_plural,
    to_singular,
)
from noun_inflector.rules import RuleTableError

__all__: list[str] = [
    "is_uncountable",
    "to_plural",
    "is_plural",
    "to_singular",
    "is_singular",
    "RuleTableError",
]
__version__ = "0.1.0"
__docformat__ = "google"
