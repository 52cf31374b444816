# src/noun_inflector/inflection/number.py
# ──────────────────────────────────────────────────────────────
# Public noun-number API
# ──────────────────────────────────────────────────────────────
"""
number.

Does: Convert English nouns between singular and plural and test which form a
      word already is. Every call follows the same order:
      uncountable → irregular → pattern rules → case restoration.
Returns: to_plural(), to_singular(), is_plural(), is_singular(), is_uncountable().
Used by: The package root (noun_inflector.*).

All five functions are total over str input; the only exceptions that can
escape come from a broken rule table on first use (see rules.load_rules).
"""

from __future__ import annotations

from noun_inflector.inflection.case import restore_case
from noun_inflector.inflection.lookup import (
    irregular_number,
    irregular_plural_of,
    irregular_singular_of,
)
from noun_inflector.inflection.lookup import is_uncountable as _is_uncountable
from noun_inflector.inflection.transform import apply_rules
from noun_inflector.rules.tables import get_rule_tables

__all__ = [
    "is_uncountable",
    "to_plural",
    "is_plural",
    "to_singular",
    "is_singular",
]


def is_uncountable(word: str) -> bool:
    """
    Does: True when `word` has the same singular and plural surface form
          ("water", "sheep"). Irregular nouns are never uncountable.
    Returns: bool
    """
    return _is_uncountable(word, get_rule_tables())


def to_plural(word: str) -> str:
    """
    Does: Plural form of `word`, keeping its casing style ("Word" → "Words").
          Uncountable words come back unchanged.
    Returns: str
    """
    tables = get_rule_tables()
    if _is_uncountable(word, tables):
        return word
    plural = irregular_plural_of(word.lower(), tables)
    if plural is not None:
        return restore_case(word, plural)
    return restore_case(word, apply_rules(word, tables.plural_rules))


def to_singular(word: str) -> str:
    """
    Does: Singular form of `word`, keeping its casing style.
          Uncountable words come back unchanged.
    Returns: str
    """
    tables = get_rule_tables()
    if _is_uncountable(word, tables):
        return word
    singular = irregular_singular_of(word.lower(), tables)
    if singular is not None:
        return restore_case(word, singular)
    return restore_case(word, apply_rules(word, tables.singular_rules))


def is_plural(word: str) -> bool:
    """
    Does: True when `word` is already plural, i.e. pluralizing it changes nothing.
          Uncountable words are reported as neither plural nor singular.
    Returns: bool
    """
    tables = get_rule_tables()
    if _is_uncountable(word, tables):
        return False
    lower = word.lower()
    decided = irregular_number(lower, tables, plural=True)
    if decided is not None:
        return decided
    return apply_rules(lower, tables.plural_rules) == lower


def is_singular(word: str) -> bool:
    """
    Does: True when `word` is already singular, i.e. singularizing it changes nothing.
          Uncountable words are reported as neither plural nor singular.
    Returns: bool
    """
    tables = get_rule_tables()
    if _is_uncountable(word, tables):
        return False
    lower = word.lower()
    decided = irregular_number(lower, tables, plural=False)
    if decided is not None:
        return decided
    return apply_rules(lower, tables.singular_rules) == lower
