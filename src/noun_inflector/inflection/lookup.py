# src/noun_inflector/inflection/lookup.py
"""
lookup.

Does: Exact-match irregular lookups and the uncountable-pattern test.
Returns: is_uncountable(), irregular_plural_of(), irregular_singular_of(), irregular_number().
Used by: inflection.number before falling back to pattern rules.
"""

from __future__ import annotations

from typing import Optional

from noun_inflector.rules.tables import RuleTables, get_rule_tables

__all__ = [
    "is_uncountable",
    "is_irregular",
    "irregular_plural_of",
    "irregular_singular_of",
    "irregular_number",
]


def is_irregular(lower: str, tables: RuleTables) -> bool:
    """Does: True iff `lower` equals either side of any irregular pair."""
    return any(lower == pair.singular or lower == pair.plural for pair in tables.irregular)


def is_uncountable(word: str, tables: Optional[RuleTables] = None) -> bool:
    """
    Does: Decide whether `word` is invariant under pluralization.
          Irregular words are never uncountable; otherwise any uncountable
          pattern found in the lowercased word is enough.
    Returns: bool
    """
    tables = tables or get_rule_tables()
    lower = word.lower()
    if is_irregular(lower, tables):
        return False
    return any(pattern.search(lower) for pattern in tables.uncountable)


def irregular_plural_of(lower: str, tables: RuleTables) -> Optional[str]:
    """Does: Plural of the first pair whose singular is `lower`. Returns: str or None."""
    for pair in tables.irregular:
        if lower == pair.singular:
            return pair.plural
    return None


def irregular_singular_of(lower: str, tables: RuleTables) -> Optional[str]:
    """Does: Singular of the first pair whose plural is `lower`. Returns: str or None."""
    for pair in tables.irregular:
        if lower == pair.plural:
            return pair.singular
    return None


def irregular_number(lower: str, tables: RuleTables, *, plural: bool) -> Optional[bool]:
    """
    Does: Answer "is `lower` plural?" (plural=True) or "is `lower` singular?"
          (plural=False) from the irregular table alone. Within each pair the
          opposite form is checked first, so a pair like them/them reads as
          not-plural and not-singular respectively.
    Returns: True/False when some pair decides it, None to fall through to rules.
    """
    for pair in tables.irregular:
        same, other = (pair.plural, pair.singular) if plural else (pair.singular, pair.plural)
        if lower == other:
            return False
        if lower == same:
            return True
    return None
