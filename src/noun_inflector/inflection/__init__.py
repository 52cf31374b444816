# noun_inflector/inflection/__init__.py
"""
inflection.
==========

Does: Provide the noun-number engine: case restoration, irregular/uncountable
      lookups, the pattern transformer and the five public operations.
Exports: to_plural, to_singular, is_plural, is_singular, is_uncountable,
         apply_rules, restore_case, CaseStyle
"""

from __future__ import annotations

from .case import CaseStyle, restore_case
from .number import (
    is_plural,
    is_singular,
    is_uncountable,
    to_plural,
    to_singular,
)
from .transform import apply_rules

__all__ = [
    # number
    "to_plural",
    "to_singular",
    "is_plural",
    "is_singular",
    "is_uncountable",
    # engine pieces
    "apply_rules",
    "restore_case",
    "CaseStyle",
]
