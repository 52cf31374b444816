# noun_inflector/rules/types.py
from __future__ import annotations

import re
from typing import NamedTuple

"""
types.py.

Does: Define the immutable in-memory shapes of the rule tables
(irregular pairs, pattern rules, rule lists).
"""

# Template meaning "this word is already in its target form".
IDENTITY_MARKER = "$0"


class IrregularPair(NamedTuple):
    singular: str
    plural: str


class Rule(NamedTuple):
    pattern: re.Pattern[str]
    replacement: str

    @property
    def is_identity(self) -> bool:
        return self.replacement == IDENTITY_MARKER


RuleList = tuple[Rule, ...]
UncountablePatterns = tuple[re.Pattern[str], ...]


__all__ = [
    "IDENTITY_MARKER",
    "IrregularPair",
    "Rule",
    "RuleList",
    "UncountablePatterns",
]

__docformat__ = "google"
