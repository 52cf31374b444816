# noun_inflector/rules/__init__.py
"""
rules.
=====

Does: Load, parse and hold the four immutable rule tables (irregular pairs,
      uncountable patterns, plural rules, singular rules).
Exports: get_rule_tables, load_rule_table, RuleTables and the RuleTableError family.
Used by: noun_inflector.inflection.
"""

from __future__ import annotations

from .load_rules import (
    RuleFileNotFound,
    RulePatternError,
    RulesDirNotFound,
    RuleSyntaxError,
    RuleTableError,
    clear_rule_cache,
    load_rule_table,
    temp_rules_dir,
)
from .tables import (
    RuleTables,
    get_rule_tables,
    load_rule_tables,
    reset_rule_tables,
)
from .types import IDENTITY_MARKER, IrregularPair, Rule, RuleList

__all__ = [
    # types
    "IDENTITY_MARKER",
    "IrregularPair",
    "Rule",
    "RuleList",
    # loading
    "load_rule_table",
    "clear_rule_cache",
    "temp_rules_dir",
    # tables
    "RuleTables",
    "load_rule_tables",
    "get_rule_tables",
    "reset_rule_tables",
    # errors
    "RuleTableError",
    "RulesDirNotFound",
    "RuleFileNotFound",
    "RuleSyntaxError",
    "RulePatternError",
]
