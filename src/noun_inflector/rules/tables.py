# src/noun_inflector/rules/tables.py
from __future__ import annotations

"""
rules.tables

Does: Build the four process-wide rule tables once, on first use, and hand out the
      same immutable RuleTables instance afterwards.
Returns: RuleTables, get_rule_tables(), reset_rule_tables().
Used by: inflection.lookup / inflection.number on every public call.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from noun_inflector.rules.load_rules import RuleTableError, load_rule_table
from noun_inflector.rules.types import IrregularPair, RuleList, UncountablePatterns

__all__ = ["RuleTables", "load_rule_tables", "get_rule_tables", "reset_rule_tables"]

log = logging.getLogger(__name__)

IRREGULAR_FILE = "irregular"
UNCOUNTABLE_FILE = "uncountable"
PLURAL_FILE = "plural"
SINGULAR_FILE = "singular"


@dataclass(frozen=True)
class RuleTables:
    irregular: tuple[IrregularPair, ...]
    uncountable: UncountablePatterns
    plural_rules: RuleList
    singular_rules: RuleList


def load_rule_tables(base_dir: Optional[Path] = None) -> RuleTables:
    """Does: Read and compile all four tables from base_dir (or the default rules dir)."""
    return RuleTables(
        irregular=load_rule_table(IRREGULAR_FILE, "pairs", base_dir=base_dir),
        uncountable=load_rule_table(UNCOUNTABLE_FILE, "patterns", base_dir=base_dir),
        plural_rules=load_rule_table(PLURAL_FILE, "rules", base_dir=base_dir),
        singular_rules=load_rule_table(SINGULAR_FILE, "rules", base_dir=base_dir),
    )


# ── Process-wide singleton ───────────────────────────────────────────────────
_INIT_LOCK = threading.Lock()
_TABLES: Optional[RuleTables] = None
_INIT_ERROR: Optional[RuleTableError] = None


def get_rule_tables() -> RuleTables:
    """
    Does: Return the shared tables, building them under a lock on first access.
          A failed build is remembered and re-raised; it is never retried.
    Returns: RuleTables
    """
    global _TABLES, _INIT_ERROR
    tables = _TABLES
    if tables is not None:
        return tables

    with _INIT_LOCK:
        if _TABLES is not None:
            return _TABLES
        if _INIT_ERROR is not None:
            raise _INIT_ERROR
        try:
            _TABLES = load_rule_tables()
        except RuleTableError as e:
            log.error("Rule tables failed to load: %s", e)
            _INIT_ERROR = e
            raise
        log.debug(
            "Rule tables ready: %d irregular, %d uncountable, %d plural, %d singular",
            len(_TABLES.irregular),
            len(_TABLES.uncountable),
            len(_TABLES.plural_rules),
            len(_TABLES.singular_rules),
        )
        return _TABLES


def reset_rule_tables() -> None:
    """Does: Forget the shared tables and any remembered failure (tests/hot reload only)."""
    global _TABLES, _INIT_ERROR
    with _INIT_LOCK:
        _TABLES = None
        _INIT_ERROR = None
