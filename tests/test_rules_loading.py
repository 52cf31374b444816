# tests/test_rules_loading.py
"""Tests for rules/load_rules.py: line grammar, ordering, errors, cache and env override."""

from __future__ import annotations

import os
import re

import pytest

from noun_inflector.rules import load_rules as LR
from noun_inflector.rules.tables import load_rule_tables
from noun_inflector.rules.types import IrregularPair


# ---------- Fixtures ----------
@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset the rules-dir override and table cache between tests."""
    monkeypatch.delenv(LR.RULES_DIR_ENV, raising=False)
    LR.clear_rule_cache()
    yield
    LR.clear_rule_cache()


@pytest.fixture
def rules_dir(tmp_path):
    """Provide an isolated rules/ dir."""
    d = tmp_path / "rules"
    d.mkdir()
    return d


def _write(d, name, text):
    p = d / f"{name}.txt"
    p.write_text(text, encoding="utf-8")
    return p


# ---------- pairs ----------
def test_pairs_keep_declaration_order_and_strip_quotes(rules_dir):
    _write(rules_dir, "irregular", '"child" = "children"\n\n# comment\nfoot=feet\n  "ox"  =  "oxen"  \n')
    pairs = LR.load_rule_table("irregular", "pairs", base_dir=rules_dir)
    assert pairs == (
        IrregularPair("child", "children"),
        IrregularPair("foot", "feet"),
        IrregularPair("ox", "oxen"),
    )


def test_pairs_reject_empty_plural(rules_dir):
    _write(rules_dir, "irregular", '"child" = ""\n')
    with pytest.raises(LR.RuleSyntaxError):
        LR.load_rule_table("irregular", "pairs", base_dir=rules_dir)


# ---------- rules ----------
def test_rules_are_reversed(rules_dir):
    _write(rules_dir, "plural", '"s?$" = "s"\n"(x)$" = "$1es"\n"eaux$" = "$0"\n')
    rules = LR.load_rule_table("plural", "rules", base_dir=rules_dir)
    assert [r.pattern.pattern for r in rules] == ["eaux$", "(x)$", "s?$"]
    assert [r.replacement for r in rules] == ["$0", "$1es", "s"]
    assert rules[0].is_identity
    assert not rules[1].is_identity


def test_rules_compile_case_insensitive(rules_dir):
    _write(rules_dir, "plural", '"(x)$" = "$1es"\n')
    (rule,) = LR.load_rule_table("plural", "rules", base_dir=rules_dir)
    assert rule.pattern.flags & re.IGNORECASE
    assert rule.pattern.search("BOX")


def test_rules_allow_empty_template(rules_dir):
    _write(rules_dir, "singular", '"s$" = ""\n')
    (rule,) = LR.load_rule_table("singular", "rules", base_dir=rules_dir)
    assert rule.replacement == ""


def test_rules_split_on_last_separator(rules_dir):
    _write(rules_dir, "plural", '"a(?=b)" = "c"\n')
    (rule,) = LR.load_rule_table("plural", "rules", base_dir=rules_dir)
    assert rule.pattern.pattern == "a(?=b)"
    assert rule.replacement == "c"


# ---------- patterns ----------
def test_patterns_keep_order(rules_dir):
    _write(rules_dir, "uncountable", '"^water$"\n\n"sheep$"\n')
    patterns = LR.load_rule_table("uncountable", "patterns", base_dir=rules_dir)
    assert [p.pattern for p in patterns] == ["^water$", "sheep$"]
    assert all(p.flags & re.IGNORECASE for p in patterns)


# ---------- errors ----------
def test_missing_separator_reports_line(rules_dir):
    _write(rules_dir, "plural", '"s?$" = "s"\n\n"(x)$" "$1es"\n')
    with pytest.raises(LR.RuleSyntaxError) as exc:
        LR.load_rule_table("plural", "rules", base_dir=rules_dir)
    assert exc.value.lineno == 3
    assert exc.value.file_name == "plural.txt"
    assert "plural.txt:3" in str(exc.value)
    assert isinstance(exc.value, LR.RuleTableError)
    assert isinstance(exc.value, ValueError)


def test_invalid_regex_raises_pattern_error(rules_dir):
    _write(rules_dir, "plural", '"(unclosed" = "x"\n')
    with pytest.raises(LR.RulePatternError) as exc:
        LR.load_rule_table("plural", "rules", base_dir=rules_dir)
    assert isinstance(exc.value.__cause__, re.error)
    assert isinstance(exc.value, LR.RuleTableError)


def test_missing_file_and_dir(rules_dir, tmp_path):
    with pytest.raises(LR.RuleFileNotFound):
        LR.load_rule_table("plural", "rules", base_dir=rules_dir)
    with pytest.raises(LR.RulesDirNotFound):
        LR.load_rule_table("plural", "rules", base_dir=tmp_path / "nope")


def test_refuses_paths_outside_rules_dir(rules_dir, tmp_path):
    _write(tmp_path, "outside", '"a" = "b"\n')
    with pytest.raises(LR.RuleFileNotFound):
        LR.load_rule_table("../outside", "rules", base_dir=rules_dir)


def test_unknown_mode(rules_dir):
    _write(rules_dir, "plural", '"a" = "b"\n')
    with pytest.raises(ValueError):
        LR.load_rule_table("plural", "dict", base_dir=rules_dir)  # type: ignore[call-overload]


# ---------- cache & env ----------
def test_cache_hit_returns_same_object(rules_dir):
    _write(rules_dir, "plural", '"a" = "b"\n')
    first = LR.load_rule_table("plural", "rules", base_dir=rules_dir)
    second = LR.load_rule_table("plural.txt", "rules", base_dir=rules_dir)
    assert first is second
    LR.clear_rule_cache()
    assert LR.load_rule_table("plural", "rules", base_dir=rules_dir) is not first


def test_temp_rules_dir_overrides_and_restores(rules_dir):
    _write(rules_dir, "plural", '"zz$" = "zzes"\n')
    with LR.temp_rules_dir(rules_dir):
        rules = LR.load_rule_table("plural", "rules")
        assert [r.pattern.pattern for r in rules] == ["zz$"]
    assert LR.RULES_DIR_ENV not in os.environ
    packaged = LR.load_rule_table("plural", "rules")
    assert len(packaged) > 1


# ---------- packaged tables ----------
def test_packaged_tables_load():
    tables = load_rule_tables()
    assert tables.irregular[0] == IrregularPair("i", "we")
    assert tables.plural_rules[0].pattern.pattern == "^thou$"
    assert tables.plural_rules[-1].pattern.pattern == "s?$"
    assert tables.singular_rules[0].pattern.pattern == "men$"
    assert tables.singular_rules[-1].pattern.pattern == "s$"
    assert any(p.pattern == "sheep$" for p in tables.uncountable)
