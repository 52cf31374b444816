# src/noun_inflector/rules/load_rules.py

"""Load the text rule tables from a <data/> directory with caching and typed parsing.

Modes:
- "pairs"     -> tuple[IrregularPair, ...] in declaration order
- "rules"     -> RuleList, REVERSED (last declared rule is tried first)
- "patterns"  -> tuple[re.Pattern, ...] in declaration order

Line grammar: `left = right` (pairs/rules) or a bare pattern (patterns).
Whitespace and surrounding double quotes are stripped, blank lines and
lines starting with '#' are skipped.
"""

from __future__ import annotations

import logging
import os
import re
import threading
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, overload

from noun_inflector.rules.types import IrregularPair, Rule, RuleList, UncountablePatterns

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["pairs", "rules", "patterns"]
__all__ = [
    "Mode",
    "RULES_DIR_ENV",
    "load_rule_table",
    "clear_rule_cache",
    "temp_rules_dir",
    "RuleTableError",
    "RulesDirNotFound",
    "RuleFileNotFound",
    "RuleSyntaxError",
    "RulePatternError",
]

RULES_DIR_ENV = "NOUN_INFLECTOR_RULES_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class RuleTableError(Exception):
    """Base class for every rule-table configuration fault."""


class RulesDirNotFound(RuleTableError, FileNotFoundError):
    """Raise when the rules directory does not exist."""


class RuleFileNotFound(RuleTableError, FileNotFoundError):
    """Raise when the requested rule file cannot be read or resolved."""


class RuleSyntaxError(RuleTableError, ValueError):
    """Raise when a rule line has no separator or an empty pattern."""

    def __init__(self, file_name: str, lineno: int, line: str, reason: str):
        self.file_name = file_name
        self.lineno = lineno
        self.line = line
        super().__init__(f"{file_name}:{lineno}: {reason}: {line!r}")


class RulePatternError(RuleTableError, ValueError):
    """Raise when a rule pattern is not a valid regular expression."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, mode, encoding
_TABLE_CACHE: dict[tuple[Path, float, str, str], Any] = {}

_PACKAGED_RULES_DIR = Path(__file__).resolve().parent.parent / "data"
_QUOTE = '"'


def clear_rule_cache() -> None:
    """Empty the in-memory table cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _TABLE_CACHE.clear()
        log.debug("Rule table cache cleared.")


def _env_rules_dir() -> Path | None:
    """Resolve rules dir from env if set."""
    v = os.environ.get(RULES_DIR_ENV)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve_rules_dir(base_dir: Path | None) -> Path:
    """Explicit base_dir > env override > packaged data directory."""
    rules_dir = (base_dir or _env_rules_dir() or _PACKAGED_RULES_DIR).resolve()
    if not rules_dir.is_dir():
        raise RulesDirNotFound(f"Rules directory not found: {rules_dir}")
    return rules_dir


def _clean(s: str) -> str:
    return s.strip().strip(_QUOTE)


def _compile(pattern: str, file_name: str, lineno: int) -> re.Pattern[str]:
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise RulePatternError(
            f"{file_name}:{lineno}: invalid pattern {pattern!r}: {e}"
        ) from e


def _iter_lines(text: str):
    """Yield (lineno, stripped line) for every meaningful line."""
    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield lineno, line


def _split_pair(line: str, file_name: str, lineno: int) -> tuple[str, str]:
    # templates never contain '=', patterns might
    left, sep, right = line.rpartition("=")
    if not sep:
        raise RuleSyntaxError(file_name, lineno, line, "missing '=' separator")
    left, right = _clean(left), _clean(right)
    if not left:
        raise RuleSyntaxError(file_name, lineno, line, "empty left-hand side")
    return left, right


def _parse_pairs(text: str, file_name: str) -> tuple[IrregularPair, ...]:
    pairs: list[IrregularPair] = []
    for lineno, line in _iter_lines(text):
        singular, plural = _split_pair(line, file_name, lineno)
        if not plural:
            raise RuleSyntaxError(file_name, lineno, line, "empty plural form")
        pairs.append(IrregularPair(singular, plural))
    return tuple(pairs)


def _parse_rules(text: str, file_name: str) -> RuleList:
    rules: list[Rule] = []
    for lineno, line in _iter_lines(text):
        pattern, replacement = _split_pair(line, file_name, lineno)
        rules.append(Rule(_compile(pattern, file_name, lineno), replacement))
    rules.reverse()
    return tuple(rules)


def _parse_patterns(text: str, file_name: str) -> UncountablePatterns:
    patterns: list[re.Pattern[str]] = []
    for lineno, line in _iter_lines(text):
        pattern = _clean(line)
        if not pattern:
            raise RuleSyntaxError(file_name, lineno, line, "empty pattern")
        patterns.append(_compile(pattern, file_name, lineno))
    return tuple(patterns)


_PARSERS = {
    "pairs": _parse_pairs,
    "rules": _parse_rules,
    "patterns": _parse_patterns,
}


@overload
def load_rule_table(
    file: str | os.PathLike[str],
    mode: Literal["pairs"],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> tuple[IrregularPair, ...]: ...
@overload
def load_rule_table(
    file: str | os.PathLike[str],
    mode: Literal["rules"],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> RuleList: ...
@overload
def load_rule_table(
    file: str | os.PathLike[str],
    mode: Literal["patterns"],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> UncountablePatterns: ...


def load_rule_table(
    file: str | os.PathLike[str],
    mode: Mode,
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> Any:
    """Load <rules>/<file>.txt, parse it according to mode, and cache the result."""
    parser = _PARSERS.get(mode)
    if parser is None:
        raise ValueError(f"Unknown mode '{mode}'")

    rules_dir = _resolve_rules_dir(base_dir)

    # Normalize file path and enforce staying under rules_dir
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".txt") else f"{file_str}.txt"
    path = (rules_dir / file_name).resolve()
    try:
        path.relative_to(rules_dir)
    except ValueError as e:
        raise RuleFileNotFound(
            f"Refusing to access file outside rules dir: {path} (base={rules_dir})"
        ) from e

    if not path.is_file():
        raise RuleFileNotFound(f"Rule file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise RuleFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding)
    with _CACHE_LOCK:
        if cache_key in _TABLE_CACHE:
            log.debug("Rule cache HIT: %s (mode=%s)", path.name, mode)
            return _TABLE_CACHE[cache_key]

    try:
        text = path.read_text(encoding=encoding, errors="strict")
    except (OSError, UnicodeDecodeError) as e:
        raise RuleFileNotFound(f"Cannot read {path}: {e}") from e

    result = parser(text, path.name)

    with _CACHE_LOCK:
        _TABLE_CACHE[cache_key] = result
        log.debug(
            "Rule cache MISS → STORED: %s (mode=%s, entries=%d)", path.name, mode, len(result)
        )
    return result


# ── Context manager to temporarily override the rules directory ──────────────
class temp_rules_dir:
    """Temporarily set the rules directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_rules_dir:
        self._old = os.environ.get(RULES_DIR_ENV)
        os.environ[RULES_DIR_ENV] = self._new
        clear_rule_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(RULES_DIR_ENV, None)
        else:
            os.environ[RULES_DIR_ENV] = self._old
        clear_rule_cache()
