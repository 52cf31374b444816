"""
transform.py.

Does: Apply the first matching pattern rule of a RuleList to a word, with
      $1/$2 capture-group substitution.
Used by: inflection.number for to_plural/to_singular and the is_* predicates.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from noun_inflector.rules.types import Rule
from noun_inflector.utils.log import debug, enabled

__all__ = ["apply_rules", "expand_template"]

_PLACEHOLDERS = ("$1", "$2")


def _group_text(match: re.Match[str], index: int) -> str:
    # absent or non-participating groups substitute as ""
    if index > match.re.groups:
        return ""
    return match.group(index) or ""


def expand_template(template: str, match: re.Match[str]) -> str:
    """Does: Replace $1 then $2 in `template` with the match's group texts."""
    for index, placeholder in enumerate(_PLACEHOLDERS, start=1):
        template = template.replace(placeholder, _group_text(match, index))
    return template


def apply_rules(word: str, rules: Iterable[Rule]) -> str:
    """
    Does: Search `rules` in order; the first rule whose pattern is found anywhere in
          `word` decides the result:
          - identity marker "$0" → `word` unchanged
          - otherwise → text before the match + expanded template
            (the matched span and anything after it are replaced)
    Returns: Transformed word, or `word` unchanged when no rule matches.
    """
    for rule in rules:
        match = rule.pattern.search(word)
        if match is None:
            continue
        if rule.is_identity:
            result = word
        else:
            result = word[: match.start()] + expand_template(rule.replacement, match)
        if enabled("rules"):
            debug(f"{word!r} ~ /{rule.pattern.pattern}/ → {result!r}", topic="rules")
        return result
    return word
