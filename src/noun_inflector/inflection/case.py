# src/noun_inflector/inflection/case.py
from __future__ import annotations

"""
inflection.case
===============

Does: Infer the letter-casing style of a word and reapply it to a derived word.
Returns: CaseStyle, classify_case(), apply_case(), restore_case().
Used By: inflection.number after every irregular lookup or rule transform.

The classification is ordered: identical, lowercase, UPPERCASE, Capitalized,
camelCase. Anything else is treated as lowercase.
"""

from enum import Enum

__all__ = ["CaseStyle", "classify_case", "apply_case", "restore_case", "camel_case"]
__docformat__ = "google"


class CaseStyle(Enum):
    IDENTICAL = "identical"
    LOWER = "lower"
    UPPER = "upper"
    CAPITALIZED = "capitalized"
    CAMEL = "camel"
    UNKNOWN = "unknown"


def _split_words(s: str) -> list[str]:
    """Does: Split on non-alphanumerics and lower→Upper transitions ("iceCream" → ice, Cream)."""
    words: list[str] = []
    current = ""
    for ch in s:
        if not ch.isalnum():
            if current:
                words.append(current)
            current = ""
            continue
        if ch.isupper() and current and not current[-1].isupper():
            words.append(current)
            current = ""
        current += ch
    if current:
        words.append(current)
    return words


def camel_case(s: str) -> str:
    """Does: First word lowercased, following words capitalized, separators dropped."""
    words = _split_words(s)
    if not words:
        return ""
    return words[0].lower() + "".join(w.capitalize() for w in words[1:])


def classify_case(original: str, candidate: str) -> CaseStyle:
    """Does: Pick the first style `original` already satisfies. Returns: CaseStyle."""
    if original == candidate:
        return CaseStyle.IDENTICAL
    if original == original.lower():
        return CaseStyle.LOWER
    if original == original.upper():
        return CaseStyle.UPPER
    if original == original.capitalize():
        return CaseStyle.CAPITALIZED
    if original == camel_case(original):
        return CaseStyle.CAMEL
    return CaseStyle.UNKNOWN


def apply_case(style: CaseStyle, candidate: str) -> str:
    """Does: Render `candidate` in `style`; UNKNOWN renders lowercase. Returns: str."""
    if style is CaseStyle.IDENTICAL:
        return candidate
    if style is CaseStyle.UPPER:
        return candidate.upper()
    if style is CaseStyle.CAPITALIZED:
        return candidate.capitalize()
    if style is CaseStyle.CAMEL:
        return camel_case(candidate)
    return candidate.lower()


def restore_case(original: str, candidate: str) -> str:
    """Does: Give `candidate` the casing style of `original`. Returns: str."""
    return apply_case(classify_case(original, candidate), candidate)
