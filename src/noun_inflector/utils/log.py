"""
log.py.

Does: Lightweight trace logger controlled by NOUN_INFLECTOR_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Silent while the variable is unset.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enabled", "reload_topics"]

DEBUG_TOPICS_ENV = "NOUN_INFLECTOR_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(DEBUG_TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable NOUN_INFLECTOR_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str) -> bool:
    """Does: Tell whether lines for `topic` would be printed."""
    return bool(_DEBUG_TOPICS) and ("all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS)


def debug(
    msg: str,
    topic: str = "inflection",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via NOUN_INFLECTOR_DEBUG_TOPICS.
    """
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
