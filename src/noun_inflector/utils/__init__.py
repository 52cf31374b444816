# noun_inflector/utils/__init__.py
"""

Does: Provide the topic-gated trace logger used by the inflection engine.
Returns: Public API via debug/enabled/reload_topics.
"""

from __future__ import annotations

from .log import (
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    "debug",
    "enabled",
    "reload_topics",
]
