"""
Engine module.

Pure filter and sort functions applied to the idea list.
"""

from idealog.engine.filters import (
    filter_ideas,
    matches,
    matches_view,
    matches_category,
    matches_tag,
    matches_query,
)
from idealog.engine.sorting import sort_ideas, resolve_sort_key

__all__ = [
    "filter_ideas",
    "matches",
    "matches_view",
    "matches_category",
    "matches_tag",
    "matches_query",
    "sort_ideas",
    "resolve_sort_key",
]
