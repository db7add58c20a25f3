"""
Sort engine for Idea Log.

Orders a filtered list for display. Ties keep the input order (store
order), since Python's sort is stable for both directions.
"""

from typing import Iterable, List

from idealog.models.idea import Idea
from idealog.state import SORT_KEYS

DEFAULT_SORT_KEY = "newest"


def resolve_sort_key(key: str) -> str:
    """Return the key if known, otherwise fall back to "newest"."""
    key = (key or "").strip().lower()
    return key if key in SORT_KEYS else DEFAULT_SORT_KEY


def sort_ideas(ideas: Iterable[Idea], key: str) -> List[Idea]:
    """
    Sort ideas by the given key.

    Args:
        ideas: Ideas to sort. Not modified.
        key: "newest" (created_at descending), "oldest" (created_at
            ascending) or "title" (case-insensitive ascending). Unknown
            keys fall back to "newest".

    Returns:
        New sorted list.
    """
    key = resolve_sort_key(key)

    if key == "oldest":
        return sorted(ideas, key=lambda i: i.created_at)
    if key == "title":
        return sorted(ideas, key=lambda i: i.title.casefold())
    return sorted(ideas, key=lambda i: i.created_at, reverse=True)
