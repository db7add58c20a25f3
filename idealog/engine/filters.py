"""
Filter engine for Idea Log.

Selects the ideas matching the current view, category, tag and search
query. All predicates are ANDed together. The functions are pure: they never
mutate the ideas or the list passed in.
"""

from typing import Iterable, List

from idealog.models.idea import Idea, normalize_tag
from idealog.state import ALL, AppState


def matches_view(idea: Idea, view: str) -> bool:
    """
    "all" passes every idea, "archived" only archived ideas, and any other
    view only non-archived ideas.
    """
    if view == ALL:
        return True
    if view == "archived":
        return idea.archived
    return not idea.archived


def matches_category(idea: Idea, category: str) -> bool:
    if category == ALL:
        return True
    return idea.category.value == category


def matches_tag(idea: Idea, tag: str) -> bool:
    if tag == ALL:
        return True
    return normalize_tag(tag) in idea.tags


def matches_query(idea: Idea, query: str) -> bool:
    """Case-insensitive substring match against title, content, or any tag."""
    needle = (query or "").strip().casefold()
    if not needle:
        return True
    if needle in idea.title.casefold():
        return True
    if needle in idea.content.casefold():
        return True
    return any(needle in tag.casefold() for tag in idea.tags)


def matches(idea: Idea, state: AppState) -> bool:
    """Check an idea against every predicate in the state."""
    return (
        matches_view(idea, state.view)
        and matches_category(idea, state.category)
        and matches_tag(idea, state.tag)
        and matches_query(idea, state.query)
    )


def filter_ideas(ideas: Iterable[Idea], state: AppState) -> List[Idea]:
    """
    Return the ideas matching all active predicates, in input order.

    Args:
        ideas: Ideas to filter (typically store.all()).
        state: Current view/category/tag/query selection.

    Returns:
        New list with the matching ideas.
    """
    return [idea for idea in ideas if matches(idea, state)]
