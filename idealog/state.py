"""
Application state for Idea Log.

AppState holds the UI state that drives the filter/sort/render pipeline:
which view is selected, the category and tag filters, the search text and
the sort order. It is passed explicitly to the engine and renderer.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Tuple

from idealog.errors import ValidationError
from idealog.models.idea import CATEGORIES, normalize_tag

ALL = "all"

VIEWS: Tuple[str, ...] = ("all", "active", "archived")
SORT_KEYS: Tuple[str, ...] = ("newest", "oldest", "title")


@dataclass
class AppState:
    """
    Current view, filter and sort selection.

    Attributes:
        view: "all", "active" or "archived".
        category: "all" or a category value.
        tag: "all" or a tag.
        query: Free-text search; empty matches everything.
        sort: "newest", "oldest" or "title".
    """

    view: str = "active"
    category: str = ALL
    tag: str = ALL
    query: str = ""
    sort: str = "newest"

    @classmethod
    def from_config(cls) -> "AppState":
        """Create a state using the configured defaults."""
        from idealog.config import DEFAULT_SORT, DEFAULT_VIEW

        state = cls()
        state.view = DEFAULT_VIEW if DEFAULT_VIEW in VIEWS else "active"
        state.sort = DEFAULT_SORT if DEFAULT_SORT in SORT_KEYS else "newest"
        return state

    def set_view(self, view: str) -> None:
        view = str(view or "").strip().lower()
        if view not in VIEWS:
            raise ValidationError(f"unknown view {view!r}", field="view")
        self.view = view

    def set_category(self, category: str) -> None:
        category = str(category or ALL).strip().lower()
        if category != ALL and category not in CATEGORIES:
            raise ValidationError(f"unknown category {category!r}", field="category")
        self.category = category

    def set_tag(self, tag: Optional[str]) -> None:
        tag = normalize_tag(tag or ALL)
        self.tag = tag or ALL

    def set_query(self, query: Optional[str]) -> None:
        self.query = str(query or "").strip()

    def set_sort(self, sort: str) -> None:
        sort = str(sort or "").strip().lower()
        if sort not in SORT_KEYS:
            raise ValidationError(f"unknown sort order {sort!r}", field="sort")
        self.sort = sort

    def clear_filters(self) -> None:
        """Reset category, tag and search. View and sort are kept."""
        self.category = ALL
        self.tag = ALL
        self.query = ""

    @property
    def has_filters(self) -> bool:
        return self.category != ALL or self.tag != ALL or bool(self.query)

    def to_dict(self) -> dict:
        return asdict(self)
