"""
View renderer for Idea Log.

Derives everything the list view shows from the store contents and the
current AppState:

    ideas -> filter -> sort -> rows
                            -> sidebar counts (per view, category, tag)
                            -> summary statistics
                            -> dynamic title

The renderer keeps no state of its own. Rendering the same ideas with the
same state and clock yields an equal RenderedView.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from idealog.engine.filters import filter_ideas, matches_view
from idealog.engine.sorting import resolve_sort_key, sort_ideas
from idealog.models.idea import Category, Idea, collect_tags
from idealog.state import ALL, VIEWS, AppState

VIEW_TITLES = {
    "all": "All",
    "active": "Active",
    "archived": "Archived",
}

SORT_LABELS = {
    "newest": "Newest first",
    "oldest": "Oldest first",
    "title": "Title (A-Z)",
}


# =============================================================================
# Render Result Data Structures
# =============================================================================

@dataclass
class IdeaRow:
    """One rendered list row."""
    id: int
    title: str
    content: str
    category: str
    category_label: str
    tags: List[str]
    archived: bool
    created_at: datetime
    age: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data


@dataclass
class ViewCounts:
    """Sidebar counts. Category and tag counts respect the current view."""
    views: Dict[str, int] = field(default_factory=dict)
    categories: Dict[str, int] = field(default_factory=dict)
    tags: Dict[str, int] = field(default_factory=dict)


@dataclass
class SummaryStats:
    """Totals for the whole store, independent of filters."""
    total: int = 0
    active: int = 0
    archived: int = 0
    tags: int = 0
    created_today: int = 0


@dataclass
class RenderedView:
    """Complete output of one render."""
    title: str
    rows: List[IdeaRow]
    counts: ViewCounts
    stats: SummaryStats
    state: dict
    sort_label: str
    empty_message: Optional[str] = None

    @property
    def visible_count(self) -> int:
        return len(self.rows)

    @property
    def ids(self) -> List[int]:
        return [row.id for row in self.rows]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "rows": [row.to_dict() for row in self.rows],
            "visible_count": self.visible_count,
            "counts": asdict(self.counts),
            "stats": asdict(self.stats),
            "state": dict(self.state),
            "sort_label": self.sort_label,
            "empty_message": self.empty_message,
        }

    def to_text(self) -> str:
        """Plain-text rendering for the command line."""
        lines = [
            "=" * 60,
            self.title,
            "=" * 60,
            f"Showing {self.visible_count} of {self.stats.total} ideas ({self.sort_label})",
            "",
        ]

        if not self.rows:
            lines.append(f"  {self.empty_message}")
        for row in self.rows:
            marker = " (archived)" if row.archived else ""
            lines.append(f"  #{row.id} [{row.category_label}] {row.title}{marker}")
            if row.content:
                lines.append(f"      {row.content}")
            if row.tags:
                lines.append(f"      {' '.join('#' + t for t in row.tags)}")
            lines.append(f"      {row.age}")

        lines.extend([
            "",
            "Views:      " + ", ".join(f"{k}={v}" for k, v in self.counts.views.items()),
            "Categories: " + ", ".join(f"{k}={v}" for k, v in self.counts.categories.items()),
        ])
        if self.counts.tags:
            lines.append("Tags:       " + ", ".join(f"{k}={v}" for k, v in self.counts.tags.items()))
        return "\n".join(lines)


# =============================================================================
# Helpers
# =============================================================================

def format_age(created_at: datetime, now: datetime) -> str:
    """Format how long ago a timestamp was ("just now", "5m ago", "2d ago")."""
    total_seconds = int((now - created_at).total_seconds())

    if total_seconds < 60:
        return "just now"
    elif total_seconds < 3600:
        return f"{total_seconds // 60}m ago"
    elif total_seconds < 86400:
        return f"{total_seconds // 3600}h ago"
    return f"{total_seconds // 86400}d ago"


def build_title(state: AppState) -> str:
    """
    Build the list heading from the active filters.

    Examples: "Active Ideas", "Archived Tech Ideas",
    'All Ideas tagged #urgent matching "proto"'.
    """
    parts = [VIEW_TITLES.get(state.view, VIEW_TITLES["active"])]
    if state.category != ALL:
        parts.append(state.category.title())
    parts.append("Ideas")
    title = " ".join(parts)

    if state.tag != ALL:
        title += f" tagged #{state.tag}"
    if state.query:
        title += f' matching "{state.query}"'
    return title


def count_ideas(ideas: Sequence[Idea], state: AppState, tags: Sequence[str]) -> ViewCounts:
    """Compute sidebar counts for views, categories and tags."""
    counts = ViewCounts()
    for view in VIEWS:
        counts.views[view] = sum(1 for i in ideas if matches_view(i, view))

    in_view = [i for i in ideas if matches_view(i, state.view)]
    for category in Category:
        counts.categories[category.value] = sum(1 for i in in_view if i.category is category)
    for tag in tags:
        counts.tags[tag] = sum(1 for i in in_view if tag in i.tags)
    return counts


def summarize(ideas: Sequence[Idea], now: datetime) -> SummaryStats:
    archived = sum(1 for i in ideas if i.archived)
    tags = {t for i in ideas for t in i.tags}
    return SummaryStats(
        total=len(ideas),
        active=len(ideas) - archived,
        archived=archived,
        tags=len(tags),
        created_today=sum(1 for i in ideas if i.created_at.date() == now.date()),
    )


def to_row(idea: Idea, now: datetime) -> IdeaRow:
    return IdeaRow(
        id=idea.id,
        title=idea.title,
        content=idea.content,
        category=idea.category.value,
        category_label=idea.category.label,
        tags=list(idea.tags),
        archived=idea.archived,
        created_at=idea.created_at,
        age=format_age(idea.created_at, now),
    )


# =============================================================================
# Render Entry Point
# =============================================================================

def render_view(
    ideas: Sequence[Idea],
    state: AppState,
    now: Optional[datetime] = None,
) -> RenderedView:
    """
    Render the list view.

    Args:
        ideas: All ideas in store order (store.all()).
        state: Current view/filter/sort selection.
        now: Reference time for relative ages. Defaults to datetime.now().

    Returns:
        RenderedView with rows, counts, stats and title.
    """
    if now is None:
        now = datetime.now()

    visible = sort_ideas(filter_ideas(ideas, state), state.sort)

    tags = collect_tags(ideas)

    empty_message = None
    if not visible:
        empty_message = "No ideas yet" if not ideas else "No ideas match the current filters"

    return RenderedView(
        title=build_title(state),
        rows=[to_row(idea, now) for idea in visible],
        counts=count_ideas(ideas, state, tags),
        stats=summarize(ideas, now),
        state=state.to_dict(),
        sort_label=SORT_LABELS[resolve_sort_key(state.sort)],
        empty_message=empty_message,
    )
