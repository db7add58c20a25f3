"""
Views module.

Renders the filtered, sorted idea list with counts and a dynamic title.
"""

from idealog.views.renderer import (
    IdeaRow,
    ViewCounts,
    SummaryStats,
    RenderedView,
    render_view,
    build_title,
    format_age,
)

__all__ = [
    "IdeaRow",
    "ViewCounts",
    "SummaryStats",
    "RenderedView",
    "render_view",
    "build_title",
    "format_age",
]
