"""
Sample ideas loaded into new sessions.

Covers every category, includes archived ideas and shared tags, and
staggers creation times so that the three sort orders differ.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from idealog.models.idea import Idea

# (title, content, category, tags, age, archived)
SAMPLE_IDEAS = [
    (
        "Prototype app for habit tracking",
        "Minimal mobile prototype with streaks and reminders.",
        "tech",
        ["mobile", "urgent"],
        timedelta(minutes=20),
        False,
    ),
    (
        "Dark mode for the dashboard",
        "Respect the system theme and remember the user's choice.",
        "design",
        ["ui", "accessibility"],
        timedelta(hours=3),
        False,
    ),
    (
        "Subscription pricing experiment",
        "Compare monthly and annual plans with a small cohort.",
        "business",
        ["pricing", "urgent"],
        timedelta(days=1, hours=2),
        False,
    ),
    (
        "Learn watercolor basics",
        "",
        "personal",
        ["hobby"],
        timedelta(days=2),
        False,
    ),
    (
        "API rate limiter",
        "Token bucket per client key, configurable burst size.",
        "tech",
        ["backend"],
        timedelta(days=4),
        False,
    ),
    (
        "Onboarding illustrations",
        "Three friendly illustrations for the welcome screens.",
        "design",
        ["ui"],
        timedelta(days=6),
        True,
    ),
    (
        "Newsletter for early adopters",
        "Monthly update with roadmap highlights.",
        "business",
        ["marketing"],
        timedelta(days=9),
        True,
    ),
]


def build_sample_ideas(now: Optional[datetime] = None) -> List[Idea]:
    """
    Build the sample ideas relative to a reference time.

    Args:
        now: Reference time (default: datetime.now()).

    Returns:
        Ideas without ids, ready for store.seed().
    """
    if now is None:
        now = datetime.now()

    ideas = []
    for title, content, category, tags, age, archived in SAMPLE_IDEAS:
        created_at = now - age
        ideas.append(Idea(
            title=title,
            content=content,
            category=category,
            tags=list(tags),
            created_at=created_at,
            updated_at=created_at,
            archived=archived,
        ))
    return ideas
