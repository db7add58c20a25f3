"""
Data models module.

Defines the Idea record, the Category set and field validation.
"""

from idealog.models.idea import (
    Idea,
    Category,
    CATEGORIES,
    EDITABLE_FIELDS,
    normalize_tag,
    normalize_tags,
    validate_fields,
)

__all__ = [
    "Idea",
    "Category",
    "CATEGORIES",
    "EDITABLE_FIELDS",
    "normalize_tag",
    "normalize_tags",
    "validate_fields",
]
