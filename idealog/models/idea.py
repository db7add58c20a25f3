"""
Core data model for Idea Log.

Defines the Idea dataclass, the fixed Category set, and the field
validation shared by the store and the form controller.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from idealog.errors import ValidationError


class Category(str, Enum):
    """The fixed set of idea categories."""

    TECH = "tech"
    DESIGN = "design"
    BUSINESS = "business"
    PERSONAL = "personal"

    @property
    def label(self) -> str:
        return self.value.title()

    @classmethod
    def parse(cls, value: Union[str, "Category"]) -> "Category":
        """
        Convert a string to a Category (case-insensitive).

        Raises:
            ValidationError: If the value is not one of the known categories.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValidationError(
                f"category must be text, got {type(value).__name__}", field="category"
            )
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValidationError(
                f"category must be one of {valid}, got {value!r}", field="category"
            ) from None


CATEGORIES: List[str] = [c.value for c in Category]

# Fields a caller may set on create/update. id and timestamps are owned by the store.
EDITABLE_FIELDS = ("title", "content", "category", "tags")

MAX_TITLE_LENGTH = 200
MAX_TAG_LENGTH = 40

# Tag names that mean "no tag filter" and cannot be used as real tags
RESERVED_TAGS = ("all",)


def text_value(value: Any, name: str) -> str:
    """
    Return a stripped text field, treating None as empty.

    Raises:
        ValidationError: If the value is not a string.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(
            f"{name} must be text, got {type(value).__name__}", field=name
        )
    return value.strip()


def normalize_tag(tag: str) -> str:
    """Strip, lower-case and drop a leading '#' from a tag."""
    return str(tag).strip().lstrip("#").strip().lower()


def normalize_tags(tags: Union[str, Iterable[str], None]) -> List[str]:
    """
    Normalize a tag collection.

    Accepts a list of tags or a comma-separated string. Empty tags and
    duplicates are dropped; first-seen order is preserved.

    Args:
        tags: Tags to normalize.

    Returns:
        Normalized list of unique tags.

    Raises:
        ValidationError: If tags is not a string or a list of strings, or
            uses a reserved name.
    """
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    elif not isinstance(tags, (list, tuple)):
        raise ValidationError(
            f"tags must be a list or a comma-separated string, got {type(tags).__name__}",
            field="tags",
        )

    result: List[str] = []
    for tag in tags:
        if not isinstance(tag, str):
            raise ValidationError(f"tags must be text, got {tag!r}", field="tags")
        tag = normalize_tag(tag)
        if tag in RESERVED_TAGS:
            raise ValidationError(f"{tag!r} is reserved and cannot be used as a tag", field="tags")
        if tag and tag not in result:
            result.append(tag)
    return result


def collect_tags(ideas: Iterable["Idea"]) -> List[str]:
    """Distinct tags across the ideas, in first-seen order."""
    tags: List[str] = []
    for idea in ideas:
        for tag in idea.tags:
            if tag not in tags:
                tags.append(tag)
    return tags


def validate_fields(fields: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    """
    Validate and clean user-supplied idea fields.

    Args:
        fields: Mapping with any of title, content, category, tags.
        partial: If True (update), missing fields are allowed and left out
            of the result. If False (create), title and category are required.

    Returns:
        Cleaned copy of the fields.

    Raises:
        ValidationError: If any field is missing, empty, unknown, of the
            wrong type or invalid.
    """
    if not isinstance(fields, dict):
        raise ValidationError(f"fields must be a mapping, got {type(fields).__name__}")

    errors = []
    first_field = None
    cleaned: Dict[str, Any] = {}

    def reject(e: ValidationError) -> None:
        nonlocal first_field
        errors.extend(e.errors)
        first_field = first_field or e.field

    unknown = sorted(set(fields) - set(EDITABLE_FIELDS), key=str)
    if unknown:
        errors.append(f"unknown or read-only fields: {', '.join(map(str, unknown))}")
        first_field = str(unknown[0])

    if "title" in fields or not partial:
        try:
            title = text_value(fields.get("title"), "title")
            if not title:
                raise ValidationError("title is required and cannot be empty", field="title")
            if len(title) > MAX_TITLE_LENGTH:
                raise ValidationError(
                    f"title cannot be longer than {MAX_TITLE_LENGTH} characters", field="title"
                )
            cleaned["title"] = title
        except ValidationError as e:
            reject(e)

    if "content" in fields or not partial:
        try:
            cleaned["content"] = text_value(fields.get("content"), "content")
        except ValidationError as e:
            reject(e)

    if "category" in fields or not partial:
        try:
            cleaned["category"] = Category.parse(fields.get("category") or "")
        except ValidationError as e:
            reject(e)

    if "tags" in fields or not partial:
        try:
            tags = normalize_tags(fields.get("tags"))
            too_long = [t for t in tags if len(t) > MAX_TAG_LENGTH]
            if too_long:
                raise ValidationError(
                    f"tags cannot be longer than {MAX_TAG_LENGTH} characters: {', '.join(too_long)}",
                    field="tags",
                )
            cleaned["tags"] = tags
        except ValidationError as e:
            reject(e)

    if errors:
        raise ValidationError(errors, field=first_field)

    return cleaned


@dataclass
class Idea:
    """
    A single logged idea.

    Attributes:
        title: Short title, required and non-empty.
        id: Unique identifier assigned by the store (None until stored).
        content: Free-text description, may be empty.
        category: One of the fixed Category values.
        tags: Labels in insertion order, matched as a set.
        created_at: When the idea was created. Never changes afterwards.
        updated_at: When the idea was last edited or (un)archived.
        archived: Whether the idea is hidden from the active view.
    """

    title: str
    id: Optional[int] = None
    content: str = ""
    category: Category = Category.TECH
    tags: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None
    archived: bool = False

    def __post_init__(self) -> None:
        """Coerce category and tags, then validate."""
        self.category = Category.parse(self.category)
        self.tags = normalize_tags(self.tags)
        if self.updated_at is None:
            self.updated_at = self.created_at
        self.validate()

    def validate(self) -> None:
        """
        Validate that required fields are present and valid.

        Raises:
            ValidationError: If validation fails.
        """
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError("title is required and cannot be empty", field="title")

    def has_tag(self, tag: str) -> bool:
        return normalize_tag(tag) in self.tags

    def to_dict(self) -> dict:
        """
        Convert the Idea to a JSON-compatible dictionary.

        Datetime fields become ISO strings and category its string value.
        """
        data = asdict(self)
        data["category"] = self.category.value
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Idea":
        """
        Create an Idea from a dictionary produced by to_dict().

        Handles conversion of ISO format strings back to datetime objects.
        """
        data = data.copy()

        for key in ("created_at", "updated_at"):
            if data.get(key) and isinstance(data[key], str):
                data[key] = datetime.fromisoformat(data[key])

        return cls(**data)

    def __str__(self) -> str:
        """Human-readable string representation."""
        marker = " [archived]" if self.archived else ""
        return f"#{self.id} [{self.category.value}] {self.title}{marker}"
