"""
Tests for the Idea model, categories and field validation.
"""

import pytest
from datetime import datetime

from idealog.errors import ValidationError
from idealog.models.idea import (
    Category,
    Idea,
    collect_tags,
    normalize_tags,
    validate_fields,
)


# =============================================================================
# Category
# =============================================================================

class TestCategory:
    """Tests for the fixed category set."""

    def test_parse_is_case_insensitive(self):
        assert Category.parse("Tech") is Category.TECH
        assert Category.parse(" DESIGN ") is Category.DESIGN

    def test_parse_passes_enum_through(self):
        assert Category.parse(Category.BUSINESS) is Category.BUSINESS

    def test_parse_unknown_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Category.parse("music")

        assert exc_info.value.field == "category"
        assert "music" in str(exc_info.value)

    def test_label(self):
        assert Category.PERSONAL.label == "Personal"

    def test_parse_non_text_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Category.parse(3)

        assert exc_info.value.field == "category"


# =============================================================================
# Tag Normalization
# =============================================================================

class TestNormalizeTags:
    """Tests for tag normalization."""

    def test_lowercases_and_strips(self):
        assert normalize_tags(["  Urgent ", "UI"]) == ["urgent", "ui"]

    def test_drops_empty_and_duplicates_keeping_first_order(self):
        assert normalize_tags(["b", "", "a", "B", "  "]) == ["b", "a"]

    def test_accepts_comma_separated_string(self):
        assert normalize_tags("mobile, urgent,,mobile") == ["mobile", "urgent"]

    def test_strips_leading_hash(self):
        assert normalize_tags(["#ui"]) == ["ui"]

    def test_none_gives_empty_list(self):
        assert normalize_tags(None) == []

    @pytest.mark.parametrize("tags", [5, {"a": 1}, 1.5])
    def test_rejects_non_list_tags(self, tags):
        with pytest.raises(ValidationError) as exc_info:
            normalize_tags(tags)

        assert exc_info.value.field == "tags"

    def test_rejects_non_text_tag_items(self):
        with pytest.raises(ValidationError):
            normalize_tags(["ui", 7])

    @pytest.mark.parametrize("tags", [["all"], "mobile, ALL", ["#All"]])
    def test_reserved_tag_name_rejected(self, tags):
        with pytest.raises(ValidationError) as exc_info:
            normalize_tags(tags)

        assert "reserved" in str(exc_info.value)

    def test_collect_tags_first_seen_order(self):
        ideas = [
            Idea(title="a", tags=["ui", "urgent"]),
            Idea(title="b", tags=["backend", "ui"]),
        ]

        assert collect_tags(ideas) == ["ui", "urgent", "backend"]


# =============================================================================
# Field Validation
# =============================================================================

class TestValidateFields:
    """Tests for validate_fields()."""

    def test_valid_create_fields_are_cleaned(self):
        cleaned = validate_fields({
            "title": "  Prototype app ",
            "category": "Tech",
            "tags": ["Urgent"],
        })

        assert cleaned == {
            "title": "Prototype app",
            "content": "",
            "category": Category.TECH,
            "tags": ["urgent"],
        }

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_fields({"title": "   ", "category": "tech"})

        assert exc_info.value.field == "title"

    def test_missing_category_rejected_on_create(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_fields({"title": "Idea"})

        assert exc_info.value.field == "category"

    def test_read_only_fields_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_fields({"title": "Idea", "category": "tech", "created_at": datetime.now()})

        assert "created_at" in str(exc_info.value)

    def test_partial_only_returns_supplied_fields(self):
        assert validate_fields({"content": "more"}, partial=True) == {"content": "more"}

    def test_partial_still_validates_title(self):
        with pytest.raises(ValidationError):
            validate_fields({"title": ""}, partial=True)

    def test_collects_multiple_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_fields({"title": "", "category": "nope"})

        assert len(exc_info.value.errors) == 2
        assert exc_info.value.field == "title"

    def test_overlong_title_rejected(self):
        with pytest.raises(ValidationError):
            validate_fields({"title": "x" * 201, "category": "tech"})

    @pytest.mark.parametrize("fields,field", [
        ({"title": 123, "category": "tech"}, "title"),
        ({"title": ["x"], "category": "tech"}, "title"),
        ({"title": "Idea", "content": 5, "category": "tech"}, "content"),
        ({"title": "Idea", "category": 2}, "category"),
        ({"title": "Idea", "category": "tech", "tags": 5}, "tags"),
    ])
    def test_wrong_types_raise_validation_error(self, fields, field):
        with pytest.raises(ValidationError) as exc_info:
            validate_fields(fields)

        assert exc_info.value.field == field

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError):
            validate_fields(["title"])


# =============================================================================
# Idea
# =============================================================================

class TestIdea:
    """Tests for the Idea dataclass."""

    def test_defaults(self):
        idea = Idea(title="Something")

        assert idea.content == ""
        assert idea.category is Category.TECH
        assert idea.tags == []
        assert idea.archived is False
        assert idea.updated_at == idea.created_at

    def test_category_string_is_coerced(self):
        assert Idea(title="x", category="design").category is Category.DESIGN

    def test_empty_title_raises(self):
        with pytest.raises(ValidationError):
            Idea(title="  ")

    def test_non_text_title_raises(self):
        with pytest.raises(ValidationError):
            Idea(title=5)

    def test_has_tag(self):
        idea = Idea(title="x", tags=["Urgent"])

        assert idea.has_tag("urgent")
        assert idea.has_tag("#URGENT")
        assert not idea.has_tag("later")

    def test_to_dict_serializes_datetimes_and_category(self):
        created = datetime(2026, 1, 2, 3, 4, 5)
        idea = Idea(id=7, title="x", category="business", created_at=created)

        data = idea.to_dict()

        assert data["id"] == 7
        assert data["category"] == "business"
        assert data["created_at"] == "2026-01-02T03:04:05"
        assert data["updated_at"] == "2026-01-02T03:04:05"

    def test_from_dict_restores_idea(self):
        original = Idea(id=3, title="x", tags=["a", "b"], archived=True,
                        created_at=datetime(2026, 1, 2, 3, 4, 5))

        restored = Idea.from_dict(original.to_dict())

        assert restored == original

    def test_str(self):
        idea = Idea(id=4, title="Logo", category="design", archived=True)

        assert str(idea) == "#4 [design] Logo [archived]"
