"""
Form controller for Idea Log.

Translates form input into store mutations. The controller is a two-state
machine:

    CREATING  (editing_id is None)  --begin_edit(id)-->  EDITING
    EDITING   --submit() ok / cancel() / reset()-->      CREATING

Tags picked in the form accumulate in a pending set until the form is
submitted or reset. A submit with an empty title is rejected before the
store is touched.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from idealog.errors import NotFoundError, ValidationError
from idealog.models.idea import RESERVED_TAGS, Category, normalize_tag, normalize_tags, text_value
from idealog.store.base import IdeaStore


class FormMode(str, Enum):
    CREATING = "creating"
    EDITING = "editing"


@dataclass
class FormData:
    """Values entered in the idea form."""
    title: str = ""
    content: str = ""
    category: str = Category.TECH.value
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "FormData":
        """
        Build form data from submitted values.

        Raises:
            ValidationError: If the data is not a mapping or a field has
                the wrong type.
        """
        if not isinstance(data, dict):
            raise ValidationError(f"form must be an object, got {type(data).__name__}")

        category = data.get("category") or Category.TECH.value
        if not isinstance(category, str):
            raise ValidationError(
                f"category must be text, got {type(category).__name__}", field="category"
            )

        return cls(
            title=text_value(data.get("title"), "title"),
            content=text_value(data.get("content"), "content"),
            category=category,
            tags=normalize_tags(data.get("tags")),
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "tags": list(self.tags),
        }


@dataclass
class SubmitResult:
    """
    Result of a form submission.

    Attributes:
        success: Whether the store was changed.
        idea_id: Id of the created or updated idea.
        created: True for a create, False for an update.
        error: User-facing error message if the submit was rejected.
        field: Offending field for validation errors.
        not_found: True if the idea being edited no longer exists.
    """
    success: bool
    idea_id: Optional[int] = None
    created: bool = False
    error: Optional[str] = None
    field: Optional[str] = None
    not_found: bool = False


class FormController:
    """
    Manages create/edit mode and pending tags for the idea form.

    Usage:
        form = FormController(store)
        form.toggle_tag("urgent")
        result = form.submit(FormData(title="Prototype app", category="tech"))
    """

    def __init__(self, store: IdeaStore):
        self.store = store
        self.editing_id: Optional[int] = None
        self.pending_tags: List[str] = []

    @property
    def mode(self) -> FormMode:
        return FormMode.CREATING if self.editing_id is None else FormMode.EDITING

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    # =========================================================================
    # Tag Selection
    # =========================================================================

    def _selectable(self, tag: str) -> str:
        tag = normalize_tag(tag)
        if tag in RESERVED_TAGS:
            raise ValidationError(f"{tag!r} is reserved and cannot be used as a tag", field="tags")
        return tag

    def add_tag(self, tag: str) -> None:
        tag = self._selectable(tag)
        if tag and tag not in self.pending_tags:
            self.pending_tags.append(tag)

    def toggle_tag(self, tag: str) -> bool:
        """
        Add the tag to the pending set, or remove it if already selected.

        Returns:
            True if the tag is selected after the call.

        Raises:
            ValidationError: If the tag name is reserved.
        """
        tag = self._selectable(tag)
        if not tag:
            return False
        if tag in self.pending_tags:
            self.pending_tags.remove(tag)
            return False
        self.pending_tags.append(tag)
        return True

    # =========================================================================
    # State Transitions
    # =========================================================================

    def begin_edit(self, idea_id: int) -> FormData:
        """
        Enter EDITING mode for an existing idea.

        Returns:
            Form data pre-filled from the idea.

        Raises:
            NotFoundError: If the idea does not exist. The mode is unchanged.
        """
        idea = self.store.get(idea_id)
        self.editing_id = idea.id
        self.pending_tags = list(idea.tags)
        return FormData(
            title=idea.title,
            content=idea.content,
            category=idea.category.value,
            tags=list(idea.tags),
        )

    def reset(self) -> None:
        """Return to CREATING and clear pending tags. No store mutation."""
        self.editing_id = None
        self.pending_tags = []

    cancel = reset

    def submit(self, form: FormData, replace_tags: bool = False) -> SubmitResult:
        """
        Submit the form.

        In CREATING mode a new idea is created; in EDITING mode the idea
        being edited is updated and the controller returns to CREATING.
        Form tags and pending tags are merged unless replace_tags is set,
        in which case the form's tags are the whole selection.
        """
        if not isinstance(form.title, str):
            return SubmitResult(
                success=False,
                error=f"title must be text, got {type(form.title).__name__}",
                field="title",
            )
        if not form.title.strip():
            return SubmitResult(
                success=False,
                error="Title is required",
                field="title",
            )

        try:
            tags = normalize_tags(form.tags)
            if not replace_tags:
                tags = normalize_tags(tags + self.pending_tags)
            fields = {
                "title": form.title,
                "content": form.content,
                "category": form.category,
                "tags": tags,
            }

            if self.is_editing:
                idea_id = self.editing_id
                self.store.update(idea_id, fields)
                created = False
            else:
                idea_id = self.store.create(fields)
                created = True
        except ValidationError as e:
            return SubmitResult(success=False, error=str(e), field=e.field)
        except NotFoundError as e:
            self.reset()
            return SubmitResult(success=False, error=str(e), not_found=True)

        self.reset()
        return SubmitResult(success=True, idea_id=idea_id, created=created)

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "editing_id": self.editing_id,
            "pending_tags": list(self.pending_tags),
        }
