"""
Action dispatcher for Idea Log.

Every user interaction is expressed as an Action and routed through
dispatch(). This is the only place that catches ValidationError and
NotFoundError: they become a failed ActionResult carrying a user-facing
notice, which is also recorded in the session's activity log.

    action -> dispatch() -> store / state / form -> render_view() -> ActionResult
"""

from dataclasses import dataclass, field as dc_field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from idealog.activity import ActivityLog
from idealog.errors import NotFoundError, ValidationError
from idealog.forms.controller import FormController, FormData
from idealog.samples import build_sample_ideas
from idealog.state import AppState
from idealog.store.base import IdeaStore
from idealog.store.memory import MemoryIdeaStore
from idealog.views.renderer import RenderedView, render_view


class Action(str, Enum):
    SET_VIEW = "set_view"
    SET_CATEGORY = "set_category"
    SET_TAG = "set_tag"
    SET_SORT = "set_sort"
    SET_SEARCH = "set_search"
    SET_FILTERS = "set_filters"
    CLEAR_FILTERS = "clear_filters"
    TOGGLE_FORM_TAG = "toggle_form_tag"
    SUBMIT_FORM = "submit_form"
    CANCEL_FORM = "cancel_form"
    EDIT = "edit"
    UPDATE = "update"
    TOGGLE_ARCHIVE = "toggle_archive"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: Union[str, "Action"]) -> "Action":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"unknown action {value!r}", field="action") from None


# =============================================================================
# Session
# =============================================================================

@dataclass
class Session:
    """
    Everything one user session owns: the store, the view/filter state,
    the form controller and the activity log.
    """
    store: IdeaStore
    state: AppState
    form: FormController
    activity: ActivityLog
    clock: Callable[[], datetime] = datetime.now

    @classmethod
    def create(
        cls,
        load_samples: Optional[bool] = None,
        clock: Optional[Callable[[], datetime]] = None,
        state: Optional[AppState] = None,
    ) -> "Session":
        """
        Build a new session using configured defaults.

        Args:
            load_samples: Seed the store with sample ideas. Defaults to
                config.LOAD_SAMPLE_IDEAS.
            clock: Time source for the store, log and renderer.
            state: Initial state. Defaults to AppState.from_config().
        """
        from idealog.config import ACTIVITY_LOG_LIMIT, LOAD_SAMPLE_IDEAS

        clock = clock or datetime.now
        store = MemoryIdeaStore(clock=clock)
        session = cls(
            store=store,
            state=state or AppState.from_config(),
            form=FormController(store),
            activity=ActivityLog(limit=ACTIVITY_LOG_LIMIT, clock=clock),
            clock=clock,
        )

        if LOAD_SAMPLE_IDEAS if load_samples is None else load_samples:
            ids = store.seed(build_sample_ideas(clock()))
            session.activity.info(f"Loaded {len(ids)} sample ideas")
        return session

    def render(self) -> RenderedView:
        return render_view(self.store.all(), self.state, now=self.clock())


@dataclass
class ActionResult:
    """
    Outcome of one dispatched action.

    Attributes:
        action: The action that ran.
        success: False if the action was rejected or referenced a missing id.
        notice: User-facing message (set for failures and mutations).
        level: Activity level of the notice.
        needs_confirmation: True for a delete that was not confirmed.
        not_found: True if the referenced idea does not exist.
        field: Offending field for validation errors.
        data: Action-specific payload (e.g. pre-filled form, new idea id).
        view: The view rendered after the action.
    """
    action: Optional[Action]
    success: bool
    notice: Optional[str] = None
    level: str = "info"
    needs_confirmation: bool = False
    not_found: bool = False
    field: Optional[str] = None
    data: Dict[str, Any] = dc_field(default_factory=dict)
    view: Optional[RenderedView] = None

    def to_dict(self) -> dict:
        return {
            "action": self.action.value if self.action else None,
            "success": self.success,
            "notice": self.notice,
            "level": self.level,
            "needs_confirmation": self.needs_confirmation,
            "not_found": self.not_found,
            "field": self.field,
            "data": self.data,
            "view": self.view.to_dict() if self.view else None,
        }


# =============================================================================
# Handlers
# =============================================================================

def _set_view(session: Session, payload: dict) -> ActionResult:
    session.state.set_view(payload.get("view"))
    return ActionResult(Action.SET_VIEW, True)


def _set_category(session: Session, payload: dict) -> ActionResult:
    session.state.set_category(payload.get("category"))
    return ActionResult(Action.SET_CATEGORY, True)


def _set_tag(session: Session, payload: dict) -> ActionResult:
    session.state.set_tag(payload.get("tag"))
    return ActionResult(Action.SET_TAG, True)


def _set_sort(session: Session, payload: dict) -> ActionResult:
    session.state.set_sort(payload.get("sort"))
    return ActionResult(Action.SET_SORT, True)


def _set_search(session: Session, payload: dict) -> ActionResult:
    session.state.set_query(payload.get("query"))
    return ActionResult(Action.SET_SEARCH, True)


def _clear_filters(session: Session, payload: dict) -> ActionResult:
    session.state.clear_filters()
    return ActionResult(Action.CLEAR_FILTERS, True)


# Payload keys accepted by SET_FILTERS, in the order they are applied
FILTER_SETTERS = (
    ("view", AppState.set_view),
    ("category", AppState.set_category),
    ("tag", AppState.set_tag),
    ("query", AppState.set_query),
    ("sort", AppState.set_sort),
)


def _set_filters(session: Session, payload: dict) -> ActionResult:
    """Apply several selections at once. Any invalid one rejects them all."""
    candidate = replace(session.state)
    errors = []
    first_field = None

    for key, setter in FILTER_SETTERS:
        if key not in payload:
            continue
        try:
            setter(candidate, payload[key])
        except ValidationError as e:
            errors.extend(e.errors)
            first_field = first_field or e.field

    if errors:
        raise ValidationError(errors, field=first_field)

    session.state = candidate
    return ActionResult(Action.SET_FILTERS, True, data={"state": candidate.to_dict()})


def _toggle_form_tag(session: Session, payload: dict) -> ActionResult:
    selected = session.form.toggle_tag(payload.get("tag") or "")
    return ActionResult(
        Action.TOGGLE_FORM_TAG,
        True,
        data={"selected": selected, "pending_tags": list(session.form.pending_tags)},
    )


def _submit_form(session: Session, payload: dict) -> ActionResult:
    form = payload.get("form")
    if form is None:
        form = FormData.from_dict(payload)
    elif not isinstance(form, FormData):
        form = FormData.from_dict(form)

    editing_id = session.form.editing_id
    result = session.form.submit(form, replace_tags=bool(payload.get("replace_tags")))
    if not result.success:
        if result.not_found:
            raise NotFoundError(editing_id)
        raise ValidationError(result.error or "invalid form", field=result.field)

    verb = "Created" if result.created else "Updated"
    title = session.store.get(result.idea_id).title
    return ActionResult(
        Action.SUBMIT_FORM,
        True,
        notice=f'{verb} idea "{title}"',
        level="success",
        data={"idea_id": result.idea_id, "created": result.created},
    )


def _cancel_form(session: Session, payload: dict) -> ActionResult:
    session.form.cancel()
    return ActionResult(Action.CANCEL_FORM, True)


def _edit(session: Session, payload: dict) -> ActionResult:
    form = session.form.begin_edit(payload.get("idea_id"))
    return ActionResult(
        Action.EDIT,
        True,
        data={"idea_id": session.form.editing_id, "form": form.to_dict()},
    )


def _update(session: Session, payload: dict) -> ActionResult:
    """Update an idea in place. The form and its pending tags are untouched."""
    fields = payload.get("fields")
    if not isinstance(fields, dict):
        raise ValidationError("fields must be an object", field="fields")

    idea = session.store.update(payload.get("idea_id"), fields)
    return ActionResult(
        Action.UPDATE,
        True,
        notice=f'Updated idea "{idea.title}"',
        level="success",
        data={"idea_id": idea.id, "idea": idea.to_dict()},
    )


def _toggle_archive(session: Session, payload: dict) -> ActionResult:
    idea_id = payload.get("idea_id")
    archived = payload.get("archived")
    if archived is None:
        archived = not session.store.get(idea_id).archived
    elif not isinstance(archived, bool):
        raise ValidationError(
            f"archived must be true or false, got {archived!r}", field="archived"
        )

    idea = session.store.archive(idea_id, archived)
    verb = "Archived" if idea.archived else "Restored"
    return ActionResult(
        Action.TOGGLE_ARCHIVE,
        True,
        notice=f'{verb} idea "{idea.title}"',
        level="success",
        data={"idea_id": idea.id, "archived": idea.archived},
    )


def _delete(session: Session, payload: dict) -> ActionResult:
    idea_id = payload.get("idea_id")
    idea = session.store.get(idea_id)

    if not payload.get("confirm"):
        return ActionResult(
            Action.DELETE,
            False,
            notice=f'Delete "{idea.title}"? This cannot be undone.',
            level="warning",
            needs_confirmation=True,
            data={"idea_id": idea_id},
        )

    session.store.delete(idea_id)
    if session.form.editing_id == idea_id:
        session.form.reset()
    return ActionResult(
        Action.DELETE,
        True,
        notice=f'Deleted idea "{idea.title}"',
        level="success",
        data={"idea_id": idea_id},
    )


HANDLERS = {
    Action.SET_VIEW: _set_view,
    Action.SET_CATEGORY: _set_category,
    Action.SET_TAG: _set_tag,
    Action.SET_SORT: _set_sort,
    Action.SET_SEARCH: _set_search,
    Action.SET_FILTERS: _set_filters,
    Action.CLEAR_FILTERS: _clear_filters,
    Action.TOGGLE_FORM_TAG: _toggle_form_tag,
    Action.SUBMIT_FORM: _submit_form,
    Action.CANCEL_FORM: _cancel_form,
    Action.EDIT: _edit,
    Action.UPDATE: _update,
    Action.TOGGLE_ARCHIVE: _toggle_archive,
    Action.DELETE: _delete,
}


# =============================================================================
# Dispatch Entry Point
# =============================================================================

def dispatch(session: Session, action: Union[str, Action], **payload) -> ActionResult:
    """
    Run one user action to completion and re-render the view.

    Args:
        session: The session to act on.
        action: Action (or its string value).
        **payload: Action arguments (view, category, tag, sort, query,
            form, replace_tags, fields, idea_id, archived, confirm).

    Returns:
        ActionResult with the freshly rendered view. Validation and
        not-found errors are reported in the result, never raised.
    """
    try:
        action = Action.parse(action)
        result = HANDLERS[action](session, payload)
    except ValidationError as e:
        result = ActionResult(
            action if isinstance(action, Action) else None,
            False,
            notice=str(e),
            level="error",
            field=e.field,
        )
    except NotFoundError as e:
        result = ActionResult(
            action,
            False,
            notice=f"{e}. It may have been deleted.",
            level="warning",
            not_found=True,
            data={"idea_id": e.idea_id},
        )

    if result.notice:
        session.activity.log(result.notice, result.level)

    result.view = session.render()
    return result
