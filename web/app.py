"""
Idea Log - Web Dashboard

A simple Flask-based dashboard over one in-memory idea session.

Run with: python -m web.app
Or: python main.py --serve
"""

import sys
import threading
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from flask import Flask, render_template, request, jsonify, redirect, url_for

from idealog.actions import Action, ActionResult, Session, dispatch
from idealog.config import DEBUG, WEB_HOST, WEB_PORT
from idealog.errors import NotFoundError
from idealog.forms.controller import FormData
from idealog.models.idea import CATEGORIES
from idealog.state import SORT_KEYS, VIEWS

app = Flask(__name__)


# =============================================================================
# Session Tracking
# =============================================================================

# Global session (simple in-memory tracking, one per process)
_session: Optional[Session] = None
_session_lock = threading.Lock()

# Query-string arguments that change the view state, mapped to SET_FILTERS keys
QUERY_ARGS = (
    ("view", "view"),
    ("category", "category"),
    ("tag", "tag"),
    ("q", "query"),
    ("sort", "sort"),
)


def get_session() -> Session:
    """Get the process-wide session, creating it on first use."""
    global _session
    if _session is None:
        _session = Session.create()
    return _session


def reset_session(session: Optional[Session] = None) -> Session:
    """Replace the process-wide session (used by tests and --no-samples)."""
    global _session
    _session = session or Session.create()
    return _session


def run_action(action: Action, **payload) -> ActionResult:
    """Dispatch one action while holding the session lock."""
    with _session_lock:
        return dispatch(get_session(), action, **payload)


def apply_query_args() -> list:
    """
    Apply view/filter/sort query arguments as one selection.

    Returns:
        The failed result, if any argument was rejected. In that case none
        of the arguments are applied.
    """
    selection = {key: request.args.get(arg) for arg, key in QUERY_ARGS if arg in request.args}
    if not selection:
        return []

    result = run_action(Action.SET_FILTERS, **selection)
    return [] if result.success else [result]


def json_object() -> Optional[dict]:
    """The request's JSON body, or None if it is missing or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def bad_request(message: str):
    return jsonify({"success": False, "error": message}), 400


def error_response(result: ActionResult):
    """Convert a failed ActionResult into a JSON error with status code."""
    if result.not_found:
        status = 404
    elif result.needs_confirmation:
        status = 409
    else:
        status = 400

    body = {"success": False, "error": result.notice}
    if result.field:
        body["field"] = result.field
    if result.needs_confirmation:
        body["needs_confirmation"] = True
    return jsonify(body), status


def result_response(result: ActionResult, status: int = 200):
    if not result.success:
        return error_response(result)
    body = {"success": True, "notice": result.notice}
    body.update(result.data)
    return jsonify(body), status


def form_values(session: Session) -> dict:
    """Values to pre-fill the dashboard form with."""
    values = FormData().to_dict()
    if session.form.is_editing:
        try:
            idea = session.store.get(session.form.editing_id)
        except NotFoundError:
            return values
        values.update(title=idea.title, content=idea.content, category=idea.category.value)
    values["tags"] = list(session.form.pending_tags)
    return values


# =============================================================================
# Dashboard
# =============================================================================

@app.route("/")
def index():
    """Main dashboard page."""
    failures = apply_query_args()
    session = get_session()

    with _session_lock:
        view = session.render()
        form_state = session.form.to_dict()
        values = form_values(session)
        tag_choices = session.store.all_tags()
        tag_choices += [t for t in values["tags"] if t not in tag_choices]
        notices = list(session.activity.entries[-5:])

    return render_template(
        "index.html",
        view=view,
        form=form_state,
        values=values,
        tag_choices=tag_choices,
        notices=notices,
        errors=[f.notice for f in failures],
        views=VIEWS,
        categories=CATEGORIES,
        sort_keys=SORT_KEYS,
    )


@app.route("/form/submit", methods=["POST"])
def form_submit():
    """Submit the dashboard form. Checked and newly typed tags are the whole selection."""
    tags = request.form.getlist("tags") + request.form.get("new_tags", "").split(",")
    run_action(
        Action.SUBMIT_FORM,
        form={
            "title": request.form.get("title", ""),
            "content": request.form.get("content", ""),
            "category": request.form.get("category", ""),
            "tags": tags,
        },
        replace_tags=True,
    )
    return redirect(url_for("index"))


@app.route("/form/cancel", methods=["POST"])
def form_cancel():
    run_action(Action.CANCEL_FORM)
    return redirect(url_for("index"))


@app.route("/ideas/<int:idea_id>/edit", methods=["POST"])
def row_edit(idea_id):
    run_action(Action.EDIT, idea_id=idea_id)
    return redirect(url_for("index"))


@app.route("/ideas/<int:idea_id>/archive", methods=["POST"])
def row_archive(idea_id):
    run_action(Action.TOGGLE_ARCHIVE, idea_id=idea_id)
    return redirect(url_for("index"))


@app.route("/ideas/<int:idea_id>/delete", methods=["POST"])
def row_delete(idea_id):
    """Delete from the dashboard. Without confirm the page shows the prompt."""
    confirm = request.form.get("confirm", "").lower() in ("1", "true", "yes")
    run_action(Action.DELETE, idea_id=idea_id, confirm=confirm)
    return redirect(url_for("index"))


# =============================================================================
# Ideas API
# =============================================================================

@app.route("/api/ideas", methods=["GET"])
def api_list_ideas():
    """Rendered list view as JSON. Accepts view/category/tag/q/sort."""
    failures = apply_query_args()
    if failures:
        return error_response(failures[0])

    with _session_lock:
        view = get_session().render()
    return jsonify({"success": True, **view.to_dict()})


@app.route("/api/ideas", methods=["POST"])
def api_submit_idea():
    """Submit the idea form: creates, or updates the idea being edited."""
    data = json_object()

    if not data:
        return bad_request("Request body must be a non-empty JSON object")

    result = run_action(Action.SUBMIT_FORM, form=data)
    status = 201 if result.success and result.data.get("created") else 200
    return result_response(result, status)


@app.route("/api/ideas/<int:idea_id>", methods=["GET"])
def api_get_idea(idea_id):
    """Get a single idea."""
    with _session_lock:
        try:
            idea = get_session().store.get(idea_id)
        except NotFoundError as e:
            return jsonify({"success": False, "error": str(e)}), 404
        return jsonify({"success": True, "idea": idea.to_dict()})


@app.route("/api/ideas/<int:idea_id>", methods=["PUT"])
def api_update_idea(idea_id):
    """Update the supplied fields of an idea. The form state is left alone."""
    data = json_object()

    if not data:
        return bad_request("Request body must be a non-empty JSON object")

    return result_response(run_action(Action.UPDATE, idea_id=idea_id, fields=data))


@app.route("/api/ideas/<int:idea_id>/edit", methods=["POST"])
def api_edit_idea(idea_id):
    """Enter edit mode for an idea and return the pre-filled form."""
    return result_response(run_action(Action.EDIT, idea_id=idea_id))


@app.route("/api/ideas/<int:idea_id>/archive", methods=["POST"])
def api_archive_idea(idea_id):
    """Toggle the archive flag, or set it with {"archived": bool}."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    elif not isinstance(data, dict):
        return bad_request("Request body must be a JSON object")

    return result_response(
        run_action(Action.TOGGLE_ARCHIVE, idea_id=idea_id, archived=data.get("archived"))
    )


@app.route("/api/ideas/<int:idea_id>", methods=["DELETE"])
def api_delete_idea(idea_id):
    """Delete an idea. Requires ?confirm=true."""
    confirm = request.args.get("confirm", "false").lower() in ("1", "true", "yes")
    return result_response(
        run_action(Action.DELETE, idea_id=idea_id, confirm=confirm)
    )


# =============================================================================
# Form API
# =============================================================================

@app.route("/api/form")
def api_form_state():
    """Current form mode, editing id and pending tags."""
    with _session_lock:
        return jsonify(get_session().form.to_dict())


@app.route("/api/form/tags", methods=["POST"])
def api_toggle_form_tag():
    """Toggle a pending tag in the form."""
    data = json_object() or {}
    tag = data.get("tag")

    if not isinstance(tag, str) or not tag.strip():
        return bad_request("Tag required")

    return result_response(run_action(Action.TOGGLE_FORM_TAG, tag=tag.strip()))


@app.route("/api/form/cancel", methods=["POST"])
def api_cancel_form():
    """Leave edit mode without changes."""
    return result_response(run_action(Action.CANCEL_FORM))


# =============================================================================
# Stats and Activity
# =============================================================================

@app.route("/api/stats")
def api_stats():
    """Store statistics and sidebar counts."""
    with _session_lock:
        data = get_session().render().to_dict()

    return jsonify({
        "stats": data["stats"],
        "counts": data["counts"],
    })


@app.route("/api/activity")
def api_activity():
    """Activity log entries for the session."""
    with _session_lock:
        entries = list(get_session().activity.entries)
    return jsonify({"count": len(entries), "entries": entries})


@app.template_filter("format_date")
def format_date(dt):
    """Format datetime for display."""
    if not dt:
        return "Unknown"
    if isinstance(dt, str):
        return dt
    return dt.strftime("%b %d, %Y")


def run_server(host: str = None, port: int = None, debug: bool = None) -> None:
    """Start the development server."""
    host = host or WEB_HOST
    port = port or WEB_PORT
    print("=" * 50)
    print("Idea Log Dashboard")
    print("=" * 50)
    print(f"Open http://{host}:{port} in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)
    app.run(host=host, port=port, debug=DEBUG if debug is None else debug)


if __name__ == "__main__":
    run_server()
