"""
Error types for Idea Log.

Two kinds of errors exist, both recoverable by the user:

- ValidationError: a required field is empty or a value is not recognized.
  The operation is aborted before anything changes.
- NotFoundError: an operation referenced an idea id that no longer exists
  (deleted, or never created). The operation is a no-op.
"""

from typing import List, Optional


class IdeaLogError(Exception):
    """Base class for all Idea Log errors."""


class ValidationError(IdeaLogError, ValueError):
    """
    Raised when input fails validation.

    Attributes:
        errors: Individual validation messages.
        field: Name of the first offending field, if known.
    """

    def __init__(self, errors, field: Optional[str] = None):
        if isinstance(errors, str):
            errors = [errors]
        self.errors: List[str] = list(errors)
        self.field = field
        super().__init__("; ".join(self.errors))


class NotFoundError(IdeaLogError, LookupError):
    """Raised when an idea id does not exist in the store."""

    def __init__(self, idea_id: int):
        self.idea_id = idea_id
        super().__init__(f"Idea {idea_id} not found")
