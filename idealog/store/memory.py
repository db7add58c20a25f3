"""
In-memory idea store.

Ideas live in a Python list for the lifetime of the session. New ideas are
inserted at the front so that all() returns them newest first. Ids come from
a monotonic counter and are never reused, even after a delete.
"""

from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional

from idealog.errors import NotFoundError, ValidationError
from idealog.models.idea import Idea, validate_fields
from idealog.store.base import IdeaStore


class MemoryIdeaStore(IdeaStore):
    """
    List-backed idea store.

    Args:
        clock: Callable returning the current datetime. Defaults to
            datetime.now; tests pass a fixed clock.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._ideas: List[Idea] = []
        self._next_id = 1
        self._clock = clock or datetime.now

    @property
    def name(self) -> str:
        return "memory"

    def _index_of(self, idea_id: int) -> int:
        for index, idea in enumerate(self._ideas):
            if idea.id == idea_id:
                return index
        raise NotFoundError(idea_id)

    def _allocate_id(self) -> int:
        idea_id = self._next_id
        self._next_id += 1
        return idea_id

    # =========================================================================
    # Store Interface Implementation
    # =========================================================================

    def create(self, fields: Dict[str, Any]) -> int:
        cleaned = validate_fields(fields)
        now = self._clock()
        idea = Idea(
            id=self._allocate_id(),
            created_at=now,
            updated_at=now,
            **cleaned,
        )
        self._ideas.insert(0, idea)
        return idea.id

    def update(self, idea_id: int, fields: Dict[str, Any]) -> Idea:
        index = self._index_of(idea_id)
        cleaned = validate_fields(fields, partial=True)
        if not cleaned:
            raise ValidationError("no fields to update")

        idea = self._ideas[index]
        for key, value in cleaned.items():
            setattr(idea, key, value)
        idea.updated_at = self._clock()
        return idea

    def archive(self, idea_id: int, archived: bool = True) -> Idea:
        idea = self._ideas[self._index_of(idea_id)]
        idea.archived = bool(archived)
        idea.updated_at = self._clock()
        return idea

    def delete(self, idea_id: int) -> None:
        del self._ideas[self._index_of(idea_id)]

    def get(self, idea_id: int) -> Idea:
        return self._ideas[self._index_of(idea_id)]

    def all(self) -> List[Idea]:
        return list(self._ideas)

    # =========================================================================
    # Extras
    # =========================================================================

    def count(self) -> int:
        return len(self._ideas)

    def exists(self, idea_id: int) -> bool:
        return any(idea.id == idea_id for idea in self._ideas)

    def seed(self, ideas: Iterable[Idea]) -> List[int]:
        """
        Load pre-built ideas, keeping their timestamps and archived flag.

        Ideas are re-sorted so the store stays newest first. Each idea gets
        a fresh id from the store's counter.
        """
        ids = []
        for idea in ideas:
            stored = replace(idea, id=self._allocate_id(), tags=list(idea.tags))
            self._ideas.append(stored)
            ids.append(stored.id)
        self._ideas.sort(key=lambda i: i.created_at, reverse=True)
        return ids

    def clear(self) -> None:
        """Remove all ideas. The id counter is not reset."""
        self._ideas.clear()
