"""
Base store abstraction for Idea Log.

Defines the interface every idea store implements. The store exclusively
owns the idea collection; other components read through all()/get() and
change ideas only through the mutation methods below.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from idealog.models.idea import Idea, collect_tags


class IdeaStore(ABC):
    """
    Abstract base class for idea stores.

    Mutations are synchronous and immediately visible to subsequent reads.
    Operations that reference a missing id raise NotFoundError; invalid
    fields raise ValidationError and leave the store unchanged.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this store (used in activity messages)."""
        pass

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> int:
        """
        Create a new idea.

        Args:
            fields: title (required), content, category (required), tags.

        Returns:
            The id assigned to the new idea.
        """
        pass

    @abstractmethod
    def update(self, idea_id: int, fields: Dict[str, Any]) -> Idea:
        """
        Update title, content, category and/or tags of an idea.

        Fields that are not supplied are left unchanged.

        Returns:
            The updated idea.
        """
        pass

    @abstractmethod
    def archive(self, idea_id: int, archived: bool = True) -> Idea:
        """Set the archived flag of an idea. Reversible."""
        pass

    @abstractmethod
    def delete(self, idea_id: int) -> None:
        """Remove an idea permanently."""
        pass

    @abstractmethod
    def get(self, idea_id: int) -> Idea:
        """Return one idea by id."""
        pass

    @abstractmethod
    def all(self) -> List[Idea]:
        """Return every idea, newest created first."""
        pass

    def count(self) -> int:
        return len(self.all())

    def exists(self, idea_id: int) -> bool:
        return any(idea.id == idea_id for idea in self.all())

    def all_tags(self) -> List[str]:
        """Distinct tags across the store, in first-seen store order."""
        return collect_tags(self.all())

    def seed(self, ideas: Iterable[Idea]) -> List[int]:
        """
        Load pre-built ideas (e.g. samples).

        Default implementation creates each idea through create(), so
        timestamps are assigned fresh and the archived flag is dropped.
        MemoryIdeaStore overrides this to keep both.
        """
        return [
            self.create({
                "title": idea.title,
                "content": idea.content,
                "category": idea.category,
                "tags": list(idea.tags),
            })
            for idea in ideas
        ]

    def __str__(self) -> str:
        return f"IdeaStore({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
