"""
Store module.

Holds the in-memory idea collection and its mutation operations.
"""

from idealog.store.base import IdeaStore
from idealog.store.memory import MemoryIdeaStore

__all__ = [
    "IdeaStore",
    "MemoryIdeaStore",
]
