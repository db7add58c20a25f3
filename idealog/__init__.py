"""
Idea Log - in-memory idea logging with filtering, sorting and rendering.

    user action -> dispatch() -> store / state / form
                -> filter -> sort -> render -> HTML / JSON / text
"""

__version__ = "1.0.0"
