"""
Session activity log.

Keeps timestamped, levelled entries describing what happened in the
session (ideas created, archived, rejected submissions, stale ids). The
web dashboard shows them as notices and the CLI prints them in verbose mode.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

LEVELS = ("info", "success", "warning", "error")


@dataclass
class ActivityLog:
    """Bounded in-memory log of session activity."""
    limit: int = 200
    entries: List[dict] = field(default_factory=list)
    clock: Callable[[], datetime] = datetime.now

    def log(self, message: str, level: str = "info") -> dict:
        """Add a log entry with timestamp."""
        if level not in LEVELS:
            level = "info"
        entry = {
            "time": self.clock().strftime("%H:%M:%S"),
            "level": level,
            "message": message,
        }
        self.entries.append(entry)
        if len(self.entries) > self.limit:
            del self.entries[: len(self.entries) - self.limit]
        return entry

    def info(self, message: str) -> dict:
        return self.log(message, "info")

    def success(self, message: str) -> dict:
        return self.log(message, "success")

    def warning(self, message: str) -> dict:
        return self.log(message, "warning")

    def error(self, message: str) -> dict:
        return self.log(message, "error")

    @property
    def last(self) -> Optional[dict]:
        return self.entries[-1] if self.entries else None

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)
