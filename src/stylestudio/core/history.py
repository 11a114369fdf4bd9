"""In-memory generation history for a studio session.

The history keeps the most recent generated images, newest first.  It is
bounded: once ``capacity`` entries exist, adding another silently drops the
oldest.  Nothing is persisted; the history lives and dies with its session.

The listing helpers mirror what the API needs: stable entry ids, metadata
dictionaries without image bytes, and pagination that clamps the requested
page to the valid range.
"""

from __future__ import annotations

import threading
import time
import uuid
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from stylestudio.core.models import GeneratedResult, GenerationOptions

DEFAULT_CAPACITY = 36


@dataclass(frozen=True)
class HistoryEntry:
    """One produced image with the options that produced it."""

    result: GeneratedResult
    theme: str
    concept: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: float = field(default_factory=time.time)

    @classmethod
    def from_result(cls, result: GeneratedResult, options: GenerationOptions) -> HistoryEntry:
        return cls(result=result, theme=options.theme.value, concept=options.concept)

    def to_dict(self) -> dict:
        """Metadata view of the entry; image bytes are served separately."""
        return {
            "id": self.id,
            "theme": self.theme,
            "concept": self.concept,
            "mime_type": self.result.mime_type,
            "prompt": self.result.prompt,
            "size": len(self.result.image),
            "created_at": self.created_at,
            "url": f"/api/history/{self.id}/image",
        }


class History:
    """Bounded, most-recent-first sequence of :class:`HistoryEntry`.

    Attributes:
        capacity: Maximum number of entries retained.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def add(self, entry: HistoryEntry) -> HistoryEntry:
        """Insert *entry* at the front, evicting the oldest entry when full."""
        with self._lock:
            self._entries.appendleft(entry)
        return entry

    def entries(self) -> list[HistoryEntry]:
        """Snapshot of all entries, newest first."""
        with self._lock:
            return list(self._entries)

    def get(self, entry_id: str) -> HistoryEntry | None:
        with self._lock:
            return next((e for e in self._entries if e.id == entry_id), None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries())


def paginate_entries(entries: list[HistoryEntry], page: int, per_page: int) -> dict:
    """Paginate history entries and clamp the requested page to valid bounds.

    Args:
        entries: Entries to paginate, newest first.
        page: Requested one-based page number.
        per_page: Requested items per page.

    Returns:
        Dictionary containing ``total``, ``page``, ``per_page``, ``pages``, and
        ``images`` (entry metadata dictionaries) for the resolved page.
    """
    per_page = max(per_page, 1)
    total = len(entries)
    pages = (total + per_page - 1) // per_page if total > 0 else 1
    resolved_page = min(max(page, 1), pages)

    start = (resolved_page - 1) * per_page
    end = start + per_page

    return {
        "total": total,
        "page": resolved_page,
        "per_page": per_page,
        "pages": pages,
        "images": [entry.to_dict() for entry in entries[start:end]],
    }
