"""Tests for stylestudio.core.history — bounded in-memory history.

Tests cover:
- Newest-first ordering and eviction of the oldest entry.
- Lookup and clearing.
- Pagination clamping.
"""

from __future__ import annotations

import pytest

from stylestudio.core.history import DEFAULT_CAPACITY, History, HistoryEntry, paginate_entries
from stylestudio.core.models import GeneratedResult


def _entry(n: int) -> HistoryEntry:
    return HistoryEntry(
        result=GeneratedResult(image=f"img-{n}".encode(), prompt=f"prompt {n}"),
        theme="korean",
        concept=f"concept {n}",
    )


class TestHistory:
    def test_default_capacity(self):
        assert DEFAULT_CAPACITY == 36
        assert History().capacity == 36

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            History(0)

    def test_newest_first(self):
        history = History(5)
        entries = [history.add(_entry(n)) for n in range(3)]
        assert history.entries() == list(reversed(entries))

    def test_overflow_drops_oldest(self):
        history = History(DEFAULT_CAPACITY)
        added = [history.add(_entry(n)) for n in range(DEFAULT_CAPACITY + 4)]

        kept = history.entries()
        assert len(kept) == DEFAULT_CAPACITY
        assert kept[0] is added[-1]
        assert kept[-1] is added[4]
        assert all(e not in kept for e in added[:4])

    def test_get_and_clear(self):
        history = History(3)
        entry = history.add(_entry(1))
        assert history.get(entry.id) is entry
        assert history.get("missing") is None

        history.clear()
        assert len(history) == 0
        assert history.get(entry.id) is None

    def test_iteration_is_a_snapshot(self):
        history = History(3)
        history.add(_entry(1))
        for _ in history:
            history.add(_entry(2))
        assert len(history) == 2


class TestHistoryEntry:
    def test_ids_unique(self):
        assert _entry(1).id != _entry(1).id

    def test_to_dict_has_no_image_bytes(self):
        entry = _entry(7)
        data = entry.to_dict()
        assert data["id"] == entry.id
        assert data["prompt"] == "prompt 7"
        assert data["size"] == len(b"img-7")
        assert data["url"] == f"/api/history/{entry.id}/image"
        assert b"img-7" not in repr(data).encode()

    def test_from_result(self, korean_options):
        result = GeneratedResult(image=b"x", prompt="p")
        entry = HistoryEntry.from_result(result, korean_options)
        assert entry.theme == "korean"
        assert entry.concept == korean_options.concept
        assert entry.result is result


class TestPaginate:
    def test_first_page(self):
        entries = [_entry(n) for n in range(25)]
        page = paginate_entries(entries, page=1, per_page=10)
        assert page["total"] == 25
        assert page["pages"] == 3
        assert [i["concept"] for i in page["images"]] == [f"concept {n}" for n in range(10)]

    def test_last_partial_page(self):
        page = paginate_entries([_entry(n) for n in range(25)], page=3, per_page=10)
        assert len(page["images"]) == 5

    def test_page_clamped(self):
        entries = [_entry(n) for n in range(5)]
        assert paginate_entries(entries, page=99, per_page=2)["page"] == 3
        assert paginate_entries(entries, page=-4, per_page=2)["page"] == 1

    def test_empty(self):
        page = paginate_entries([], page=1, per_page=12)
        assert page == {"total": 0, "page": 1, "per_page": 12, "pages": 1, "images": []}

    def test_per_page_floor(self):
        assert paginate_entries([_entry(1)], page=1, per_page=0)["per_page"] == 1
