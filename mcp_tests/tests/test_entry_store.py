import dataclasses

import pytest

from core.entry_store import Entry, EntryStore
from core.recency import RecencyTracker


def test_entry_is_immutable():
    e = Entry(key="k", value=1, refreshed_at=5.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.value = 2


def test_entry_staleness_is_strict():
    e = Entry(key="k", value=1, refreshed_at=5.0)
    assert e.age(12.0) == 7.0
    assert e.is_stale(15.0, ttl=10.0) is False
    assert e.is_stale(15.5, ttl=10.0) is True


def test_entry_store_set_replaces_entry_wholesale():
    s = EntryStore()
    first = s.set("k", "v1", now=1.0)
    second = s.set("k", "v2", now=2.0)

    assert first is not second
    assert first.value == "v1"
    assert s.get("k") is second
    assert len(s) == 1


def test_entry_store_remove_and_clear():
    s = EntryStore()
    s.set("a", 1, now=0.0)
    s.set("b", 2, now=0.0)

    assert s.remove("a").value == 1
    assert s.remove("a") is None
    assert "a" not in s
    assert "b" in s
    assert len(s) == 1

    s.clear()
    assert len(s) == 0


def test_recency_touch_orders_oldest_first():
    r = RecencyTracker()
    r.touch("a")
    r.touch("b")
    r.touch("c")
    r.touch("a")

    assert r.snapshot() == ["b", "c", "a"]


def test_recency_pop_oldest():
    r = RecencyTracker()
    assert r.pop_oldest() is None

    r.touch("a")
    r.touch("b")

    assert r.pop_oldest() == "a"
    assert r.snapshot() == ["b"]


def test_recency_remove_and_clear():
    r = RecencyTracker()
    r.touch("a")
    r.touch("b")

    assert r.remove("a") is True
    assert r.remove("a") is False
    assert r.snapshot() == ["b"]

    r.clear()
    assert r.snapshot() == []
    assert r.pop_oldest() is None
