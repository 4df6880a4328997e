from __future__ import annotations

import pytest

from speeddial.errors import (
    CodeNotFoundError,
    CodeTooLongError,
    DuplicateCodeError,
    NotReadyError,
    PartitionFullError,
    ValueTooLongError,
)
from speeddial.partition import Partition


def test_add_then_get_returns_value():
    p = Partition("Directory 1", 3)
    p.add("home", "123-456-7890")
    assert p.get("home") == "123-456-7890"
    assert p.get("work") is None
    assert "home" in p
    assert len(p) == 1
    assert not p.is_empty


def test_duplicate_code_rejected_and_count_unchanged():
    p = Partition("Directory 1", 3)
    p.add("home", "111")
    with pytest.raises(DuplicateCodeError):
        p.add("home", "222")
    assert p.count == 1
    assert p.get("home") == "111"


def test_capacity_checked_before_duplicate():
    p = Partition("Directory 1", 2)
    p.add("home", "111")
    p.add("work", "222")
    assert p.is_full
    # Existing code on a full directory reports full, not duplicate
    with pytest.raises(PartitionFullError):
        p.add("home", "333")
    with pytest.raises(PartitionFullError):
        p.add("x", "333")
    assert p.list() == [("home", "111"), ("work", "222")]


def test_one_remove_frees_exactly_one_slot():
    p = Partition("Directory 3", 2)
    p.add("a", "1")
    p.add("b", "2")
    p.remove("a")
    p.add("c", "3")
    with pytest.raises(PartitionFullError):
        p.add("d", "4")


def test_remove_preserves_order_of_survivors():
    p = Partition("Directory 1", 5)
    for code in ("a", "b", "c", "d"):
        p.add(code, code.upper())
    p.remove("b")
    assert p.list() == [("a", "A"), ("c", "C"), ("d", "D")]
    with pytest.raises(CodeNotFoundError):
        p.remove("b")
    assert len(p.list()) == 3


def test_remove_missing_leaves_state_unchanged():
    p = Partition("Directory 2", 2)
    p.add("friend1", "111-222-3333")
    with pytest.raises(CodeNotFoundError):
        p.remove("nonexistent")
    assert p.list() == [("friend1", "111-222-3333")]


def test_too_long_input_rejected_not_truncated():
    p = Partition("Directory 1", 2, max_code_length=4, max_value_length=5)
    with pytest.raises(CodeTooLongError) as ei:
        p.add("house", "123")
    assert ei.value.max_length == 4
    with pytest.raises(ValueTooLongError):
        p.add("home", "123456")
    assert p.is_empty

    # Exactly at the limit is accepted
    p.add("home", "12345")
    assert p.get("home") == "12345"


def test_list_is_a_snapshot():
    p = Partition("Directory 1", 2)
    p.add("home", "111")
    snap = p.list()
    snap.append(("x", "y"))
    assert p.list() == [("home", "111")]


def test_invalid_capacity_raises():
    with pytest.raises(ValueError):
        Partition("Directory 1", 0)


def test_cleared_partition_rejects_entry_operations():
    p = Partition("Directory 1", 2)
    p.add("home", "111")
    p.clear()
    assert p.is_empty
    with pytest.raises(NotReadyError):
        p.add("work", "222")
    with pytest.raises(NotReadyError):
        p.list()
