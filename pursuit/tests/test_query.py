"""
Tests for read-only ledger views.
"""

from pursuit.core.state import Chronicle, DeadlineMark, LedgerState, PriorityWeight
from pursuit.query import (
    ABSENT,
    get_chronicle,
    get_deadline,
    get_priority,
    orphaned_identities,
    validate_presence,
)


def test_presence_absent():
    assert validate_presence(LedgerState(), "nobody") == ABSENT
    assert ABSENT.to_dict() == {"present": False, "description_length": 0, "completion_achieved": False}


def test_presence_counts_characters():
    st = LedgerState().with_chronicle("alice", Chronicle("Café", True))

    report = validate_presence(st, "alice")

    assert report.description_length == 4
    assert report.completion_achieved is True


def test_getters():
    st = (
        LedgerState()
        .with_chronicle("alice", Chronicle("Run"))
        .with_priority("alice", PriorityWeight(1))
        .with_deadline("alice", DeadlineMark(42))
    )

    assert get_chronicle(st, "alice") == Chronicle("Run", False)
    assert get_priority(st, "alice") == PriorityWeight(1)
    assert get_deadline(st, "alice") == DeadlineMark(42, False)
    assert get_chronicle(st, "bob") is None
    assert get_priority(st, "bob") is None
    assert get_deadline(st, "bob") is None


def test_orphans_sorted():
    st = (
        LedgerState()
        .with_priority("zed", PriorityWeight(2))
        .with_deadline("amy", DeadlineMark(5))
        .with_chronicle("kim", Chronicle("Paint"))
        .with_priority("kim", PriorityWeight(3))
    )

    assert orphaned_identities(st) == ["amy", "zed"]


def test_state_round_trips_through_dict():
    st = (
        LedgerState()
        .with_chronicle("alice", Chronicle("Run", True))
        .with_priority("alice", PriorityWeight(3))
        .with_deadline("bob", DeadlineMark(9))
    )

    assert LedgerState.from_dict(st.to_dict()) == st
