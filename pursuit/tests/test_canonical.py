"""
Tests for canonical serialization.

Ledger hashes depend on these being stable.
"""

from pursuit.core.canonical import canonicalize, canonical_json_bytes, canonical_json_str
from pursuit.core.state import Chronicle, LedgerState


def test_canonicalize_dict_key_order():
    """Dict key order must not affect canonical output."""
    d1 = {"z": 1, "a": 2, "m": 3}
    d2 = {"a": 2, "m": 3, "z": 1}

    assert canonicalize(d1) == canonicalize(d2)


def test_canonicalize_expands_records():
    """Objects with to_dict() serialize as their dict form."""
    state = LedgerState().with_chronicle("alice", Chronicle("Run a marathon"))

    canon = canonicalize(state)

    assert list(canon.keys()) == ["chronicles", "deadlines", "priorities"]
    assert canon["chronicles"]["alice"] == {"fulfilled": False, "vision": "Run a marathon"}


def test_canonical_json_str_compact_sorted():
    obj = {"b": 2, "a": 1}

    assert canonical_json_str(obj) == '{"a":1,"b":2}'
    assert canonical_json_bytes(obj) == b'{"a":1,"b":2}'


def test_canonical_handles_unicode():
    """Unicode vision text must survive unescaped."""
    s = canonical_json_str({"vision": "Courir un marathon à Paris"})

    assert "à" in s
