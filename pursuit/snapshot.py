"""
Deterministic state snapshot utilities.
"""

import hashlib

from .core.canonical import canonical_json_bytes
from .core.state import State


def serialize_state(state: State) -> bytes:
    """Canonical bytes for a State: same state, same bytes."""
    state_dict = {
        "version": state.version,
        "aggregates": state.aggregates,
    }
    return canonical_json_bytes(state_dict)


def compute_state_hash(state: State) -> str:
    """SHA-256 of serialize_state(), as 64 hex characters."""
    return hashlib.sha256(serialize_state(state)).hexdigest()
