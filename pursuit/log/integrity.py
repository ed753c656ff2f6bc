"""
Hash chain integrity verification.

Each record carries the hash of the previous one, so any edit to a stored event
breaks every hash after it.
"""

import hashlib
from typing import Any, Dict, Iterable, Optional

from ..core.canonical import canonical_json_bytes
from ..core.errors import IntegrityError
from ..core.events import Event

ZERO_HASH = "0" * 64


def hash_event(prev_hash: str, event: Event) -> str:
    """
    Compute hash of event chained to previous hash.

    Hash input: prev_hash + canonical_json(event)
    """
    b = prev_hash.encode("utf-8") + canonical_json_bytes(event.to_dict())
    return hashlib.sha256(b).hexdigest()


def chain_record(prev_hash: str, event: Event) -> Dict[str, Any]:
    """
    Create hash chain record for storage.

    Returns:
        {"prev_hash", "event_hash", "event"} ready for JSONL serialization
    """
    return {
        "prev_hash": prev_hash,
        "event_hash": hash_event(prev_hash, event),
        "event": event.to_dict(),
    }


def find_break(records: Iterable[Dict[str, Any]]) -> Optional[int]:
    """
    Walk a sequence of chain records.

    Returns:
        Index of the first record whose link or hash does not verify, or None
    """
    prev_hash = ZERO_HASH
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            return i
        if rec.get("prev_hash") != prev_hash:
            return i
        try:
            ev = Event.from_dict(rec["event"])
        except (KeyError, TypeError):
            return i
        if hash_event(prev_hash, ev) != rec.get("event_hash"):
            return i
        prev_hash = rec["event_hash"]
    return None


def verify_chain(records: Iterable[Dict[str, Any]]) -> None:
    """
    Raises:
        IntegrityError: If the chain is broken
    """
    broken_at = find_break(records)
    if broken_at is not None:
        raise IntegrityError(f"hash chain broken at record {broken_at}")
