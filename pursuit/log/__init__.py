"""
Event storage and integrity verification.

This module provides:
- EventStore: Abstract interface for event persistence
- FileEventStore: File-based append-only storage (JSONL)
- MemoryEventStore: In-process storage with the same contract
- Integrity: Hash chain construction and verification
"""

from .store import EventStore, AppendResult
from .file_store import FileEventStore
from .memory_store import MemoryEventStore
from .integrity import ZERO_HASH, hash_event, chain_record, find_break, verify_chain

__all__ = [
    "EventStore",
    "AppendResult",
    "FileEventStore",
    "MemoryEventStore",
    "ZERO_HASH",
    "hash_event",
    "chain_record",
    "find_break",
    "verify_chain",
]
