"""
Core ledger primitives.

- HostContext: caller identity and block height supplied by the host
- BoundedText: capacity-checked vision text
- Event: immutable record of one accepted write
- State / LedgerState: engine container and the three ledger stores
- Reducer: pure event application
- Canonical: deterministic serialization
- Errors: domain failures with stable codes, infrastructure errors
"""

from .context import HostContext
from .text import BoundedText, VISION_CAPACITY
from .events import Event, EVENT_TYPES
from .state import (
    State,
    LedgerState,
    Chronicle,
    PriorityWeight,
    DeadlineMark,
    LEDGER_AGG_ID,
    as_ledger_state,
    ledger_state,
)
from .reducer import Reducer
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .errors import (
    LedgerError,
    EntityMissing,
    RecordExists,
    InvalidInput,
    InvalidTransitionError,
    IntegrityError,
    EventStoreError,
)

__all__ = [
    "HostContext",
    "BoundedText",
    "VISION_CAPACITY",
    "Event",
    "EVENT_TYPES",
    "State",
    "LedgerState",
    "Chronicle",
    "PriorityWeight",
    "DeadlineMark",
    "LEDGER_AGG_ID",
    "as_ledger_state",
    "ledger_state",
    "Reducer",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "LedgerError",
    "EntityMissing",
    "RecordExists",
    "InvalidInput",
    "InvalidTransitionError",
    "IntegrityError",
    "EventStoreError",
]
