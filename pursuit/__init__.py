"""
Pursuit Ledger

Per-identity goal-tracking ledger backed by a deterministic, hash-chained event log.
"""

__version__ = "0.1.0"

from .core import HostContext, LedgerError, EntityMissing, RecordExists, InvalidInput
from .ledger import Ledger, Receipt
from .query import PresenceReport

__all__ = [
    "__version__",
    "HostContext",
    "Ledger",
    "Receipt",
    "PresenceReport",
    "LedgerError",
    "EntityMissing",
    "RecordExists",
    "InvalidInput",
]
