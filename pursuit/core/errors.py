"""
Exception types for the pursuit ledger.

LedgerError subclasses are the domain failures returned to callers; each carries a
stable numeric code. The remaining types signal infrastructure problems.
"""

from typing import Optional


class LedgerError(Exception):
    """Base class for precondition failures. Raised before any write."""

    code: int = 0
    kind: str = "LedgerError"

    def __init__(self, message: str, identity: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.identity = identity

    def to_dict(self) -> dict:
        return {"error": self.kind, "code": self.code, "message": self.message, "identity": self.identity}


class EntityMissing(LedgerError):
    """Raised when a required Chronicle does not exist for the identity."""

    code = 404
    kind = "EntityMissing"


class RecordExists(LedgerError):
    """Raised when a Chronicle already exists where uniqueness is required."""

    code = 409
    kind = "RecordExists"


class InvalidInput(LedgerError):
    """Raised when an argument violates its domain constraint."""

    code = 400
    kind = "InvalidInput"


class InvalidTransitionError(Exception):
    """Raised when event handler is not registered or transition is invalid."""
    pass


class IntegrityError(Exception):
    """Raised when hash chain verification fails."""
    pass


class EventStoreError(Exception):
    """Raised when event store operations fail."""
    pass
