"""
Event model for ledger writes.

Every accepted operation produces exactly one immutable Event.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

CHRONICLE_INSCRIBED = "ChronicleInscribed"
CHRONICLE_SEEDED = "ChronicleSeeded"
CHRONICLE_MODIFIED = "ChronicleModified"
CHRONICLE_ELIMINATED = "ChronicleEliminated"
PRIORITY_CLASSIFIED = "PriorityClassified"
DEADLINE_ESTABLISHED = "DeadlineEstablished"

EVENT_TYPES = (
    CHRONICLE_INSCRIBED,
    CHRONICLE_SEEDED,
    CHRONICLE_MODIFIED,
    CHRONICLE_ELIMINATED,
    PRIORITY_CLASSIFIED,
    DEADLINE_ESTABLISHED,
)


@dataclass(frozen=True)
class Event:
    """
    Immutable event record.

    Fields:
        type: Event type (one of EVENT_TYPES)
        aggregate_id: Target aggregate identifier ("ledger")
        ts: Block height at which the write was accepted
        payload: Event-specific data, always including "identity"
        meta: Metadata (caller)
        seq: Sequence number (assigned by EventStore)
    """
    type: str
    aggregate_id: str
    ts: int
    payload: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)
    seq: Optional[int] = None

    @property
    def identity(self) -> Optional[str]:
        return self.payload.get("identity")

    def with_seq(self, seq: int) -> "Event":
        return Event(
            type=self.type,
            aggregate_id=self.aggregate_id,
            ts=self.ts,
            payload=self.payload,
            meta=self.meta,
            seq=seq,
        )

    def require_seq(self) -> int:
        """
        Get sequence number or raise error if not assigned.

        Raises:
            ValueError: If seq is None
        """
        if self.seq is None:
            raise ValueError("Event.seq is required but None")
        return self.seq

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "aggregate_id": self.aggregate_id,
            "seq": self.seq,
            "ts": self.ts,
            "payload": self.payload,
            "meta": self.meta,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Event":
        return Event(
            type=data["type"],
            aggregate_id=data["aggregate_id"],
            seq=data.get("seq"),
            ts=data["ts"],
            payload=dict(data.get("payload") or {}),
            meta=dict(data.get("meta") or {}),
        )
