"""
State model for the pursuit ledger.

State is the engine-level container (versioned aggregates). The ledger itself is a
single aggregate, LedgerState, holding three independent stores keyed by identity:
chronicles, priorities and deadlines.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

LEDGER_AGG_ID = "ledger"


@dataclass(frozen=True)
class State:
    """
    Immutable state container.

    Fields:
        version: Monotonic version number (increments with each event)
        aggregates: Dict of aggregate_id -> aggregate_state

    Use with_agg() to create new state with updated aggregate.
    """
    version: int = 0
    aggregates: Dict[str, Any] = field(default_factory=dict)

    def get_agg(self, aggregate_id: str) -> Any:
        """Get aggregate state by ID, or None if not found."""
        return self.aggregates.get(aggregate_id)

    def with_agg(self, aggregate_id: str, agg_state: Any) -> "State":
        """Return new State with the aggregate replaced and version incremented."""
        new_aggs = dict(self.aggregates)
        new_aggs[aggregate_id] = agg_state
        return State(version=self.version + 1, aggregates=new_aggs)


@dataclass(frozen=True)
class Chronicle:
    """The pursuit record for one identity."""
    vision: str
    fulfilled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"vision": self.vision, "fulfilled": self.fulfilled}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Chronicle":
        return Chronicle(vision=data["vision"], fulfilled=bool(data.get("fulfilled", False)))


@dataclass(frozen=True)
class PriorityWeight:
    weight: int

    def to_dict(self) -> Dict[str, Any]:
        return {"weight": self.weight}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "PriorityWeight":
        return PriorityWeight(weight=int(data["weight"]))


@dataclass(frozen=True)
class DeadlineMark:
    """
    Absolute deadline for one identity.

    alert_processed is written False on every upsert. Alert handling happens
    outside the ledger.
    """
    target_height: int
    alert_processed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"target_height": self.target_height, "alert_processed": self.alert_processed}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "DeadlineMark":
        return DeadlineMark(
            target_height=int(data["target_height"]),
            alert_processed=bool(data.get("alert_processed", False)),
        )


@dataclass(frozen=True)
class LedgerState:
    """
    The three ledger stores.

    Priority and deadline entries are gated on a Chronicle only when written.
    Eliminating a Chronicle leaves them in place.
    """
    chronicles: Dict[str, Chronicle] = field(default_factory=dict)
    priorities: Dict[str, PriorityWeight] = field(default_factory=dict)
    deadlines: Dict[str, DeadlineMark] = field(default_factory=dict)

    @staticmethod
    def initial() -> "LedgerState":
        return LedgerState()

    def has_chronicle(self, identity: str) -> bool:
        return identity in self.chronicles

    def with_chronicle(self, identity: str, chronicle: Chronicle) -> "LedgerState":
        chronicles = dict(self.chronicles)
        chronicles[identity] = chronicle
        return LedgerState(chronicles=chronicles, priorities=self.priorities, deadlines=self.deadlines)

    def without_chronicle(self, identity: str) -> "LedgerState":
        chronicles = dict(self.chronicles)
        chronicles.pop(identity, None)
        return LedgerState(chronicles=chronicles, priorities=self.priorities, deadlines=self.deadlines)

    def with_priority(self, identity: str, priority: PriorityWeight) -> "LedgerState":
        priorities = dict(self.priorities)
        priorities[identity] = priority
        return LedgerState(chronicles=self.chronicles, priorities=priorities, deadlines=self.deadlines)

    def with_deadline(self, identity: str, deadline: DeadlineMark) -> "LedgerState":
        deadlines = dict(self.deadlines)
        deadlines[identity] = deadline
        return LedgerState(chronicles=self.chronicles, priorities=self.priorities, deadlines=deadlines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chronicles": {k: v.to_dict() for k, v in self.chronicles.items()},
            "priorities": {k: v.to_dict() for k, v in self.priorities.items()},
            "deadlines": {k: v.to_dict() for k, v in self.deadlines.items()},
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "LedgerState":
        data = data or {}
        return LedgerState(
            chronicles={k: Chronicle.from_dict(v) for k, v in (data.get("chronicles") or {}).items()},
            priorities={k: PriorityWeight.from_dict(v) for k, v in (data.get("priorities") or {}).items()},
            deadlines={k: DeadlineMark.from_dict(v) for k, v in (data.get("deadlines") or {}).items()},
        )


def as_ledger_state(agg: Any) -> LedgerState:
    """
    Coerce a stored aggregate to LedgerState.

    Handlers keep the LedgerState itself; the dict form is accepted for states
    rebuilt from serialized snapshots.
    """
    if isinstance(agg, LedgerState):
        return agg
    if isinstance(agg, dict):
        return LedgerState.from_dict(agg)
    return LedgerState.initial()


def ledger_state(state: State, aggregate_id: str = LEDGER_AGG_ID) -> LedgerState:
    """Load the ledger aggregate out of an engine State."""
    return as_ledger_state(state.get_agg(aggregate_id))
