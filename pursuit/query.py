"""
Read-only views over ledger state.

None of these functions fail or write.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .core.state import Chronicle, DeadlineMark, LedgerState, PriorityWeight


@dataclass(frozen=True)
class PresenceReport:
    present: bool
    description_length: int
    completion_achieved: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "present": self.present,
            "description_length": self.description_length,
            "completion_achieved": self.completion_achieved,
        }


ABSENT = PresenceReport(present=False, description_length=0, completion_achieved=False)


def validate_presence(state: LedgerState, identity: str) -> PresenceReport:
    chronicle = state.chronicles.get(identity)
    if chronicle is None:
        return ABSENT
    return PresenceReport(
        present=True,
        description_length=len(chronicle.vision),
        completion_achieved=chronicle.fulfilled,
    )


def get_chronicle(state: LedgerState, identity: str) -> Optional[Chronicle]:
    return state.chronicles.get(identity)


def get_priority(state: LedgerState, identity: str) -> Optional[PriorityWeight]:
    return state.priorities.get(identity)


def get_deadline(state: LedgerState, identity: str) -> Optional[DeadlineMark]:
    return state.deadlines.get(identity)


def orphaned_identities(state: LedgerState) -> List[str]:
    """
    Identities holding a priority or deadline entry but no Chronicle.

    Happens after eliminate(), which never cascades.
    """
    annotated = set(state.priorities.keys()) | set(state.deadlines.keys())
    return sorted(annotated - set(state.chronicles.keys()))
