"""
Replay runner: reconstruct state from event log.

Replay is pure: applies reducer to each event in sequence order.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from ..core.events import Event
from ..core.reducer import Reducer
from ..core.state import State
from ..log.store import EventStore


@dataclass(frozen=True)
class ReplayResult:
    """
    Fields:
        state: Final state after applying events
        applied: Number of events applied
    """
    state: State
    applied: int


def replay_records(
    records: Iterable[Dict[str, Any]], reducer: Reducer, to_seq: Optional[int] = None
) -> ReplayResult:
    """
    Replay raw chain records already read from a store.

    Lets a caller verify and replay the exact same snapshot of the log.
    """
    st = State()
    count = 0

    for rec in records:
        ev = Event.from_dict(rec["event"])
        if to_seq is not None and ev.require_seq() > to_seq:
            break
        st = reducer.apply(st, ev)
        count += 1

    return ReplayResult(state=st, applied=count)


def replay(store: EventStore, reducer: Reducer, to_seq: Optional[int] = None) -> ReplayResult:
    """
    Replay events to reconstruct state.

    Args:
        store: Event store to read from
        reducer: Reducer with registered handlers
        to_seq: Stop at this sequence (inclusive, None = all)
    """
    return replay_records(store.records(), reducer, to_seq=to_seq)
