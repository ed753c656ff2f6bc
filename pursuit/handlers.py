"""
Reducer handlers for the ledger aggregate.

All handlers are pure and deterministic. They trust the event: every precondition
was checked by the decision layer before the event was produced. The aggregate is
kept as a LedgerState; serialization happens only when hashing or snapshotting.
"""

from .core import events as ev_types
from .core.events import Event
from .core.reducer import Reducer
from .core.state import LedgerState, Chronicle, PriorityWeight, DeadlineMark, as_ledger_state


def register_handlers(reducer: Reducer) -> Reducer:
    reducer.register(ev_types.CHRONICLE_INSCRIBED, on_chronicle_created)
    reducer.register(ev_types.CHRONICLE_SEEDED, on_chronicle_created)
    reducer.register(ev_types.CHRONICLE_MODIFIED, on_chronicle_modified)
    reducer.register(ev_types.CHRONICLE_ELIMINATED, on_chronicle_eliminated)
    reducer.register(ev_types.PRIORITY_CLASSIFIED, on_priority_classified)
    reducer.register(ev_types.DEADLINE_ESTABLISHED, on_deadline_established)
    return reducer


def build_reducer() -> Reducer:
    return register_handlers(Reducer())


def on_chronicle_created(cur, ev: Event) -> LedgerState:
    state = as_ledger_state(cur)
    chronicle = Chronicle(vision=ev.payload["vision"], fulfilled=False)
    return state.with_chronicle(ev.payload["identity"], chronicle)


def on_chronicle_modified(cur, ev: Event) -> LedgerState:
    state = as_ledger_state(cur)
    chronicle = Chronicle(vision=ev.payload["vision"], fulfilled=bool(ev.payload["fulfilled"]))
    return state.with_chronicle(ev.payload["identity"], chronicle)


def on_chronicle_eliminated(cur, ev: Event) -> LedgerState:
    # Priority and deadline entries stay behind.
    return as_ledger_state(cur).without_chronicle(ev.payload["identity"])


def on_priority_classified(cur, ev: Event) -> LedgerState:
    state = as_ledger_state(cur)
    priority = PriorityWeight(weight=int(ev.payload["weight"]))
    return state.with_priority(ev.payload["identity"], priority)


def on_deadline_established(cur, ev: Event) -> LedgerState:
    state = as_ledger_state(cur)
    deadline = DeadlineMark(target_height=int(ev.payload["target_height"]), alert_processed=False)
    return state.with_deadline(ev.payload["identity"], deadline)
