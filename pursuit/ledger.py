"""
Ledger service: the public operation surface.

Each mutating call follows the same path:
    decide (pure, may raise LedgerError) -> append to log -> apply to state

A failed decision writes nothing. A failed or conflicting append leaves the
in-memory state untouched. The host serializes calls; there is no locking here.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from . import operations, query
from .core.context import HostContext
from .core.errors import EventStoreError, LedgerError
from .core.events import Event
from .core.reducer import Reducer
from .core.state import LedgerState, State, ledger_state
from .handlers import build_reducer
from .log.file_store import FileEventStore
from .log.integrity import ZERO_HASH, verify_chain
from .log.store import EventStore
from .logging_config import get_logger
from .replay.runner import replay_records

MSG_INSCRIBED = "Pursuit inscribed"
MSG_CLASSIFIED = "Priority classified"
MSG_DEADLINE = "Deadline established"
MSG_SEEDED = "Pursuit seeded"
MSG_MODIFIED = "Pursuit modified"
MSG_ELIMINATED = "Pursuit eliminated"


@dataclass(frozen=True)
class Receipt:
    """Success payload: confirmation message plus where the write landed."""
    message: str
    identity: str
    seq: int
    event_hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "identity": self.identity,
            "seq": self.seq,
            "event_hash": self.event_hash,
        }


class Ledger:
    """
    Usage:
        ledger = Ledger.open_file("/tmp/pursuit/ledger-events.log")
        ctx = HostContext("alice", height=10)
        ledger.inscribe(ctx, "Run a marathon")
        ledger.validate_presence(ctx)
    """

    def __init__(
        self,
        store: EventStore,
        reducer: Optional[Reducer] = None,
        state: Optional[State] = None,
        head: Optional[str] = None,
    ) -> None:
        """
        head is the hash of the last event folded into state. Defaults to the
        store's current head, which is only right for an empty state.
        """
        self.store = store
        self.reducer = reducer or build_reducer()
        self._state = state or State()
        self._head = head if head is not None else store.get_last_hash()

    @classmethod
    def open(cls, store: EventStore, reducer: Optional[Reducer] = None) -> "Ledger":
        """
        Verify the store's hash chain and rebuild state by replay.

        Raises:
            IntegrityError: If the chain is broken
        """
        reducer = reducer or build_reducer()
        records = list(store.records())
        verify_chain(records)
        result = replay_records(records, reducer)
        head = records[-1]["event_hash"] if records else ZERO_HASH
        get_logger(__name__).debug("Ledger opened", extra={"events_replayed": result.applied})
        return cls(store, reducer, result.state, head=head)

    @classmethod
    def open_file(cls, path: str, create: bool = True) -> "Ledger":
        return cls.open(FileEventStore(path, create=create))

    @property
    def state(self) -> State:
        return self._state

    @property
    def ledger(self) -> LedgerState:
        return ledger_state(self._state)

    def _execute(self, message: str, ctx: HostContext, decide: Callable[[LedgerState], Event]) -> Receipt:
        log = get_logger(__name__, trace_id=ctx.caller)
        try:
            event = decide(self.ledger)
        except LedgerError as ex:
            log.warning(
                "%s rejected: %s",
                message,
                ex.message,
                extra={"code": ex.code, "kind": ex.kind, "height": ctx.height},
            )
            raise

        result = self.store.append(event, expected_prev_hash=self._head)
        if not result.committed:
            raise EventStoreError(
                f"ledger is stale: expected head {self._head}, log is at {result.observed_prev_hash}"
            )

        self._state = self.reducer.apply(self._state, result.event)
        self._head = result.event_hash
        log.info(
            message,
            extra={"event_type": result.event.type, "seq": result.seq, "height": ctx.height},
        )
        return Receipt(message=message, identity=event.identity, seq=result.seq, event_hash=result.event_hash)

    def inscribe(self, ctx: HostContext, vision_text: str) -> Receipt:
        return self._execute(MSG_INSCRIBED, ctx, lambda st: operations.inscribe(st, ctx, vision_text))

    def classify_weight(self, ctx: HostContext, level: int) -> Receipt:
        return self._execute(MSG_CLASSIFIED, ctx, lambda st: operations.classify_weight(st, ctx, level))

    def establish_deadline(self, ctx: HostContext, duration_units: int) -> Receipt:
        return self._execute(MSG_DEADLINE, ctx, lambda st: operations.establish_deadline(st, ctx, duration_units))

    def seed_for_other(self, ctx: HostContext, target_identity: str, vision_text: str) -> Receipt:
        return self._execute(
            MSG_SEEDED, ctx, lambda st: operations.seed_for_other(st, ctx, target_identity, vision_text)
        )

    def modify(self, ctx: HostContext, vision_text: str, completion_state: bool) -> Receipt:
        return self._execute(
            MSG_MODIFIED, ctx, lambda st: operations.modify(st, ctx, vision_text, completion_state)
        )

    def eliminate(self, ctx: HostContext) -> Receipt:
        return self._execute(MSG_ELIMINATED, ctx, lambda st: operations.eliminate(st, ctx))

    # Reads

    def validate_presence(self, ctx: HostContext) -> query.PresenceReport:
        return query.validate_presence(self.ledger, ctx.caller)

    def chronicle(self, identity: str):
        return query.get_chronicle(self.ledger, identity)

    def priority(self, identity: str):
        return query.get_priority(self.ledger, identity)

    def deadline(self, identity: str):
        return query.get_deadline(self.ledger, identity)

    def orphaned_identities(self) -> List[str]:
        return query.orphaned_identities(self.ledger)
