"""
Decision layer: precondition checks for every ledger write.

NO side effects. NO I/O.
Pure functions only: (ledger_state, context, args) -> Event

Validations run in a fixed order and the first failure is raised as a
LedgerError. A returned Event is the single write the operation performs.
"""

from typing import Any, Dict

from .core import events as ev_types
from .core.context import HostContext
from .core.errors import EntityMissing, InvalidInput, RecordExists
from .core.events import Event
from .core.state import LEDGER_AGG_ID, LedgerState
from .core.text import BoundedText

MIN_WEIGHT = 1
MAX_WEIGHT = 3


def _event(event_type: str, ctx: HostContext, payload: Dict[str, Any]) -> Event:
    return Event(
        type=event_type,
        aggregate_id=LEDGER_AGG_ID,
        ts=ctx.height,
        payload=payload,
        meta={"caller": ctx.caller},
    )


def _vision(raw: Any, identity: str) -> BoundedText:
    try:
        return BoundedText.parse(raw)
    except InvalidInput as ex:
        raise InvalidInput(f"vision text rejected: {ex.message}", identity) from ex


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_chronicle(state: LedgerState, identity: str) -> None:
    if not state.has_chronicle(identity):
        raise EntityMissing(f"no pursuit recorded for {identity}", identity)


def _require_absent(state: LedgerState, identity: str) -> None:
    if state.has_chronicle(identity):
        raise RecordExists(f"a pursuit is already recorded for {identity}", identity)


def inscribe(state: LedgerState, ctx: HostContext, vision_text: Any) -> Event:
    """Create the caller's Chronicle. Refuses to overwrite an existing one."""
    identity = ctx.caller
    _require_absent(state, identity)
    vision = _vision(vision_text, identity)
    return _event(ev_types.CHRONICLE_INSCRIBED, ctx, {"identity": identity, "vision": vision.value})


def classify_weight(state: LedgerState, ctx: HostContext, level: Any) -> Event:
    """Upsert the caller's priority weight (1, 2 or 3)."""
    identity = ctx.caller
    _require_chronicle(state, identity)
    if not _is_int(level) or not MIN_WEIGHT <= level <= MAX_WEIGHT:
        raise InvalidInput(f"priority level must be between {MIN_WEIGHT} and {MAX_WEIGHT}, got {level!r}", identity)
    return _event(ev_types.PRIORITY_CLASSIFIED, ctx, {"identity": identity, "weight": level})


def establish_deadline(state: LedgerState, ctx: HostContext, duration_units: Any) -> Event:
    """
    Upsert the caller's deadline at ctx.height + duration_units.

    The height is read once, here; the resulting event carries the absolute target.
    """
    identity = ctx.caller
    _require_chronicle(state, identity)
    if not _is_int(duration_units) or duration_units <= 0:
        raise InvalidInput(f"deadline duration must be a positive integer, got {duration_units!r}", identity)
    now = ctx.height
    return _event(
        ev_types.DEADLINE_ESTABLISHED,
        ctx,
        {"identity": identity, "target_height": now + duration_units, "duration": duration_units},
    )


def seed_for_other(state: LedgerState, ctx: HostContext, target_identity: Any, vision_text: Any) -> Event:
    """
    Create a Chronicle for target_identity.

    Any caller may seed any identity that has no Chronicle. The caller's own
    record, present or not, is not read or touched.
    """
    if not isinstance(target_identity, str) or not target_identity:
        raise InvalidInput("target identity must be a non-empty string", ctx.caller)
    _require_absent(state, target_identity)
    vision = _vision(vision_text, target_identity)
    return _event(
        ev_types.CHRONICLE_SEEDED,
        ctx,
        {"identity": target_identity, "vision": vision.value, "seeded_by": ctx.caller},
    )


def modify(state: LedgerState, ctx: HostContext, vision_text: Any, completion_state: Any) -> Event:
    """Replace both fields of the caller's Chronicle."""
    identity = ctx.caller
    _require_chronicle(state, identity)
    vision = _vision(vision_text, identity)
    if not isinstance(completion_state, bool):
        raise InvalidInput(f"completion state must be a boolean, got {completion_state!r}", identity)
    return _event(
        ev_types.CHRONICLE_MODIFIED,
        ctx,
        {"identity": identity, "vision": vision.value, "fulfilled": completion_state},
    )


def eliminate(state: LedgerState, ctx: HostContext) -> Event:
    """Delete the caller's Chronicle. Priority and deadline entries are kept."""
    identity = ctx.caller
    _require_chronicle(state, identity)
    return _event(ev_types.CHRONICLE_ELIMINATED, ctx, {"identity": identity})
