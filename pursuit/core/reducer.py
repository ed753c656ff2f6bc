"""
Reducer: Pure state transition functions.

The reducer must be:
- Pure (no side effects, no I/O)
- Deterministic (same input -> same output)
"""

from typing import Callable, Dict, Any, Iterable
from .events import Event
from .state import State
from .errors import InvalidTransitionError

# Handler signature: (current_aggregate_state, event) -> new_aggregate_state
Handler = Callable[[Any, Event], Any]


class Reducer:
    """
    Registry of event handlers for state transitions.

    Usage:
        reducer = Reducer()
        reducer.register("ChronicleInscribed", on_chronicle_inscribed)
        new_state = reducer.apply(state, event)
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, event_type: str, handler: Handler) -> None:
        self._handlers[event_type] = handler

    def handles(self, event_type: str) -> bool:
        return event_type in self._handlers

    def apply(self, state: State, event: Event) -> State:
        """
        Apply event to state using registered handler.

        Raises:
            InvalidTransitionError: If no handler registered for event type
        """
        if event.type not in self._handlers:
            raise InvalidTransitionError(f"No handler for event type: {event.type}")

        current = state.get_agg(event.aggregate_id)
        new_agg_state = self._handlers[event.type](current, event)
        return state.with_agg(event.aggregate_id, new_agg_state)

    def apply_all(self, state: State, events: Iterable[Event]) -> State:
        for ev in events:
            state = self.apply(state, ev)
        return state
