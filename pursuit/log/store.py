"""
EventStore abstract interface.

Defines contract for event storage implementations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from ..core.events import Event


@dataclass(frozen=True)
class AppendResult:
    """
    Result of an append attempt.

    When committed is False and conflict is True, the event was not written.
    """

    event: Event
    seq: Optional[int]
    event_hash: Optional[str]
    prev_hash: Optional[str]
    committed: bool
    conflict: bool
    observed_prev_hash: Optional[str] = None


class EventStore(ABC):
    """
    Abstract event storage interface.

    All implementations must guarantee:
    - Append-only (no updates, no deletes)
    - Sequential ordering (events indexed by seq, starting at 0)
    - Hash chain records (see integrity.chain_record)
    """

    @abstractmethod
    def append(self, event: Event, expected_prev_hash: Optional[str] = None) -> AppendResult:
        """
        Append event to log.

        If expected_prev_hash is given and differs from the current head, nothing
        is written and the result reports a conflict.

        Raises:
            EventStoreError: If append fails
        """
        ...

    @abstractmethod
    def records(self) -> Iterator[Dict[str, Any]]:
        """Yield raw chain records in sequence order."""
        ...

    @abstractmethod
    def get_last_hash(self) -> str:
        """Return hash of the last record, or ZERO_HASH for an empty log."""
        ...
