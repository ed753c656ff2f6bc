"""
Replay system for deterministic state reconstruction.

Same events -> same ledger state.
"""

from .runner import ReplayResult, replay, replay_records

__all__ = [
    "ReplayResult",
    "replay",
    "replay_records",
]
