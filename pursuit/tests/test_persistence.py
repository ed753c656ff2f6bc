"""
Tests for file-backed persistence and replay.
"""

import os
import tempfile

import pytest

from pursuit.core.canonical import canonical_json_str
from pursuit.core.context import HostContext
from pursuit.core.state import Chronicle, ledger_state
from pursuit.handlers import build_reducer
from pursuit.ledger import Ledger
from pursuit.log.file_store import FileEventStore
from pursuit.query import PresenceReport
from pursuit.replay.runner import replay
from pursuit.snapshot import compute_state_hash


def _scenario(ledger: Ledger) -> None:
    ctx = HostContext("alice", height=500)
    ledger.inscribe(ctx, "Run a marathon")
    ledger.classify_weight(ctx, 2)
    ledger.establish_deadline(ctx, 50)
    ledger.seed_for_other(ctx, "bob", "Learn Rust")
    ledger.modify(ctx.advance(3), "Run a marathon this year", True)


def test_reopen_restores_state():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = os.path.join(tmpdir, "nested", "ledger.log")
        first = Ledger.open_file(log_path)
        _scenario(first)

        reopened = Ledger.open_file(log_path)

        assert reopened.ledger == first.ledger
        assert reopened.validate_presence(HostContext("alice")) == PresenceReport(True, 24, True)
        assert reopened.chronicle("bob") == Chronicle("Learn Rust", False)
        assert compute_state_hash(reopened.state) == compute_state_hash(first.state)


def test_reopened_ledger_keeps_appending():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = os.path.join(tmpdir, "ledger.log")
        _scenario(Ledger.open_file(log_path))

        receipt = Ledger.open_file(log_path).eliminate(HostContext("bob", height=600))

        assert receipt.seq == 5
        assert Ledger.open_file(log_path).chronicle("bob") is None


def test_replay_determinism():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = os.path.join(tmpdir, "ledger.log")
        _scenario(Ledger.open_file(log_path))
        store = FileEventStore(log_path)

        results = {canonical_json_str(replay(store, build_reducer()).state.aggregates) for _ in range(20)}

        assert len(results) == 1


def test_replay_partial():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = os.path.join(tmpdir, "ledger.log")
        _scenario(Ledger.open_file(log_path))

        result = replay(FileEventStore(log_path), build_reducer(), to_seq=0)

        assert result.applied == 1
        assert ledger_state(result.state).chronicles == {"alice": Chronicle("Run a marathon", False)}


def test_replay_empty_log():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = FileEventStore(os.path.join(tmpdir, "empty.log"))

        result = replay(store, build_reducer())

        assert result.applied == 0
        assert result.state.version == 0
        assert result.state.aggregates == {}


def test_open_missing_without_create():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(FileNotFoundError):
            FileEventStore(os.path.join(tmpdir, "absent.log"), create=False)
