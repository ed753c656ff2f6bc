"""
Tests for the pursuit command line host.
"""

import json
import os

import pytest
from typer.testing import CliRunner

from pursuitctl.main import app

runner = CliRunner()


@pytest.fixture
def log_path(tmp_path, monkeypatch):
    monkeypatch.setenv("PURSUIT_LOG_LEVEL", "CRITICAL")
    path = str(tmp_path / "ledger.log")
    monkeypatch.setenv("PURSUIT_LEDGER_PATH", path)
    return path


def _invoke(*args):
    return runner.invoke(app, list(args))


def _json(result):
    return json.loads(result.stdout)


def test_end_to_end_json(log_path):
    assert _invoke("inscribe", "Run a marathon", "--as", "alice", "--height", "500").exit_code == 0
    assert _invoke("classify", "2", "--as", "alice").exit_code == 0
    assert _invoke("deadline", "50", "--as", "alice", "--height", "500").exit_code == 0
    result = _invoke("modify", "Run a marathon this year", "--done", "--as", "alice", "--json")
    assert result.exit_code == 0
    assert _json(result)["message"] == "Pursuit modified"

    status = _invoke("status", "--as", "alice", "--json")

    assert status.exit_code == 0
    assert _json(status) == {
        "present": True,
        "description_length": 24,
        "completion_achieved": True,
        "identity": "alice",
        "priority": 2,
        "deadline": {"target_height": 550, "alert_processed": False},
    }


def test_ledger_failure_exit_code(log_path):
    _invoke("inscribe", "Run a marathon", "--as", "alice")

    result = _invoke("inscribe", "Again", "--as", "alice", "--json")

    assert result.exit_code == 1
    assert _json(result)["code"] == 409
    assert _json(result)["error"] == "RecordExists"


def test_classify_without_record(log_path):
    result = _invoke("classify", "2", "--as", "bob", "--json")

    assert result.exit_code == 1
    assert _json(result)["code"] == 404


def test_seed_and_eliminate(log_path):
    assert _invoke("seed", "bob", "Learn Rust", "--as", "alice").exit_code == 0
    assert _invoke("eliminate", "--as", "bob").exit_code == 0

    result = _invoke("status", "--as", "bob", "--json")

    assert _json(result)["present"] is False
    assert _json(result)["description_length"] == 0


def test_status_does_not_create_log(log_path):
    result = _invoke("status", "--as", "alice", "--json")

    assert result.exit_code == 0
    assert _json(result)["present"] is False
    assert not os.path.exists(log_path)


def test_log_tail_and_verify(log_path):
    _invoke("inscribe", "Run a marathon", "--as", "alice")
    _invoke("seed", "bob", "Learn Rust", "--as", "alice")

    tail = _invoke("log", "tail", "--json")
    verify = _invoke("log", "verify", "--json")

    assert tail.exit_code == 0
    assert _json(tail)["count"] == 2
    assert [r["event"]["type"] for r in _json(tail)["events"]] == ["ChronicleInscribed", "ChronicleSeeded"]
    assert verify.exit_code == 0
    assert _json(verify) == {"valid": True, "broken_at": None, "count": 2}


def test_log_tail_missing_file(log_path):
    result = _invoke("log", "tail", "--json")

    assert result.exit_code == 2


def test_replay_reports_orphans(log_path):
    _invoke("inscribe", "Run a marathon", "--as", "alice")
    _invoke("classify", "3", "--as", "alice")
    _invoke("eliminate", "--as", "alice")

    result = _invoke("replay", "--json")

    assert result.exit_code == 0
    out = _json(result)
    assert out["events_replayed"] == 3
    assert out["chronicles"] == 0
    assert out["orphaned"] == ["alice"]
    assert out["event_counts"] == {
        "ChronicleInscribed": 1,
        "PriorityClassified": 1,
        "ChronicleEliminated": 1,
    }


def test_rich_output(log_path):
    result = _invoke("inscribe", "Run a marathon", "--as", "alice")

    assert result.exit_code == 0
    assert "Pursuit inscribed" in result.stdout


def test_empty_identity_is_usage_error(log_path):
    """A bad host value is a usage error and must not create the log."""
    result = _invoke("inscribe", "Run a marathon", "--as", "")

    assert result.exit_code == 2
    assert not os.path.exists(log_path)


def test_empty_identity_on_status(log_path):
    result = _invoke("status", "--as", "", "--json")

    assert result.exit_code == 2


@pytest.mark.parametrize("lines", ["0", "-1"])
def test_log_tail_rejects_non_positive_lines(log_path, lines):
    _invoke("inscribe", "Run a marathon", "--as", "alice")

    result = _invoke("log", "tail", "--lines", lines, "--json")

    assert result.exit_code == 2


def test_log_tail_lines_limits_records(log_path):
    _invoke("inscribe", "Run a marathon", "--as", "alice")
    _invoke("seed", "bob", "Learn Rust", "--as", "alice")

    result = _invoke("log", "tail", "--lines", "1", "--json")

    assert result.exit_code == 0
    assert _json(result)["count"] == 1
    assert _json(result)["events"][0]["event"]["type"] == "ChronicleSeeded"


def test_corrupt_line_reported_not_crashed(log_path):
    _invoke("inscribe", "Run a marathon", "--as", "alice")
    with open(log_path, "a") as f:
        f.write("5\n")

    verify = _invoke("log", "verify", "--json")
    replay = _invoke("replay", "--json")
    status = _invoke("status", "--as", "alice", "--json")

    assert verify.exit_code == 2
    assert _json(verify)["broken_at"] == 1
    assert replay.exit_code == 2
    assert status.exit_code == 2
    assert _json(status)["error"] == "IntegrityError"
