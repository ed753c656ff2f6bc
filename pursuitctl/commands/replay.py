"""
Replay command: rebuild ledger state from the event log
"""

from collections import Counter
from typing import Optional

import typer
from rich.syntax import Syntax
from rich.table import Table

from pursuit.core.canonical import canonical_json_str
from pursuit.handlers import build_reducer
from pursuit.log import FileEventStore, verify_chain
from pursuit.query import orphaned_identities
from pursuit.core.state import ledger_state
from pursuit.replay import replay_records
from pursuit.snapshot import compute_state_hash

from ._common import JsonOption, LogOption, console, emit, reporting, resolve_log_path


def replay_command(
    log_path: Optional[str] = LogOption,
    until: Optional[int] = typer.Option(None, "--until", "-u", help="Replay until sequence number"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = JsonOption,
):
    """
    Replay event log and report the rebuilt ledger.

    Examples:
        pursuit replay
        pursuit replay --until 10 --show-state
    """
    with reporting(json_output):
        records = list(FileEventStore(resolve_log_path(log_path), create=False).records())
        verify_chain(records)
        result = replay_records(records, build_reducer(), to_seq=until)
        state_hash = compute_state_hash(result.state)
        ledger = ledger_state(result.state)

        event_types = Counter()
        for rec in records[: result.applied]:
            event_types[rec["event"]["type"]] += 1

        if json_output:
            output = {
                "success": True,
                "events_replayed": result.applied,
                "state_version": result.state.version,
                "state_hash": state_hash,
                "event_counts": dict(event_types),
                "chronicles": len(ledger.chronicles),
                "orphaned": orphaned_identities(ledger),
            }
            if show_state:
                output["ledger"] = ledger.to_dict()
            emit(output)
            return

        console.print(f"[green]✓ Replayed {result.applied} events[/green]")
        console.print(f"  State version: [cyan]{result.state.version}[/cyan]")
        console.print(f"  State hash: [yellow]{state_hash}[/yellow]")
        console.print(f"  Chronicles: [cyan]{len(ledger.chronicles)}[/cyan]")

        orphans = orphaned_identities(ledger)
        if orphans:
            console.print(f"  [yellow]Orphaned annotations:[/yellow] {', '.join(orphans)}")

        table = Table(title="Event Counts")
        table.add_column("Event Type", style="green")
        table.add_column("Count", style="cyan", justify="right")
        for event_type in sorted(event_types):
            table.add_row(event_type, str(event_types[event_type]))
        console.print(table)

        if show_state:
            console.print("\n[bold]Ledger State:[/bold]")
            console.print(Syntax(canonical_json_str(ledger.to_dict()), "json", theme="monokai"))
