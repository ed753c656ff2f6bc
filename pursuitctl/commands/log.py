"""
Event log commands: tail, verify
"""

from typing import Optional

import typer
from rich.table import Table

from pursuit.log import FileEventStore, find_break

from ._common import EXIT_INFRA_ERROR, JsonOption, LogOption, console, emit, reporting, resolve_log_path

app = typer.Typer()


@app.command()
def tail(
    log_path: Optional[str] = LogOption,
    lines: Optional[int] = typer.Option(None, "--lines", "-n", min=1, help="Number of records to show"),
    json_output: bool = JsonOption,
):
    """
    Show recorded ledger events.

    Examples:
        pursuit log tail
        pursuit log tail --lines 10 --json
    """
    with reporting(json_output):
        path = resolve_log_path(log_path)
        records = list(FileEventStore(path, create=False).records())

        if lines is not None:
            records = records[-lines:]

        if json_output:
            emit({"events": records, "count": len(records)})
            return

        if not records:
            console.print("[yellow]Event log is empty[/yellow]")
            return

        table = Table(title=f"Event Log: {path}")
        table.add_column("Seq", style="cyan")
        table.add_column("Height", style="cyan")
        table.add_column("Type", style="green")
        table.add_column("Identity", style="yellow")
        table.add_column("Hash (prefix)", style="dim")

        for rec in records:
            ev = rec["event"]
            table.add_row(
                str(ev.get("seq", "N/A")),
                str(ev.get("ts", "N/A")),
                ev.get("type", "N/A"),
                (ev.get("payload") or {}).get("identity", "N/A"),
                rec.get("event_hash", "")[:16] or "N/A",
            )

        console.print(table)
        console.print(f"\n[bold]Total events:[/bold] {len(records)}")


@app.command()
def verify(
    log_path: Optional[str] = LogOption,
    json_output: bool = JsonOption,
):
    """Check the hash chain of the event log."""
    with reporting(json_output):
        path = resolve_log_path(log_path)
        records = list(FileEventStore(path, create=False).records())
        broken_at = find_break(records)

        if json_output:
            emit({"valid": broken_at is None, "broken_at": broken_at, "count": len(records)})
        elif broken_at is None:
            console.print(f"[green]✓ Hash chain intact[/green] ({len(records)} records)")
        else:
            console.print(f"[red]✗ Hash chain broken at record {broken_at}[/red]")

    if broken_at is not None:
        raise typer.Exit(EXIT_INFRA_ERROR)
