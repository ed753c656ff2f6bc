"""
Ledger commands: one command per ledger operation, plus status.
"""

from typing import Optional

import typer
from rich.table import Table

from pursuit.ledger import Receipt

from ._common import (
    CallerOption,
    HeightOption,
    JsonOption,
    LogOption,
    console,
    emit,
    host_context,
    open_ledger,
    reporting,
)


def _report(receipt: Receipt, json_output: bool) -> None:
    if json_output:
        emit(receipt.to_dict())
    else:
        console.print(f"[green]✓ {receipt.message}[/green] for [yellow]{receipt.identity}[/yellow]")
        console.print(f"  Seq: [cyan]{receipt.seq}[/cyan]  Hash: [dim]{receipt.event_hash[:16]}[/dim]")


def inscribe(
    vision: str = typer.Argument(..., help="Pursuit description (1-100 characters)"),
    caller: str = CallerOption,
    height: int = HeightOption,
    log_path: Optional[str] = LogOption,
    json_output: bool = JsonOption,
):
    """
    Record a pursuit for the caller.

    Examples:
        pursuit inscribe "Run a marathon" --as alice
    """
    with reporting(json_output):
        ctx = host_context(caller, height)
        ledger = open_ledger(log_path)
        _report(ledger.inscribe(ctx, vision), json_output)


def classify(
    level: int = typer.Argument(..., help="Priority level: 1, 2 or 3"),
    caller: str = CallerOption,
    height: int = HeightOption,
    log_path: Optional[str] = LogOption,
    json_output: bool = JsonOption,
):
    """Set the caller's priority weight."""
    with reporting(json_output):
        ctx = host_context(caller, height)
        ledger = open_ledger(log_path)
        _report(ledger.classify_weight(ctx, level), json_output)


def deadline(
    duration: int = typer.Argument(..., help="Blocks from the current height"),
    caller: str = CallerOption,
    height: int = HeightOption,
    log_path: Optional[str] = LogOption,
    json_output: bool = JsonOption,
):
    """
    Set the caller's deadline to height + duration.

    Examples:
        pursuit deadline 50 --as alice --height 1200
    """
    with reporting(json_output):
        ctx = host_context(caller, height)
        ledger = open_ledger(log_path)
        _report(ledger.establish_deadline(ctx, duration), json_output)


def seed(
    target: str = typer.Argument(..., help="Identity to seed a pursuit for"),
    vision: str = typer.Argument(..., help="Pursuit description (1-100 characters)"),
    caller: str = CallerOption,
    height: int = HeightOption,
    log_path: Optional[str] = LogOption,
    json_output: bool = JsonOption,
):
    """Record a pursuit for another identity that has none."""
    with reporting(json_output):
        ctx = host_context(caller, height)
        ledger = open_ledger(log_path)
        _report(ledger.seed_for_other(ctx, target, vision), json_output)


def modify(
    vision: str = typer.Argument(..., help="Replacement pursuit description"),
    done: bool = typer.Option(False, "--done/--not-done", help="Completion state"),
    caller: str = CallerOption,
    height: int = HeightOption,
    log_path: Optional[str] = LogOption,
    json_output: bool = JsonOption,
):
    """Replace the caller's pursuit text and completion state."""
    with reporting(json_output):
        ctx = host_context(caller, height)
        ledger = open_ledger(log_path)
        _report(ledger.modify(ctx, vision, done), json_output)


def eliminate(
    caller: str = CallerOption,
    height: int = HeightOption,
    log_path: Optional[str] = LogOption,
    json_output: bool = JsonOption,
):
    """Delete the caller's pursuit. Priority and deadline entries are kept."""
    with reporting(json_output):
        ctx = host_context(caller, height)
        ledger = open_ledger(log_path)
        _report(ledger.eliminate(ctx), json_output)


def status(
    caller: str = CallerOption,
    height: int = HeightOption,
    log_path: Optional[str] = LogOption,
    json_output: bool = JsonOption,
):
    """Show the caller's presence report with stored priority and deadline."""
    with reporting(json_output):
        ctx = host_context(caller, height)
        ledger = open_ledger(log_path, create=False)
        report = ledger.validate_presence(ctx)
        priority = ledger.priority(caller)
        mark = ledger.deadline(caller)

        if json_output:
            out = report.to_dict()
            out["identity"] = caller
            out["priority"] = priority.weight if priority else None
            out["deadline"] = mark.to_dict() if mark else None
            emit(out)
            return

        table = Table(title=f"Pursuit: {caller}", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Present", "yes" if report.present else "no")
        table.add_row("Description length", str(report.description_length))
        table.add_row("Completed", "yes" if report.completion_achieved else "no")
        table.add_row("Priority", str(priority.weight) if priority else "-")
        table.add_row("Deadline", str(mark.target_height) if mark else "-")
        console.print(table)
