#!/usr/bin/env python3
"""
Pursuit CLI

Main entrypoint for the pursuit command-line tool. It acts as the host: the
caller identity and block height come from --as and --height.
"""

import typer
from rich.console import Console
from rich.table import Table

from pursuit.logging_config import setup_logging
from pursuitctl.commands import ledger, log, replay

app = typer.Typer(
    name="pursuit",
    help="Per-identity pursuit ledger",
    add_completion=False,
)

console = Console()

app.add_typer(log.app, name="log", help="Event log operations")
for command in (
    ledger.inscribe,
    ledger.classify,
    ledger.deadline,
    ledger.seed,
    ledger.modify,
    ledger.eliminate,
    ledger.status,
):
    app.command()(command)
app.command("replay")(replay.replay_command)


@app.callback()
def _configure():
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from pursuit import __version__ as ledger_version
    from pursuitctl import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Pursuit CLI[/bold]", f"v{__version__}")
    table.add_row("Ledger", f"v{ledger_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
