"""
Shared plumbing for ledger commands: option definitions, ledger opening and
uniform error reporting.
"""

import json
import os
from contextlib import contextmanager
from typing import Any, Dict, Optional

import typer
from rich.console import Console

from pursuit.config import Settings
from pursuit.core.context import HostContext
from pursuit.core.errors import EventStoreError, IntegrityError, LedgerError
from pursuit.ledger import Ledger
from pursuit.log.memory_store import MemoryEventStore

EXIT_OK = 0
EXIT_LEDGER_ERROR = 1
EXIT_INFRA_ERROR = 2

console = Console()
err_console = Console(stderr=True)

CallerOption = typer.Option(..., "--as", "-a", envvar="PURSUIT_IDENTITY", help="Caller identity")
HeightOption = typer.Option(0, "--height", min=0, envvar="PURSUIT_HEIGHT", help="Current block height")
LogOption = typer.Option(None, "--log", "-l", help="Path to event log file (default: PURSUIT_LEDGER_PATH)")
JsonOption = typer.Option(False, "--json", help="Output as JSON")


def resolve_log_path(log_path: Optional[str]) -> str:
    return log_path or Settings.from_env().ledger_path


def open_ledger(log_path: Optional[str], create: bool = True) -> Ledger:
    """
    Open the ledger at log_path.

    With create=False a missing log reads as an empty ledger and no file is made.
    """
    path = resolve_log_path(log_path)
    if not create and not os.path.exists(path):
        return Ledger.open(MemoryEventStore())
    return Ledger.open_file(path, create=create)


def host_context(caller: str, height: int) -> HostContext:
    """
    Build the invocation context from --as and --height.

    Bad host values are usage errors (exit 2), not ledger failures.
    """
    try:
        return HostContext(caller, height)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="'--as' / '--height'") from e


def emit(data: Dict[str, Any]) -> None:
    print(json.dumps(data, indent=2))


@contextmanager
def reporting(json_output: bool):
    """
    Map ledger and storage failures to exit codes.

    LedgerError -> 1, storage or integrity failure -> 2. Usage errors raised
    as typer.BadParameter pass through and also exit 2.
    """
    try:
        yield
    except LedgerError as e:
        if json_output:
            emit(e.to_dict())
        else:
            err_console.print(f"[red]{e.kind} (code {e.code}):[/red] {e.message}")
        raise typer.Exit(EXIT_LEDGER_ERROR)
    except (EventStoreError, IntegrityError, OSError) as e:
        if json_output:
            emit({"error": type(e).__name__, "message": str(e)})
        else:
            err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_INFRA_ERROR)
