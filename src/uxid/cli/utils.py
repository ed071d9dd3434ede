"""CLI utility functions shared across commands."""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from uxid.exceptions import UXIDError

console = Console()
error_console = Console(stderr=True)


def exit_with_error(error: UXIDError) -> NoReturn:
    """Print a UXID error in red and exit with code 1.

    Raises:
        typer.Exit: Always
    """
    error_console.print(f"[red]Error: {escape(str(error))}[/red]", soft_wrap=True)
    raise typer.Exit(1) from error
