"""CLI entry point for cliselect.

Draws the menu on stderr and prints the chosen id on stdout, so the
command can be used inside shell substitutions: choice=$(cliselect ...).
"""

from pathlib import Path
from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="cliselect",
    help="Pick one entry from an arrow-key menu",
    add_completion=False,
)


@app.command()
def main(
    prompt: str = typer.Argument(..., help="Prompt shown above the menu"),
    entries: Optional[list[str]] = typer.Argument(
        None,
        help="Menu entries as ID=TEXT. An entry without '=' uses its text as id.",
    ),
    hint: Optional[list[str]] = typer.Option(
        None,
        "--hint",
        "-H",
        help="Display-only line shown above the entries (repeatable)",
    ),
    debug_log: Optional[Path] = typer.Option(
        None,
        "--debug-log",
        help="Append debug lines to this file",
    ),
) -> None:
    """Show a menu and print the selected id."""
    from cliselect.cli.commands import cmd_select

    cmd_select(prompt, entries or [], hint or [], debug_log)
