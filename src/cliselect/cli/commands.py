"""CLI command handlers."""

from pathlib import Path
from typing import Optional

import typer

from cliselect.menu import Menu
from cliselect.ui.base import MenuTerminal
from cliselect.utils.config import Config
from cliselect.utils.exceptions import TerminalError

# Exit status when the user cancels with Escape
EXIT_CANCELLED = 1
# Exit status when the terminal cannot be used
EXIT_TERMINAL_ERROR = 2


def parse_entry(entry: str) -> tuple[str, str]:
    """Split an ID=TEXT argument into (id, text)."""
    if "=" not in entry:
        item_id, text = entry, entry
    else:
        item_id, text = entry.split("=", 1)
    if not item_id or not text:
        raise typer.BadParameter(f"Malformed entry {entry!r}, expected ID=TEXT")
    return item_id, text


def make_terminal(config: Config) -> MenuTerminal:
    """Terminal used by the CLI, drawing on stderr."""
    from cliselect.ui.panels import err_console
    from cliselect.ui.terminal import TtyTerminal

    return TtyTerminal(config, console=err_console)


def build_menu(
    prompt: str,
    entries: list[str],
    hints: list[str],
    config: Config,
    terminal: MenuTerminal,
) -> Menu:
    """Build a menu with hints first, then entries."""
    menu = Menu(prompt, terminal=terminal, config=config)
    for text in hints:
        menu.add_hint(text)
    for entry in entries:
        item_id, text = parse_entry(entry)
        menu.add_item(text, item_id)
    return menu


def cmd_select(
    prompt: str,
    entries: list[str],
    hints: list[str],
    debug_log: Optional[Path] = None,
):
    """Run the menu and print the chosen id."""
    if debug_log is not None:
        config = Config(debug=True, debug_log=debug_log)
    else:
        config = Config()

    menu = build_menu(prompt, entries, hints, config, make_terminal(config))

    try:
        selected = menu.display()
    except TerminalError:
        # Already logged by the key reader
        raise typer.Exit(EXIT_TERMINAL_ERROR)

    if not selected:
        raise typer.Exit(EXIT_CANCELLED)
    typer.echo(selected)
