"""Shared console and terminal control sequences."""

from rich.console import Console
from rich.control import Control, ControlType

console = Console(highlight=False)

# Menus drawn by the CLI go to stderr so stdout only carries the result
err_console = Console(stderr=True, highlight=False)


def hide_cursor(target: Console = console) -> None:
    """Hide the terminal cursor (\\033[?25l)."""
    target.control(Control.show_cursor(False))


def show_cursor(target: Console = console) -> None:
    """Show the terminal cursor again (\\033[?25h)."""
    target.control(Control.show_cursor(True))


def move_up(lines: int, target: Console = console) -> None:
    """Move the cursor up so the next print overwrites earlier lines.

    Emits \\033[<lines>A. Zero or negative counts emit nothing.
    """
    if lines > 0:
        target.control(Control.move(0, -lines))


def carriage_return(target: Console = console) -> None:
    """Return to column 0 of the current line."""
    target.control(Control(ControlType.CARRIAGE_RETURN))
