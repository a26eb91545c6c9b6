"""Base protocol for menu terminals."""

from typing import Optional, Protocol


class MenuTerminal(Protocol):
    """Protocol for the terminal a menu talks to.

    Allows driving a menu from scripted keys in tests.
    """

    def read_key(self) -> int:
        """Block until a key is pressed, return its key code."""
        ...

    def write(self, text: str, style: Optional[str] = None) -> None:
        """Write text at the cursor, optionally styled."""
        ...

    def carriage_return(self) -> None:
        """Move to column 0 of the current line."""
        ...

    def move_up(self, lines: int) -> None:
        """Move the cursor up by a number of lines."""
        ...

    def hide_cursor(self) -> None:
        ...

    def show_cursor(self) -> None:
        ...
