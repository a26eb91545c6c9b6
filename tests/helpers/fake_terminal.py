"""Fake terminal for driving menus from scripted keys.

Implements the MenuTerminal protocol in memory: keys come from a list,
every output call is recorded so tests can inspect what was drawn.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass
class Call:
    """Record of one terminal call."""

    name: str
    text: str = ""
    style: Optional[str] = None
    lines: int = 0


class FakeTerminal:
    """In-memory MenuTerminal.

    Raises AssertionError when the menu asks for more keys than scripted,
    so a menu that fails to terminate fails the test instead of hanging.
    """

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._keys = list(keys)
        self.calls: list[Call] = []
        self.keys_read = 0

    # --- MenuTerminal protocol implementation ---

    def read_key(self) -> int:
        if self.keys_read >= len(self._keys):
            raise AssertionError("menu read more keys than were scripted")
        key = self._keys[self.keys_read]
        self.keys_read += 1
        return key

    def write(self, text: str, style: Optional[str] = None) -> None:
        self.calls.append(Call("write", text=text, style=style))

    def carriage_return(self) -> None:
        self.calls.append(Call("cr"))

    def move_up(self, lines: int) -> None:
        self.calls.append(Call("move_up", lines=lines))

    def hide_cursor(self) -> None:
        self.calls.append(Call("hide_cursor"))

    def show_cursor(self) -> None:
        self.calls.append(Call("show_cursor"))

    # --- Inspection helpers ---

    @property
    def output(self) -> str:
        """Plain text written, with carriage returns kept."""
        parts = []
        for call in self.calls:
            if call.name == "write":
                parts.append(call.text)
            elif call.name == "cr":
                parts.append("\r")
        return "".join(parts)

    def names(self) -> list[str]:
        return [call.name for call in self.calls]

    def styled(self, style: str) -> list[str]:
        """Texts written with the given style."""
        return [c.text for c in self.calls if c.name == "write" and c.style == style]

    def frames(self) -> list[str]:
        """Item-list renders, split at each cursor move back up."""
        frames = [[]]
        for call in self.calls:
            if call.name == "move_up":
                frames.append([])
            elif call.name == "write":
                frames[-1].append(call.text)
        return ["".join(frame) for frame in frames]
