"""Real terminal backend: keys from the tty, output through rich."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from cliselect.ui import keys, panels
from cliselect.utils.config import Config


class TtyTerminal:
    """MenuTerminal reading the controlling terminal and writing to a console."""

    def __init__(self, config: Optional[Config] = None, console: Optional[Console] = None):
        self.config = config or Config()
        self.console = console or panels.console

    def read_key(self) -> int:
        return keys.read_key(self.config.tty_path)

    def write(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(Text(text, style=style or ""), end="", soft_wrap=True)

    def carriage_return(self) -> None:
        panels.carriage_return(self.console)

    def move_up(self, lines: int) -> None:
        panels.move_up(lines, self.console)

    def hide_cursor(self) -> None:
        panels.hide_cursor(self.console)

    def show_cursor(self) -> None:
        panels.show_cursor(self.console)
