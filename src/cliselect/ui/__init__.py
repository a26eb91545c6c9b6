"""Terminal input and output for menus."""

from cliselect.ui.base import MenuTerminal
from cliselect.ui.keys import decode_key, raw_terminal, read_key
from cliselect.ui.panels import console, err_console
from cliselect.ui.terminal import TtyTerminal

__all__ = [
    "MenuTerminal",
    "TtyTerminal",
    "console",
    "decode_key",
    "err_console",
    "raw_terminal",
    "read_key",
]
