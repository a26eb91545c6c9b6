"""cliselect - Interactive arrow-key menus for the terminal."""

from importlib.metadata import version

__version__ = version("cliselect")

from cliselect.menu import Menu, MenuItem
from cliselect.utils.config import Config
from cliselect.utils.exceptions import CliselectError, TerminalError

__all__ = [
    "Menu",
    "MenuItem",
    "Config",
    "CliselectError",
    "TerminalError",
]
