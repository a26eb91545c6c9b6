"""Interactive single-choice menu."""

from dataclasses import dataclass, field
from typing import Optional

from cliselect.ui.base import MenuTerminal
from cliselect.ui.terminal import TtyTerminal
from cliselect.utils.config import Config
from cliselect.utils.constants import BLANK_MARKER, Key
from cliselect.utils.debug import configure, debug_menu

# Cursor position before any selectable item exists, and after a choice is made
UNSET = -1


@dataclass(frozen=True)
class MenuItem:
    """One menu row. Hints are display-only and carry an empty id."""

    text: str
    id: str
    selectable: bool


@dataclass
class Menu:
    """Vertical list of items navigated with the arrow keys.

    Build it with add_item/add_hint (both return the menu for chaining),
    then call display() to run the session:

        choice = (
            Menu("Pick a color")
            .add_item("Red", "r")
            .add_item("Green", "g")
            .display()
        )

    Attributes:
        prompt: Text printed above the items
        items: Rows in display order
        cursor_position: Index of the highlighted item, UNSET if none
        terminal: Where keys come from and output goes to
        config: Colors and marker used when rendering
    """

    prompt: str
    terminal: Optional[MenuTerminal] = None
    config: Optional[Config] = None
    items: list[MenuItem] = field(default_factory=list)
    cursor_position: int = UNSET

    def __post_init__(self):
        if self.config is None:
            self.config = Config()
        if self.terminal is None:
            self.terminal = TtyTerminal(self.config)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def selectable_items(self) -> list[MenuItem]:
        return [item for item in self.items if item.selectable]

    def add_item(self, text: str, id: str) -> "Menu":
        """Append a selectable item.

        The first selectable item added receives the cursor, so menus that
        start with hints still open on a choice.
        """
        self.items.append(MenuItem(text=text, id=id, selectable=True))
        if self.cursor_position == UNSET:
            self.cursor_position = len(self.items) - 1
        return self

    def add_hint(self, text: str) -> "Menu":
        """Append a display-only line."""
        self.items.append(MenuItem(text=text, id="", selectable=False))
        return self

    def _step(self, offset: int):
        """Move the cursor by offset with wraparound, skipping hints.

        The skip is bounded by one pass over the items, so an all-hint menu
        ends up on a hint instead of looping forever.
        """
        count = len(self.items)
        if count == 0:
            return
        self.cursor_position = (self.cursor_position + count + offset) % count
        iterations = 0
        while not self.items[self.cursor_position].selectable and iterations < count:
            self.cursor_position = (self.cursor_position + count + offset) % count
            iterations += 1

    def move_up(self):
        self._step(-1)

    def move_down(self):
        self._step(1)

    def _render_prompt(self):
        self.terminal.write(f"{self.prompt}:", f"bold {self.config.highlight_color}")
        self.terminal.write("\n")

    def _render_items(self, redraw: bool = False):
        """Print the item list.

        With redraw, the cursor first moves back to the first item line so the
        list is overwritten in place. The last line gets no newline, which
        keeps the cursor on the list for the next redraw.
        """
        if redraw and len(self.items) > 1:
            self.terminal.move_up(len(self.items) - 1)

        highlight = self.config.highlight_color
        last = len(self.items) - 1
        for index, item in enumerate(self.items):
            self.terminal.carriage_return()
            if item.selectable:
                if index == self.cursor_position:
                    self.terminal.write(self.config.cursor_marker, highlight)
                    self.terminal.write(" ")
                    self.terminal.write(item.text, highlight)
                else:
                    self.terminal.write(BLANK_MARKER)
                    self.terminal.write(" ")
                    self.terminal.write(item.text)
            else:
                self.terminal.write(item.text, self.config.hint_color)
            if index != last:
                self.terminal.write("\n")

    def _finish_line(self):
        self.terminal.carriage_return()
        self.terminal.write("\n")

    def _selected_id(self) -> str:
        if 0 <= self.cursor_position < len(self.items):
            return self.items[self.cursor_position].id
        return ""

    def display(self) -> str:
        """Show the menu and wait for the user's choice.

        Returns:
            Id of the confirmed item, or "" if the user pressed Escape.

        Raises:
            TerminalError: The terminal could not be read
        """
        configure(self.config)

        # A blank hint keeps rendering and cursor arithmetic working on empty menus
        if not self.items:
            self.add_hint("")

        if self.cursor_position == UNSET:
            for index, item in enumerate(self.items):
                if item.selectable:
                    self.cursor_position = index
                    break

        debug_menu(
            "Display",
            prompt=self.prompt,
            items=len(self.items),
            cursor=self.cursor_position,
        )

        try:
            self._render_prompt()
            self._render_items()
            self.terminal.hide_cursor()

            while True:
                key = self.terminal.read_key()

                if key == Key.ESCAPE:
                    self._finish_line()
                    debug_menu("Cancelled")
                    return ""
                elif key == Key.ENTER:
                    selected = self._selected_id()
                    self.cursor_position = UNSET
                    self._render_items(redraw=True)
                    self._finish_line()
                    debug_menu("Selected", id=selected)
                    return selected
                elif key == Key.UP:
                    self.move_up()
                elif key == Key.DOWN:
                    self.move_down()
                else:
                    continue

                debug_menu("Moved", cursor=self.cursor_position)
                self._render_items(redraw=True)
        finally:
            self.terminal.show_cursor()
