"""Constants used throughout cliselect."""

import readchar

# Controlling terminal device, read directly so redirected stdin is bypassed
DEFAULT_TTY_PATH = "/dev/tty"

# Arrow keys arrive as ESC [ <code>; a single read returns at most this many bytes
KEY_READ_SIZE = 3


# Raw input key codes
class Key:
    """Logical key codes returned by the input decoder."""

    NOOP = 0
    ENTER = ord(readchar.key.CR)
    ESCAPE = ord(readchar.key.ESC)
    UP = ord(readchar.key.UP[-1])
    DOWN = ord(readchar.key.DOWN[-1])


# Third bytes of the escape sequences the menu reacts to
ARROW_KEYS = frozenset({Key.UP, Key.DOWN})

# Default styling
DEFAULT_HIGHLIGHT_COLOR = "yellow"
DEFAULT_HINT_COLOR = "cyan"
DEFAULT_CURSOR_MARKER = "> "
BLANK_MARKER = "  "
