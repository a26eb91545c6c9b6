"""Raw keyboard input from the controlling terminal."""

import os
import termios
import tty
from contextlib import contextmanager
from typing import Iterator

from cliselect.utils.constants import ARROW_KEYS, DEFAULT_TTY_PATH, KEY_READ_SIZE, Key
from cliselect.utils.debug import debug_key, log_error
from cliselect.utils.exceptions import TerminalError


@contextmanager
def raw_terminal(path: str = DEFAULT_TTY_PATH) -> Iterator[int]:
    """Open the terminal device in raw mode.

    Yields the file descriptor. Original attributes are restored and the
    descriptor closed on exit, whatever happens inside the block.
    """
    fd = os.open(path, os.O_RDWR | os.O_NOCTTY)
    try:
        saved = termios.tcgetattr(fd)
        # TCSANOW keeps keys typed while the menu was redrawing
        tty.setraw(fd, termios.TCSANOW)
        try:
            yield fd
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    finally:
        os.close(fd)


def decode_key(data: bytes) -> int:
    """Classify one raw read as a logical key code.

    Three bytes are an escape sequence; only the Up and Down arrows are kept,
    anything else (left/right arrows, pasted text) becomes Key.NOOP.
    Shorter reads are plain keypresses and return their first byte.
    """
    if len(data) == KEY_READ_SIZE:
        if data[2] in ARROW_KEYS:
            return data[2]
        return Key.NOOP
    if not data:
        return Key.NOOP
    return data[0]


def read_key(tty_path: str = DEFAULT_TTY_PATH) -> int:
    """Block until a key is pressed and return its code.

    Raises:
        TerminalError: The terminal could not be opened, configured or read
    """
    try:
        with raw_terminal(tty_path) as fd:
            data = os.read(fd, KEY_READ_SIZE)
    except (OSError, termios.error) as e:
        log_error("tty", f"Cannot read key from {tty_path}", e)
        raise TerminalError(f"Cannot read key from {tty_path}: {e}", tty_path) from e

    key = decode_key(data)
    debug_key("Read key", raw=data.hex(), key=key)
    return key
