"""Debug logging utility.

Lines never go to stdout or stderr while a menu is drawn, since that would
break the in-place redraw. They are appended to ``Config.debug_log``.
"""

import sys
from datetime import datetime
from typing import Optional

from cliselect.utils.config import Config

_config: Optional[Config] = None


def _get_config() -> Config:
    """Get active config, falling back to defaults."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def configure(config: Optional[Config]):
    """Install the config debug output follows (None resets to defaults)."""
    global _config
    _config = config


def _log_to_file(line: str):
    """Append line to debug log file."""
    log_path = _get_config().debug_log
    if log_path is None:
        return
    try:
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass  # Logging must never take the menu down


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'key', 'menu'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[cliselect:{category}] {_timestamp()} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def debug_key(message: str, **kwargs):
    """Log key-decoding debug message."""
    debug("key", message, **kwargs)


def debug_menu(message: str, **kwargs):
    """Log menu-state debug message."""
    debug("menu", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'tty'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    line = f"[cliselect:{category}] {_timestamp()} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass
