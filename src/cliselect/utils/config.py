"""Configuration management."""

from pathlib import Path
from typing import Any, Optional

from cliselect.utils.constants import (
    DEFAULT_CURSOR_MARKER,
    DEFAULT_HIGHLIGHT_COLOR,
    DEFAULT_HINT_COLOR,
    DEFAULT_TTY_PATH,
)
from cliselect.utils.exceptions import ConfigurationError


class Config:
    """Menu configuration.

    Settings are passed in by the embedding program; nothing is read from
    disk or the environment.
    """

    # Settings with descriptions (attr_name -> description)
    SETTINGS: dict[str, str] = {
        "highlight_color": "Color of the prompt and the active item",
        "hint_color": "Color of hint lines",
        "cursor_marker": "Two-character marker in front of the active item",
        "tty_path": "Terminal device keys are read from",
        "debug": "Write debug lines to debug_log",
        "debug_log": "File debug and error lines are appended to",
    }

    def __init__(self, **overrides: Any):
        """Build config from defaults plus keyword overrides."""
        self.highlight_color = DEFAULT_HIGHLIGHT_COLOR
        self.hint_color = DEFAULT_HINT_COLOR
        self.cursor_marker = DEFAULT_CURSOR_MARKER
        self.tty_path = DEFAULT_TTY_PATH
        self.debug = False
        self.debug_log: Optional[Path] = None

        for key, value in overrides.items():
            if key not in self.SETTINGS:
                raise ConfigurationError(f"Unknown setting: {key}")
            setattr(self, key, value)

        if self.debug_log is not None:
            self.debug_log = Path(self.debug_log)
        self._validate()

    def _validate(self):
        """Check values that rendering depends on."""
        if len(self.cursor_marker) != 2:
            raise ConfigurationError(
                f"cursor_marker must be two characters, got {self.cursor_marker!r}"
            )
        for name in ("highlight_color", "hint_color"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} must not be empty")

    def to_dict(self) -> dict[str, Any]:
        """Return settings as a plain dict."""
        data = {name: getattr(self, name) for name in self.SETTINGS}
        if self.debug_log is not None:
            data["debug_log"] = str(self.debug_log)
        return data
