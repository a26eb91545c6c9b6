"""Custom exceptions for cliselect.

- CliselectError: Base exception for all cliselect errors
- TerminalError: The controlling terminal could not be opened, configured or read
- ConfigurationError: Invalid configuration values
"""

from typing import Optional


class CliselectError(Exception):
    """Base exception for all cliselect errors.

    All cliselect-specific exceptions inherit from this class, allowing
    callers to catch all cliselect errors with a single except clause.
    """

    pass


class TerminalError(CliselectError):
    """Terminal access errors.

    Raised when the controlling terminal cannot be used, such as:
    - The device cannot be opened (no controlling terminal)
    - Raw mode cannot be entered or left
    - The read fails

    There is no recovery path; menus are only usable on an interactive terminal.

    Attributes:
        path: Terminal device that failed, if known
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigurationError(CliselectError):
    """Configuration related errors.

    Raised when a setting is unknown or has an invalid value.
    """

    pass
