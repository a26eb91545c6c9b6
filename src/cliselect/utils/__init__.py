"""Utilities for cliselect."""

from cliselect.utils.config import Config
from cliselect.utils.exceptions import CliselectError, ConfigurationError, TerminalError

__all__ = ["Config", "CliselectError", "ConfigurationError", "TerminalError"]
