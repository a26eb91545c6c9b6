"""Tests for custom exceptions."""

import pytest

from cliselect.utils.exceptions import CliselectError, ConfigurationError, TerminalError


def test_cliselect_error_is_base():
    """CliselectError is the base exception for all cliselect errors."""
    assert issubclass(TerminalError, CliselectError)
    assert issubclass(ConfigurationError, CliselectError)


def test_terminal_error_has_path():
    err = TerminalError("cannot open", path="/dev/tty")
    assert err.path == "/dev/tty"
    assert "cannot open" in str(err)


def test_terminal_error_without_path():
    err = TerminalError("read failed")
    assert err.path is None


def test_catch_with_base():
    with pytest.raises(CliselectError):
        raise TerminalError("boom")
