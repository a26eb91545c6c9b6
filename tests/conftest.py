"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from cliselect.utils import debug


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def reset_debug_config():
    """Keep the module-level debug config from leaking between tests."""
    debug.configure(None)
    yield
    debug.configure(None)


@pytest.fixture
def make_menu():
    """Build a menu driven by scripted keys."""
    from cliselect.menu import Menu
    from tests.helpers.fake_terminal import FakeTerminal

    def _make(prompt="Pick", keys=(), config=None):
        terminal = FakeTerminal(keys)
        return Menu(prompt, terminal=terminal, config=config), terminal

    return _make

