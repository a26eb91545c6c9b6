"""Allow running as python -m cliselect.cli."""

from cliselect.cli import app

app()
