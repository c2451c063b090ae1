"""Allow `python -m graphcool`."""

from graphcool.cli.main import app

app()
