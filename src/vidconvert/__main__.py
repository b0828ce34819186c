"""Allow ``python -m vidconvert``."""

from vidconvert.cli import app

app()
