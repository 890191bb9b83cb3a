"""Allow ``python -m obsd``."""

from .cli import app

app(prog_name="obsd")
