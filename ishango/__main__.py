"""Allow ``python -m ishango``."""

from .cli import app

app(prog_name="ishango")
