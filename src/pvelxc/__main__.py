"""Allow ``python -m pvelxc``."""

from .cli.main import app

app(prog_name="pvelxc")
