"""Allow ``python -m rust_app``."""

from rust_app.cli.app import app

app(prog_name="rust-app")
