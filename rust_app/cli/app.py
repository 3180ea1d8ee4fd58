"""Typer-based CLI application for `rust_app`.

The ``rust-app`` command takes no options: it collects the build metadata
record and prints the report on standard output.
"""
from __future__ import annotations

import logging

import typer
from rich.console import Console

from ..config import get_settings
from ..errors import BuildInfoError
from ..info import collect_build_info
from ..log import setup_logging
from ..report import write_report
from ..stamp import current_revision

app = typer.Typer(help="Print the build metadata of this program", add_completion=False)
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


@app.command()
def main() -> None:
    """Print program name, version, platform and source revision."""
    setup_logging(get_settings().log_level_number)

    try:
        info = collect_build_info()
        write_report(info, current_revision())
    except BuildInfoError as e:
        logger.debug("Fatal startup failure", exc_info=True)
        err_console.print(f"Error: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1) from e


if __name__ == "__main__":  # pragma: no cover
    app()
