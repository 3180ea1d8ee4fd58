"""Typer-based CLI for the ``rust-app-stamp`` build step."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import get_settings
from ..log import setup_logging
from ..stamp import BUILD_CONSTANTS_PATH, choose_revision, write_build_constants

app = typer.Typer(help="Stamp the source revision into rust_app", add_completion=False)
console = Console()
err_console = Console(stderr=True)


@app.command()
def stamp(
    revision: Optional[str] = typer.Option(  # noqa: UP007 - Optional for clarity in help
        None,
        "--revision",
        "-r",
        help="Revision to stamp. Defaults to the git HEAD of --source.",
    ),
    source: Path = typer.Option(
        Path("."),
        "--source",
        "-s",
        exists=True,
        file_okay=False,
        help="Source checkout used to resolve the git revision.",
    ),
    output: Path = typer.Option(
        BUILD_CONSTANTS_PATH,
        "--output",
        "-o",
        dir_okay=False,
        help="Build constants module to write.",
    ),
) -> None:
    """Write the build constants module consumed by ``rust-app``.

    Args:
        revision: Explicit revision, e.g. passed in by the build pipeline.
        source: Directory to resolve ``git rev-parse HEAD`` in.
        output: Path of the generated module.
    """
    setup_logging(get_settings().log_level_number)

    try:
        chosen = choose_revision(revision, source)
        path = write_build_constants(chosen, output)
    except (OSError, ValueError) as e:
        err_console.print(f"Error: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1) from e

    console.print(
        f"Stamped revision {chosen} into {path}", markup=False, highlight=False, soft_wrap=True
    )


if __name__ == "__main__":  # pragma: no cover
    app()
