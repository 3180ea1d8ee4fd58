"""Human-readable rendering of the build metadata record."""

from __future__ import annotations

import logging
from typing import TextIO

import typer
from pydantic_core import PydanticSerializationError

from rust_app.errors import ReportError
from rust_app.info import BuildInfo

logger = logging.getLogger(__name__)

BANNER = "=== Rust App Example ==="
LIBRARY_NAME = "HOPR Nix"


def serialize_build_info(info: BuildInfo) -> str:
    """Return the record as 2-space indented JSON keyed name, version, platform."""
    try:
        return info.model_dump_json(indent=2)
    except PydanticSerializationError as e:
        raise ReportError(f"Unable to serialize build info: {e}") from e


def render_report(info: BuildInfo, revision: str) -> str:
    """Return the full report text, including the trailing newline."""
    lines = [
        BANNER,
        serialize_build_info(info),
        "",
        f"This binary was built using the {LIBRARY_NAME} Library!",
        f"Git revision: {revision}",
    ]
    return "\n".join(lines) + "\n"


def write_report(info: BuildInfo, revision: str, file: TextIO | None = None) -> None:
    """Write the report to ``file`` (standard output by default).

    Raises:
        ReportError: If the record cannot be serialized or the stream cannot
            encode it.
    """
    text = render_report(info, revision)
    try:
        typer.echo(text, file=file, nl=False)
    except UnicodeEncodeError as e:
        raise ReportError(f"Unable to write build info: {e}") from e
    logger.debug("Wrote build report", extra={"revision": revision})
