"""Top-level package for `rust_app`.

This module exposes package metadata and primary exports.

It adheres to the project's Python coding standards and uses Google style
docstrings for clarity and consistency.
"""

from .__about__ import __title__, __version__
from .info import BuildInfo, collect_build_info
from .report import render_report, write_report

__all__ = [
    "BuildInfo",
    "__title__",
    "__version__",
    "collect_build_info",
    "render_report",
    "write_report",
]
