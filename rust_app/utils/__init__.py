"""Utility helpers for `rust_app`.

Group reusable, non-IO core utilities here to keep concerns separate.
"""

from .helpers import format_platform

__all__ = ["format_platform"]
