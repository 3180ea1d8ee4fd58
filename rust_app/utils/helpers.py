"""General-purpose helper utilities.

Functions here are intentionally side-effect free and reusable across the
package. They follow the project's coding standards and use Google style
docstrings.
"""
from __future__ import annotations


def format_platform(os_name: str, arch: str) -> str:
    """Return the platform identifier for an OS and CPU architecture.

    Args:
        os_name: Operating system name, e.g. ``linux``.
        arch: CPU architecture name, e.g. ``x86_64``.

    Returns:
        The identifier ``"{os_name}-{arch}"``.
    """
    return f"{os_name}-{arch}"
