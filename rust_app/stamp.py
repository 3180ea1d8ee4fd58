"""Build step that fixes the source revision reported by ``rust-app``.

The revision is written into :mod:`rust_app.build_constants` before the
package is built, so the installed program never looks it up at runtime.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from rust_app import build_constants

logger = logging.getLogger(__name__)

#: Revision reported when no source-control metadata is available.
FALLBACK_REVISION = "dev"

BUILD_CONSTANTS_PATH = Path(build_constants.__file__)

_TEMPLATE = '# Generated by rust-app-stamp. Do not edit.\nGIT_REVISION = "{revision}"\n'


def resolve_git_revision(source: Path) -> str | None:
    """Return the commit hash of ``HEAD`` in ``source``.

    Returns:
        The full commit hash, or ``None`` when git is unavailable or
        ``source`` is not inside a repository with commits.

    Raises:
        NotADirectoryError: If ``source`` is not an existing directory.
    """
    if not source.is_dir():
        raise NotADirectoryError(f"Source directory not found: {source}")

    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=source,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError:
        logger.info("git executable not found")
        return None
    except subprocess.CalledProcessError as e:
        logger.info("No git revision in %s: %s", source, e.stderr.strip())
        return None

    return result.stdout.strip() or None


def choose_revision(explicit: str | None, source: Path) -> str:
    """Pick the revision to stamp: explicit, then git ``HEAD``, then fallback."""
    explicit = (explicit or "").strip()
    if explicit:
        return explicit
    return resolve_git_revision(source) or FALLBACK_REVISION


def render_build_constants(revision: str) -> str:
    """Return the source of the build constants module for ``revision``."""
    if not revision or any(c in revision for c in '"\\\n\r'):
        raise ValueError(f"Invalid revision: {revision!r}")
    return _TEMPLATE.format(revision=revision)


def write_build_constants(revision: str, path: Path = BUILD_CONSTANTS_PATH) -> Path:
    """Write the build constants module and return its path."""
    path.write_text(render_build_constants(revision), encoding="utf-8")
    logger.info("Stamped revision %s into %s", revision, path)
    return path


def current_revision() -> str:
    """Return the stamped revision, or the fallback if none was stamped."""
    return build_constants.GIT_REVISION or FALLBACK_REVISION
