"""Build metadata record and its collector."""

from __future__ import annotations

import logging
import platform

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rust_app.__about__ import __title__, __version__
from rust_app.errors import BuildInfoError, PlatformDetectionError
from rust_app.utils import format_platform

logger = logging.getLogger(__name__)


class BuildInfo(BaseModel):
    """Immutable record of the program's build metadata.

    Field declaration order is the serialized key order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Declared program identifier")
    version: str = Field(..., min_length=1, description="Declared program version")
    platform: str = Field(..., min_length=1, description="Operating system and architecture")


def detect_platform() -> str:
    """Return ``"{os}-{arch}"`` for the running interpreter.

    Systems that report a versioned name such as ``CYGWIN_NT-10.0-19045``
    keep only the part before the first hyphen.

    Raises:
        PlatformDetectionError: If either half cannot be determined, or the
            architecture name contains a hyphen.
    """
    os_name = platform.system().lower().partition("-")[0]
    arch = platform.machine()
    if not os_name:
        raise PlatformDetectionError("Unable to determine the operating system")
    if not arch:
        raise PlatformDetectionError("Unable to determine the CPU architecture")
    if "-" in arch:
        raise PlatformDetectionError(f"Unsupported CPU architecture name: {arch!r}")
    return format_platform(os_name, arch)


def collect_build_info() -> BuildInfo:
    """Assemble the build metadata record from the package constants."""
    platform_id = detect_platform()
    try:
        info = BuildInfo(name=__title__, version=__version__, platform=platform_id)
    except ValidationError as e:
        raise BuildInfoError(f"Invalid build metadata: {e}") from e

    logger.debug("Collected build info", extra={"platform": info.platform})
    return info
