"""Fatal startup failures."""


class BuildInfoError(Exception):
    """Build metadata could not be collected or reported."""


class PlatformDetectionError(BuildInfoError):
    """The interpreter did not report an operating system or architecture."""


class ReportError(BuildInfoError):
    """The build metadata record could not be serialized or written."""
