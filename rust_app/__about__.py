"""Package version and metadata.

These values are fixed when the package is built and are reported verbatim by
the ``rust-app`` program. Follows Google style docstrings as per project
standards.
"""

__all__ = ["__title__", "__version__"]

#: Declared program identifier.
__title__ = "rust-app"

#: Semantic version of the package.
__version__ = "0.1.0"
