"""Package version and metadata.

This module centralizes the package version and other lightweight metadata.
"""

__all__ = ["__version__"]

#: Semantic version of the package.
__version__ = "0.3.0"
