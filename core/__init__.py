"""Core components of the translator.

This package contains the Google Translation API binding and the version information.
"""

from core.version import VERSION

__all__: list[str] = ["VERSION"]
