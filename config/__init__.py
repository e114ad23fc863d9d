"""Configuration loading and validation for the translator.

This package provides utilities for loading, parsing, and validating configuration
settings from the translator.ini file.
"""

from config.loader import (
    API_KEY_ENV_VAR,
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigLoaderError,
    ConfigTypeError,
    ConfigValueError,
)

__all__: list[str] = [
    "API_KEY_ENV_VAR",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]
