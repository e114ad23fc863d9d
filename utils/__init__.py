"""Utility modules for the translator.

This package provides the logging setup shared by every module.
"""

from utils.logger_utils import LoggerUtils

__all__: list[str] = ["LoggerUtils"]
