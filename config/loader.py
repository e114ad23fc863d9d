"""Configuration file loader and validator.

Reads ``translator.ini``, coerces each value to the type of its dataclass default and
validates the result. Problems with the file raise ``ConfigLoaderError`` subclasses.
A missing API key is not one of them: the client reports it when an operation is called.
"""

from __future__ import annotations

import ast
import configparser
import os
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from yarl import URL

from models.config_models import Config
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "API_KEY_ENV_VAR",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

API_KEY_ENV_VAR: Final[str] = "GOOGLE_TRANSLATE_API_OAUTH"


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Loads and validates the translator configuration.

    Precedence, lowest first: dataclass defaults, INI file, ``GOOGLE_TRANSLATE_API_OAUTH``
    environment variable (API key only), keyword overrides.

    Args:
        config_filename (str): INI file name to load.
        script_name (str): Executing script name, used in error messages.
        **args: Overrides from the command line. ``api_key`` and ``debug`` are recognized;
            None values are ignored.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(
        self,
        *,
        config_filename: str,
        script_name: str,
        **args,
    ) -> None:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()

        try:
            parser.read(config_path, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        self._convert_settings(parser)

        env_api_key: str | None = os.getenv(API_KEY_ENV_VAR)
        if env_api_key:
            logger.debug("API key taken from environment variable '%s'", API_KEY_ENV_VAR)
            self.config.TRANSLATION.API_KEY = env_api_key
        if args.get("api_key") is not None:
            self.config.TRANSLATION.API_KEY = args["api_key"]
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Copy every defined INI value onto the matching Config field."""
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            for key in fields(getattr(self.config, section.name)):
                if not parser.has_option(section.name, key.name):
                    logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                    continue
                formatted_value = formatter.apply_format(section, key)
                setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate types and ranges of the translation settings.

        Raises:
            ConfigFormatError: If validation fails for any setting.
        """
        translation = self.config.TRANSLATION
        for key_name in ("API_KEY", "BASE_URL", "DISPLAY_LOCALE"):
            value: Any = getattr(translation, key_name)
            if not isinstance(value, str):
                msg: str = f"Unsupported type used for 'TRANSLATION.{key_name}': {type(value)}"
                raise ConfigTypeError(msg)

        try:
            url = URL(translation.BASE_URL)
        except ValueError as err:
            msg = f"Invalid URL for 'TRANSLATION.BASE_URL': {translation.BASE_URL}"
            raise ConfigValueError(msg) from err
        if url.scheme not in ("http", "https") or not url.host:
            msg = f"'TRANSLATION.BASE_URL' must be an http(s) URL: {translation.BASE_URL}"
            raise ConfigValueError(msg)

        if translation.TIMEOUT < 0:
            msg = f"'TRANSLATION.TIMEOUT' must not be negative: {translation.TIMEOUT}"
            raise ConfigValueError(msg)

        if not translation.API_KEY:
            logger.warning("No API key configured. Requests to the translation API will fail.")


class _ConfigFormatter:
    """Converts INI string values to typed Python objects (bool, int, float, literals)."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert an INI value to the type of the field's default.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigFormatError: If literal evaluation fails due to invalid syntax.
            ConfigTypeError: If an unexpected type is encountered during coercion.
        """
        formatters: dict[type, Callable[[DataclassField[Any], DataclassField[Any]], bool | int | float]] = {
            bool: self.parse_as_boolean,
            int: self.parse_as_integer,
            float: self.parse_as_float,
        }

        formatter = formatters.get(type(getattr(getattr(self.config, section.name), key.name)))
        if formatter:
            try:
                return formatter(section, key)
            except ValueError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigValueError(msg) from err
            except TypeError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigTypeError(msg) from err

        value_str: str = self.parser[section.name][key.name]
        try:
            return ast.literal_eval(value_str)
        except ValueError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigValueError(msg) from err
        except SyntaxError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigFormatError(msg) from err

    def _strip_quotes(self, section: DataclassField[Any], key: DataclassField[Any]) -> str:
        value: str = self.parser.get(section.name, key.name)
        for char in ("'", '"'):
            value = value.removeprefix(char).removesuffix(char)
        return value

    def parse_as_float(self, section: DataclassField[Any], key: DataclassField[Any]) -> float:
        return float(self._strip_quotes(section, key))

    def parse_as_integer(self, section: DataclassField[Any], key: DataclassField[Any]) -> int:
        return int(float(self._strip_quotes(section, key)))

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        return self.parser.getboolean(section.name, key.name)
