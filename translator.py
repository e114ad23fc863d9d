"""Command line front end for the Google Cloud Translation API binding.

Examples:
    python translator.py languages --locale ja
    python translator.py detect "Bonjour tout le monde"
    python translator.py translate "Hello" --to fr --from en

Settings are read from translator.ini; the API key may also come from the
GOOGLE_TRANSLATE_API_OAUTH environment variable or the --api-key option.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn

from config.loader import ConfigLoader, ConfigLoaderError
from core.trans import AsyncCommError, GoogleApiClient, TranslateExceptionError
from core.version import VERSION
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config
    from models.translation_models import SupportedLanguages

CFG_FILE: Final[str] = "translator.ini"

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv (list[str] | None): Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        description="Translate text with the Google Cloud Translation API",
        epilog='Example: python translator.py translate "Hello" --to fr --from en',
    )
    parser.add_argument("--config", dest="config_file", default=CFG_FILE, metavar="FILE", help="INI file to load")
    parser.add_argument("--api-key", dest="api_key", metavar="KEY", help="Override the configured API key")
    parser.add_argument("--debug", dest="debug", action="store_true", help="Log debug messages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    languages = subparsers.add_parser("languages", help="List supported languages")
    languages.add_argument("--locale", dest="locale", metavar="LOCALE", help="Language of the listed names")

    detect = subparsers.add_parser("detect", help="Detect the language of a text")
    detect.add_argument("text", help="Text to analyze")

    translate = subparsers.add_parser("translate", help="Translate a text")
    translate.add_argument("text", help="Text to translate")
    translate.add_argument("--to", dest="target", metavar="LOCALE", required=True, help="Target language")
    translate.add_argument(
        "--from", dest="source", metavar="LOCALE", help="Source language (detected when omitted)"
    )
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file and apply the command-line overrides.

    Raises:
        ConfigLoaderError: If the configuration file cannot be loaded.
    """
    script_name: str = Path(sys.argv[0]).name
    return ConfigLoader(
        config_filename=args.config_file,
        script_name=script_name,
        api_key=args.api_key,
        debug=args.debug,
    ).config


def setup_logging(config: Config) -> None:
    log_file: str = config.GENERAL.LOG_FILE
    log_path: str = str(Path(log_file).resolve()) if log_file else ""
    logger_utils = LoggerUtils(log_path)
    logger_utils.set_level("DEBUG" if config.GENERAL.DEBUG else "INFO")


def format_languages(result: SupportedLanguages) -> str:
    return "\n".join(f"{language.code}\t{language.name}" for language in result.languages)


async def run_command(client: GoogleApiClient, args: argparse.Namespace) -> str:
    """Run the selected subcommand and return the text to print.

    Raises:
        ApiKeyMissingError: If no API key is configured.
        TranslateExceptionError: If the source language could not be detected.
        AsyncCommError: If the HTTP request fails.
    """
    if args.command == "languages":
        return format_languages(await client.fetch_supported_languages(args.locale))

    if args.command == "detect":
        return await client.detect_language(args.text)

    source: str | None = args.source
    if not source:
        source = await client.detect_language(args.text)
        if not source:
            msg = "Could not detect the source language. Specify it with --from."
            raise TranslateExceptionError(msg)
        logger.info("Detected source language: '%s'", source)
    return await client.translate(args.text, args.target, source)


async def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit status.
    """
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return 1

    setup_logging(config)

    async with GoogleApiClient.from_config(config) as client:
        try:
            output: str = await run_command(client, args)
        except TranslateExceptionError as err:
            print(f"\nError: {err}", file=sys.stderr)
            return 1
        except AsyncCommError as err:
            print("\nError: The translation service could not be reached.", file=sys.stderr)
            print(f"Details: {err}", file=sys.stderr)
            return 1

    print(output)
    return 0


def run() -> None:
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nCancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
