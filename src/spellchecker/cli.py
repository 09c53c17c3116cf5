"""Command line entry point of the spell checker."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .checker import SpellChecker, format_report
from .config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    SpellCheckerConfig,
    load_config_file,
)
from .dictionary import load_dictionary
from .logger import LOG_FILE_PATH, setup_logging

EXIT_OK = 0
EXIT_MISTAKES = 1
EXIT_ERROR = 2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser of the spell checker.

    Returns:
        argparse.ArgumentParser: The configured parser.

    """
    parser = argparse.ArgumentParser(
        prog="spellcheck",
        description="Check a document for words missing from a dictionary.",
    )
    parser.add_argument("document", type=Path, help="The file to check.")
    parser.add_argument(
        "dictionary",
        type=Path,
        nargs="?",
        default=None,
        help="Optional word-per-line dictionary, overrides the config file.",
    )
    parser.add_argument(
        "--config_path",
        type=Path,
        default=None,
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--log_file",
        type=Path,
        default=LOG_FILE_PATH,
        help="Where the log records are written.",
    )
    parser.add_argument(
        "--log_level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def resolve_config(args: argparse.Namespace) -> SpellCheckerConfig:
    """Merge the config file (if any) with the command line arguments.

    Args:
        args (argparse.Namespace): The parsed command line.

    Raises:
        ConfigNotFoundError: If the config file misses a setting.
        ConfigBoolParsingError: If the config file has a bad boolean.
        FileNotFoundError: If the config or dictionary file is missing.

    Returns:
        SpellCheckerConfig: The settings to run with.

    """
    config = SpellCheckerConfig()
    if args.config_path is not None:
        config = load_config_file(args.config_path)

    if args.dictionary is not None:
        config.dictionary_path = args.dictionary

    return config


def main(argv: Optional[list[str]] = None) -> int:
    """Run the spell checker.

    Args:
        argv (Optional[list[str]]): The arguments, defaults to sys.argv.

    Returns:
        int: 0 when the document has no mistakes, 1 when it has some
        and 2 when the check could not be run.

    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_OK if e.code == 0 else EXIT_ERROR

    setup_logging(args.log_file, args.log_level)

    try:
        config = resolve_config(args)
        logger.debug("Running with %r", config)

        dictionary = load_dictionary(config.dictionary_path, config.lowercase)
        checker = SpellChecker(
            dictionary,
            lowercase=config.lowercase,
            log_mismatches=config.log_mismatches,
        )
        mistakes = checker.check_document(args.document)

    except FileNotFoundError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    except (ConfigNotFoundError, ConfigBoolParsingError) as e:
        logger.error("Invalid configuration: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    except Exception as e:
        # Unreadable files: directories, bad encodings, permissions
        logger.exception("Spell check failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if not mistakes:
        return EXIT_OK

    sys.stdout.write(format_report(mistakes))
    return EXIT_MISTAKES


if __name__ == "__main__":
    sys.exit(main())
