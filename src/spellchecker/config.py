"""Configuration parser for the spell checker."""

from pathlib import Path
from typing import cast

DEFAULT_DICTIONARY_PATH = Path("/usr/share/dict/words")


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the configuration settings is not provided."""


class SpellCheckerConfig:
    """A class to save spell checker configuration settings."""

    def __init__(
        self,
        dictionary_path: Path = DEFAULT_DICTIONARY_PATH,
        lowercase: bool = True,
        log_mismatches: bool = False,
    ) -> None:
        """Initialize the spell checker configuration.

        Args:
            dictionary_path (Path): The path to the dictionary file,
            one word per line.
            lowercase (bool): Whether dictionary words and document
            tokens are lowercased before use.
            log_mismatches (bool): Whether every misspelt word is logged.

        """
        self.dictionary_path = dictionary_path
        self.lowercase = lowercase
        self.log_mismatches = log_mismatches

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Spell checker configuration settings:
                Dictionary path: {self.dictionary_path}
                Lowercase words: {"YES" if self.lowercase else "NO"}
                Log mismatches: {"YES" if self.log_mismatches else "NO"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def load_config_file(config_file_path: Path) -> SpellCheckerConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        ConfigBoolParsingError: If a boolean setting can't be parsed.
        FileNotFoundError: If the config or the dictionary file
        does not exist.

    Returns:
        SpellCheckerConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    dictionary_path = lowercase = log_mismatches = None

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "dictionary_path":
                dictionary_path = Path(value)
            elif key == "lowercase":
                lowercase = parse_bool("lowercase", value)
            elif key == "log_mismatches":
                log_mismatches = parse_bool("log_mismatches", value)

    required = {
        "dictionary_path": dictionary_path,
        "lowercase": lowercase,
        "log_mismatches": log_mismatches,
    }

    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                f"Please ensure the config file includes a valid line for "
                f"'{key}'.",
            )

    if dictionary_path is not None and not dictionary_path.exists():
        raise FileNotFoundError(
            f"The required file {dictionary_path} doesn't exist.",
        )

    return SpellCheckerConfig(
        cast("Path", dictionary_path),
        cast("bool", lowercase),
        cast("bool", log_mismatches),
    )
