from pathlib import Path

import pytest

from src.spellchecker.config import (
    DEFAULT_DICTIONARY_PATH,
    ConfigBoolParsingError,
    ConfigNotFoundError,
    SpellCheckerConfig,
    load_config_file,
    parse_bool,
)

# Test data for valid configurations
VALID_CONFIG = """
# Spell checker configuration
dictionary_path = {dictionary_path}
lowercase = true
log_mismatches = yes
"""

MISSING_KEY_CONFIG = """
dictionary_path = {dictionary_path}
log_mismatches = false
"""

INVALID_BOOL_CONFIG = """
dictionary_path = {dictionary_path}
lowercase = maybe
log_mismatches = false
"""


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("True", True),
        ("TRUE", True),
        ("1", True),
        ("yes", True),
        ("false", False),
        ("False", False),
        ("FALSE", False),
        ("0", False),
        ("no", False),
    ],
)
def test_parse_bool_valid(value, expected):
    """Test valid boolean values."""
    assert parse_bool("test_key", value) == expected


@pytest.mark.parametrize("value", ["maybe", "2", "yess", "tru", "invalid"])
def test_parse_bool_invalid(value):
    """Test invalid boolean values."""
    with pytest.raises(ConfigBoolParsingError) as excinfo:
        parse_bool("test_key", value)
    assert "Invalid boolean value for key 'test_key'" in str(excinfo.value)


def test_config_defaults():
    """Test the settings used when no config file is given."""
    config = SpellCheckerConfig()

    assert config.dictionary_path == DEFAULT_DICTIONARY_PATH
    assert config.lowercase is True
    assert config.log_mismatches is False


def test_config_repr(tmp_path):
    """Test the string representation of SpellCheckerConfig."""
    words = tmp_path / "words.txt"

    config = SpellCheckerConfig(
        dictionary_path=words,
        lowercase=False,
        log_mismatches=True,
    )

    repr_str = repr(config)
    assert "Spell checker configuration settings" in repr_str
    assert str(words) in repr_str
    assert "Lowercase words: NO" in repr_str
    assert "Log mismatches: YES" in repr_str


def test_load_valid_config(tmp_path):
    """Test loading a valid configuration file."""
    words = tmp_path / "words.txt"
    words.touch()

    config_path = tmp_path / "config.txt"
    config_path.write_text(VALID_CONFIG.format(dictionary_path=words))

    config = load_config_file(config_path)

    assert config.dictionary_path == words
    assert config.lowercase is True
    assert config.log_mismatches is True


def test_load_config_missing_file():
    """Test loading a configuration from a non-existent file."""
    with pytest.raises(FileNotFoundError) as excinfo:
        load_config_file(Path("/non/existent/path"))
    assert "Missing required configuration file" in str(excinfo.value)


def test_load_config_missing_key(tmp_path):
    """Test configuration with a missing required key."""
    words = tmp_path / "words.txt"
    words.touch()

    config_path = tmp_path / "config.txt"
    config_path.write_text(MISSING_KEY_CONFIG.format(dictionary_path=words))

    with pytest.raises(ConfigNotFoundError) as excinfo:
        load_config_file(config_path)
    assert "Missing required configuration: 'lowercase'" in str(excinfo.value)


def test_load_config_invalid_bool(tmp_path):
    """Test configuration with an invalid boolean value."""
    words = tmp_path / "words.txt"
    words.touch()

    config_path = tmp_path / "config.txt"
    config_path.write_text(INVALID_BOOL_CONFIG.format(dictionary_path=words))

    with pytest.raises(ConfigBoolParsingError) as excinfo:
        load_config_file(config_path)
    assert "Invalid boolean value for key 'lowercase'" in str(excinfo.value)


def test_load_config_comments_and_case(tmp_path):
    """Test that comments are ignored and keys are case-insensitive."""
    words = tmp_path / "words.txt"
    words.touch()

    config_content = f"""
    # This is a comment
    DICTIONARY_PATH = {words}
    # Another comment
    LowerCase = no
    log_mismatches = 1
    """

    config_path = tmp_path / "config.txt"
    config_path.write_text(config_content)

    config = load_config_file(config_path)

    assert config.dictionary_path == words
    assert config.lowercase is False
    assert config.log_mismatches is True


def test_load_config_missing_dictionary_file(tmp_path):
    """Test that FileNotFoundError is raised if the dictionary is missing."""
    non_existent = tmp_path / "non_existent.txt"

    config_path = tmp_path / "config.txt"
    config_path.write_text(VALID_CONFIG.format(dictionary_path=non_existent))

    with pytest.raises(FileNotFoundError) as excinfo:
        load_config_file(config_path)
    assert (
        f"The required file {non_existent} "
        "doesn't exist" in str(excinfo.value)
    )


def test_load_config_invalid_line_format(tmp_path):
    """Test that malformed lines are ignored."""
    words = tmp_path / "words.txt"
    words.touch()

    config_content = f"""
    dictionary_path = {words}
    invalid_line_without_equals
    lowercase = true
    another_invalid line
    log_mismatches = false
    unknown_key = whatever
    """

    config_path = tmp_path / "config.txt"
    config_path.write_text(config_content)

    config = load_config_file(config_path)

    assert config.dictionary_path == words
    assert config.lowercase is True
    assert config.log_mismatches is False
