"""Check documents for words that are missing from a dictionary."""

import logging
import re
import string
import time
from collections.abc import Iterable
from pathlib import Path

from src.custom_data_structures.RadixTree.RadixTree import RadixTree

from .logger import log_check

logger = logging.getLogger(__name__)

# Any ASCII punctuation character or whitespace ends a token
_SEPARATORS = re.compile(f"[{re.escape(string.punctuation)}\\s]")
_WORD = re.compile(r"[A-Za-z']+")


def tokenize(line: str, lowercase: bool = True) -> list[str]:
    """Split a line of text into the words to look up.

    Args:
        line (str): The raw line of the document.
        lowercase (bool): Whether the words are lowercased.

    Returns:
        list[str]: The words in the order they appear in the line.

    """
    words = []
    for token in _SEPARATORS.split(line):
        token = token.strip()
        if lowercase:
            token = token.lower()
        if _WORD.fullmatch(token):
            words.append(token)
    return words


class LineMistakes:
    """The misspelt words found on a single line of a document."""

    def __init__(self, line_number: int, line: str, words: list[str]) -> None:
        """Initialize the line report.

        Args:
            line_number (int): Zero-based index of the line.
            line (str): The line as it appears in the document.
            words (list[str]): The misspelt words, in document order.

        """
        self.line_number = line_number
        self.line = line
        self.words = words

    def __eq__(self, other: object) -> bool:
        """Compare two line reports field by field.

        Args:
            other (object): The object to compare with.

        Returns:
            bool: True if line number, line and words are all equal.

        """
        if not isinstance(other, LineMistakes):
            return NotImplemented
        return (self.line_number, self.line, self.words) == (
            other.line_number,
            other.line,
            other.words,
        )

    def __repr__(self) -> str:
        """Return a string representation of the line report.

        Returns:
            str: The report with all of its fields.

        """
        return (
            f"LineMistakes(line_number={self.line_number}, "
            f"line={self.line!r}, words={self.words!r})"
        )


class SpellChecker:
    """Looks up the words of a document in a radix tree dictionary."""

    def __init__(
        self,
        dictionary: RadixTree,
        lowercase: bool = True,
        log_mismatches: bool = False,
    ) -> None:
        """Initialize the spell checker.

        Args:
            dictionary (RadixTree): The words considered correct.
            lowercase (bool): Whether document words are lowercased
            before the lookup.
            log_mismatches (bool): Whether every misspelt word is logged.

        Attributes:
            words_checked (int): How many words have been looked up.

        """
        self.dictionary = dictionary
        self.lowercase = lowercase
        self.log_mismatches = log_mismatches
        self.words_checked = 0

    def check_word(self, word: str) -> bool:
        """Check a single, already tokenized word.

        Args:
            word (str): The word to look up.

        Returns:
            bool: True if the dictionary contains the word.

        """
        self.words_checked += 1
        return self.dictionary.contains(word)

    def check_lines(self, lines: Iterable[str]) -> list[LineMistakes]:
        """Check a sequence of lines for spelling mistakes.

        Lines without words, and lines whose words are all in the
        dictionary, are left out of the result.

        Args:
            lines (Iterable[str]): The lines of the text, without newlines.

        Returns:
            list[LineMistakes]: One entry per line with a mistake.

        """
        mistakes = []
        for line_number, line in enumerate(lines):
            words = tokenize(line, self.lowercase)
            if not words:
                continue

            incorrect = [word for word in words if not self.check_word(word)]
            if not incorrect:
                continue

            if self.log_mismatches:
                for word in incorrect:
                    logger.info(
                        "Misspelt word '%s' on line %d",
                        word,
                        line_number,
                    )
            mistakes.append(LineMistakes(line_number, line, incorrect))
        return mistakes

    def check_document(self, data_path: Path) -> list[LineMistakes]:
        """Check a text file for spelling mistakes.

        Args:
            data_path (Path): The path of the document to check.

        Raises:
            FileNotFoundError: If the file specified by `data_path` does
            not exist.
            Exception: If an error occurs while reading the file.

        Returns:
            list[LineMistakes]: One entry per line with a mistake.

        """
        try:
            with data_path.open("r", encoding="utf-8") as file:
                lines = [line.rstrip("\r\n") for line in file]

        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {data_path}") from e

        except Exception as e:
            raise Exception(f"An error occurred: {e!s}") from e

        checked_before = self.words_checked
        start = time.perf_counter()
        mistakes = self.check_lines(lines)
        log_check(
            data_path,
            self.words_checked - checked_before,
            sum(len(entry.words) for entry in mistakes),
            (time.perf_counter() - start) * 1000,
        )
        return mistakes


def format_report(mistakes: Iterable[LineMistakes]) -> str:
    """Render the mistakes the way they are printed on the terminal.

    Every entry gives the line number and the line, then the misspelt
    words separated by single spaces, each followed by a blank line.

    Args:
        mistakes (Iterable[LineMistakes]): The lines to report.

    Returns:
        str: The report, empty when there are no mistakes.

    """
    parts = []
    for entry in mistakes:
        parts.append(f"{entry.line_number} {entry.line}\n\n")
        parts.append(" ".join(entry.words) + "\n\n")
    return "".join(parts)
