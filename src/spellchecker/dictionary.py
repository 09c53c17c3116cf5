"""Load word-per-line dictionary files into a radix tree."""

import logging
import time
from pathlib import Path

from src.custom_data_structures.RadixTree.RadixTree import RadixTree

logger = logging.getLogger(__name__)


def load_dictionary(data_path: Path, lowercase: bool = True) -> RadixTree:
    """Insert all the lines of a dictionary file into a radix tree.

    Each line is taken as one word. Blank lines are skipped.

    Args:
        data_path (Path): The path of the dictionary file.
        lowercase (bool): Whether words are lowercased before insertion.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        Exception: If an error occurs while reading the file.

    Returns:
        RadixTree: The tree holding every word of the file.

    """
    dictionary = RadixTree()
    count = 0
    start = time.perf_counter()
    try:
        with data_path.open("r", encoding="utf-8") as file:
            for line in file:
                word = line.rstrip("\r\n")
                if not word:
                    continue
                dictionary.insert(word.lower() if lowercase else word)
                count += 1

    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {data_path}") from e

    except Exception as e:
        raise Exception(f"An error occurred: {e!s}") from e

    logger.info(
        "Loaded %d words from %s in %.2f ms",
        count,
        data_path,
        (time.perf_counter() - start) * 1000,
    )
    return dictionary
