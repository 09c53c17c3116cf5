import logging

import pytest

from tests.word_lists import DICTIONARY_WORDS


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way it was after every test.

    The command line entry point installs its own file handler, which
    must not leak into other tests.
    """
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def dictionary_file(tmp_path):
    file_path = tmp_path / "words.txt"
    with file_path.open("w", encoding="utf-8") as f:
        for word in DICTIONARY_WORDS:
            f.write(f"{word}\n")
    return file_path
