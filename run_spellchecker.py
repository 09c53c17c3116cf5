"""This module provides the entry point for running the spell checker."""

import sys

from src.spellchecker.cli import main

if __name__ == "__main__":
    sys.exit(main())
