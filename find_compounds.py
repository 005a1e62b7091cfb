#!/usr/bin/env python3
"""
Compound Word Finder

Loads a word list (one word per line) and reports how many entries are
compound words, i.e. made entirely of two or more shorter words from the
same list, along with the longest ones.  Falls back to a small built-in
vocabulary when no dictionary file is found.
"""

from __future__ import annotations

import argparse
import logging

from compounds.cli import run_cli
from compounds.constants import DEFAULT_TOP_N
from compounds.dictionary import Dictionary


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Compound Word Finder -- finds the longest words made of other words",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--top", type=int, default=DEFAULT_TOP_N,
                        help="How many of the longest compound words to report")
    parser.add_argument("--lookup", nargs="+", metavar="WORD", default=None,
                        help="Print whether each WORD is in the dictionary")
    parser.add_argument("--trace", action="store_true",
                        help="Print every visited prefix and its flags")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.top < 1:
        parser.error("--top must be at least 1")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = Dictionary(args.dict)
    run_cli(dictionary, top_n=args.top, lookups=args.lookup, trace=args.trace)


if __name__ == "__main__":
    main()
