"""Shared constants for the compound word finder."""

from __future__ import annotations

import string

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)  # 26

# How many of the longest compound words to report
DEFAULT_TOP_N = 2

# Initial node slots in a fresh prefix tree; the arena doubles when full
INITIAL_CAPACITY = 64

# Tried in order after an explicit --dict path
DICTIONARY_SEARCH_PATHS: list[str] = [
    "wordsforproblem.txt",
    "words.txt",
    "dictionary.txt",
]

# Fallback vocabulary when no dictionary file can be read
SAMPLE_WORDS: list[str] = [
    "cat",
    "cats",
    "catsdogcats",
    "catxdogcatsrat",
    "dog",
    "dogcatsdog",
    "hippopotamuses",
    "rat",
    "ratcatdogcat",
]
