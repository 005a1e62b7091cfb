"""Dictionary / word list loading into a prefix tree."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from compounds.constants import ALPHABET, DICTIONARY_SEARCH_PATHS, SAMPLE_WORDS
from compounds.trie import PrefixTree

log = logging.getLogger("compounds")

_LETTERS = frozenset(ALPHABET)


def normalize(token: str) -> str | None:
    """Lowercased *token*, or None if it is not made of a-z letters."""
    word = token.lower()
    if word and _LETTERS.issuperset(word):
        return word
    return None


class Dictionary:
    """Word list backed by a :class:`PrefixTree`."""

    def __init__(self, dict_path: str | None = None, words: Iterable[str] | None = None):
        self.words: list[str] = []
        self.tree = PrefixTree()
        self.source: str | None = None
        if words is not None:
            self._add_all(words)
        else:
            self._load(dict_path)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        """Build from an in-memory word list; no normalization is applied."""
        return cls(words=words)

    def _load(self, dict_path: str | None) -> None:
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        search_paths.extend(DICTIONARY_SEARCH_PATHS)

        for path in search_paths:
            if not os.path.isfile(path):
                continue
            try:
                words, skipped = self._read(path)
            except OSError as exc:
                log.debug("Could not read %s: %s", path, exc)
                continue
            if skipped:
                log.warning("Skipped %d entries in %s that are not plain a-z words", skipped, path)
            if words:
                self._add_all(words)
                self.source = path
                log.info("Loaded %s words from %s", f"{len(self):,}", path)
                return

        if dict_path:
            log.warning("Failed to load %s -- using built-in sample words.", dict_path)
        else:
            log.warning("No dictionary file found -- using built-in sample words.")
        self._add_all(SAMPLE_WORDS)

    @staticmethod
    def _read(path: str) -> tuple[list[str], int]:
        """First token of every non-blank line, normalized; plus a skip count."""
        words: list[str] = []
        skipped = 0
        # Undecodable bytes become U+FFFD and fail normalize()
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                tokens = line.split()
                if not tokens:
                    continue
                word = normalize(tokens[0])
                if word is None:
                    skipped += 1
                else:
                    words.append(word)
        return words, skipped

    def _add_all(self, words: Iterable[str]) -> None:
        for word in words:
            before = len(self.tree)
            self.tree.insert(word)
            if len(self.tree) > before:
                self.words.append(word)

    def is_valid(self, word: str) -> bool:
        word = normalize(word)
        return word is not None and self.tree.contains(word)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.tree)
