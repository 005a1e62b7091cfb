"""Compound word search: one pre-order pass over the prefix tree.

A prefix P of length L is decomposable when some split point i in [0, L)
leaves P[:i] empty or decomposable and P[i:] a whole word.  Pre-order
guarantees every ancestor is settled before its descendants, so each node
only has to look upward.  A word counts as a compound when such a split
exists with i > 0, i.e. at least two words.  The flags only ever turn on:
adding words can make more prefixes decomposable but never fewer, so a
later run over the same or a grown tree starts from valid flags.
"""

from __future__ import annotations

import logging
from typing import Callable

from compounds.constants import DEFAULT_TOP_N
from compounds.trie import PrefixTree, TreeNode

logger = logging.getLogger("compounds.finder")

Observer = Callable[[str, TreeNode], None]


class FindResult:
    """Outcome of a compound search: the total and the longest words."""

    __slots__ = ("count", "words")

    def __init__(self, count: int = 0, words: list[str] | None = None):
        self.count = count
        self.words = words or []  # longest first

    @property
    def longest(self) -> str | None:
        return self.words[0] if self.words else None

    @property
    def second_longest(self) -> str | None:
        return self.words[1] if len(self.words) > 1 else None

    def as_tuple(self) -> tuple[int, str | None, str | None]:
        return self.count, self.longest, self.second_longest

    def __repr__(self) -> str:
        return f"FindResult(count={self.count}, words={self.words!r})"


class CompoundFinder:
    """Finds every compound word in a :class:`PrefixTree`.

    Parameters
    ----------
    top_n : int
        How many of the longest compound words to keep.
    observer : callable, optional
        Called as ``observer(prefix, node)`` for every visited node once
        its flags are final.  Used for diagnostic dumps.
    """

    def __init__(self, top_n: int = DEFAULT_TOP_N, observer: Observer | None = None):
        if top_n < 1:
            raise ValueError(f"top_n must be at least 1, got {top_n}")
        self.top_n = top_n
        self.observer = observer

    # public API

    def run(self, tree: PrefixTree) -> FindResult:
        """Traverse *tree* once and return the count and the longest compounds."""
        logger.debug("Searching %d words (%d nodes)", len(tree), tree.node_count)
        result = FindResult()

        # Explicit stack, so word length is not bound by the recursion limit
        stack: list[TreeNode] = [tree.root]
        path: list[str] = []
        while stack:
            node = stack.pop()
            depth = node.depth
            if depth:
                del path[depth - 1:]
                path.append(node.letter)
                prefix = "".join(path)
                self._visit(tree, node, prefix, result)
            stack.extend(reversed(node.children.values()))

        logger.debug("Found %d compound words", result.count)
        return result

    # traversal

    def _visit(self, tree: PrefixTree, node: TreeNode, prefix: str, result: FindResult) -> None:
        split = self._has_split(tree, node, prefix)
        if split or node.is_word:
            node.mark_decomposable()
        if split and node.is_word:
            result.count += 1
            self._rank(result.words, prefix)
        if self.observer is not None:
            self.observer(prefix, node)

    @staticmethod
    def _has_split(tree: PrefixTree, node: TreeNode, prefix: str) -> bool:
        """True if *prefix* is a settled non-empty head plus a whole-word tail.

        Cut points are tried from the end backwards (shortest tail first);
        any one is enough.  The root is left out: a head of nothing is the
        single-word case, which the caller handles through ``is_word``.
        """
        ancestor = node.parent
        cut = len(prefix) - 1
        while cut > 0:
            if (ancestor.is_word or ancestor.is_decomposable) and tree.contains(prefix[cut:]):
                return True
            ancestor = ancestor.parent
            cut -= 1
        return False

    def _rank(self, ranking: list[str], word: str) -> None:
        # Strictly longer wins a slot; on a tie the earlier word keeps it
        for slot, held in enumerate(ranking):
            if len(word) > len(held):
                ranking.insert(slot, word)
                del ranking[self.top_n:]
                return
        if len(ranking) < self.top_n:
            ranking.append(word)


def find_compounds(tree: PrefixTree, top_n: int = DEFAULT_TOP_N) -> FindResult:
    """Count the compound words in *tree* and pick the *top_n* longest."""
    return CompoundFinder(top_n).run(tree)
