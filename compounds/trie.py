"""Prefix trie over a-z, stored as an arena of numpy arrays.

Every node is a row index into a handful of parallel arrays.  Index 0 is
the root (the empty prefix), so a 0 in the children table means "no child".
The parent column is a plain index back up the tree; it owns nothing, and
dropping the tree releases the whole arena at once.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from compounds.constants import ALPHABET, ALPHABET_SIZE, INITIAL_CAPACITY

ROOT = 0
_ORD_A = ord("a")


class InvalidInputError(ValueError):
    """A word is empty or contains a character outside a-z."""


def _letter_indices(word: str) -> list[int]:
    if not isinstance(word, str) or not word:
        raise InvalidInputError(f"Invalid word {word!r}: expected a non-empty string")
    indices: list[int] = []
    for ch in word:
        i = ord(ch) - _ORD_A
        if not 0 <= i < ALPHABET_SIZE:
            raise InvalidInputError(
                f"Invalid word {word!r}: {ch!r} is not a lowercase letter a-z"
            )
        indices.append(i)
    return indices


def _extend(arr: np.ndarray, capacity: int, fill) -> np.ndarray:
    out = np.full((capacity,) + arr.shape[1:], fill, dtype=arr.dtype)
    out[: len(arr)] = arr
    return out


class TreeNode:
    """Read-only view of one prefix in a :class:`PrefixTree`.

    Views are cheap and not cached; two views compare equal when they point
    at the same node of the same tree.
    """

    __slots__ = ("tree", "index")

    def __init__(self, tree: PrefixTree, index: int):
        self.tree = tree
        self.index = index

    @property
    def is_word(self) -> bool:
        return bool(self.tree._is_word[self.index])

    @property
    def is_decomposable(self) -> bool:
        return bool(self.tree._is_decomposable[self.index])

    def mark_decomposable(self) -> None:
        """Flag this prefix as splittable into dictionary words (one-way)."""
        self.tree._is_decomposable[self.index] = True

    @property
    def is_root(self) -> bool:
        return self.index == ROOT

    @property
    def depth(self) -> int:
        return int(self.tree._depth[self.index])

    @property
    def letter(self) -> str | None:
        """Letter on the edge into this node; None for the root."""
        if self.is_root:
            return None
        return ALPHABET[self.tree._letter[self.index]]

    @property
    def parent(self) -> TreeNode | None:
        if self.is_root:
            return None
        return TreeNode(self.tree, int(self.tree._parent[self.index]))

    @property
    def children(self) -> dict[str, TreeNode]:
        """Existing children keyed by letter, in ascending letter order."""
        row = self.tree._children[self.index]
        return {
            ALPHABET[i]: TreeNode(self.tree, int(row[i]))
            for i in np.flatnonzero(row)
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.tree is other.tree and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.tree), self.index))

    def __repr__(self) -> str:
        flags = []
        if self.is_word:
            flags.append("word")
        if self.is_decomposable:
            flags.append("decomposable")
        return f"TreeNode(#{self.index}, depth={self.depth}, {'|'.join(flags) or '-'})"


class PrefixTree:
    """Prefix trie over lowercase a-z with per-node word and
    decomposability flags."""

    def __init__(self, capacity: int = INITIAL_CAPACITY):
        capacity = max(1, capacity)
        self._children = np.zeros((capacity, ALPHABET_SIZE), dtype=np.int32)
        self._parent = np.full(capacity, -1, dtype=np.int32)
        self._letter = np.zeros(capacity, dtype=np.uint8)
        self._depth = np.zeros(capacity, dtype=np.int32)
        self._is_word = np.zeros(capacity, dtype=bool)
        self._is_decomposable = np.zeros(capacity, dtype=bool)
        self._size = 1  # the root
        self._word_count = 0

    # public API

    def insert(self, word: str) -> None:
        """Add *word*; inserting the same word again changes nothing."""
        node = ROOT
        for i in _letter_indices(word):
            child = int(self._children[node, i])
            if child == ROOT:
                child = self._new_node(node, i)
            node = child
        if not self._is_word[node]:
            self._is_word[node] = True
            self._word_count += 1

    def contains(self, word: str) -> bool:
        """True if *word* was inserted as a whole word."""
        node = self._walk(_letter_indices(word))
        return node is not None and bool(self._is_word[node])

    def node(self, prefix: str) -> TreeNode | None:
        """Node for *prefix* (``""`` is the root), or None if absent."""
        if prefix == "":
            return self.root
        node = self._walk(_letter_indices(prefix))
        return None if node is None else TreeNode(self, node)

    def reset(self) -> None:
        """Drop every node but the root and clear its flags.

        The arena keeps its capacity so the tree can be refilled without
        reallocating.
        """
        self._size = 1
        self._word_count = 0
        self._children[ROOT] = 0
        self._is_word[ROOT] = False
        self._is_decomposable[ROOT] = False

    @property
    def root(self) -> TreeNode:
        return TreeNode(self, ROOT)

    @property
    def node_count(self) -> int:
        """Number of nodes, root included."""
        return self._size

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __iter__(self) -> Iterator[str]:
        """Yield all words in pre-order, a before z."""
        stack: list[tuple[int, str]] = [(ROOT, "")]
        while stack:
            node, prefix = stack.pop()
            if self._is_word[node]:
                yield prefix
            row = self._children[node]
            for i in np.flatnonzero(row)[::-1]:
                stack.append((int(row[i]), prefix + ALPHABET[i]))

    def __repr__(self) -> str:
        return f"PrefixTree(words={self._word_count}, nodes={self._size})"

    # arena

    def _walk(self, indices: list[int]) -> int | None:
        node = ROOT
        for i in indices:
            node = int(self._children[node, i])
            if node == ROOT:
                return None
        return node

    def _new_node(self, parent: int, letter: int) -> int:
        if self._size == len(self._parent):
            self._grow()
        node = self._size
        self._size += 1
        # Slots are reused after reset(), so clear everything
        self._children[node] = 0
        self._parent[node] = parent
        self._letter[node] = letter
        self._depth[node] = self._depth[parent] + 1
        self._is_word[node] = False
        self._is_decomposable[node] = False
        self._children[parent, letter] = node
        return node

    def _grow(self) -> None:
        capacity = 2 * len(self._parent)
        self._children = _extend(self._children, capacity, 0)
        self._parent = _extend(self._parent, capacity, -1)
        self._letter = _extend(self._letter, capacity, 0)
        self._depth = _extend(self._depth, capacity, 0)
        self._is_word = _extend(self._is_word, capacity, False)
        self._is_decomposable = _extend(self._is_decomposable, capacity, False)


def build(words: Iterable[str]) -> PrefixTree:
    """Prefix tree holding *words*, inserted in order.

    Raises InvalidInputError on the first word that is empty or not a-z.
    """
    tree = PrefixTree()
    for word in words:
        tree.insert(word)
    return tree
