"""Compound word finder: trie-backed search for words made of other words."""

from compounds.constants import ALPHABET, DEFAULT_TOP_N, SAMPLE_WORDS
from compounds.trie import InvalidInputError, PrefixTree, TreeNode, build
from compounds.finder import CompoundFinder, FindResult, find_compounds
from compounds.dictionary import Dictionary

__all__ = [
    "ALPHABET",
    "DEFAULT_TOP_N",
    "SAMPLE_WORDS",
    "CompoundFinder",
    "Dictionary",
    "FindResult",
    "InvalidInputError",
    "PrefixTree",
    "TreeNode",
    "build",
    "find_compounds",
]
