"""Terminal output for the compound word finder."""

from __future__ import annotations

import time

from compounds.constants import DEFAULT_TOP_N
from compounds.dictionary import Dictionary
from compounds.finder import CompoundFinder, FindResult
from compounds.trie import TreeNode


def print_lookups(dictionary: Dictionary, words: list[str]) -> None:
    """Print a membership line for each word."""
    for word in words:
        print(f"Search {word}: {dictionary.is_valid(word)}")


def _print_node(prefix: str, node: TreeNode) -> None:
    marks = []
    if node.is_word:
        marks.append("word")
    if node.is_decomposable:
        marks.append("decomposable")
    print(f"  {prefix:<30} {' '.join(marks)}")


def run_cli(
    dictionary: Dictionary,
    top_n: int = DEFAULT_TOP_N,
    lookups: list[str] | None = None,
    trace: bool = False,
) -> FindResult:
    """Find and print compound words in *dictionary*."""
    if lookups:
        print_lookups(dictionary, lookups)
        print()

    if trace:
        print("Traversal:")
    finder = CompoundFinder(top_n, observer=_print_node if trace else None)

    t0 = time.time()
    result = finder.run(dictionary.tree)
    elapsed = time.time() - t0

    source = dictionary.source or "built-in sample words"
    print(f"Searched {len(dictionary):,} words from {source} in {elapsed:.2f}s.\n")
    print(f"Total number of compound words is: {result.count}")

    if not result.words:
        print("No compound words found.")
        return result

    print(f"The longest {len(result.words)} compound words are:")
    for i, word in enumerate(result.words):
        print(f" {i+1:>2}  {word:<30} ({len(word)} letters)")
    return result
