import random

import pytest

from compounds.constants import SAMPLE_WORDS
from compounds.finder import CompoundFinder, FindResult, find_compounds
from compounds.trie import PrefixTree, build


def brute_force_compounds(words):
    """Reference word-break check, straight from the definition."""
    vocab = set(words)
    memo = {}

    def decomposable(s):
        if s not in memo:
            memo[s] = s in vocab or any(
                decomposable(s[:i]) and s[i:] in vocab for i in range(1, len(s))
            )
        return memo[s]

    return {
        w for w in vocab
        if any(decomposable(w[:i]) and w[i:] in vocab for i in range(1, len(w)))
    }


def test_two_word_compound():
    result = find_compounds(build(["cat", "dog", "catdog"]))
    assert result.as_tuple() == (1, "catdog", None)


def test_longer_word_found_later_takes_first_slot():
    words = ["cat", "cats", "dog", "rat", "catsdogcats", "ratcatdogcat"]
    result = find_compounds(build(words))

    assert result.count == 2
    assert result.longest == "ratcatdogcat"
    assert result.second_longest == "catsdogcats"


def test_unknown_letter_blocks_split():
    result = find_compounds(build(["cat", "dog", "rat", "catxdogcatsrat"]))
    assert result.as_tuple() == (0, None, None)


def test_empty_tree():
    result = find_compounds(PrefixTree())
    assert result.as_tuple() == (0, None, None)
    assert result.words == []


def test_single_word_is_not_compound():
    result = find_compounds(build(["hippopotamuses"]))
    assert result.count == 0
    assert result.longest is None


def test_sample_words():
    result = find_compounds(build(SAMPLE_WORDS))
    assert result.as_tuple() == (3, "ratcatdogcat", "catsdogcats")


def test_ties_go_to_first_in_traversal_order():
    result = find_compounds(build(["ab", "cd", "cdab", "abcd", "abab"]))

    assert result.count == 3
    # All three are length 4; pre-order reaches abab, then abcd, then cdab
    assert result.words == ["abab", "abcd"]


def test_equal_length_fills_empty_second_slot():
    result = find_compounds(build(["a", "b", "ba", "ab"]))
    assert result.as_tuple() == (2, "ab", "ba")


def test_top_n():
    words = ["a", "ab", "b", "aab", "abab", "ababab"]
    tree = build(words)

    assert find_compounds(tree, top_n=1).words == ["ababab"]
    assert find_compounds(tree, top_n=3).words == ["ababab", "abab", "aab"]
    # Asking for more than exist returns what there is
    assert find_compounds(tree, top_n=10).count == 4
    assert len(find_compounds(tree, top_n=10).words) == 4


def test_top_n_must_be_positive():
    with pytest.raises(ValueError):
        CompoundFinder(top_n=0)


def test_decomposable_prefix_that_is_not_a_word():
    tree = build(["cat", "dog", "catdogs"])
    result = find_compounds(tree)

    assert result.count == 0
    assert tree.node("catdog").is_decomposable is True
    assert tree.node("catdog").is_word is False
    assert tree.node("ca").is_decomposable is False
    assert tree.node("catdo").is_decomposable is False
    # A plain word is decomposable as itself but not a compound
    assert tree.node("catdogs").is_word is True
    assert tree.node("catdogs").is_decomposable is True


def test_split_through_decomposable_head():
    # "abc" is ab + c without being a word itself
    tree = build(["ab", "c", "d", "abcd"])
    result = find_compounds(tree)

    assert result.as_tuple() == (1, "abcd", None)
    assert tree.node("abc").is_decomposable is True


def test_plain_words_are_decomposable():
    tree = build(["cat"])
    find_compounds(tree)
    assert tree.node("cat").is_decomposable is True
    assert tree.node("c").is_decomposable is False


def test_rerun_is_deterministic():
    tree = build(SAMPLE_WORDS)
    first = find_compounds(tree)
    flags = {w: tree.node(w).is_decomposable for w in ("cats", "catx", "catsdog", "hippo")}

    second = find_compounds(tree)
    assert second.as_tuple() == first.as_tuple()
    assert {w: tree.node(w).is_decomposable for w in flags} == flags


def test_flags_never_turn_off():
    tree = build(["cat", "dog", "catdogs"])
    find_compounds(tree)
    assert tree.node("catdog").is_decomposable is True

    tree.insert("s")
    result = find_compounds(tree)

    assert result.as_tuple() == (1, "catdogs", None)
    assert tree.node("catdog").is_decomposable is True
    assert tree.node("catdo").is_decomposable is False


def test_observer_sees_every_prefix_in_preorder():
    seen = []
    tree = build(["ab", "b"])
    CompoundFinder(observer=lambda prefix, node: seen.append((prefix, node.is_word))).run(tree)

    assert seen == [("a", False), ("ab", True), ("b", True)]


def test_long_word_does_not_hit_recursion_limit():
    long_word = "a" * 5000
    result = find_compounds(build(["a", long_word]))

    assert result.count == 1
    assert result.longest == long_word


def test_matches_brute_force():
    rng = random.Random(1234)
    for _ in range(20):
        words = {
            "".join(rng.choice("abc") for _ in range(rng.randint(1, 6)))
            for _ in range(rng.randint(1, 40))
        }
        expected = brute_force_compounds(words)
        result = CompoundFinder(top_n=len(words)).run(build(sorted(words)))

        assert result.count == len(expected)
        assert set(result.words) == expected
        lengths = [len(w) for w in result.words]
        assert lengths == sorted(lengths, reverse=True)


def test_find_result_defaults():
    result = FindResult()
    assert result.as_tuple() == (0, None, None)
    assert "count=0" in repr(result)
