import pytest

from patsearch.aho_corasick import AhoCorasickMachine, aho_corasick_search
from patsearch.naive import naive_search


def test_classic_worked_example():
    machine = AhoCorasickMachine(["he", "she", "his", "hers"])
    assert machine.search("ushers") == [("he", 2), ("she", 1), ("hers", 2)]


@pytest.mark.parametrize(
    "patterns, text",
    [
        (["a", "aa", "aaa"], "aaaaaa"),
        (["ab", "bc", "abc", "c"], "abcabcxabc"),
        (["needle", "eed", "le"], "needleneedle haystack needle"),
        (["xyz"], "abcdef"),
    ],
)
def test_counts_agree_with_naive(patterns, text):
    results = AhoCorasickMachine(patterns).search(text)
    for pattern in patterns:
        found = [start for p, start in results if p == pattern]
        assert len(found) == naive_search(pattern, text)
        for start in found:
            assert text[start:start + len(pattern)] == pattern


def test_results_ordered_by_end_position():
    text = "abcabcxabc"
    results = AhoCorasickMachine(["ab", "bc", "abc", "c"]).search(text)
    ends = [start + len(p) for p, start in results]
    assert ends == sorted(ends)


def test_duplicate_patterns_reported_once():
    assert aho_corasick_search(["ab", "ab"], "abab") == naive_search("ab", "abab")


def test_empty_pattern_list():
    assert AhoCorasickMachine([]).search("anything") == []
    assert aho_corasick_search([], "anything") == 0


def test_search_total_matches_sum_of_counts():
    patterns = ["ana", "na", "ban"]
    text = "bananabanana"
    expected = sum(naive_search(p, text) for p in patterns)
    assert aho_corasick_search(patterns, text) == expected


def test_machine_reusable():
    machine = AhoCorasickMachine(["ab"])
    assert machine.search("abab") == machine.search("abab")
    assert len(machine.search("ababab")) == naive_search("ab", "ababab")