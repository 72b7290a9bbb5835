import re

import pytest

from patsearch.naive import naive_search
from patsearch.z_search import z_function, z_search


def _reference_count(pat, txt):
    return len(re.findall(f"(?={re.escape(pat)})", txt))


def test_z_function_worked_example():
    assert z_function("aabxaab") == [7, 1, 0, 0, 3, 1, 0]


def test_z_function_empty():
    assert z_function("") == []


@pytest.mark.parametrize("text", ["aaaaa", "abacaba", "abcabcabc", "xyz", "a"])
def test_z_values_are_longest_common_prefixes(text):
    z = z_function(text)
    assert z[0] == len(text)
    for i in range(1, len(text)):
        k = z[i]
        assert text[i:i + k] == text[:k]
        if i + k < len(text):
            assert text[i + k] != text[k]


@pytest.mark.parametrize(
    "pat, txt",
    [
        ("aa", "aaaaa"),
        ("aba", "abababa"),
        ("needle", "find the needle in the needle stack"),
        ("q", "abc"),
        ("r", "r"),
    ],
)
def test_matches_reference(pat, txt):
    assert z_search(pat, txt) == _reference_count(pat, txt)


def test_agrees_with_naive():
    txt = "mississippi mississippi"
    for pat in ["ss", "issi", "i", "pp", "sip", "mississippi"]:
        assert z_search(pat, txt) == naive_search(pat, txt)


def test_match_followed_by_separator_is_not_counted():
    assert z_search("ab", "ab$ab") == 1


def test_empty_pattern():
    assert z_search("", "abcd") == len("abcd") + 1


def test_pattern_longer_than_text():
    assert z_search("abcde", "ab") == 0