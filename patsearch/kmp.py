"""Knuth-Morris-Pratt substring counting."""

from patsearch.naive import _degenerate_count


def compute_lps(pat: str) -> list[int]:
    """Return, for each prefix of ``pat``, the length of its longest proper border."""
    lps = [0] * len(pat)
    length = 0
    i = 1
    while i < len(pat):
        if pat[i] == pat[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(pat: str, txt: str) -> int:
    """Count overlapping occurrences of ``pat`` in ``txt`` with the KMP automaton."""
    special = _degenerate_count(pat, txt)
    if special is not None:
        return special

    lps = compute_lps(pat)
    m = len(pat)
    count = 0
    j = 0
    for char in txt:
        while j and pat[j] != char:
            j = lps[j - 1]
        if pat[j] == char:
            j += 1
            if j == m:
                count += 1
                j = lps[j - 1]
    return count