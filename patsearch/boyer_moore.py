"""Boyer-Moore substring counting with bad-character and strong good-suffix rules."""

from patsearch.naive import _degenerate_count


def bad_character_table(pattern: str) -> dict[str, int]:
    """Map each character of ``pattern`` to the index of its last occurrence."""
    return {char: index for index, char in enumerate(pattern)}


def good_suffix_table(pattern: str) -> list[int]:
    """Return the strong good-suffix shift for each position 0..len(pattern)."""
    m = len(pattern)
    shift = [0] * (m + 1)
    border = [0] * (m + 1)

    i, j = m, m + 1
    border[i] = j
    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == 0:
                shift[j] = j - i
            j = border[j]
        i -= 1
        j -= 1
        border[i] = j

    j = border[0]
    for i in range(m + 1):
        if shift[i] == 0:
            shift[i] = j
        if i == j:
            j = border[j]
    return shift


def boyer_moore_search(pat: str, txt: str) -> int:
    """Count overlapping occurrences of ``pat`` in ``txt`` with Boyer-Moore."""
    special = _degenerate_count(pat, txt)
    if special is not None:
        return special

    m, n = len(pat), len(txt)
    last = bad_character_table(pat)
    good = good_suffix_table(pat)

    count = 0
    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0 and pat[j] == txt[s + j]:
            j -= 1
        if j < 0:
            count += 1
            s += good[0]
        else:
            bad_shift = j - last.get(txt[s + j], -1)
            s += max(1, bad_shift, good[j + 1])
    return count