"""Z-function substring counting."""

from patsearch.naive import _degenerate_count

SEPARATOR = "$"


def z_function(text: str) -> list[int]:
    """Return the Z-array of ``text``; the first entry is the length of ``text``."""
    n = len(text)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and text[z[i]] == text[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def z_search(pat: str, txt: str) -> int:
    """Count occurrences of ``pat`` in ``txt`` using the Z-array of ``pat + '$' + txt``.

    A position counts only when its Z-value equals the pattern length exactly,
    so a match immediately followed by ``'$'`` is not counted.
    """
    special = _degenerate_count(pat, txt)
    if special is not None:
        return special

    m = len(pat)
    z = z_function(pat + SEPARATOR + txt)
    return sum(1 for value in z[m + 1:] if value == m)