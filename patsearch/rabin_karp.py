"""Rabin-Karp rolling-hash substring counting."""

from patsearch.naive import _degenerate_count

MODULUS = 2_147_483_647
RADIX = 256


def rabin_karp_search(pat: str, txt: str) -> int:
    """Count overlapping occurrences of ``pat`` in ``txt`` using a rolling hash.

    Hash matches are confirmed by direct comparison, so collisions never
    produce false positives.
    """
    special = _degenerate_count(pat, txt)
    if special is not None:
        return special

    m, n = len(pat), len(txt)
    high = pow(RADIX, m - 1, MODULUS)

    pat_hash = 0
    win_hash = 0
    for p_char, t_char in zip(pat, txt[:m]):
        pat_hash = (RADIX * pat_hash + ord(p_char)) % MODULUS
        win_hash = (RADIX * win_hash + ord(t_char)) % MODULUS

    count = 0
    for start in range(n - m + 1):
        if pat_hash == win_hash and txt[start:start + m] == pat:
            count += 1
        if start < n - m:
            win_hash = (win_hash - ord(txt[start]) * high) % MODULUS
            win_hash = (win_hash * RADIX + ord(txt[start + m])) % MODULUS
    return count