"""Brute-force substring counting."""

import logging

logger = logging.getLogger(__name__)


def _degenerate_count(pat: str, txt: str) -> int | None:
    """Return the count for empty or oversized patterns, or None to search."""
    if not pat:
        count = len(txt) + 1 if txt else 1
        logger.warning("Pattern is empty; counting %d occurrences.", count)
        return count
    if not txt:
        logger.info("Text is empty. Pattern not found.")
        return 0
    if len(pat) > len(txt):
        logger.info("Pattern is longer than text. Pattern not found.")
        return 0
    return None


def naive_search(pat: str, txt: str) -> int:
    """Count overlapping occurrences of ``pat`` in ``txt`` by checking every shift.

    An empty pattern matches at every position, including the end of the text.
    """
    special = _degenerate_count(pat, txt)
    if special is not None:
        return special
    m = len(pat)
    return sum(
        1 for start in range(len(txt) - m + 1) if txt[start:start + m] == pat
    )