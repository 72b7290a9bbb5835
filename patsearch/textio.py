"""Reading search texts and pattern lists from files."""

from __future__ import annotations

import os


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of ``path`` unchanged.

    Raises ``OSError`` if the file cannot be opened or read.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def read_patterns(path: str | os.PathLike[str]) -> list[str]:
    """Return the non-empty lines of ``path``, split on newline characters.

    Raises ``OSError`` if the file cannot be opened or read.
    """
    return [line for line in read_file(path).split("\n") if line]