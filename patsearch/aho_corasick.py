"""Aho-Corasick automaton for counting many patterns in one pass."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    fail: _Node | None = None
    outputs: set[str] = field(default_factory=set)
    matches: tuple[str, ...] = ()


class AhoCorasickMachine:
    """A trie of patterns with failure links, built once and searched many times.

    Duplicate patterns are reported once. Matches ending at the same position
    are reported in sorted pattern order.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self._root = _Node()
        self._nodes = [self._root]
        patterns = list(patterns)
        self._root.fail = self._root
        if not patterns:
            return

        for pattern in patterns:
            node = self._root
            for char in pattern:
                node = self._child(node, char)
            node.outputs.add(pattern)

        queue: deque[_Node] = deque()
        for _, child in sorted(self._root.children.items()):
            child.fail = self._root
            queue.append(child)

        while queue:
            node = queue.popleft()
            for key, child in sorted(node.children.items()):
                queue.append(child)
                link = node.fail
                while link is not self._root and key not in link.children:
                    link = link.fail
                child.fail = link.children.get(key, self._root)
                child.outputs |= child.fail.outputs

        for node in self._nodes:
            node.matches = tuple(sorted(node.outputs))

    def _child(self, parent: _Node, key: str) -> _Node:
        child = parent.children.get(key)
        if child is None:
            child = _Node()
            self._nodes.append(child)
            parent.children[key] = child
        return child

    def _step(self, state: _Node, char: str) -> _Node:
        while state is not self._root and char not in state.children:
            state = state.fail
        return state.children.get(char, self._root)

    def search(self, text: str) -> list[tuple[str, int]]:
        """Return every ``(pattern, start_index)`` match in ``text``."""
        results: list[tuple[str, int]] = []
        state = self._root
        for index, char in enumerate(text):
            state = self._step(state, char)
            results.extend(
                (pattern, index - len(pattern) + 1) for pattern in state.matches
            )
        return results


def aho_corasick_search(patterns: Iterable[str], text: str) -> int:
    """Count all matches of all ``patterns`` in ``text``; 0 for no patterns."""
    patterns = list(patterns)
    if not patterns:
        logger.warning("Pattern set is empty.")
        return 0
    return len(AhoCorasickMachine(patterns).search(text))