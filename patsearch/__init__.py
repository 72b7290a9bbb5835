"""Exact string-search algorithms, an Aho-Corasick automaton and a timing harness."""

__version__ = "0.1.0"