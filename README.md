# patsearch

This package provides exact string-search algorithms and a small timing harness for comparing them.

## Single-pattern search

Each of these functions takes `(pat, txt)` and returns the number of times `pat` occurs in `txt`. Overlapping matches are counted:

- `patsearch.naive.naive_search`
- `patsearch.rabin_karp.rabin_karp_search` uses a rolling hash modulo 2147483647 with radix 256. Every hash match is checked against the text.
- `patsearch.kmp.kmp_search`. `compute_lps` returns the longest-proper-border table.
- `patsearch.boyer_moore.boyer_moore_search`. `bad_character_table` returns last-occurrence indices. `good_suffix_table` returns the strong good-suffix shifts for positions `0..len(pattern)`.
- `patsearch.z_search.z_search`. `z_function` returns the Z-array, and its first entry is the length of the text.

All five functions handle edge cases the same way:

- An empty pattern occurs `len(txt) + 1` times, or once in an empty text. The functions log a warning through `logging` in this case.
- An empty text gives 0.
- A pattern longer than the text gives 0.

`z_search` searches the string `pat + "$" + txt`. It counts a position only when the Z-value there equals the pattern length. A match followed directly by a `"$"` in the text is therefore not counted.

```python
from patsearch.kmp import kmp_search, compute_lps

kmp_search("aa", "aaaa")      # 3
compute_lps("abab")           # [0, 0, 1, 2]
```

## Many patterns at once

`patsearch.aho_corasick.AhoCorasickMachine` builds an automaton once from a collection of patterns. Its `search(text)` method returns every `(pattern, start_index)` match.

- Duplicate patterns are reported once.
- Matches that end at the same position come in sorted pattern order.

`aho_corasick_search(patterns, text)` returns the number of matches. It returns 0, with a logged warning, when no patterns are given.

```python
from patsearch.aho_corasick import AhoCorasickMachine, aho_corasick_search

machine = AhoCorasickMachine(["he", "she", "his", "hers"])
machine.search("ushers")                       # [("he", 2), ("she", 1), ("hers", 2)]

aho_corasick_search(["he", "she"], "ushers")   # 2
```

## Reading input files

The module `patsearch.textio` has two functions:

- `read_file(path)` returns a file's whole content as UTF-8 text, with line endings unchanged.
- `read_patterns(path)` returns the non-empty lines of a file. Lines are split on `"\n"`.

Both raise `OSError` when the file cannot be read.

## Benchmark

Install with `pip install .` and run:

```
patsearch-bench TEXT_FILE PATTERN_FILE [-n ITERATIONS] [--single]
```

The default mode reads one pattern from each non-empty line of `PATTERN_FILE`.

- Each of the naive, Rabin-Karp, KMP, Boyer-Moore and Z-function searches runs `ITERATIONS` times for every pattern. The default is 100.
- The harness then builds one Aho-Corasick machine for all patterns and searches with it `ITERATIONS` times.
- It prints the average time in milliseconds and the average number of occurrences. Both averages are per iteration, summed over all patterns, and truncated to integers.

With `--single`, the whole pattern file is used as one pattern. Every algorithm, Aho-Corasick included, is timed on that pattern.

The command's exit codes are:

- 0 on success.
- 1 when a file cannot be read.
- 2 when the iteration count is not positive.

You can also call the timing helpers in `patsearch.benchmark` directly with any search function:

- `run_timed_test(search, name, pattern, text, iterations)`
- `run_multi_pattern_timed_test(search, name, patterns, text, iterations)`

Each helper prints its results and returns a `TimingResult`. The multi-pattern helper returns `None` for an empty pattern list. Both raise `ValueError` when `iterations` is not positive.

## Tests

```
pip install .[test]
pytest
```