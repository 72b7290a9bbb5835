"""Timing harness comparing the substring search algorithms."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from patsearch.aho_corasick import AhoCorasickMachine, aho_corasick_search
from patsearch.boyer_moore import boyer_moore_search
from patsearch.kmp import kmp_search
from patsearch.naive import naive_search
from patsearch.rabin_karp import rabin_karp_search
from patsearch.textio import read_file, read_patterns
from patsearch.z_search import z_search

SearchFunc = Callable[[str, str], int]

DEFAULT_ITERATIONS = 100
RULE = "======================================="

ALGORITHMS: tuple[tuple[str, SearchFunc], ...] = (
    ("Naive Algorithm", naive_search),
    ("Rabin-Karp Algorithm", rabin_karp_search),
    ("KMP Algorithm", kmp_search),
    ("Boyer-Moore Algorithm", boyer_moore_search),
    ("Z-function Algorithm", z_search),
)


@dataclass(frozen=True)
class TimingResult:
    """Averages gathered by one timing run."""

    name: str
    iterations: int
    patterns: int
    average_ms: float
    average_occurrences: float


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check_iterations(name: str, iterations: int) -> None:
    if iterations <= 0:
        raise ValueError(f"[{name}]: Number of iterations must be positive.")


def run_timed_test(
    search: SearchFunc, name: str, pattern: str, text: str, iterations: int
) -> TimingResult:
    """Run ``search`` ``iterations`` times, print and return the averages."""
    _check_iterations(name, iterations)
    print(f"\n--- Timing {iterations} searches for {name} ---")

    start = time.perf_counter()
    total = sum(search(pattern, text) for _ in range(iterations))
    elapsed = _elapsed_ms(start)

    result = TimingResult(
        name=name,
        iterations=iterations,
        patterns=1,
        average_ms=elapsed / iterations,
        average_occurrences=total / iterations,
    )
    print(
        f"\nThe average time for {iterations} searches ({name}): "
        f"{result.average_ms:g} ms"
    )
    print(f"All occurrences per search ({name}): {result.average_occurrences:g}")
    return result


def run_multi_pattern_timed_test(
    search: SearchFunc,
    name: str,
    patterns: Sequence[str],
    text: str,
    iterations: int,
) -> TimingResult | None:
    """Run ``search`` for every pattern ``iterations`` times each.

    Returns ``None`` without searching when ``patterns`` is empty. Averages
    are per iteration, summed over all patterns, truncated to integers.
    """
    _check_iterations(name, iterations)
    if not patterns:
        print(f"\n--- Skipping multi-pattern test for {name} (pattern list is empty) ---")
        return None

    count = len(patterns)
    print(
        f"\n--- Timing {iterations} searches for EACH of {count} patterns using {name} ---"
    )
    print(f"Total individual search runs will be: {count * iterations}")

    start = time.perf_counter()
    total = sum(
        search(pattern, text) for pattern in patterns for _ in range(iterations)
    )
    elapsed = _elapsed_ms(start)

    result = TimingResult(
        name=name,
        iterations=iterations,
        patterns=count,
        average_ms=elapsed // iterations,
        average_occurrences=total // iterations,
    )
    print(f"\n--- Results for Multi-Pattern Test ({name}) ---")
    print(f"Total patterns tested: {count}")
    print(f"Iterations per pattern: {iterations}")
    print(f"Average time for all runs: {int(result.average_ms)} ms")
    print(f"Average occurrences across all runs: {int(result.average_occurrences)}")
    return result


def _run_aho_corasick_prebuilt(
    patterns: Sequence[str], text: str, iterations: int
) -> TimingResult:
    name = "Aho-Corasick Algorithm (Efficient Multi-Pattern)"
    print(f"\n{RULE}")
    print(
        f"\n--- Timing {iterations} searches for {name} "
        f"(using {len(patterns)} patterns) ---"
    )
    print(f"Total search operations executed (machine built once): {iterations}")

    start = time.perf_counter()
    machine = AhoCorasickMachine(patterns)
    total = sum(len(machine.search(text)) for _ in range(iterations))
    elapsed = _elapsed_ms(start)

    result = TimingResult(
        name=name,
        iterations=iterations,
        patterns=len(patterns),
        average_ms=elapsed // iterations,
        average_occurrences=total // iterations,
    )
    print(f"\n--- Results for Multi-Pattern Test ({name}) ---")
    print(f"Total patterns used to build machine: {len(patterns)}")
    print(f"Iterations of search (with pre-built machine): {iterations}")
    print(f"Average time for all runs: {int(result.average_ms)} ms")
    print(f"Average occurrences across all runs: {int(result.average_occurrences)}")
    print(RULE)
    return result


def _aho_single(pattern: str, text: str) -> int:
    return aho_corasick_search([pattern], text)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="patsearch", description="Time substring search algorithms."
    )
    parser.add_argument("text", help="file holding the text to search")
    parser.add_argument("patterns", help="file holding the pattern(s)")
    parser.add_argument(
        "-n", "--iterations", type=int, default=DEFAULT_ITERATIONS,
        help="repetitions of each search (default: %(default)s)",
    )
    parser.add_argument(
        "--single", action="store_true",
        help="use the whole pattern file as one pattern instead of one per line",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the text and patterns, time every algorithm and print the results."""
    args = _parse_args(argv)
    if args.iterations <= 0:
        print("Error: Number of iterations must be positive.", file=sys.stderr)
        return 2

    print(f"Attempting to read text from '{args.text}'...")
    try:
        text = read_file(args.text)
    except OSError as exc:
        print(f"Error: Unable to open file '{args.text}': {exc}", file=sys.stderr)
        return 1
    print("Successfully read text.")

    print(f"Attempting to read pattern from '{args.patterns}'...")
    try:
        pattern = read_file(args.patterns)
    except OSError as exc:
        print(f"Error: Unable to open file '{args.patterns}': {exc}", file=sys.stderr)
        return 1
    print("Successfully read pattern.")

    iterations = args.iterations

    if args.single:
        if not pattern:
            print("\n===== Skipping ALL Single-Pattern Tests ('pat' string empty) =====")
            return 0
        print(
            f"\n===== Running Single-Pattern Tests (using entire "
            f"'{args.patterns}' as one pattern) ====="
        )
        algorithms = ALGORITHMS + (
            ("Aho-Corasick Algorithm (Single Large Pattern from file)", _aho_single),
        )
        for name, search in algorithms:
            print(f"\n{RULE}")
            run_timed_test(search, name, pattern, text, iterations)
            print(RULE)
        return 0

    print(
        f"\nReading patterns for multi-pattern tests from '{args.patterns}' line by line..."
    )
    patterns = read_patterns(args.patterns)
    print(f"Successfully read {len(patterns)} patterns for multi-pattern tests.")

    if not patterns:
        print("\n===== Skipping ALL Multi-Pattern Tests (pattern list empty) =====")
        return 0

    print(f"\n===== Running Multi-Pattern Tests (using {len(patterns)} patterns) =====")
    for name, search in ALGORITHMS:
        print(f"\n{RULE}")
        run_multi_pattern_timed_test(search, name, patterns, text, iterations)
        print(RULE)
    _run_aho_corasick_prebuilt(patterns, text, iterations)
    return 0


if __name__ == "__main__":
    sys.exit(main())