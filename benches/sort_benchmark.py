"""
Sorting benchmark.

Times every dsakit sort against list.sort() and sorted() on the same
seeded random data and writes the results as CSV plus metadata.

Run from the project root:
  python -m benches.sort_benchmark
  python -m benches.sort_benchmark --sizes 1000 10000 --repeats 5
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, Dict, List

import pandas as pd

import config.settings as settings
from dsakit.algorithms import max_heap
from dsakit.algorithms.sort import (
    binary_quick_sort,
    insertion_sort,
    intro_sort,
    merge_sort,
    radix_sort,
    ternary_quick_sort,
    tim_sort,
    uint_scheme,
)
from dsakit.utils.reporting import ReportWriter

logger = logging.getLogger(__name__)

# 64-bit unsigned values, as wide as the radix scheme below
VALUE_BITS = 64


def _sorted_baseline(arr: List[int]) -> None:
    arr[:] = sorted(arr)


SORTS: Dict[str, Callable[[List[int]], None]] = {
    "list.sort": list.sort,
    "sorted": _sorted_baseline,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "heap": max_heap.heapsort,
    "quick": binary_quick_sort,
    "3 way quick": ternary_quick_sort,
    "intro": intro_sort,
    "tim": tim_sort,
    "radix": lambda arr: radix_sort(arr, uint_scheme(width=VALUE_BITS, radix_bits=16)),
}


def make_data(size: int, seed: int) -> List[int]:
    """Seeded random unsigned 64-bit integers."""
    rng = random.Random(seed)
    return [rng.getrandbits(VALUE_BITS) for _ in range(size)]


def time_sort(sort: Callable[[List[int]], None], data: List[int], repeats: int) -> float:
    """Best wall time of `repeats` runs, each on a fresh copy of data."""
    best = float("inf")
    for _ in range(repeats):
        arr = list(data)
        start = time.perf_counter()
        sort(arr)
        elapsed = time.perf_counter() - start
        best = min(best, elapsed)
    return best


def run_benchmark(sizes: List[int], repeats: int, seed: int) -> pd.DataFrame:
    """
    Time every sort at every size.

    Args:
        sizes: Input lengths to benchmark
        repeats: Runs per (sort, size); the best time is kept
        seed: Random seed for the input data

    Returns:
        DataFrame with columns Algorithm, Size, Seconds, ElementsPerSecond
    """
    data = make_data(max(sizes), seed)
    rows = []
    for size in sizes:
        chunk = data[:size]
        expected = sorted(chunk)
        for name, sort in SORTS.items():
            if name == "insertion" and size > settings.INSERTION_SORT_BENCH_LIMIT:
                logger.debug(f"Skipping insertion sort at size {size}")
                continue

            check = list(chunk)
            sort(check)
            if check != expected:
                raise AssertionError(f"{name} produced an unsorted result at size {size}")

            seconds = time_sort(sort, chunk, repeats)
            rows.append({
                'Algorithm': name,
                'Size': size,
                'Seconds': seconds,
                'ElementsPerSecond': size / seconds if seconds > 0 else float("inf")
            })
            logger.info(f"{name:>12} n={size:<7} {seconds * 1000:.2f} ms")

    return pd.DataFrame(rows, columns=['Algorithm', 'Size', 'Seconds', 'ElementsPerSecond'])


def main():
    """Benchmark entry point."""
    parser = argparse.ArgumentParser(description="Benchmark dsakit sorting algorithms")
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=settings.BENCH_SIZES,
        help=f"Input sizes (default: {settings.BENCH_SIZES})"
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=settings.BENCH_REPEATS,
        help=f"Runs per measurement (default: {settings.BENCH_REPEATS})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.BENCH_SEED,
        help=f"Random seed (default: {settings.BENCH_SEED})"
    )
    parser.add_argument(
        "--output-root",
        default=str(settings.OUTPUT_ROOT),
        help=f"Report directory (default: {settings.OUTPUT_ROOT})"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )

    results = run_benchmark(args.sizes, args.repeats, args.seed)

    writer = ReportWriter(args.output_root)
    output_path = writer.write_table(
        results,
        settings.BENCH_REPORT_NAME,
        metadata={
            "seed": args.seed,
            "sizes": args.sizes,
            "repeats": args.repeats,
            "insertion_sort_limit": settings.INSERTION_SORT_BENCH_LIMIT
        }
    )

    table = results.pivot_table(index="Algorithm", columns="Size", values="Seconds")
    print((table * 1000).round(3).to_string())
    print(f"\nResults (seconds): {output_path}")


if __name__ == "__main__":
    main()
