"""Benchmark the radix tree against flat dictionary structures."""

import bisect
import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path
from typing import Any, Callable

import matplotlib.pyplot as plt
import psutil

from src.custom_data_structures.RadixTree.RadixTree import RadixTree

RESULTS_DIR = (
    Path(__file__).parent.parent / "static" / "benchmarks" / "dictionary"
)
DATA_SIZES = [1_000, 10_000, 50_000, 100_000]
NUMBER_OF_QUERIES = 10_000
SEED = 1234


class SortedWordList:
    """A sorted list searched with bisect, as a flat baseline."""

    def __init__(self, words: list[str]) -> None:
        self.words = sorted(words)

    def contains(self, word: str) -> bool:
        index = bisect.bisect_left(self.words, word)
        return index < len(self.words) and self.words[index] == word


class WordSet:
    """A hash set, as a flat baseline."""

    def __init__(self, words: list[str]) -> None:
        self.words = set(words)

    def contains(self, word: str) -> bool:
        return word in self.words


def build_radix_tree(words: list[str]) -> RadixTree:
    """Insert every word into a fresh radix tree."""
    tree = RadixTree()
    for word in words:
        tree.insert(word)
    return tree


STRUCTURES: dict[str, Callable[[list[str]], Any]] = {
    "Radix Tree": build_radix_tree,
    "Hash Set": WordSet,
    "Sorted List": SortedWordList,
}


def generate_words(count: int, rng: random.Random) -> list[str]:
    """Generate words that share prefixes the way natural words do.

    Args:
        count (int): How many words to generate.
        rng (random.Random): The random generator to draw from.

    Returns:
        list[str]: The generated words, duplicates possible.

    """
    stems = [
        "".join(rng.choices(string.ascii_lowercase, k=rng.randint(2, 5)))
        for _ in range(max(1, count // 20))
    ]
    suffixes = ["", "s", "ed", "ing", "er", "est", "ly", "ness", "ment"]
    words = []
    for _ in range(count):
        tail = "".join(
            rng.choices(string.ascii_lowercase, k=rng.randint(0, 4)),
        )
        words.append(rng.choice(stems) + tail + rng.choice(suffixes))
    return words


def benchmark_structure(
    build: Callable[[list[str]], Any],
    words: list[str],
    queries: list[str],
) -> dict[str, float]:
    """Measure build time, query time and memory of one structure.

    Args:
        build (Callable): Builds the structure from the word list.
        words (list[str]): The dictionary words.
        queries (list[str]): The words to look up.

    Returns:
        dict[str, float]: The collected metrics.

    """
    gc.collect()
    process = psutil.Process()
    rss_before = process.memory_info().rss

    tracemalloc.start()
    start = time.perf_counter()
    structure = build(words)
    build_time_ms = (time.perf_counter() - start) * 1000
    traced_current, traced_peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    rss_growth = process.memory_info().rss - rss_before

    start = time.perf_counter()
    hits = sum(1 for query in queries if structure.contains(query))
    query_time_us = (time.perf_counter() - start) * 1_000_000 / len(queries)

    del structure
    gc.collect()

    return {
        "build_time_ms": build_time_ms,
        "average_query_time_us": query_time_us,
        "traced_memory_bytes": traced_current,
        "traced_peak_bytes": traced_peak,
        "rss_growth_bytes": rss_growth,
        "hits": hits,
    }


def plot_metric(
    results: dict[int, dict[str, dict[str, float]]],
    metric: str,
    ylabel: str,
) -> None:
    """Save a grouped bar chart of one metric over all data sizes."""
    try:
        plt.figure(figsize=(8, 5))
        width = 0.8 / len(STRUCTURES)
        x = range(len(DATA_SIZES))
        for offset, name in enumerate(STRUCTURES):
            values = [results[size][name][metric] for size in DATA_SIZES]
            plt.bar(
                [i + offset * width for i in x],
                values,
                width=width,
                label=name,
            )
        plt.xticks(
            [i + width * (len(STRUCTURES) - 1) / 2 for i in x],
            [str(size) for size in DATA_SIZES],
        )
        plt.xlabel("Dictionary size (words)")
        plt.ylabel(ylabel)
        plt.title(ylabel)
        plt.legend()
        plt.tight_layout()
        plt.savefig(RESULTS_DIR / f"benchmark_{metric}.png")
    finally:
        plt.close("all")


def main() -> None:
    """Main function."""
    rng = random.Random(SEED)
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    results: dict[int, dict[str, dict[str, float]]] = {}
    for size in DATA_SIZES:
        words = generate_words(size, rng)
        queries = rng.sample(words, min(len(words), NUMBER_OF_QUERIES // 2))
        queries += generate_words(NUMBER_OF_QUERIES - len(queries), rng)

        results[size] = {}
        for name, build in STRUCTURES.items():
            print(f"\n--- Benchmarking {name} with {size} words ---")
            metrics = benchmark_structure(build, words, queries)
            results[size][name] = metrics
            print(
                f"Build: {metrics['build_time_ms']:.2f} ms, "
                f"query: {metrics['average_query_time_us']:.2f} us, "
                f"memory: {metrics['traced_memory_bytes']} bytes",
            )

        hits = {metrics["hits"] for metrics in results[size].values()}
        if len(hits) != 1:
            print(f"Warning: structures disagree on hits for size {size}")

    plot_metric(results, "build_time_ms", "Build Time (ms)")
    plot_metric(results, "average_query_time_us", "Query Time (us)")
    plot_metric(results, "traced_memory_bytes", "Traced Memory (bytes)")

    results_json_path = RESULTS_DIR / "results.json"
    with open(results_json_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)


if __name__ == "__main__":
    main()
