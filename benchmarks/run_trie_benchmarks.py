"""Benchmark the trie operations over growing word sets."""

import gc
import json
import random
import string
import time
from pathlib import Path
from typing import Callable

import matplotlib.pyplot as plt
import psutil

from src.custom_data_structures.Trie.Trie import StringTrie

RESULTS_DIR = Path(__file__).parent / "results"
DATA_SIZES = [1_000, 10_000, 50_000, 100_000, 250_000]
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 12
SEED = 1234


def generate_words(count: int, rng: random.Random) -> list[str]:
    """Generate `count` random lower-case words.

    Args:
        count (int): How many words to generate.
        rng (random.Random): The random generator to draw from.

    Returns:
        list[str]: The generated words (duplicates are possible).

    """
    return [
        "".join(
            rng.choices(
                string.ascii_lowercase,
                k=rng.randint(MIN_WORD_LENGTH, MAX_WORD_LENGTH),
            ),
        )
        for _ in range(count)
    ]


def time_operation(
    operation: Callable[[str], object],
    words: list[str],
) -> float:
    """Return the average time of `operation` per word in microseconds."""
    start_time = time.perf_counter()
    for word in words:
        operation(word)
    elapsed = time.perf_counter() - start_time
    return elapsed / len(words) * 1_000_000


def benchmark_size(size: int, rng: random.Random) -> dict[str, float]:
    """Measure insert, search, prefix search and delete for one data size.

    Args:
        size (int): The number of words to insert.
        rng (random.Random): The random generator to draw from.

    Returns:
        dict[str, float]: Average microseconds per operation, plus the
        resident memory growth in MiB and the node count.

    """
    words = generate_words(size, rng)
    misses = generate_words(size, rng)

    gc.collect()
    process = psutil.Process()
    memory_before = process.memory_info().rss

    trie = StringTrie()
    insert_us = time_operation(trie.insert, words)
    memory_after = process.memory_info().rss

    search_hit_us = time_operation(trie.search_word, words)
    search_miss_us = time_operation(trie.search_word, misses)
    prefix_us = time_operation(
        trie.starts_with,
        [word[: len(word) // 2] for word in words],
    )
    node_count = trie.count_nodes()
    delete_us = time_operation(trie.delete, words)

    return {
        "insert_us": insert_us,
        "search_hit_us": search_hit_us,
        "search_miss_us": search_miss_us,
        "starts_with_us": prefix_us,
        "delete_us": delete_us,
        "memory_mib": (memory_after - memory_before) / 1024 / 1024,
        "node_count": node_count,
    }


def plot_results(results: dict[int, dict[str, float]], output: Path) -> None:
    """Draw one line per operation against the data size.

    Args:
        results (dict[int, dict[str, float]]): Results keyed by size.
        output (Path): Where to save the PNG.

    """
    sizes = sorted(results)
    fig, (time_axis, memory_axis) = plt.subplots(1, 2, figsize=(12, 5))

    for key in (
        "insert_us",
        "search_hit_us",
        "search_miss_us",
        "starts_with_us",
        "delete_us",
    ):
        time_axis.plot(
            sizes,
            [results[size][key] for size in sizes],
            marker="o",
            label=key.replace("_us", "").replace("_", " "),
        )
    time_axis.set_xscale("log")
    time_axis.set_xlabel("Number of words")
    time_axis.set_ylabel("Average time per operation (µs)")
    time_axis.set_title("Trie operation time")
    time_axis.legend()

    memory_axis.plot(
        sizes,
        [results[size]["memory_mib"] for size in sizes],
        marker="o",
        color="tab:red",
    )
    memory_axis.set_xscale("log")
    memory_axis.set_xlabel("Number of words")
    memory_axis.set_ylabel("RSS growth (MiB)")
    memory_axis.set_title("Trie memory usage")

    fig.tight_layout()
    fig.savefig(output)
    plt.close(fig)


def main() -> None:
    """Run every benchmark and write the JSON results and the plot."""
    rng = random.Random(SEED)
    results: dict[int, dict[str, float]] = {}

    for size in DATA_SIZES:
        print(f"[BENCHMARK] Running with {size} words...")
        results[size] = benchmark_size(size, rng)
        print(f"[BENCHMARK] {size} words: {results[size]}")

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    with open(RESULTS_DIR / "results.json", "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)

    plot_results(results, RESULTS_DIR / "trie_benchmark.png")
    print(f"[BENCHMARK] Results written to {RESULTS_DIR}")


if __name__ == "__main__":
    main()
