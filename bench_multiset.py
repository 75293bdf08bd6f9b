#!/usr/bin/env python3
"""
Performance Test Script for the AVL Multiset

Tests:
1. Sequential insert throughput
2. Random insert throughput (with duplicates)
3. Membership lookups
4. Min/max queries
5. Random erase throughput
6. Mixed workload (insert/erase/contains)

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Final tree height
"""

import logging
import os
import random
import statistics
import time
from typing import List

from avl_multiset import Multiset, MultisetAVLTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


class PerformanceTest:
    def __init__(self, seed: int = 0):
        self.rng = random.Random(seed)
        self.tree = MultisetAVLTree()
        self.multiset = Multiset(self.tree)

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_us": min(latencies) / 1_000,
            "max_us": max(latencies) / 1_000,
            "mean_us": statistics.mean(latencies) / 1_000,
            "median_us": statistics.median(latencies) / 1_000,
            "p95_us": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000,
            "p99_us": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000,
        }

    def _run(self, name: str, operations: list, op) -> dict:
        """Time op(value) for each value and collect stats."""
        print(f"\n{'='*60}")
        print(f"{name}: {len(operations)} operations")
        print(f"{'='*60}")

        latencies = []
        start_time = time.perf_counter_ns()
        for value in operations:
            op_start = time.perf_counter_ns()
            op(value)
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": name,
            "count": len(operations),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(operations) / elapsed if elapsed else float("inf"),
            "size": self.multiset.size(),
            "height": self.tree.height(),
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def test_sequential_insert(self, count: int) -> dict:
        return self._run("Sequential Insert", list(range(count)), self.multiset.insert)

    def test_random_insert(self, count: int, key_range: int) -> dict:
        values = [self.rng.randrange(key_range) for _ in range(count)]
        return self._run("Random Insert", values, self.multiset.insert)

    def test_contains(self, count: int, key_range: int) -> dict:
        values = [self.rng.randrange(key_range * 2) for _ in range(count)]
        return self._run("Contains", values, self.multiset.contains)

    def test_min_max(self, count: int) -> dict:
        def op(_):
            self.multiset.min_value()
            self.multiset.max_value()

        return self._run("Min/Max", list(range(count)), op)

    def test_random_erase(self, count: int, key_range: int) -> dict:
        values = [self.rng.randrange(key_range) for _ in range(count)]
        return self._run("Random Erase", values, self.multiset.erase)

    def test_mixed_workload(self, count: int, key_range: int) -> dict:
        def op(value):
            roll = self.rng.random()
            if roll < 0.4:
                self.multiset.insert(value)
            elif roll < 0.7:
                self.multiset.erase(value)
            else:
                self.multiset.contains(value)

        values = [self.rng.randrange(key_range) for _ in range(count)]
        return self._run("Mixed Workload", values, op)

    @staticmethod
    def print_results(results: dict):
        """Print test results in a formatted way."""
        print(f"\nResults for {results['test']}:")
        print(f"  Operations: {results['count']}")
        print(f"  Elapsed: {results['elapsed_sec']:.3f} sec")
        print(f"  Throughput: {results['ops_per_sec']:.0f} ops/sec")
        print(f"  Size after: {results['size']} (height {results['height']})")
        if "median_us" in results:
            print(
                f"  Latency p50/p95/p99: {results['median_us']:.2f} / "
                f"{results['p95_us']:.2f} / {results['p99_us']:.2f} us"
            )


def run_tests(count: int, key_range: int):
    test = PerformanceTest()
    logger.info(f"Running multiset benchmark: count={count}, key_range={key_range}")

    test.test_sequential_insert(count)
    test.test_random_insert(count, key_range)
    test.test_contains(count, key_range)
    test.test_min_max(count)
    test.test_random_erase(count, key_range)
    test.test_mixed_workload(count, key_range)

    test.tree.validate()
    logger.info("Benchmark complete, tree invariants hold")


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(count=10_000, key_range=1_000)
    else:
        run_tests(count=200_000, key_range=50_000)
