"""Timing and space benchmarks for MinHeap.

Each operation is run over random integer inputs whose size doubles at every
step; mean and standard deviation of the wall time (ms) and an estimate of the
heap's memory footprint are written to a CSV report.
"""

import csv
import logging
import random
import statistics
import sys
import time

from .datastructures.heap import MinHeap

logger = logging.getLogger(__name__)

HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng=random):
    """Generate a list of random integers of given size."""
    return [rng.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def heap_size_bytes(heap: MinHeap) -> int:
    """Estimate memory held by `heap`: the object, its slot buffer and live elements."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._slots) + sys.getsizeof(heap._slots._buf)
    for item in heap:
        total += sys.getsizeof(item)
    return total


def measure_space_efficiency(operation, input_size: int, iterations: int = 3):
    """Return average memory used by the MinHeap (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        sizes.append(heap_size_bytes(operation(data)))
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_add(data):
    heap = MinHeap()
    for item in data:
        heap.add(item)
    return heap


def bench_pop(data):
    heap = bench_add(data)
    while heap.pop() is not None:
        pass
    return heap


def bench_peek(data):
    heap = bench_add(data)
    for _ in range(min(3, len(data))):
        heap.peek()
    return heap


def bench_delete(data):
    heap = bench_add(data)
    # Each delete rebuilds the whole heap, so only a few are timed.
    for item in data[:3]:
        heap.delete(item)
    return heap


OPERATIONS = {
    "add": bench_add,
    "pop": bench_pop,
    "peek": bench_peek,
    "delete": bench_delete,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 12, iterations: int = 5):
    """Run exponential performance tests for MinHeap operations.

    Returns the rows written after the header.
    """
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                avg_space = measure_space_efficiency(op_func, size, min(3, iterations))
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                logger.info(
                    "%-8s size=%-8d avg=%.3f ms std=%.3f ms space=%.0f bytes",
                    op_name, size, avg_time, std_time, avg_space,
                )

    return rows
