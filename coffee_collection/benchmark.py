"""Timing and space measurements for DynamicList operations.

Each operation builds a DynamicList from random integers, then exercises
one access pattern. Sizes grow exponentially (base_input * 2**i) so the
CSV makes the O(1) / O(n) split between operations easy to see.
"""

from __future__ import annotations

import csv
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Tuple

from .datastructures import DynamicList

Operation = Callable[[List[int]], DynamicList[int]]

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Average Space (bytes)",
    "Std Dev Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int) -> List[int]:
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_true_space(lst: DynamicList) -> int:
    """Estimate total memory usage of a DynamicList including its buffer."""
    total = sys.getsizeof(lst)
    total += sys.getsizeof(lst._buf)  # ctypes array
    for i in range(len(lst)):
        total += sys.getsizeof(lst.get(i))
    return total


def measure_operation_time(
    operation: Operation, input_size: int, iterations: int = 5
) -> Tuple[float, float, float, float]:
    """Run the operation multiple times and return avg/std time (ms) and avg/std space (bytes)."""
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        lst = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)
        space_used.append(measure_true_space(lst))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(space_used)
    std_space = statistics.stdev(space_used) if len(space_used) > 1 else 0.0
    return avg_time, std_time, avg_space, std_space


# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_append(data: List[int]) -> DynamicList[int]:
    lst: DynamicList[int] = DynamicList()
    for item in data:
        lst.append(item)
    return lst


def op_insert_front(data: List[int]) -> DynamicList[int]:
    lst: DynamicList[int] = DynamicList()
    for item in data:
        lst.insert(0, item)
    return lst


def op_remove_at_end(data: List[int]) -> DynamicList[int]:
    lst = DynamicList(data)
    while not lst.is_empty():
        lst.remove_at(lst.size() - 1)
    return lst


def op_remove_value(data: List[int]) -> DynamicList[int]:
    lst = DynamicList(data)
    # Mostly misses, so each call scans the whole list.
    n = len(data)
    for item in range(n, n - 3, -1):
        lst.remove(item)
    return lst


def op_index_of(data: List[int]) -> DynamicList[int]:
    lst = DynamicList(data)
    if data:
        lst.index_of(data[-1])
    return lst


def op_list_cursor_walk(data: List[int]) -> DynamicList[int]:
    lst = DynamicList(data)
    cur = lst.list_cursor()
    while cur.has_next():
        cur.next()
    while cur.has_previous():
        cur.previous()
    return lst


OPERATIONS: Dict[str, Operation] = {
    "append": op_append,
    "insert_front": op_insert_front,
    "remove_at_end": op_remove_at_end,
    "remove_value": op_remove_value,
    "index_of": op_index_of,
    "list_cursor_walk": op_list_cursor_walk,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 8, iterations: int = 5) -> int:
    """Run exponential performance tests for DynamicList operations.

    Returns the number of result rows written (excluding the header).
    """
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, avg_space, std_space = measure_operation_time(op_func, size, iterations)
                writer.writerow([
                    size,
                    op_name,
                    f"{avg_time:.3f}",
                    f"{std_time:.3f}",
                    f"{avg_space:.0f}",
                    f"{std_space:.0f}",
                ])
                rows += 1
                print(
                    f"{op_name:<18} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | Std Time: {std_time:.3f} ms "
                    f"| Avg Space: {avg_space:.0f} B | Std Space: {std_space:.0f} B"
                )

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
