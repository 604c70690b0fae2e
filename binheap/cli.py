"""
MinHeap Command-Line Interface (CLI)

Small front end for poking at the heap from a shell:
- sort numbers through the heap
- show the tree level by level
- delete a value and show what is left
- run the timing benchmark

Usage examples:
    python -m binheap.cli sort 5 3 8 1 9 2
    python -m binheap.cli levels 1 5 69 99 884 15 66 4 7
    python -m binheap.cli delete --value 8 5 3 8 1 9 2
    python -m binheap.cli bench --path heap_bench.csv --steps 6
"""

import argparse
import logging
import sys

from .datastructures.heap import MinHeap
from . import benchmark


# -------------------------------------------------------------------
# Utility: argument parsing and output
# -------------------------------------------------------------------
def number(text):
    """Parse an int when possible, otherwise a float."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


def drain(heap):
    """Pop every element, smallest first."""
    out = []
    while heap:
        out.append(heap.pop())
    return out


def format_values(values):
    return " ".join(str(v) for v in values)


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_sort(args):
    """Print the numbers in ascending order by draining a heap."""
    print(format_values(drain(MinHeap(args.numbers))))


def cmd_levels(args):
    """Print the heap one tree level per line."""
    heap = MinHeap(args.numbers)
    if not heap:
        print("Heap is empty.")
        return
    for level in heap.levels():
        print(format_values(level))


def cmd_delete(args):
    """Delete one occurrence of a value and print the remaining pop order."""
    heap = MinHeap(args.numbers)
    if heap.delete(args.value):
        print(f"deleted {args.value}")
    else:
        print(f"{args.value} not found")
    print(format_values(drain(heap)))


def cmd_bench(args):
    """Run the benchmark and write the CSV report."""
    rows = benchmark.run_benchmarks(args.path, base_input=args.base, steps=args.steps, iterations=args.iterations)
    print(f"Benchmark completed. {len(rows)} rows saved to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m binheap.cli", description="Binary min-heap CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Sort numbers through the heap")
    s.add_argument("numbers", type=number, nargs="*")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("levels", help="Show the heap level by level")
    s.add_argument("numbers", type=number, nargs="*")
    s.set_defaults(func=cmd_levels)

    s = sub.add_parser("delete", help="Delete one value and show the rest")
    s.add_argument("--value", type=number, required=True)
    s.add_argument("numbers", type=number, nargs="*")
    s.set_defaults(func=cmd_delete)

    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base", type=int, default=100)
    s.add_argument("--steps", type=int, default=12)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m binheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
