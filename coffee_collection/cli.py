"""
Coffee Collection Command-Line Interface (CLI)

Subcommands:
- demo:      walk through the DynamicList API on a handful of coffees
- benchmark: time DynamicList operations and write the results to CSV

Usage examples:
    python -m coffee_collection.cli demo
    python -m coffee_collection.cli --verbose demo
    python -m coffee_collection.cli benchmark --path list_perf.csv --base-input 100 --steps 6
"""

import argparse
import logging
import sys

from . import benchmark
from .business.ordering import report_lines, sort_by_price_to_weight
from .datastructures import DynamicList
from .models import GroundCoffee, InstantCoffee, WholeBeanCoffee

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: pretty-print a collection
# -------------------------------------------------------------------
def display_collection(coffees, ratio=False):
    """Print one line per coffee in collection order."""
    print("Displaying Coffee Collection:")
    for line in report_lines(coffees, ratio=ratio):
        print(line)


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Exercise constructors, queries and bulk operations on sample coffees."""
    espresso = WholeBeanCoffee(1.0, 10.0, 8.5, "Lavazza", 0.5, "Italy")
    americano = GroundCoffee(0.5, 8.0, 6.0, "Nescafe", 0.3, "Fine")
    instant = InstantCoffee(0.2, 7.0, 9.0, "Taster's Choice", 0.1, "Can")
    caribou = GroundCoffee(0.5, 12.0, 4.5, "Caribou", 0.4, "Medium")
    latte = GroundCoffee(0.7, 9.0, 5.5, "Starbucks", 0.35, "Coarse")

    print("Creating DynamicList using default constructor:")
    collection = DynamicList()
    collection.append(espresso)
    collection.append(americano)
    collection.append(instant)
    collection.append(caribou)
    display_collection(collection)

    print("\nCreating DynamicList with a single Coffee object:")
    display_collection(DynamicList.of_single(espresso))

    print("\nCreating DynamicList with an existing collection of Coffee objects:")
    display_collection(DynamicList.of_all([
        WholeBeanCoffee(1.5, 15.0, 8.0, "Peet's", 2.0, "Colombia"),
        InstantCoffee(1.5, 4.0, 6.0, "Taster's Choice", 2.3, "Can"),
    ]))

    print(f"\nSize of Coffee Collection: {collection.size()}")
    print(f"Contains Lavazza coffee: {collection.contains(espresso)}")
    print(f"Contains Starbucks coffee: {collection.contains(latte)}")

    collection.remove(americano)
    print(f"\nAfter removing Nescafe coffee, Collection Size: {collection.size()}")
    display_collection(collection)

    additional = DynamicList([americano, latte])
    collection.extend(additional)
    print("\nAfter extend(additional): ")
    display_collection(collection)

    print(f"\nContains all additional coffees: {collection.contains_all(additional)}")

    collection.retain_all(additional)
    print("\nAfter retain_all(additional): ")
    display_collection(collection)

    print("\nSorted Coffees by Price-to-Weight Ratio:")
    display_collection(sort_by_price_to_weight(collection), ratio=True)

    collection.clear()
    print(f"\nAfter clear(): Coffee Collection Size: {collection.size()}")
    return collection


def cmd_benchmark(args):
    """Run the DynamicList benchmark suite and write a CSV report."""
    rows = benchmark.run_benchmarks(args.path, base_input=args.base_input, steps=args.steps,
                                    iterations=args.iterations)
    logger.info("wrote %d benchmark rows to %s", rows, args.path)


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m coffee_collection.cli", description="Coffee collection CLI")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging (capacity growth etc.)")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Walk through the DynamicList API")
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("benchmark", help="Benchmark DynamicList operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=8)
    s.add_argument("--iterations", type=int, default=5)
    s.set_defaults(func=cmd_benchmark)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m coffee_collection.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
