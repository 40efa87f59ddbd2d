"""Caller-side ordering and report lines for coffee collections.

DynamicList has no sorting of its own. Callers take a snapshot with
`to_array()`, sort it with a comparator and, when they need a list back,
rebuild one from the sorted snapshot.
"""

from __future__ import annotations

import functools
from typing import Iterable

from ..datastructures import DynamicList
from ..models import Coffee


def compare_price_to_weight(a: Coffee, b: Coffee) -> int:
    """Three-way comparison on price-to-weight ratio (ascending)."""
    ra = a.price_to_weight_ratio
    rb = b.price_to_weight_ratio
    return (ra > rb) - (ra < rb)


def sort_by_price_to_weight(coffees: DynamicList[Coffee]) -> DynamicList[Coffee]:
    """Return a new list with `coffees` ordered by ascending price-to-weight ratio.

    The sort is stable, so coffees with equal ratios keep their relative order.
    `coffees` itself is left untouched.
    """
    snapshot = coffees.to_array()
    snapshot.sort(key=functools.cmp_to_key(compare_price_to_weight))
    return DynamicList(snapshot)


def describe(coffee: Coffee) -> str:
    """One report line: type, brand and quality."""
    return f"Type: {coffee.coffee_type}, Brand: {coffee.brand}, Quality: {coffee.quality:.2f}"


def describe_ratio(coffee: Coffee) -> str:
    """One report line with the price-to-weight breakdown."""
    return (
        f"Type: {coffee.coffee_type}, Brand: {coffee.brand}, "
        f"Price-to-Weight Ratio: {coffee.price_to_weight_ratio:.2f}, "
        f"Price: {coffee.price:.2f}, Weight: {coffee.weight:.2f}"
    )


def report_lines(coffees: Iterable[Coffee], ratio: bool = False) -> list[str]:
    fmt = describe_ratio if ratio else describe
    return [fmt(c) for c in coffees]
