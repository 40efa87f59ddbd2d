from coffee_collection.business.ordering import (
    compare_price_to_weight,
    describe,
    describe_ratio,
    report_lines,
    sort_by_price_to_weight,
)
from coffee_collection.datastructures import DynamicList


def test_compare_price_to_weight(espresso, americano, instant):
    # ratios: espresso 10.0, americano 16.0, instant 35.0
    assert compare_price_to_weight(espresso, americano) < 0
    assert compare_price_to_weight(instant, americano) > 0
    assert compare_price_to_weight(espresso, espresso) == 0


def test_sort_returns_new_list(coffees, espresso, americano, instant, caribou):
    lst = DynamicList(coffees)
    ordered = sort_by_price_to_weight(lst)
    assert ordered.to_array() == [espresso, americano, caribou, instant]
    assert lst.to_array() == coffees


def test_sort_empty():
    assert sort_by_price_to_weight(DynamicList()).is_empty()


def test_describe(americano):
    assert describe(americano) == "Type: Ground (Fine), Brand: Nescafe, Quality: 6.00"
    assert describe_ratio(americano) == (
        "Type: Ground (Fine), Brand: Nescafe, Price-to-Weight Ratio: 16.00, Price: 8.00, Weight: 0.50"
    )


def test_report_lines(coffees):
    lines = report_lines(DynamicList(coffees))
    assert len(lines) == 4
    assert lines[0].startswith("Type: Whole Bean (Italy)")
    assert "Price-to-Weight" in report_lines(DynamicList(coffees), ratio=True)[0]
