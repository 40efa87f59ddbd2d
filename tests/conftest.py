import pytest

from coffee_collection.models import GroundCoffee, InstantCoffee, WholeBeanCoffee


@pytest.fixture
def espresso():
    return WholeBeanCoffee(1.0, 10.0, 8.5, "Lavazza", 0.5, "Italy")


@pytest.fixture
def americano():
    return GroundCoffee(0.5, 8.0, 6.0, "Nescafe", 0.3, "Fine")


@pytest.fixture
def instant():
    return InstantCoffee(0.2, 7.0, 9.0, "Taster's Choice", 0.1, "Can")


@pytest.fixture
def caribou():
    return GroundCoffee(0.5, 12.0, 4.5, "Caribou", 0.4, "Medium")


@pytest.fixture
def coffees(espresso, americano, instant, caribou):
    return [espresso, americano, instant, caribou]
