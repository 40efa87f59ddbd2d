import pytest

from coffee_collection.models import Coffee, GroundCoffee, InstantCoffee, WholeBeanCoffee


def test_attributes_and_ratio(americano):
    assert americano.weight == 0.5
    assert americano.price == 8.0
    assert americano.quality == 6.0
    assert americano.brand == "Nescafe"
    assert americano.volume == 0.3
    assert americano.price_to_weight_ratio == pytest.approx(16.0)


def test_coffee_types(espresso, americano, instant):
    assert espresso.coffee_type == "Whole Bean (Italy)"
    assert americano.coffee_type == "Ground (Fine)"
    assert instant.coffee_type == "Instant (Can)"
    assert espresso.country_of_origin == "Italy"
    assert americano.grind_size == "Fine"
    assert instant.package_type == "Can"


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Coffee(1.0, 1.0, 1.0, "x", 1.0)


@pytest.mark.parametrize(
    "weight,price,quality,brand,volume",
    [
        (0, 1.0, 5, "b", 1.0),
        (1.0, -2.0, 5, "b", 1.0),
        (1.0, 1.0, -0.1, "b", 1.0),
        (1.0, 1.0, 10.5, "b", 1.0),
        (1.0, 1.0, 5, "", 1.0),
        (1.0, 1.0, 5, None, 1.0),
        (1.0, 1.0, 5, "b", 0),
    ],
)
def test_invalid_base_attributes(weight, price, quality, brand, volume):
    with pytest.raises(ValueError):
        InstantCoffee(weight, price, quality, brand, volume, "Jar")


def test_quality_bounds_are_inclusive():
    assert InstantCoffee(1.0, 1.0, 0, "b", 1.0, "Jar").quality == 0
    assert InstantCoffee(1.0, 1.0, 10, "b", 1.0, "Jar").quality == 10


def test_invalid_variant_attributes():
    with pytest.raises(ValueError):
        GroundCoffee(1.0, 1.0, 5, "b", 1.0, "Extra Fine")
    with pytest.raises(ValueError):
        WholeBeanCoffee(1.0, 1.0, 5, "b", 1.0, "")
    with pytest.raises(ValueError):
        InstantCoffee(1.0, 1.0, 5, "b", 1.0, None)


def test_equality_is_identity():
    a = GroundCoffee(1.0, 1.0, 5, "b", 1.0, "Fine")
    b = GroundCoffee(1.0, 1.0, 5, "b", 1.0, "Fine")
    assert a == a
    assert a != b
