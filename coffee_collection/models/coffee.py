"""Coffee item hierarchy.

These are the element values stored in a DynamicList by the demo and the
tests. Every attribute is validated once at construction and exposed
read-only afterwards:

- weight (kg) and price (currency units) must be positive
- quality is a rating in [0, 10]
- brand must be a non-empty string
- volume must be positive

Equality is object identity: two coffees with identical attributes are
still different items in a collection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Coffee(ABC):
    """Base class for every kind of coffee."""

    __slots__ = ("_weight", "_price", "_quality", "_brand", "_volume")

    def __init__(self, weight: float, price: float, quality: float, brand: str, volume: float) -> None:
        if weight <= 0 or price <= 0:
            raise ValueError("Weight and price must be positive.")
        if quality < 0 or quality > 10:
            raise ValueError("Quality must be between 0 and 10.")
        if not brand:
            raise ValueError("Brand cannot be empty.")
        if volume <= 0:
            raise ValueError("Volume must be positive.")
        self._weight = weight
        self._price = price
        self._quality = quality
        self._brand = brand
        self._volume = volume

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def price(self) -> float:
        return self._price

    @property
    def quality(self) -> float:
        return self._quality

    @property
    def brand(self) -> str:
        return self._brand

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def price_to_weight_ratio(self) -> float:
        """Price per kilogram."""
        return self._price / self._weight

    @property
    @abstractmethod
    def coffee_type(self) -> str:
        """Human readable kind, e.g. ``"Ground (Fine)"``."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}(brand={self._brand!r}, price={self._price}, weight={self._weight})"


class GroundCoffee(Coffee):
    """Coffee sold already ground to one of the supported grind sizes."""

    __slots__ = ("_grind_size",)

    VALID_GRIND_SIZES = ("Fine", "Medium", "Coarse")

    def __init__(
        self, weight: float, price: float, quality: float, brand: str, volume: float, grind_size: str
    ) -> None:
        super().__init__(weight, price, quality, brand, volume)
        if grind_size not in self.VALID_GRIND_SIZES:
            raise ValueError(f"Invalid grind size. Valid options are: {list(self.VALID_GRIND_SIZES)}")
        self._grind_size = grind_size

    @property
    def grind_size(self) -> str:
        return self._grind_size

    @property
    def coffee_type(self) -> str:
        return f"Ground ({self._grind_size})"


class WholeBeanCoffee(Coffee):
    __slots__ = ("_country_of_origin",)

    def __init__(
        self, weight: float, price: float, quality: float, brand: str, volume: float, country_of_origin: str
    ) -> None:
        super().__init__(weight, price, quality, brand, volume)
        if not country_of_origin:
            raise ValueError("Country of origin cannot be empty.")
        self._country_of_origin = country_of_origin

    @property
    def country_of_origin(self) -> str:
        return self._country_of_origin

    @property
    def coffee_type(self) -> str:
        return f"Whole Bean ({self._country_of_origin})"


class InstantCoffee(Coffee):
    __slots__ = ("_package_type",)

    def __init__(
        self, weight: float, price: float, quality: float, brand: str, volume: float, package_type: str
    ) -> None:
        super().__init__(weight, price, quality, brand, volume)
        if not package_type:
            raise ValueError("Package type cannot be empty.")
        self._package_type = package_type

    @property
    def package_type(self) -> str:
        return self._package_type

    @property
    def coffee_type(self) -> str:
        return f"Instant ({self._package_type})"
