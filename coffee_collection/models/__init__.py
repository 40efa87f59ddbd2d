from .coffee import Coffee, GroundCoffee, InstantCoffee, WholeBeanCoffee

__all__ = [
    "Coffee",
    "GroundCoffee",
    "WholeBeanCoffee",
    "InstantCoffee",
]
