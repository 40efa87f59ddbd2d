"""Coffee collection: a dynamic-array list container and the coffee items it holds."""

from .datastructures import Cursor, CursorStateError, DynamicList, ListCursor

__all__ = [
    "DynamicList",
    "Cursor",
    "ListCursor",
    "CursorStateError",
]

__version__ = "0.1.0"
