from .dynamic_list import DynamicList
from .cursor import Cursor, CursorStateError, ListCursor

__all__ = [
    "DynamicList",
    "Cursor",
    "ListCursor",
    "CursorStateError",
]
