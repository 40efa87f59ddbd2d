from __future__ import annotations
import ctypes
import logging
from collections.abc import Container
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from .cursor import Cursor, ListCursor

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicList(Generic[T]):
    """An insertion-ordered, indexable list implemented via a dynamic array.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Capacity starts at 15 and grows by 30% when full; it never shrinks.
    • `None` is never stored. Single-element writes reject it with
      ValueError, bulk writes silently skip it.
    • Indices are not normalized: negative indices are out of range.
    • `sub_list()` returns an independent copy, not a view.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    INITIAL_CAPACITY = 15
    GROWTH_FACTOR = 1.3

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._capacity = self.INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0

        if it is not None:
            self.extend(it)

    @classmethod
    def of_single(cls, item: T) -> "DynamicList[T]":
        """Build a list holding exactly `item`.

        Raises:
            ValueError: if `item` is None.
        """
        if item is None:
            raise ValueError("item cannot be None")
        out: DynamicList[T] = cls()
        out.append(item)
        return out

    @classmethod
    def of_all(cls, items: Iterable[Optional[T]]) -> "DynamicList[T]":
        """Build a list from `items`, skipping None elements.

        Raises:
            ValueError: if `items` itself is None.
        """
        if items is None:
            raise ValueError("collection cannot be None")
        return cls(items)  # type: ignore[arg-type]

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        if capacity <= 0:
            capacity = 1  # never allow a zero-length buffer
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move live items into a fresh buffer of `new_capacity` slots."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        logger.debug("DynamicList capacity %d -> %d (size=%d)", self._capacity, new_capacity, self._size)
        self._buf = new_buf
        self._capacity = new_capacity

    def _ensure_capacity(self) -> None:
        """Grow by GROWTH_FACTOR when the buffer is full (amortized O(1) append)."""
        if self._size >= self._capacity:
            # int() floors; the +1 floor only matters for capacities below 4.
            self._resize(max(int(self._capacity * self.GROWTH_FACTOR), self._capacity + 1))

    def _check_index(self, idx: int) -> None:
        """Validate 0 <= idx < size (element access)."""
        if idx < 0 or idx >= self._size:
            raise IndexError("list index out of range")

    def _check_position(self, idx: int) -> None:
        """Validate 0 <= idx <= size (insertion points)."""
        if idx < 0 or idx > self._size:
            raise IndexError("list index out of range")

    @staticmethod
    def _require_collection(items: Any) -> None:
        if items is None:
            raise ValueError("collection cannot be None")

    def _stable_items(self, items: Iterable[Any]) -> Iterable[Any]:
        """Snapshot `items` when it is this list, so iteration never sees its own edits."""
        return self.to_array() if items is self else items

    # --------------------------------- queries -------------------------------

    @property
    def capacity(self) -> int:
        """Number of allocated slots in the backing buffer."""
        return self._capacity

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def get(self, idx: int) -> T:
        """Return the element at `idx`.

        Raises:
            IndexError: unless 0 <= idx < size.
        """
        self._check_index(idx)
        return self._buf[idx]  # type: ignore[return-value]

    def index_of(self, value: Any) -> int:
        """Return the first index of `value`, or -1 (always -1 for None)."""
        if value is None:
            return -1
        for i in range(self._size):
            if value == self._buf[i]:
                return i
        return -1

    def last_index_of(self, value: Any) -> int:
        """Return the last index of `value`, or -1 (always -1 for None)."""
        if value is None:
            return -1
        for i in range(self._size - 1, -1, -1):
            if value == self._buf[i]:
                return i
        return -1

    def contains(self, value: Any) -> bool:
        """Return True if `value` is present (linear scan).

        Unlike `index_of`, a None probe is an error rather than a miss.

        Raises:
            ValueError: if `value` is None.
        """
        if value is None:
            raise ValueError("checked value cannot be None")
        return self.index_of(value) >= 0

    def contains_all(self, items: Iterable[Any]) -> bool:
        """Return True if every element of `items` passes `contains`.

        Raises:
            ValueError: if `items` is None, or any element of it is None.
        """
        self._require_collection(items)
        for v in items:
            if not self.contains(v):
                return False
        return True

    def to_array(self) -> List[T]:
        """Return a fresh Python list copy of the live range."""
        return [self._buf[i] for i in range(self._size)]

    # -------------------------------- mutation -------------------------------

    def append(self, value: T) -> bool:
        """Append `value` to the end. Amortized O(1). Always returns True.

        Raises:
            ValueError: if `value` is None.
        """
        if value is None:
            raise ValueError("item cannot be None")
        self._ensure_capacity()
        self._buf[self._size] = value
        self._size += 1
        return True

    def insert(self, idx: int, value: T) -> None:
        """Insert `value` before position `idx`, shifting the tail right. O(n - idx).

        Raises:
            IndexError: unless 0 <= idx <= size.
            ValueError: if `value` is None.
        """
        self._check_position(idx)
        if value is None:
            raise ValueError("item cannot be None")
        self._ensure_capacity()
        for j in range(self._size, idx, -1):
            self._buf[j] = self._buf[j - 1]
        self._buf[idx] = value
        self._size += 1

    def set(self, idx: int, value: T) -> T:
        """Replace the element at `idx` and return the previous one.

        Raises:
            IndexError: unless 0 <= idx < size.
            ValueError: if `value` is None.
        """
        self._check_index(idx)
        if value is None:
            raise ValueError("item cannot be None")
        old = self._buf[idx]
        self._buf[idx] = value
        return old  # type: ignore[return-value]

    def remove_at(self, idx: int) -> T:
        """Remove and return the element at `idx`, shifting the tail left. O(n - idx).

        Raises:
            IndexError: unless 0 <= idx < size.
        """
        self._check_index(idx)
        val = self._buf[idx]

        for j in range(idx, self._size - 1):
            self._buf[j] = self._buf[j + 1]

        # Drop the reference held by the vacated trailing slot.
        self._buf[self._size - 1] = None
        self._size -= 1
        return val  # type: ignore[return-value]

    def remove(self, value: Any) -> bool:
        """Remove the first occurrence of `value`; False if absent or None."""
        i = self.index_of(value)
        if i < 0:
            return False
        self.remove_at(i)
        return True

    def extend(self, items: Iterable[Optional[T]]) -> bool:
        """Append every non-None element of `items` in order.

        Returns True if at least one element was appended.

        Raises:
            ValueError: if `items` is None.
        """
        self._require_collection(items)
        modified = False
        for v in self._stable_items(items):
            if v is not None:
                self.append(v)
                modified = True
        return modified

    def insert_all(self, idx: int, items: Iterable[Optional[T]]) -> bool:
        """Insert the non-None elements of `items` starting at `idx`, keeping their order.

        Raises:
            IndexError: unless 0 <= idx <= size.
            ValueError: if `items` is None.
        """
        self._check_position(idx)
        self._require_collection(items)
        modified = False
        for v in self._stable_items(items):
            if v is not None:
                self.insert(idx, v)
                idx += 1
                modified = True
        return modified

    def remove_all(self, items: Iterable[Any]) -> bool:
        """Remove one occurrence per element of `items`.

        A value repeated k times in `items` removes up to k occurrences.

        Raises:
            ValueError: if `items` is None.
        """
        self._require_collection(items)
        modified = False
        for v in self._stable_items(items):
            if self.remove(v):
                modified = True
        return modified

    def retain_all(self, items: Iterable[Any]) -> bool:
        """Keep only elements `e` for which `e in items`, preserving order.

        A one-shot iterable (no `__contains__`) is materialized once first.

        Raises:
            ValueError: if `items` is None.
        """
        self._require_collection(items)
        if not isinstance(items, Container):
            items = list(items)
        modified = False
        i = 0
        while i < self._size:
            if self._buf[i] not in items:
                # The tail shifts onto i, so re-examine the same slot.
                self.remove_at(i)
                modified = True
            else:
                i += 1
        return modified

    def clear(self) -> None:
        """Remove all items. Keeps capacity to avoid churn on re-use."""
        for i in range(self._size):
            self._buf[i] = None
        self._size = 0

    def sub_list(self, from_index: int, to_index: int) -> "DynamicList[T]":
        """Return a new DynamicList copying the elements in [from_index, to_index).

        Mutating the result never affects this list, and vice versa.

        Raises:
            IndexError: unless 0 <= from_index <= to_index <= size.
        """
        if from_index < 0 or to_index > self._size or from_index > to_index:
            raise IndexError("sub_list index out of range")
        out: DynamicList[T] = DynamicList()
        for i in range(from_index, to_index):
            out.append(self._buf[i])  # type: ignore[arg-type]
        return out

    # --------------------------------- cursors -------------------------------

    def iterator(self) -> Cursor[T]:
        """Forward cursor starting before the first element."""
        return Cursor(self)

    def list_cursor(self, index: int = 0) -> ListCursor[T]:
        """Bidirectional cursor positioned before `index`.

        Raises:
            IndexError: unless 0 <= index <= size.
        """
        self._check_position(index)
        return ListCursor(self, index)

    # ----------------------------- python protocol ---------------------------

    def __len__(self) -> int:
        """Number of stored elements. O(1)."""
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __reversed__(self) -> Iterator[T]:
        for i in range(self._size - 1, -1, -1):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int | slice) -> T | "DynamicList[T]":
        """Get an item or a contiguous slice.

        • `lst[i]` is `get(i)`; negative indices are rejected.
        • `lst[a:b]` is `sub_list` with Python slice clamping.
        """
        if isinstance(idx, slice):
            if idx.step not in (None, 1):
                raise ValueError("DynamicList slices do not support a step")
            start, stop, _ = idx.indices(self._size)
            return self.sub_list(start, max(start, stop))
        return self.get(idx)

    def __setitem__(self, idx: int, value: T) -> None:
        self.set(idx, value)

    def __delitem__(self, idx: int) -> None:
        self.remove_at(idx)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicList):
            other_items = other.to_array()
        elif isinstance(other, (list, tuple)):
            other_items = list(other)
        else:
            return NotImplemented
        return self.to_array() == other_items

    __hash__ = None  # type: ignore[assignment]

    def to_py(self) -> List[object]:
        """Convert to a plain Python `list`.

        If an element implements `to_py()`, that method is used to convert it,
        enabling recursive conversion of custom objects.
        """
        out: List[object] = []
        for i in range(self._size):
            v = self._buf[i]
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                out.append(v.to_py())
            else:
                out.append(v)
        return out

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicList({self.to_py()!r})"
