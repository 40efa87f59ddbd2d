from __future__ import annotations
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

if TYPE_CHECKING:
    from .dynamic_list import DynamicList

T = TypeVar("T")


class CursorStateError(RuntimeError):
    """Raised when a cursor mutation has no previously returned element to act on."""


class Cursor(Generic[T]):
    """Forward cursor over a DynamicList.

    Holds an integer position into its owner rather than a reference to a
    slot, so mutations made through the owner are visible immediately.
    Concurrent structural changes from another cursor are not detected.
    """

    __slots__ = ("_owner", "_pos", "_last")

    def __init__(self, owner: "DynamicList[T]", index: int = 0) -> None:
        self._owner = owner
        self._pos = index
        # Index of the element last returned by next()/previous(); -1 if none.
        self._last = -1

    def has_next(self) -> bool:
        return self._pos < self._owner.size()

    def next(self) -> T:
        """Return the element at the cursor and step past it.

        Raises:
            StopIteration: if there is no next element.
        """
        if not self.has_next():
            raise StopIteration
        value = self._owner.get(self._pos)
        self._last = self._pos
        self._pos += 1
        return value

    def remove(self) -> None:
        """Remove the element last returned by this cursor from the owner.

        Raises:
            CursorStateError: if nothing was returned since the cursor was
                created or since its last remove()/add().
        """
        if self._last < 0:
            raise CursorStateError("no element to remove; call next() or previous() first")
        self._owner.remove_at(self._last)
        if self._last < self._pos:
            self._pos -= 1
        self._last = -1

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self.next()


class ListCursor(Cursor[T]):
    """Bidirectional cursor supporting replace and insert through the cursor.

    The cursor sits between two elements: `next()` returns the one after it,
    `previous()` the one before it.
    """

    __slots__ = ()

    def has_previous(self) -> bool:
        return self._pos > 0

    def previous(self) -> T:
        """Step back and return the element now after the cursor.

        Raises:
            StopIteration: if there is no previous element.
        """
        if not self.has_previous():
            raise StopIteration
        self._pos -= 1
        value = self._owner.get(self._pos)
        self._last = self._pos
        return value

    def next_index(self) -> int:
        return self._pos

    def previous_index(self) -> int:
        return self._pos - 1

    def set(self, value: T) -> None:
        """Replace the element last returned by `next()` or `previous()`.

        Raises:
            CursorStateError: under the same condition as `remove()`.
            ValueError: if `value` is None.
        """
        if self._last < 0:
            raise CursorStateError("no element to replace; call next() or previous() first")
        self._owner.set(self._last, value)

    def add(self, value: T) -> None:
        """Insert `value` just before the cursor; a following `next()` skips it.

        Raises:
            ValueError: if `value` is None.
        """
        self._owner.insert(self._pos, value)
        self._pos += 1
        self._last = -1
