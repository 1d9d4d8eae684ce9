"""Stack-like collection with save/restore/forget support.

To handle glue, the runtime executes past the end of a line to see whether
glue follows. If it does not, everything done since the save point has to be
undone. Collections built on :class:`Restorable` can take a save point, and
then either roll back to it or keep what happened since.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

from .core import InkError

T = TypeVar("T")


def _never_null(_element: object) -> bool:
    return False


class Restorable(Generic[T]):
    """Collection whose pushes and pops can be rolled back to a save point.

    While saved, data below the save point is never overwritten: a push that
    happens after popping below the save point jumps over the saved region,
    and the jump point records where it jumped from.
    """

    def __init__(self, capacity: int | None = None) -> None:
        self._buffer: list[T] = []
        self._capacity = capacity
        self._pos = 0
        self._save: int | None = None
        self._jump: int | None = None

    def is_saved(self) -> bool:
        """Return True if a save point is active."""
        return self._save is not None

    def save(self) -> None:
        """Create a save point that can later be restored or forgotten."""
        if self._save is not None:
            raise InkError("Collection is already saved.")
        self._save = self._jump = self._pos

    def restore(self) -> None:
        """Roll back to the save point and drop it."""
        if self._save is None:
            raise InkError("Collection can't be restored because it's not saved.")
        self._pos = self._save
        self._save = self._jump = None

    def forget(self, nullify: Callable[[T], T]) -> None:
        """Keep the current data and drop the save point.

        Elements popped while saved and jumped over are replaced by what
        ``nullify`` returns for them.
        """
        if self._save is None:
            raise InkError("Can't forget save point because there is none.")
        jump, save = self._jump, self._save
        if save != jump and self._pos > jump:
            for i in range(jump, save):
                self._buffer[i] = nullify(self._buffer[i])
        self._save = self._jump = None

    def push(self, element: T) -> T:
        """Push ``element`` on top and return it."""
        if self._save is not None and self._pos < self._save:
            self._jump = self._pos
            self._pos = self._save
        if self._capacity is not None and self._pos >= self._capacity:
            raise InkError("Restorable run out of memory!")
        if self._pos < len(self._buffer):
            self._buffer[self._pos] = element
        else:
            self._buffer.append(element)
        self._pos += 1
        return element

    def _top_index(self, is_null: Callable[[T], bool]) -> int:
        if self._pos == 0:
            raise InkError("No elements left!")
        pos = self._jump if self._pos == self._save else self._pos
        while pos > 0 and is_null(self._buffer[pos - 1]):
            pos -= 1
        if pos == 0:
            raise InkError("No elements left!")
        return pos - 1

    def pop(self, is_null: Callable[[T], bool] = _never_null) -> T:
        """Remove and return the topmost non-null element."""
        index = self._top_index(is_null)
        self._pos = index
        return self._buffer[index]

    def top(self, is_null: Callable[[T], bool] = _never_null) -> T:
        """Return the topmost non-null element without removing it."""
        return self._buffer[self._top_index(is_null)]

    def is_empty(self) -> bool:
        return self._pos == 0

    def clear(self) -> None:
        """Remove everything and drop any save point."""
        self._pos = 0
        self._save = self._jump = None

    def iterate(self, is_null: Callable[[T], bool] = _never_null) -> Iterator[T]:
        """Yield live non-null elements from bottom to top."""
        i = 0
        while i < self._pos:
            if i == self._jump:
                i = self._save
                if i >= self._pos:
                    break
            element = self._buffer[i]
            if not is_null(element):
                yield element
            i += 1

    def iterate_all(self) -> Iterator[T]:
        """Yield every stored element, including saved ones, bottom to top."""
        if self._save is None or self._pos > self._save:
            length = self._pos
        else:
            length = self._save
        yield from self._buffer[:length]

    def _reverse_indices(self) -> Iterator[int]:
        i = self._pos
        while i > 0:
            i -= 1
            yield i
            if i == self._save:
                i = self._jump

    def reverse_iterate(
        self, is_null: Callable[[T], bool] = _never_null
    ) -> Iterator[T]:
        """Yield live non-null elements from top to bottom."""
        for i in self._reverse_indices():
            element = self._buffer[i]
            if not is_null(element):
                yield element

    def find(
        self,
        predicate: Callable[[T], bool],
        is_null: Callable[[T], bool] = _never_null,
    ) -> T | None:
        """Return the lowest live element matching ``predicate``, or None."""
        return next((e for e in self.iterate(is_null) if predicate(e)), None)

    def reverse_find(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the topmost live element matching ``predicate``, or None."""
        for i in self._reverse_indices():
            element = self._buffer[i]
            if predicate(element):
                return element
        return None

    def size(self, is_null: Callable[[T], bool] = _never_null) -> int:
        """Count live non-null elements."""
        return sum(1 for _ in self.reverse_iterate(is_null))