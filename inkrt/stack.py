"""Simple stack with save/restore support for scalar values."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from .core import InkError

T = TypeVar("T")


class SimpleRestorableStack(Generic[T]):
    """Stack that can roll back to a save point.

    ``null`` marks discarded slots and may never be pushed. With a
    ``capacity`` the stack raises on overflow; without one it grows.
    """

    def __init__(self, null: T, capacity: int | None = None) -> None:
        self._null = null
        self._capacity = capacity
        self._buffer: list[T] = []
        self._pos = 0
        self._save: int | None = None
        self._jump: int | None = None

    def push(self, value: T) -> None:
        """Push ``value``; saved data below the save point is jumped over."""
        if value == self._null:
            raise InkError("Can not push a 'null' value onto the stack.")
        if self._save is not None and self._pos < self._save:
            self._jump = self._pos
            self._pos = self._save
        if self._capacity is not None and self._pos >= self._capacity:
            raise InkError("Stack overflow!")
        if self._pos < len(self._buffer):
            self._buffer[self._pos] = value
        else:
            self._buffer.append(value)
        self._pos += 1

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._pos == 0:
            raise InkError("Nothing left to pop!")
        pos = self._jump if self._pos == self._save else self._pos
        if pos == 0:
            raise InkError("Nothing left to pop!")
        self._pos = pos - 1
        return self._buffer[self._pos]

    def top(self) -> T:
        """Return the top value without removing it."""
        pos = self._jump if self._pos == self._save else self._pos
        if pos == 0:
            raise InkError("Stack is empty! No top()")
        return self._buffer[pos - 1]

    def __len__(self) -> int:
        if self._save is not None and self._pos >= self._save:
            return self._pos - (self._save - self._jump)
        return self._pos

    def is_empty(self) -> bool:
        return len(self) == 0

    def clear(self) -> None:
        """Remove everything and drop any save point."""
        self._save = self._jump = None
        self._pos = 0

    def __iter__(self) -> Iterator[T]:
        """Yield live values from top to bottom, skipping nulls."""
        it = self._pos
        while it > 0:
            if it == self._save:
                it = self._jump
            it -= 1
            while it >= 0 and self._buffer[it] == self._null:
                it -= 1
            if it < 0:
                return
            yield self._buffer[it]

    def save(self) -> None:
        """Remember the current position."""
        if self._save is not None:
            raise InkError("Can not save stack twice! restore() or forget() first")
        self._save = self._jump = self._pos

    def restore(self) -> None:
        """Return to the saved position and drop the save point."""
        if self._save is None:
            raise InkError("Can not restore() when there is no save!")
        self._pos = self._save
        self._save = self._jump = None

    def forget(self) -> None:
        """Keep the current contents and drop the save point."""
        if self._save is None:
            raise InkError("Can not forget when the stack has never been saved!")
        if self._pos == self._save:
            self._pos = self._jump
        else:
            for i in range(self._jump, self._save):
                self._buffer[i] = self._null
        self._save = None
        self._jump = None