"""Growable arrays and arrays with save/restore support."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from .core import InkError

T = TypeVar("T")


class ManagedArray(Generic[T]):
    """Array with a fixed or growing capacity."""

    def __init__(self, initial_capacity: int, dynamic: bool = True) -> None:
        self._items: list[T] = []
        self._capacity = initial_capacity
        self._dynamic = dynamic

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def dynamic(self) -> bool:
        return self._dynamic

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def back(self) -> T:
        """Return the last element."""
        if not self._items:
            raise InkError("array is empty")
        return self._items[-1]

    def push(self, value: T) -> None:
        """Append ``value``, growing the capacity if the array is dynamic."""
        if len(self._items) >= self._capacity:
            if not self._dynamic:
                raise InkError("Stack Overflow!")
            self.extend()
        self._items.append(value)

    def clear(self) -> None:
        self._items.clear()

    def resize(self, size: int) -> None:
        """Shrink the array to ``size`` elements."""
        if size > len(self._items):
            raise InkError("Only allow to reduce size")
        del self._items[size:]

    def extend(self) -> None:
        """Grow the capacity by half, to at least 5."""
        if not self._dynamic:
            raise InkError("Can only extend if array is dynamic!")
        self._capacity = max(int(1.5 * self._capacity), 5)


class RestorableArray(Generic[T]):
    """Fixed-size array whose writes can be staged and then kept or dropped.

    After :meth:`save`, writes go to a staging area; :meth:`restore` drops
    them and :meth:`forget` commits them. ``null`` marks an empty staged slot
    and may never be stored.
    """

    def __init__(self, capacity: int, initial: T, null: T) -> None:
        self._null = null
        self._saved = False
        self._array: list[T] = [initial] * capacity
        self._temp: list[T] = [null] * capacity

    @property
    def capacity(self) -> int:
        return len(self._array)

    def __len__(self) -> int:
        return len(self._array)

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._array):
            raise InkError("Index out of range!")

    def set(self, index: int, value: T) -> None:
        self._check_index(index)
        if value == self._null:
            raise InkError(
                "Can not add a value considered a 'null' to a restorable_array"
            )
        if self._saved:
            self._temp[index] = value
        else:
            self._array[index] = value

    def get(self, index: int) -> T:
        self._check_index(index)
        if self._saved and self._temp[index] != self._null:
            return self._temp[index]
        return self._array[index]

    def save(self) -> None:
        """Start staging writes."""
        self._saved = True

    def restore(self) -> None:
        """Drop staged writes and leave save mode."""
        self._temp = [self._null] * len(self._array)
        self._saved = False

    def forget(self) -> None:
        """Commit staged writes to the real array."""
        self._array = [
            staged if staged != self._null else real
            for real, staged in zip(self._array, self._temp)
        ]
        self._temp = [self._null] * len(self._array)

    def clear(self, value: T) -> None:
        """Set every slot to ``value`` and drop any save point."""
        self._saved = False
        self._array = [value] * len(self._array)
        self._temp = [self._null] * len(self._array)


class AllocatedRestorableArray(RestorableArray[T]):
    """Restorable array that can change its capacity."""

    def __init__(self, initial: T, null: T, capacity: int = 0) -> None:
        super().__init__(capacity, initial, null)
        self._initial = initial

    def resize(self, n: int) -> None:
        """Change the capacity to ``n``; new slots hold the initial value."""
        old = len(self._array)
        if n <= old:
            self._array = self._array[:n]
            self._temp = self._temp[:n]
        else:
            self._array.extend([self._initial] * (n - old))
            self._temp.extend([self._null] * (n - old))