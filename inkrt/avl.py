"""Fixed-capacity AVL tree stored in parallel arrays."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from .core import InkError

K = TypeVar("K")
V = TypeVar("V")


class AvlArray(Generic[K, V]):
    """Ordered map with a fixed maximum number of entries.

    Nodes live in preallocated slots; the slot index ``max_size`` stands for
    "no node". Removing an entry moves the last used slot into the freed one,
    so the slots in use are always ``0 .. len - 1``. Keys must support ``<``
    and ``==``.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._max = max_size
        self._inv = max_size
        self._keys: list = [None] * max_size
        self._vals: list = [None] * max_size
        self._balance: list[int] = [0] * max_size
        self._left: list[int] = [max_size] * max_size
        self._right: list[int] = [max_size] * max_size
        self._parent: list[int] = [max_size] * max_size
        self._size = 0
        self._root = max_size

    # -- container protocol -------------------------------------------------

    @property
    def max_size(self) -> int:
        return self._max

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._find(key) != self._inv

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __getitem__(self, key: K) -> V:
        idx = self._find(key)
        if idx == self._inv:
            raise KeyError(key)
        return self._vals[idx]

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.erase(key):
            raise KeyError(key)

    # -- public operations --------------------------------------------------

    def clear(self) -> None:
        """Remove every entry."""
        self._size = 0
        self._root = self._inv

    def insert(self, key: K, value: V) -> None:
        """Insert ``key`` or update its value; raise InkError if the tree is full."""
        inv = self._inv
        if self._root == inv:
            self._root = self._new_node(key, value, inv)
            return
        i = self._root
        while i != inv:
            if key < self._keys[i]:
                if self._left[i] == inv:
                    self._left[i] = self._new_node(key, value, i)
                    self._insert_balance(i, 1)
                    return
                i = self._left[i]
            elif self._keys[i] == key:
                self._vals[i] = value
                return
            else:
                if self._right[i] == inv:
                    self._right[i] = self._new_node(key, value, i)
                    self._insert_balance(i, -1)
                    return
                i = self._right[i]
        raise InkError("node does not fit")

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key``, or ``default`` if it is absent."""
        idx = self._find(key)
        return default if idx == self._inv else self._vals[idx]

    def count(self, key: K) -> int:
        """Return 1 if ``key`` is present, else 0."""
        return 0 if self._find(key) == self._inv else 1

    def erase(self, key: K) -> bool:
        """Remove ``key``; return False if it was not present."""
        idx = self._find(key)
        if self._size == 0 or idx == self._inv:
            return False
        self._erase_index(idx)
        return True

    def check(self) -> bool:
        """Verify the structural integrity of the tree."""
        inv = self._inv
        if self._size == 0 and self._root != inv:
            return False
        if self._size and self._root >= self._size:
            return False
        for i in range(self._size):
            left, right = self._left[i], self._right[i]
            if left != inv and (
                not (self._keys[left] < self._keys[i])
                or self._keys[left] == self._keys[i]
            ):
                return False
            if right != inv and (
                self._keys[right] < self._keys[i]
                or self._keys[right] == self._keys[i]
            ):
                return False
            parent = self._parent[i]
            if i != self._root and parent == inv:
                return False
            if i == self._root and parent != inv:
                return False
        return True

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        inv = self._inv
        i = self._root
        if i == inv:
            return
        while self._left[i] != inv:
            i = self._left[i]
        while i != inv:
            yield self._keys[i], self._vals[i]
            right = self._right[i]
            if right != inv:
                i = right
                while self._left[i] != inv:
                    i = self._left[i]
            else:
                parent = self._parent[i]
                while parent != inv and i == self._right[parent]:
                    i = parent
                    parent = self._parent[i]
                i = parent

    def keys(self) -> Iterator[K]:
        """Yield the keys in ascending order."""
        for key, _ in self.items():
            yield key

    # -- internals ----------------------------------------------------------

    def _find(self, key: object) -> int:
        i = self._root
        while i != self._inv:
            if key < self._keys[i]:
                i = self._left[i]
            elif key == self._keys[i]:
                return i
            else:
                i = self._right[i]
        return self._inv

    def _new_node(self, key: K, value: V, parent: int) -> int:
        if self._size >= self._max:
            raise InkError("container is full")
        n = self._size
        self._keys[n] = key
        self._vals[n] = value
        self._balance[n] = 0
        self._left[n] = self._inv
        self._right[n] = self._inv
        self._parent[n] = parent
        self._size += 1
        return n

    def _set_parent(self, node: int, parent: int) -> None:
        if node != self._inv:
            self._parent[node] = parent

    def _replace_child(self, parent: int, old: int, new: int) -> None:
        if old == self._root:
            self._root = new
        elif self._left[parent] == old:
            self._left[parent] = new
        else:
            self._right[parent] = new

    def _erase_index(self, node: int) -> None:
        inv = self._inv
        L, R, B = self._left, self._right, self._balance
        left, right = L[node], R[node]

        if left == inv:
            if right == inv:
                if node == self._root:
                    self._root = inv
                else:
                    parent = self._parent[node]
                    if L[parent] == node:
                        L[parent] = inv
                        self._delete_balance(parent, -1)
                    else:
                        R[parent] = inv
                        self._delete_balance(parent, 1)
            else:
                parent = self._parent[node]
                self._replace_child(parent, node, right)
                self._set_parent(right, parent)
                self._delete_balance(right, 0)
        elif right == inv:
            parent = self._parent[node]
            self._replace_child(parent, node, left)
            self._set_parent(left, parent)
            self._delete_balance(left, 0)
        else:
            successor = right
            if L[successor] == inv:
                parent = self._parent[node]
                L[successor] = left
                B[successor] = B[node]
                self._set_parent(successor, parent)
                self._set_parent(left, successor)
                self._replace_child(parent, node, successor)
                self._delete_balance(successor, 1)
            else:
                while L[successor] != inv:
                    successor = L[successor]
                parent = self._parent[node]
                successor_parent = self._parent[successor]
                successor_right = R[successor]
                if L[successor_parent] == successor:
                    L[successor_parent] = successor_right
                else:
                    R[successor_parent] = successor_right
                self._set_parent(successor_right, successor_parent)
                self._set_parent(successor, parent)
                self._set_parent(right, successor)
                self._set_parent(left, successor)
                L[successor] = left
                R[successor] = right
                B[successor] = B[node]
                self._replace_child(parent, node, successor)
                self._delete_balance(successor_parent, -1)

        self._size -= 1
        last = self._size
        if node != last:
            if self._root == last:
                self._root = node
            else:
                parent = self._parent[last]
                if parent != inv:
                    if L[parent] == last:
                        L[parent] = node
                    else:
                        R[parent] = node
            self._set_parent(L[last], node)
            self._set_parent(R[last], node)
            self._keys[node] = self._keys[last]
            self._vals[node] = self._vals[last]
            B[node] = B[last]
            L[node] = L[last]
            R[node] = R[last]
            self._parent[node] = self._parent[last]
        self._keys[last] = None
        self._vals[last] = None

    def _insert_balance(self, node: int, balance: int) -> None:
        inv = self._inv
        B = self._balance
        while node != inv:
            B[node] += balance
            balance = B[node]
            if balance == 0:
                return
            if balance == 2:
                if B[self._left[node]] == 1:
                    self._rotate_right(node)
                else:
                    self._rotate_left_right(node)
                return
            if balance == -2:
                if B[self._right[node]] == -1:
                    self._rotate_left(node)
                else:
                    self._rotate_right_left(node)
                return
            parent = self._parent[node]
            if parent != inv:
                balance = 1 if self._left[parent] == node else -1
            node = parent

    def _delete_balance(self, node: int, balance: int) -> None:
        inv = self._inv
        B = self._balance
        while node != inv:
            B[node] += balance
            balance = B[node]
            if balance == -2:
                if B[self._right[node]] <= 0:
                    node = self._rotate_left(node)
                    if B[node] == 1:
                        return
                else:
                    node = self._rotate_right_left(node)
            elif balance == 2:
                if B[self._left[node]] >= 0:
                    node = self._rotate_right(node)
                    if B[node] == -1:
                        return
                else:
                    node = self._rotate_left_right(node)
            elif balance != 0:
                return
            parent = self._parent[node]
            if parent != inv:
                balance = -1 if self._left[parent] == node else 1
            node = parent

    def _rotate_left(self, node: int) -> int:
        L, R, B = self._left, self._right, self._balance
        right = R[node]
        right_left = L[right]
        parent = self._parent[node]
        self._set_parent(right, parent)
        self._set_parent(node, right)
        self._set_parent(right_left, node)
        L[right] = node
        R[node] = right_left
        if node == self._root:
            self._root = right
        elif R[parent] == node:
            R[parent] = right
        else:
            L[parent] = right
        B[right] += 1
        B[node] = -B[right]
        return right

    def _rotate_right(self, node: int) -> int:
        L, R, B = self._left, self._right, self._balance
        left = L[node]
        left_right = R[left]
        parent = self._parent[node]
        self._set_parent(left, parent)
        self._set_parent(node, left)
        self._set_parent(left_right, node)
        R[left] = node
        L[node] = left_right
        if node == self._root:
            self._root = left
        elif L[parent] == node:
            L[parent] = left
        else:
            R[parent] = left
        B[left] -= 1
        B[node] = -B[left]
        return left

    def _rotate_left_right(self, node: int) -> int:
        L, R, B = self._left, self._right, self._balance
        left = L[node]
        left_right = R[left]
        left_right_right = R[left_right]
        left_right_left = L[left_right]
        parent = self._parent[node]
        self._set_parent(left_right, parent)
        self._set_parent(left, left_right)
        self._set_parent(node, left_right)
        self._set_parent(left_right_right, node)
        self._set_parent(left_right_left, left)
        L[node] = left_right_right
        R[left] = left_right_left
        L[left_right] = left
        R[left_right] = node
        if node == self._root:
            self._root = left_right
        elif L[parent] == node:
            L[parent] = left_right
        else:
            R[parent] = left_right
        if B[left_right] == 0:
            B[node] = 0
            B[left] = 0
        elif B[left_right] == -1:
            B[node] = 0
            B[left] = 1
        else:
            B[node] = -1
            B[left] = 0
        B[left_right] = 0
        return left_right

    def _rotate_right_left(self, node: int) -> int:
        L, R, B = self._left, self._right, self._balance
        right = R[node]
        right_left = L[right]
        right_left_left = L[right_left]
        right_left_right = R[right_left]
        parent = self._parent[node]
        self._set_parent(right_left, parent)
        self._set_parent(right, right_left)
        self._set_parent(node, right_left)
        self._set_parent(right_left_left, node)
        self._set_parent(right_left_right, right)
        R[node] = right_left_left
        L[right] = right_left_right
        R[right_left] = right
        L[right_left] = node
        if node == self._root:
            self._root = right_left
        elif R[parent] == node:
            R[parent] = right_left
        else:
            L[parent] = right_left
        if B[right_left] == 0:
            B[node] = 0
            B[right] = 0
        elif B[right_left] == 1:
            B[node] = 0
            B[right] = -1
        else:
            B[node] = 1
            B[right] = 0
        B[right_left] = 0
        return right_left