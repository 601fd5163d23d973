"""Indexed data structures: union-find and the Fenwick prefix tree."""

from __future__ import annotations

import operator
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, List, Tuple, TypeVar

from .errors import IndexOutOfRangeError

T = TypeVar("T")


def _lowbit(position: int) -> int:
    return position & -position


@dataclass(eq=False)
class DisjointSet:
    """Union-find over ``0..size-1`` with union by size and path compression."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        # Only meaningful at roots.
        self.set_sizes = [1] * self.size

    def __len__(self) -> int:
        return self.size

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexOutOfRangeError(index, self.size)

    def find(self, index: int) -> int:
        """Return the representative of the set containing `index`."""

        self._check(index)
        root = index
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[index] != root:
            self.parent[index], index = root, self.parent[index]
        return root

    def union(self, left: int, right: int) -> bool:
        """Merge the sets of `left` and `right`; return False if already joined."""

        self._check(left)
        self._check(right)
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        if self.set_sizes[root_left] < self.set_sizes[root_right]:
            root_left, root_right = root_right, root_left
        self.parent[root_right] = root_left
        self.set_sizes[root_left] += self.set_sizes[root_right]
        return True

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def set_size(self, index: int) -> int:
        return self.set_sizes[self.find(index)]

    @property
    def set_count(self) -> int:
        return sum(1 for index in range(self.size) if self.parent[index] == index)

    def groups(self) -> Dict[int, List[int]]:
        """Map every root to its members in ascending order."""

        members: Dict[int, List[int]] = defaultdict(list)
        for index in range(self.size):
            members[self.find(index)].append(index)
        return dict(members)


class FenwickTree(Generic[T]):
    """Binary indexed tree answering prefix aggregates in O(log n).

    Works for any associative, commutative ``combine`` with an ``identity``
    element: sums (the default), XOR, or ``max`` with a suitable floor.

    Storage is 1-indexed. Slot ``i`` holds the combination of the logical
    range ``[i - lowbit(i), i)``, so a prefix ``[0, k]`` decomposes into the
    slots reached from ``k + 1`` by repeatedly clearing the lowest set bit.
    """

    def __init__(
        self,
        values: Iterable[T] = (),
        combine: Callable[[T, T], T] = operator.add,
        identity: T = 0,  # type: ignore[assignment]
    ) -> None:
        self.combine = combine
        self.identity = identity
        self._tree: List[T] = [identity, *values]

        length = len(self._tree)
        for position in range(1, length):
            parent = position + _lowbit(position)
            if parent < length:
                self._tree[parent] = combine(self._tree[parent], self._tree[position])

    def __len__(self) -> int:
        return len(self._tree) - 1

    def is_empty(self) -> bool:
        return len(self) == 0

    @property
    def tree(self) -> Tuple[T, ...]:
        """Internal storage including the unused identity slot 0."""

        return tuple(self._tree)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise IndexOutOfRangeError(index, len(self))

    def add(self, index: int, delta: T) -> None:
        """Combine `delta` into the element at `index`."""

        self._check(index)
        position = index + 1
        while position < len(self._tree):
            self._tree[position] = self.combine(self._tree[position], delta)
            position += _lowbit(position)

    def prefix_sum(self, index: int) -> T:
        """Return the combination of elements ``0..index`` inclusive."""

        self._check(index)
        position = index + 1
        total = self.identity
        while position > 0:
            total = self.combine(total, self._tree[position])
            position -= _lowbit(position)
        return total

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FenwickTree):
            return self._tree[1:] == other._tree[1:]
        if isinstance(other, (list, tuple)):
            return self._tree[1:] == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FenwickTree({self._tree[1:]!r})"


__all__ = ["DisjointSet", "FenwickTree"]
