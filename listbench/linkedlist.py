"""A sorted, duplicate-free singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: int, next_node: _Node | None = None) -> None:
        self.data = data
        self.next = next_node


class SortedLinkedList:
    """Singly linked list that keeps its values in ascending order without duplicates."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _locate(self, value: int) -> tuple[_Node | None, _Node | None]:
        """Return the last node below ``value`` and the first node not below it."""
        pred: _Node | None = None
        curr = self._head
        while curr is not None and curr.data < value:
            pred, curr = curr, curr.next
        return pred, curr

    def member(self, value: int) -> bool:
        """Return True if ``value`` is in the list."""
        _, curr = self._locate(value)
        return curr is not None and curr.data == value

    def insert(self, value: int) -> bool:
        """Insert ``value``; return False if it was already present."""
        pred, curr = self._locate(value)
        if curr is not None and curr.data == value:
            return False
        node = _Node(value, curr)
        if pred is None:
            self._head = node
        else:
            pred.next = node
        self._size += 1
        return True

    def delete(self, value: int) -> bool:
        """Remove ``value``; return False if it was not present."""
        pred, curr = self._locate(value)
        if curr is None or curr.data != value:
            return False
        if pred is None:
            self._head = curr.next
        else:
            pred.next = curr.next
        self._size -= 1
        return True

    def clear(self) -> None:
        """Drop every node."""
        self._head = None
        self._size = 0

    def __iter__(self) -> Iterator[int]:
        curr = self._head
        while curr is not None:
            yield curr.data
            curr = curr.next

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.member(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"