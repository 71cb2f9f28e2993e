"""Singly and doubly linked lists of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _DoubleNode:
    data: Any
    prev: Optional[_DoubleNode] = None
    next: Optional[_DoubleNode] = None


class DoublyLinkedList:
    """Linked list that can be walked from either end."""

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


class SinglyLinkedList:
    """Forward-only linked list with positional insert and erase."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the end."""
        if self._head is None:
            self._head = _Node(value)
        else:
            self._node_at(self._size - 1).next = _Node(value)
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError("out of range!")
        if index == 0:
            self.push_front(value)
            return
        before = self._node_at(index - 1)
        before.next = _Node(value, before.next)
        self._size += 1

    def erase(self, index: int) -> None:
        """Remove the element at position ``index``."""
        if self._head is None:
            raise IndexError("list is empty!")
        if not 0 <= index < self._size:
            raise IndexError("out of range!")
        if index == 0:
            self._head = self._head.next
        else:
            before = self._node_at(index - 1)
            assert before.next is not None
            before.next = before.next.next
        self._size -= 1

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"