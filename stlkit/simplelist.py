"""A singly linked list with forward iterators."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class Node:
    """A node of a :class:`SimpleList` holding a public ``value``."""

    __slots__ = ("value", "_next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self._next: Node | None = None

    def next(self) -> "Node | None":
        """The following node, or None at the back."""
        return self._next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class SimpleList:
    """A singly linked list with pointers to both its front and back."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def front_node(self) -> Node | None:
        return self._head

    def back_node(self) -> Node | None:
        return self._tail

    def push_front(self, value: Any) -> Node:
        """Prepend ``value`` and return its node."""
        node = Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node._next = self._head
            self._head = node
        self._len += 1
        return node

    def push_back(self, value: Any) -> Node:
        """Append ``value`` and return its node."""
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail._next = node
            self._tail = node
        self._len += 1
        return node

    def insert_after(self, value: Any, mark: Node) -> Node:
        """Insert ``value`` right after ``mark`` and return its node."""
        node = Node(value)
        node._next = mark._next
        mark._next = node
        if node._next is None:
            self._tail = node
        self._len += 1
        return node

    def remove(self, pre: Node | None, node: Node | None) -> Any:
        """Unlink ``node``, whose predecessor is ``pre`` (None for the front)."""
        if node is None:
            return None
        if pre is None:
            self._head = node._next
            if self._head is None:
                self._tail = None
        else:
            pre._next = node._next
            if pre._next is None:
                self._tail = pre
        self._len -= 1
        return node.value

    def move_to_front(self, pre: Node | None, node: Node | None) -> None:
        """Move ``node``, which follows ``pre``, to the front."""
        if pre is None or node is None or pre._next is not node or self._len <= 1:
            return
        pre._next = node._next
        if pre._next is None:
            self._tail = pre
        node._next = self._head
        self._head = node

    def move_to_back(self, pre: Node | None, node: Node | None) -> None:
        """Move ``node``, which follows ``pre`` (None for the front), to the back."""
        if node is None or node._next is None or self._len <= 1:
            return
        if pre is None:
            self._head = node._next
        else:
            pre._next = node._next
        self._tail._next = node
        self._tail = node
        node._next = None

    def traversal(self, visitor: Callable[[Any], bool]) -> None:
        """Call ``visitor`` on each value in order until it returns False."""
        for value in self:
            if not visitor(value):
                break

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node._next

    def __str__(self) -> str:
        return "[" + " ".join(str(v) for v in self) + "]"

    def __repr__(self) -> str:
        return f"SimpleList({list(self)!r})"


class ListIterator:
    """A forward position within a :class:`SimpleList`."""

    def __init__(self, node: Node | None) -> None:
        self._node = node

    def is_valid(self) -> bool:
        return self._node is not None

    def next(self) -> "ListIterator":
        if self._node is not None:
            self._node = self._node.next()
        return self

    @property
    def value(self) -> Any:
        return None if self._node is None else self._node.value

    @value.setter
    def value(self, val: Any) -> None:
        if self._node is not None:
            self._node.value = val

    def clone(self) -> "ListIterator":
        return ListIterator(self._node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListIterator):
            return NotImplemented
        return other._node is self._node

    __hash__ = None  # type: ignore[assignment]