"""A circular doubly linked list with bidirectional iterators."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class Node:
    """A node of a :class:`LinkedList` holding a public ``value``."""

    __slots__ = ("value", "_next", "_prev", "_list")

    def __init__(self, value: Any, owner: "LinkedList | None") -> None:
        self.value = value
        self._next: Node | None = None
        self._prev: Node | None = None
        self._list = owner

    def next(self) -> "Node | None":
        """The following node, or None at the back of the list."""
        if self._list is None or self._next is self._list._head:
            return None
        return self._next

    def prev(self) -> "Node | None":
        """The preceding node, or None at the front of the list."""
        if self._list is None or self is self._list._head:
            return None
        return self._prev

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList:
    """A bidirectional list kept as a ring with a pointer to its front node."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def size(self) -> int:
        """The number of nodes in the list."""
        return self._len

    def empty(self) -> bool:
        return self._len == 0

    def front_node(self) -> Node | None:
        return self._head

    def back_node(self) -> Node | None:
        return None if self._head is None else self._head._prev

    def front(self) -> Any:
        """The first value, or None if the list is empty."""
        return None if self._head is None else self._head.value

    def back(self) -> Any:
        """The last value, or None if the list is empty."""
        return None if self._head is None else self._head._prev.value

    def _link_after(self, node: Node, at: Node) -> Node:
        node._next = at._next
        node._prev = at
        at._next._prev = node
        at._next = node
        self._len += 1
        return node

    def _append(self, value: Any) -> Node:
        node = Node(value, self)
        if self._head is None:
            node._next = node._prev = node
            self._head = node
            self._len = 1
            return node
        return self._link_after(node, self._head._prev)

    def push_back(self, value: Any) -> Node:
        """Append ``value`` and return its node."""
        return self._append(value)

    def push_front(self, value: Any) -> Node:
        """Prepend ``value`` and return its node."""
        node = self._append(value)
        self._head = node
        return node

    def insert_after(self, value: Any, mark: Node) -> Node | None:
        """Insert ``value`` right after ``mark``; None if ``mark`` is not in this list."""
        if mark._list is not self:
            return None
        return self._link_after(Node(value, self), mark)

    def insert_before(self, value: Any, mark: Node) -> Node | None:
        """Insert ``value`` right before ``mark``; None if ``mark`` is not in this list."""
        if mark._list is not self:
            return None
        node = self._link_after(Node(value, self), mark._prev)
        if self._head is mark:
            self._head = node
        return node

    def remove(self, node: Node) -> Any:
        """Unlink ``node`` if it belongs to this list and return its value."""
        if node._list is self:
            if node is self._head:
                self._head = node._next
            node._prev._next = node._next
            node._next._prev = node._prev
            node._next = node._prev = None
            node._list = None
            self._len -= 1
            if self._len == 0:
                self._head = None
        return node.value

    def clear(self) -> None:
        self._head = None
        self._len = 0

    def pop_back(self) -> Any:
        """Remove and return the last value, or None if empty."""
        node = self.back_node()
        return None if node is None else self.remove(node)

    def pop_front(self) -> Any:
        """Remove and return the first value, or None if empty."""
        node = self.front_node()
        return None if node is None else self.remove(node)

    def _move_after(self, node: Node, at: Node) -> None:
        if node is at:
            return
        if node is self._head:
            self._head = node._next
        if at._next is node:
            return
        node._prev._next = node._next
        node._next._prev = node._prev
        node._next = at._next
        node._prev = at
        at._next._prev = node
        at._next = node

    def move_to_front(self, node: Node) -> None:
        """Move ``node`` to the front; nodes of other lists are ignored."""
        if node._list is not self or self._head is node:
            return
        self._move_after(node, self._head._prev)
        self._head = node

    def move_to_back(self, node: Node) -> None:
        """Move ``node`` to the back; nodes of other lists are ignored."""
        if node._list is not self or self._head._prev is node:
            return
        self._move_after(node, self._head._prev)

    def move_after(self, node: Node, mark: Node) -> None:
        """Move ``node`` to just after ``mark``; ignored unless both are distinct nodes here."""
        if node._list is not self or mark._list is not self or node is mark:
            return
        self._move_after(node, mark)

    def push_back_list(self, other: "LinkedList") -> None:
        """Append a copy of ``other``'s values; ``other`` may be this list."""
        for value in list(other):
            self.push_back(value)

    def push_front_list(self, other: "LinkedList") -> None:
        """Prepend a copy of ``other``'s values; ``other`` may be this list."""
        for value in reversed(list(other)):
            self.push_front(value)

    def traversal(self, visitor: Callable[[Any], bool]) -> None:
        """Call ``visitor`` on each value in order until it returns False."""
        for value in self:
            if not visitor(value):
                break

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next()

    def __str__(self) -> str:
        return "[" + " ".join(str(v) for v in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class ListIterator:
    """A bidirectional position within a :class:`LinkedList`."""

    def __init__(self, node: Node | None) -> None:
        self._node = node

    def is_valid(self) -> bool:
        return self._node is not None

    def next(self) -> "ListIterator":
        if self._node is not None:
            self._node = self._node.next()
        return self

    def prev(self) -> "ListIterator":
        if self._node is not None:
            self._node = self._node.prev()
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