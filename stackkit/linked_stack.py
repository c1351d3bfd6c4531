"""Stack built from singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("elem", "next")

    def __init__(self, elem: Any, next_node: _Node | None = None) -> None:
        self.elem = elem
        self.next = next_node


def _walk(node: _Node | None) -> Iterator[_Node]:
    """Yield ``node`` and every node that follows it."""
    while node is not None:
        yield node
        node = node.next


class LinkedStack:
    """A stack whose top is the head of a singly linked list."""

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head: _Node | None = None

    def push(self, elem: Any) -> None:
        self._head = _Node(elem, self._head)

    def pop(self) -> Any | None:
        """Remove and return the top item, or None if the stack is empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        return node.elem

    def peek(self) -> Any | None:
        """Return the top item without removing it, or None if empty."""
        return None if self._head is None else self._head.elem

    def replace_top(self, value: Any) -> None:
        """Replace the top item with ``value``."""
        if self._head is None:
            raise IndexError(f"cannot replace the top of an empty {type(self).__name__}")
        self._head.elem = value

    def drain(self) -> Iterator[Any]:
        """Pop items one at a time, top first, until the stack is empty."""
        while self._head is not None:
            yield self.pop()

    def __iter__(self) -> Iterator[Any]:
        return (node.elem for node in _walk(self._head))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"