"""Singly linked list usable as a stack, with search and positional edits."""

from __future__ import annotations

from typing import Any, Iterator

from stackkit.linked_stack import LinkedStack, _Node, _walk


class SinglyLinkedList(LinkedStack):
    """A singly linked list whose front acts as the top of a stack."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()

    def push_front(self, elem: Any) -> None:
        """Place ``elem`` at the front of the list."""
        return super().push(elem)

    def pop_front(self) -> Any | None:
        """Remove and return the front element, or None if the list is empty."""
        return super().pop()

    def peek(self) -> Any | None:
        """Return the front element without removing it, or None if empty."""
        return super().peek()

    def replace_front(self, value: Any) -> Any:
        """Replace the front element with ``value``."""
        return super().replace_top(value)

    def drain(self) -> Iterator[Any]:
        """Yield elements front first, removing each as it is yielded."""
        return super().drain()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def contains(self, elem: Any) -> bool:
        """Return True if some element equals ``elem``."""
        return any(elem == node.elem for node in _walk(self._head))

    def __contains__(self, elem: Any) -> bool:
        return self.contains(elem)

    def insert(self, left_elem: Any, new_elem: Any) -> bool:
        """Insert ``new_elem`` right after the first element equal to ``left_elem``.

        An empty list receives ``new_elem`` as its only element. When the
        matching element is the last one, nothing is inserted but the call
        still reports success. Returns False if no element matches.
        """
        if self._head is None:
            self.push_front(new_elem)
            return True
        for node in _walk(self._head):
            if left_elem == node.elem:
                if node.next is not None:
                    node.next = _Node(new_elem, node.next)
                return True
        return False

    def remove(self, elem: Any) -> Any | None:
        """Remove the first element equal to ``elem`` and return it, or None."""
        previous: _Node | None = None
        for node in _walk(self._head):
            if elem == node.elem:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                return node.elem
            previous = node
        return None

    def push_back(self, elem: Any) -> None:
        """Append ``elem`` at the end of the list."""
        last: _Node | None = None
        for last in _walk(self._head):
            pass
        if last is None:
            self._head = _Node(elem)
        else:
            last.next = _Node(elem)

    def pop_back(self) -> Any | None:
        """Remove and return the last element, or None if the list is empty."""
        previous: _Node | None = None
        for node in _walk(self._head):
            if node.next is None:
                break
            previous = node
        else:
            return None
        if previous is None:
            self._head = None
        else:
            previous.next = None
        return node.elem

    def keys(self) -> str:
        """Return the elements, front first, joined by ``->``."""
        return "->".join(map(str, self))

    def search(self, elem: Any) -> Any | None:
        """Return the first element equal to ``elem``, or None."""
        return next((value for value in self if elem == value), None)