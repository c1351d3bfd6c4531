"""Immutable singly linked list whose versions share their tails."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from stackkit.linked_stack import _Node, _walk


class PersistentList:
    """An immutable list; ``prepend`` and ``tail`` return new lists.

    Nodes are never modified once created, so lists may share them freely.
    """

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head: _Node | None = None

    @classmethod
    def _from_node(cls, node: _Node | None) -> PersistentList:
        result = cls()
        result._head = node
        return result

    def prepend(self, elem: Any) -> PersistentList:
        """Return a new list with ``elem`` in front of this one."""
        return self._from_node(_Node(elem, self._head))

    def tail(self) -> PersistentList:
        """Return the list without its first element; empty stays empty."""
        return self._from_node(None if self._head is None else self._head.next)

    def head(self) -> Any | None:
        """Return the first element, or None if the list is empty."""
        return None if self._head is None else self._head.elem

    def __iter__(self) -> Iterator[Any]:
        return (node.elem for node in _walk(self._head))

    def __repr__(self) -> str:
        return f"PersistentList({list(self)!r})"