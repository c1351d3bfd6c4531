"""Unbounded stack backed by a Python list."""

from __future__ import annotations

from typing import Any


class VecStack:
    """A growable stack."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Any | None:
        """Remove and return the top item, or None if the stack is empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> Any | None:
        """Return the top item without removing it, or None if empty."""
        return self._items[-1] if self._items else None

    def replace_top(self, value: Any) -> None:
        """Replace the top item with ``value``."""
        if not self._items:
            raise IndexError(f"replace_top on an empty {type(self).__name__}")
        self._items[-1] = value

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"