"""Fixed-capacity stack."""

from __future__ import annotations

from typing import Any

from stackkit.vec_stack import VecStack

CAPACITY = 5


class ArrayStack(VecStack):
    """A stack holding at most ``CAPACITY`` items."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()

    def push(self, item: Any) -> bool:
        """Place ``item`` on top. Return False if the stack is full."""
        if self.is_full():
            return False
        super().push(item)
        return True

    def pop(self) -> Any | None:
        """Remove and return the top item, or None if the stack is empty."""
        return super().pop()

    def peek(self) -> Any | None:
        """Return the top item without removing it, or None if empty."""
        return super().peek()

    def replace_top(self, value: Any) -> Any:
        """Replace the top item with ``value``."""
        return super().replace_top(value)

    def is_full(self) -> bool:
        """Return True when no more items fit."""
        return len(self) >= CAPACITY

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return super().is_empty()

    def __len__(self) -> int:
        return super().__len__()