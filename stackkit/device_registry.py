"""Registry of devices indexed by path in a character trie."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class IoTDevice:
    """A device; two devices are equal when their id and address match."""

    numerical_id: int
    address: str
    path: str = field(compare=False)


class _Node:
    __slots__ = ("key", "children", "value")

    def __init__(self, key: str) -> None:
        self.key = key
        self.children: dict[str, _Node] = {}
        self.value: IoTDevice | None = None


class DeviceRegistry:
    """Stores devices under their path, one trie level per character."""

    __slots__ = ("_length", "_root")

    def __init__(self) -> None:
        self._length = 0
        self._root: dict[str, _Node] = {}

    def add(self, device: IoTDevice) -> None:
        """Store ``device`` under its path; devices with an empty path are ignored.

        Every stored device counts toward the length, including one that
        replaces an earlier device at the same path.
        """
        path = device.path
        if not path:
            return
        self._length += 1
        level = self._root
        node: _Node | None = None
        for char in path:
            node = level.get(char)
            if node is None:
                node = level[char] = _Node(char)
            level = node.children
        node.value = device

    def find(self, path: str) -> IoTDevice | None:
        """Return a copy of the device along ``path``.

        The walk stops at the first character with no matching node, and the
        device at the deepest node reached, if any, is returned.
        """
        if not path:
            return None
        node = self._root.get(path[0])
        if node is None:
            return None
        for char in path[1:]:
            child = node.children.get(char)
            if child is None:
                break
            node = child
        return None if node.value is None else dataclasses.replace(node.value)

    def walk(self, callback: Callable[[IoTDevice], object]) -> None:
        """Call ``callback`` for every stored device, children before parents."""
        for node in self._root.values():
            self._walk(node, callback)

    def _walk(self, node: _Node, callback: Callable[[IoTDevice], object]) -> None:
        for child in node.children.values():
            self._walk(child, callback)
        if node.value is not None:
            callback(node.value)

    def __len__(self) -> int:
        return self._length