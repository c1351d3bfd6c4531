"""Stacks, linked lists, a persistent list and a path trie for device lookup."""

__version__ = "0.1.0"