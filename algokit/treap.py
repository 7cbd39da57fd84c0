"""Treap keeping a sorted multiset of integer keys."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    key: int
    priority: int
    left: _Node | None = None
    right: _Node | None = None


def _split(t: _Node | None, key: int) -> tuple[_Node | None, _Node | None]:
    """Split into keys ``< key`` and keys ``>= key``."""
    if t is None:
        return None, None
    if t.key < key:
        t.right, rest = _split(t.right, key)
        return t, rest
    rest, t.left = _split(t.left, key)
    return rest, t


def _merge(a: _Node | None, b: _Node | None) -> _Node | None:
    if a is None:
        return b
    if b is None:
        return a
    if a.priority > b.priority:
        a.right = _merge(a.right, b)
        return a
    b.left = _merge(a, b.left)
    return b


class Treap:
    """Randomised balanced search tree over integer keys; duplicates allowed."""

    def __init__(self, seed: int | None = None) -> None:
        self._root: _Node | None = None
        self._rng = random.Random(seed)

    def insert(self, key: int) -> None:
        """Add one occurrence of ``key``."""
        left, right = _split(self._root, key)
        node = _Node(key, self._rng.getrandbits(63))
        self._root = _merge(_merge(left, node), right)

    def erase(self, key: int) -> None:
        """Remove every occurrence of ``key``; absent keys are ignored."""
        left, rest = _split(self._root, key)
        _, right = _split(rest, key + 1)
        self._root = _merge(left, right)

    def __iter__(self) -> Iterator[int]:
        """Keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right