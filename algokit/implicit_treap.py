"""Implicit-key treap: a sequence with cut, paste and reversal of ranges."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    value: Any
    priority: int
    size: int = 1
    left: _Node | None = None
    right: _Node | None = None
    flipped: bool = False


def _size(t: _Node | None) -> int:
    return t.size if t is not None else 0


def _update(t: _Node) -> None:
    t.size = 1 + _size(t.left) + _size(t.right)


def _push(t: _Node | None) -> None:
    if t is None or not t.flipped:
        return
    t.flipped = False
    t.left, t.right = t.right, t.left
    for child in (t.left, t.right):
        if child is not None:
            child.flipped = not child.flipped


def _split(t: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
    """Split into the first ``k`` elements and the rest."""
    if t is None:
        return None, None
    _push(t)
    if _size(t.left) < k:
        t.right, rest = _split(t.right, k - _size(t.left) - 1)
        _update(t)
        return t, rest
    rest, t.left = _split(t.left, k)
    _update(t)
    return rest, t


def _merge(a: _Node | None, b: _Node | None) -> _Node | None:
    if a is None:
        return b
    if b is None:
        return a
    _push(a)
    _push(b)
    if a.priority > b.priority:
        a.right = _merge(a.right, b)
        _update(a)
        return a
    b.left = _merge(a, b.left)
    _update(b)
    return b


class ImplicitTreap:
    """Sequence supporting positional insert, erase, cut, paste and reverse."""

    def __init__(self, values: Iterable[Any] = (), seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._root: _Node | None = None
        for value in values:
            self._root = _merge(self._root, self._new(value))

    def _new(self, value: Any) -> _Node:
        return _Node(value, self._rng.getrandbits(63))

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= len(self):
            raise IndexError(f"range [{l}, {r}) invalid for length {len(self)}")

    def insert(self, i: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``i``."""
        if not 0 <= i <= len(self):
            raise IndexError(f"position {i} out of range for length {len(self)}")
        left, right = _split(self._root, i)
        self._root = _merge(_merge(left, self._new(value)), right)

    def erase(self, i: int) -> None:
        """Remove the element at position ``i``."""
        if not 0 <= i < len(self):
            raise IndexError(f"position {i} out of range for length {len(self)}")
        left, rest = _split(self._root, i)
        _, right = _split(rest, 1)
        self._root = _merge(left, right)

    def cut(self, l: int, r: int) -> ImplicitTreap:
        """Remove ``[l, r)`` from this sequence and return it as a new treap."""
        self._check_range(l, r)
        head, right = _split(self._root, r)
        left, middle = _split(head, l)
        self._root = _merge(left, right)
        piece = ImplicitTreap(seed=self._rng.getrandbits(32))
        piece._root = middle
        return piece

    def paste(self, i: int, other: ImplicitTreap) -> None:
        """Move all of ``other`` into this sequence starting at position ``i``."""
        if other is self:
            raise ValueError("cannot paste a treap into itself")
        if not 0 <= i <= len(self):
            raise IndexError(f"position {i} out of range for length {len(self)}")
        left, right = _split(self._root, i)
        self._root = _merge(_merge(left, other._root), right)
        other._root = None

    def reverse(self, l: int, r: int) -> None:
        """Reverse the order of the elements in ``[l, r)``."""
        self._check_range(l, r)
        head, right = _split(self._root, r)
        left, middle = _split(head, l)
        if middle is not None:
            middle.flipped = not middle.flipped
        self._root = _merge(_merge(left, middle), right)

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                _push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right