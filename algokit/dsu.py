"""Disjoint-set union structures: plain, range-joining, undoable and sparse."""

from __future__ import annotations


class DSU:
    """Union-find over ``0..n-1`` with path compression and union by size."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, v: int) -> int:
        """Return the representative of ``v``'s set."""
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def join(self, a: int, b: int) -> bool:
        """Unite the sets of ``a`` and ``b``; return False if already united."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def hang(self, child: int, parent: int) -> bool:
        """Attach the set of ``child`` below the root of ``parent``'s set."""
        child, parent = self.find(child), self.find(parent)
        if child == parent:
            return False
        self._parent[child] = parent
        self._size[parent] += self._size[child]
        return True


class DSURangeJoin:
    """Union-find that can also unite a whole range of elements at once."""

    def __init__(self, n: int) -> None:
        self._dsu = DSU(n)
        self._next = DSU(n + 1)

    def find(self, v: int) -> int:
        return self._dsu.find(v)

    def join(self, a: int, b: int) -> bool:
        return self._dsu.join(a, b)

    def join_range(self, a: int, b: int) -> None:
        """Unite every element of ``[a, b]`` in amortised near-constant time."""
        a = self._next.find(a)
        while a < b:
            self._dsu.join(a, b)
            self._next.hang(a, a + 1)
            a = self._next.find(a)


class DSUWithUndo:
    """Union-find without path compression whose joins can be rolled back."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n
        self.count = n
        self.history: list[tuple[int, int]] = []

    def find(self, v: int) -> int:
        while self._parent[v] != v:
            v = self._parent[v]
        return v

    def join(self, a: int, b: int) -> bool:
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        self.history.append((a, b))
        self.count -= 1
        return True

    def undo(self) -> None:
        """Revert the most recent successful join."""
        if not self.history:
            raise IndexError("nothing to undo")
        a, b = self.history.pop()
        self._parent[b] = b
        self._size[a] -= self._size[b]
        self.count += 1


class ImplicitDSU:
    """Union-find over arbitrary integers, creating elements on first use."""

    def __init__(self) -> None:
        self._parent: dict[int, int] = {}
        self._size: dict[int, int] = {}

    def _touch(self, v: int) -> None:
        if v not in self._parent:
            self._parent[v] = v
            self._size[v] = 1

    def find(self, v: int) -> int:
        self._touch(v)
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def join(self, a: int, b: int) -> bool:
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] > self._size[b]:
            a, b = b, a
        self._parent[a] = b
        self._size[b] += self._size[a]
        return True

    def merge(self, other: ImplicitDSU) -> int:
        """Apply all of ``other``'s unions here; return how many joins succeeded."""
        return sum(self.join(v, other.find(v)) for v in sorted(other._parent))