"""Quadtree-shaped segment tree for range-minimum queries on a grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

I64_MAX = (1 << 63) - 1


def _bit_ceil(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


@dataclass(frozen=True)
class Rect2D:
    """Half-open rectangle ``[left, right) x [bottom, top)``."""

    left: int
    bottom: int
    right: int
    top: int

    def contains_point(self, point: tuple[int, int]) -> bool:
        x, y = point
        return self.left <= x < self.right and self.bottom <= y < self.top

    def contains(self, other: Rect2D) -> bool:
        return (
            self.left <= other.left
            and self.right >= other.right
            and self.bottom <= other.bottom
            and self.top >= other.top
        )

    def intersects(self, other: Rect2D) -> bool:
        return (
            self.right > other.left
            and self.left < other.right
            and self.top > other.bottom
            and self.bottom < other.top
        )

    def quadrants(self) -> tuple[Rect2D, Rect2D, Rect2D, Rect2D]:
        """Upper-right, upper-left, lower-left and lower-right quarters."""
        mx = (self.left + self.right) // 2
        my = (self.bottom + self.top) // 2
        return (
            Rect2D(mx, my, self.right, self.top),
            Rect2D(self.left, my, mx, self.top),
            Rect2D(self.left, self.bottom, mx, my),
            Rect2D(mx, self.bottom, self.right, my),
        )


class SegTree2D:
    """Point assignment and rectangle minimum over an ``sx`` by ``sy`` grid."""

    def __init__(self, sx: int, sy: int, default: Any = I64_MAX) -> None:
        self._sx = sx
        self._sy = sy
        self._size = _bit_ceil(max(sx, sy))
        self._default = default
        self._bounds = Rect2D(0, 0, self._size, self._size)
        self._tree = [default] * ((4 * self._size * self._size - 1) // 3)

    def set(self, point: tuple[int, int], value: Any) -> None:
        """Make cell ``point`` (x, y) hold ``value``."""
        x, y = point
        if not (0 <= x < self._sx and 0 <= y < self._sy):
            raise IndexError(f"point {point} outside {self._sx}x{self._sy} grid")
        self._set(point, value, 0, self._bounds)

    def get(self, rect: Rect2D) -> Any:
        """Minimum over the cells inside ``rect``; ``default`` if there are none."""
        return self._get(rect, 0, self._bounds)

    def _set(self, point: tuple[int, int], value: Any, x: int, q: Rect2D) -> None:
        if q.right - q.left == 1:
            self._tree[x] = value
            return
        for i, quad in enumerate(q.quadrants()):
            if quad.contains_point(point):
                self._set(point, value, 4 * x + 1 + i, quad)
                break
        self._tree[x] = min(self._tree[4 * x + 1 : 4 * x + 5])

    def _get(self, rect: Rect2D, x: int, q: Rect2D) -> Any:
        if rect.contains(q):
            return self._tree[x]
        if not rect.intersects(q):
            return self._default
        return min(
            self._get(rect, 4 * x + 1 + i, quad) for i, quad in enumerate(q.quadrants())
        )