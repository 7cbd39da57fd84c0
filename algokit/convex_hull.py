"""Convex hull trick: lower envelope of lines added in decreasing slope order."""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class Line:
    """The line ``y = k * x + b``."""

    k: int = 0
    b: int = 0

    def intersection(self, other: Line) -> int:
        """x-coordinate of the crossing with ``other``, truncated toward zero."""
        return _trunc_div(other.b - self.b, self.k - other.k)

    def evaluate(self, x: int) -> int:
        return self.k * x + self.b


class LowerEnvelope:
    """Minimum of a set of lines, queried at integer points."""

    def __init__(self) -> None:
        self._lines: list[Line] = []
        self._starts: list[float] = []

    def add(self, line: Line) -> None:
        """Add a line; slopes must come in decreasing order."""
        while self._lines and self._lines[-1].intersection(line) <= self._starts[-1]:
            self._lines.pop()
            self._starts.pop()
        start = line.intersection(self._lines[-1]) if self._lines else -math.inf
        self._lines.append(line)
        self._starts.append(start)

    def query(self, x: int) -> int:
        """Value of the envelope at ``x``."""
        if not self._lines:
            raise ValueError("envelope has no lines")
        return self._lines[bisect_right(self._starts, x) - 1].evaluate(x)