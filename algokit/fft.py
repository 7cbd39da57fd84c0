"""Recursive complex FFT and integer polynomial multiplication."""

from __future__ import annotations

import math
from collections.abc import Sequence


def next_pow2(n: int) -> int:
    """Smallest power of two that is at least ``n`` (1 for ``n <= 1``)."""
    r = 1
    while r < n:
        r <<= 1
    return r


def _fft(values: list[complex], inverse: bool) -> list[complex]:
    n = len(values)
    if n == 1:
        return [values[0]]
    even = _fft(values[0::2], inverse)
    odd = _fft(values[1::2], inverse)
    angle = 2.0 * math.pi / n
    if inverse:
        angle = -angle
    wn = complex(math.cos(angle), math.sin(angle))
    low: list[complex] = []
    high: list[complex] = []
    w = complex(1.0)
    for e, o in zip(even, odd):
        t = w * o
        low.append(e + t)
        high.append(e - t)
        w *= wn
    return low + high


def fft(values: Sequence[complex], inverse: bool = False) -> list[complex]:
    """Discrete Fourier transform of a power-of-two-length sequence (unscaled)."""
    n = len(values)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")
    return _fft([complex(v) for v in values], inverse)


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Cyclic convolution of two integer sequences of equal power-of-two length."""
    if len(a) != len(b):
        raise ValueError("sequences must have equal length")
    product = [x * y for x, y in zip(fft(a), fft(b))]
    n = len(a)
    return [int(round(v.real / n)) for v in fft(product, inverse=True)]


def pair_sum_counts(a: Sequence[int], b: Sequence[int]) -> list[tuple[int, int]]:
    """For each value ``s``, count pairs ``(x in a, y in b)`` with ``x + y == s``.

    Returns ``(s, count)`` for every ``s`` with a non-zero count, in increasing order.
    """
    if any(v < 0 for v in a) or any(v < 0 for v in b):
        raise ValueError("values must be non-negative")
    size = next_pow2(max(a, default=0) + max(b, default=0) + 1)
    p1 = [0] * size
    p2 = [0] * size
    for v in a:
        p1[v] += 1
    for v in b:
        p2[v] += 1
    return [(s, c) for s, c in enumerate(multiply(p1, p2)) if c]