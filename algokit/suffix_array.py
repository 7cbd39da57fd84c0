"""Suffix array by prefix doubling, and the LCP array by Kasai's method."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def suffix_array(s: str) -> list[int]:
    """Start positions of the suffixes of ``s`` in lexicographic order."""
    classes = [ord(c) + 1 for c in s] + [0]
    n = len(classes)
    order = sorted(range(n), key=classes.__getitem__)
    shift = 1
    while shift < n:
        current = classes

        def key(i: int, current: list[int] = current, shift: int = shift) -> tuple[int, int]:
            return current[i], current[(i + shift) % n]

        order.sort(key=key)
        new = [0] * n
        cls = 0
        for prev, cur in pairwise(order):
            if key(cur) != key(prev):
                cls += 1
            new[cur] = cls
        classes = new
        shift *= 2
    return order[1:]


def lcp_array(s: str, sa: Sequence[int]) -> list[int]:
    """``lcp[i]`` is the common prefix length of suffixes ``sa[i]`` and ``sa[i + 1]``."""
    n = len(s)
    if len(sa) != n:
        raise ValueError("suffix array length does not match the string")
    if n == 0:
        return []
    pos = [0] * n
    for rank, i in enumerate(sa):
        pos[i] = rank
    lcp = [0] * (n - 1)
    k = 0
    for i in range(n):
        if pos[i] == n - 1:
            k = 0
            continue
        j = sa[pos[i] + 1]
        while max(i, j) + k < n and s[i + k] == s[j + k]:
            k += 1
        lcp[pos[i]] = k
        if k:
            k -= 1
    return lcp