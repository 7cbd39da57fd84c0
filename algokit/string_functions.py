"""Prefix function and Z-function of a sequence."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_function(s: Sequence) -> list[int]:
    """``p[i]`` is the length of the longest proper border of ``s[:i + 1]``."""
    p = [0] * len(s)
    for i in range(1, len(s)):
        cur = p[i - 1]
        while cur > 0 and s[cur] != s[i]:
            cur = p[cur - 1]
        p[i] = cur + 1 if s[cur] == s[i] else 0
    return p


def z_function(s: Sequence) -> list[int]:
    """``z[i]`` is the length of the longest common prefix of ``s`` and ``s[i:]``; ``z[0] == 0``."""
    n = len(s)
    z = [0] * n
    l = r = 0
    for i in range(1, n):
        if i <= r:
            z[i] = min(z[i - l], r - i + 1)
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > r:
            l, r = i, i + z[i] - 1
    return z