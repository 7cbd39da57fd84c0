"""Polynomial string hashing: palindrome checks, double hashes and prefix hashes."""

from __future__ import annotations

from functools import total_ordering

MOD = 10**9 + 7
BASE = 31
_MASK = (1 << 64) - 1


def _char_value(c: str) -> int:
    return ord(c) - ord("a") + 1


class PalindromeHasher:
    """Forward and backward hashes of a string, wrapping modulo ``2**64``."""

    def __init__(self, s: str) -> None:
        if not s:
            raise ValueError("string must not be empty")
        n = self._n = len(s)
        values = [_char_value(c) for c in s]
        self._pow = [1] * (n + 1)
        for i in range(1, n + 1):
            self._pow[i] = self._pow[i - 1] * BASE & _MASK
        self._prefix = []
        running = 0
        for i, v in enumerate(values):
            running = (running + self._pow[i] * v) & _MASK
            self._prefix.append(running)
        self._suffix = [0] * n
        running = 0
        for i in reversed(range(n)):
            running = (running + self._pow[n - 1 - i] * values[i]) & _MASK
            self._suffix[i] = running

    def substring_hash(self, b: int, e: int) -> int:
        """Forward hash of ``s[b:e]``, weighted by absolute position."""
        if e == 0:
            return 0
        h = self._prefix[e - 1]
        if b:
            h -= self._prefix[b - 1]
        return h & _MASK

    def reverse_hash(self, b: int, e: int) -> int:
        """Backward hash of ``s[b:e]``, weighted by distance from the end."""
        h = self._suffix[b]
        if e != self._n:
            h -= self._suffix[e]
        return h & _MASK

    def is_palindrome(self, b: int, e: int) -> bool:
        """True if ``s[b:e]`` (non-empty) reads the same both ways."""
        if not 0 <= b < e <= self._n:
            raise IndexError(f"range [{b}, {e}) invalid for length {self._n}")
        forward = self.substring_hash(b, e)
        backward = self.reverse_hash(b, e)
        d1 = b
        d2 = self._n - e
        if d1 < d2:
            forward = forward * self._pow[d2 - d1] & _MASK
        else:
            backward = backward * self._pow[d1 - d2] & _MASK
        return forward == backward

    def max_odd_palindrome(self, i: int) -> int:
        """Largest ``l`` with ``s[i - l : i + l + 1]`` a palindrome."""
        if not 0 <= i < self._n:
            raise IndexError(f"position {i} out of range for length {self._n}")
        l, r = 0, min(self._n - 1 - i, i)
        while r - l > 1:
            m = (l + r) // 2
            if self.is_palindrome(i - m, i + m + 1):
                l = m
            else:
                r = m
        if self.is_palindrome(i - r, i + r + 1):
            l = r
        return l

    def max_even_palindrome(self, i: int) -> int:
        """Largest ``l`` with ``s[i - l : i + l + 2]`` a palindrome, 0 if there is none."""
        if not 0 <= i < self._n - 1:
            raise IndexError(f"position {i} out of range for length {self._n}")
        l, r = 0, min(self._n - 2 - i, i)
        while r - l > 1:
            m = (l + r) // 2
            if self.is_palindrome(i - m, i + m + 2):
                l = m
            else:
                r = m
        if self.is_palindrome(i - r, i + r + 2):
            l = r
        return l


def power_table(base: int, size: int, mod: int = MOD) -> list[int]:
    """``[base**0, ..., base**(size-1)]`` modulo ``mod``."""
    powers = [1] * size
    for i in range(1, size):
        powers[i] = powers[i - 1] * base % mod
    return powers


def polynomial_hash(s: str, base: int, mod: int = MOD) -> int:
    """Sum of ``value(s[i]) * base**i`` modulo ``mod``, with ``value('a') == 1``."""
    h, m = 0, 1
    for c in s:
        h = (h + _char_value(c) * m) % mod
        m = m * base % mod
    return h


@total_ordering
class DoubleHash:
    """A pair of hashes with bases 5 and 7, updatable one character at a time."""

    __slots__ = ("h5", "h7")

    def __init__(self, s: str) -> None:
        self.h5 = polynomial_hash(s, 5)
        self.h7 = polynomial_hash(s, 7)

    def change(self, old: str, new: str, i: int) -> None:
        """Account for replacing character ``old`` by ``new`` at position ``i``."""
        diff = _char_value(new) - _char_value(old)
        self.h5 = (self.h5 + diff * pow(5, i, MOD)) % MOD
        self.h7 = (self.h7 + diff * pow(7, i, MOD)) % MOD

    def _key(self) -> tuple[int, int]:
        return self.h5, self.h7

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoubleHash):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: DoubleHash) -> bool:
        if not isinstance(other, DoubleHash):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"DoubleHash(h5={self.h5}, h7={self.h7})"


class PrefixHash:
    """Prefix hashes of a string for comparing substrings at different positions."""

    def __init__(self, s: str, base: int = BASE, mod: int = MOD) -> None:
        self._base = base
        self._mod = mod
        self._prefix: list[int] = []
        running, power = 0, 1
        for c in s:
            running = (running + power * _char_value(c)) % mod
            self._prefix.append(running)
            power = power * base % mod

    def substring(self, l: int, w: int, max_pow: int) -> int:
        """Hash of ``s[l:l + w]`` shifted so its weights start at ``base**max_pow``.

        Substrings hashed with the same ``max_pow`` compare equal exactly when
        their hashes agree (up to collisions).
        """
        if w < 1 or l < 0 or l + w > len(self._prefix):
            raise IndexError(f"substring ({l}, {w}) outside length {len(self._prefix)}")
        if max_pow < l:
            raise ValueError("max_pow must be at least l")
        h = self._prefix[l + w - 1]
        if l:
            h = (h - self._prefix[l - 1]) % self._mod
        return h * pow(self._base, max_pow - l, self._mod) % self._mod