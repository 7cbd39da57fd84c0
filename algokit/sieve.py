"""Linear sieve of Eratosthenes."""

from __future__ import annotations


def linear_sieve(n: int) -> tuple[list[int], list[int]]:
    """Return ``(min_divisor, primes)`` for ``0..n``.

    ``min_divisor[k]`` is the least prime factor of ``k`` for ``k >= 2`` and 0
    for 0 and 1.
    """
    min_divisor = [0] * (n + 1)
    primes: list[int] = []
    for k in range(2, n + 1):
        if min_divisor[k] == 0:
            min_divisor[k] = k
            primes.append(k)
        for p in primes:
            if p > min_divisor[k] or p * k > n:
                break
            min_divisor[k * p] = p
    return min_divisor, primes