"""Modular arithmetic helpers over a prime modulus."""

from __future__ import annotations

MOD = 10**9 + 7


def pow_mod(a: int, b: int, mod: int = MOD) -> int:
    """``a ** b`` modulo ``mod`` for a non-negative exponent."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    return pow(a, b, mod)


def inv_mod(a: int, mod: int = MOD) -> int:
    """Multiplicative inverse of ``a`` modulo the prime ``mod``."""
    return pow_mod(a, mod - 2, mod)


def div_mod(a: int, b: int, mod: int = MOD) -> int:
    """``a / b`` modulo the prime ``mod``."""
    return a * inv_mod(b, mod) % mod


def comb_mod(n: int, k: int, mod: int = MOD) -> int:
    """Binomial coefficient ``C(n, k)`` modulo the prime ``mod``."""
    result = 1
    for i in range(n - k + 1, n + 1):
        result = result * (i % mod) % mod
    for i in range(2, k + 1):
        result = div_mod(result, i % mod, mod)
    return result