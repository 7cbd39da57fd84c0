"""Fibonacci numbers via 2x2 matrix exponentiation."""

from __future__ import annotations

from dataclasses import dataclass

MOD = 10**9 + 7


@dataclass(frozen=True)
class Mat2:
    """A 2x2 integer matrix."""

    m00: int = 0
    m01: int = 0
    m10: int = 0
    m11: int = 0

    @classmethod
    def identity(cls) -> Mat2:
        return cls(1, 0, 0, 1)

    def __mul__(self, other: Mat2) -> Mat2:
        if not isinstance(other, Mat2):
            return NotImplemented
        return Mat2(
            self.m00 * other.m00 + self.m01 * other.m10,
            self.m00 * other.m01 + self.m01 * other.m11,
            self.m10 * other.m00 + self.m11 * other.m10,
            self.m10 * other.m01 + self.m11 * other.m11,
        )

    def __mod__(self, mod: int) -> Mat2:
        return Mat2(self.m00 % mod, self.m01 % mod, self.m10 % mod, self.m11 % mod)


def mat_pow(matrix: Mat2, exponent: int, mod: int = MOD) -> Mat2:
    """``matrix ** exponent`` with entries reduced modulo ``mod``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = Mat2.identity()
    while exponent:
        if exponent & 1:
            result = result * matrix % mod
        matrix = matrix * matrix % mod
        exponent >>= 1
    return result


def fib_step_matrix(n: int, mod: int = MOD) -> Mat2:
    """Matrix that advances a Fibonacci pair by ``n`` steps (backwards if negative)."""
    if n >= 0:
        return mat_pow(Mat2(0, 1, 1, 1), n, mod)
    return mat_pow(Mat2(-1, 1, 1, 0), -n, mod)


def fibonacci_pair(n: int, mod: int = MOD) -> tuple[int, int]:
    """Return ``(F(n-1), F(n))`` modulo ``mod``; negative ``n`` is allowed."""
    step = fib_step_matrix(n - 1, mod)
    return step.m10 % mod, step.m11 % mod