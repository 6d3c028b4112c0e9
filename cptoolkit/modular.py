"""Modular arithmetic helpers and precomputed binomial tables."""

from __future__ import annotations

MOD = 1_000_000_007
"""Default prime modulus; 998244353 is the usual alternative."""


def _check_modulus(m: int) -> None:
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")


def powmod(x: int, y: int, m: int = MOD) -> int:
    """Return ``x ** y`` reduced modulo ``m``; ``y == 0`` always gives 1."""
    _check_modulus(m)
    if y < 0:
        raise ValueError(f"exponent must be non-negative, got {y}")
    if y == 0:
        return 1
    return pow(x, y, m)


def mod_inverse(a: int, m: int = MOD) -> int:
    """Return the inverse of ``a`` modulo the prime ``m`` (Fermat's little theorem)."""
    _check_modulus(m)
    if a % m == 0:
        raise ZeroDivisionError(f"{a} has no inverse modulo {m}")
    return powmod(a, m - 2, m) % m


def add_mod(a: int, b: int, m: int = MOD) -> int:
    """Return ``(a + b) mod m`` in the range ``[0, m)``."""
    _check_modulus(m)
    return (a % m + b % m) % m


def sub_mod(a: int, b: int, m: int = MOD) -> int:
    """Return ``(a - b) mod m`` in the range ``[0, m)``."""
    _check_modulus(m)
    return (a % m - b % m) % m


def mul_mod(a: int, b: int, m: int = MOD) -> int:
    """Return ``(a * b) mod m`` in the range ``[0, m)``."""
    _check_modulus(m)
    return (a % m) * (b % m) % m


def div_mod(a: int, b: int, m: int = MOD) -> int:
    """Return ``a / b`` modulo the prime ``m``."""
    return mul_mod(a, mod_inverse(b % m, m), m)


def ncr_mod(n: int, r: int, m: int = MOD) -> int:
    """Return the binomial coefficient C(n, r) modulo the prime ``m``."""
    _check_modulus(m)
    if r < 0 or r > n:
        return 0
    r = min(r, n - r)
    result = 1
    for i in range(1, r + 1):
        result = result * (n - i + 1) % m
        result = result * mod_inverse(i, m) % m
    return result % m


class Combinatorics:
    """Factorial and inverse-factorial tables for fast binomials modulo a prime."""

    def __init__(self, n: int, modulus: int = MOD) -> None:
        if n < 0:
            raise ValueError(f"table size must be non-negative, got {n}")
        _check_modulus(modulus)
        self.n = n
        self.modulus = modulus
        size = n + 1
        fact = [1] * size
        inv = [1] * size
        invfact = [1] * size
        for i in range(2, size):
            fact[i] = fact[i - 1] * i % modulus
            inv[i] = (modulus - modulus // i) * inv[modulus % i] % modulus
            invfact[i] = invfact[i - 1] * inv[i] % modulus
        self.fact = tuple(fact)
        self.inv = tuple(inv)
        self.invfact = tuple(invfact)

    def _check(self, n: int, r: int) -> None:
        if r < 0 or n > self.n:
            raise ValueError(
                f"arguments ({n}, {r}) outside the table range 0..{self.n}"
            )

    def ncr(self, n: int, r: int) -> int:
        """Return C(n, r) modulo the table's modulus; 0 when ``n < r``."""
        if n < r:
            return 0
        self._check(n, r)
        m = self.modulus
        return self.fact[n] * self.invfact[r] % m * self.invfact[n - r] % m

    def npr(self, n: int, r: int) -> int:
        """Return P(n, r) modulo the table's modulus; 0 when ``n < r``."""
        if n < r:
            return 0
        self._check(n, r)
        return self.ncr(n, r) * self.fact[r] % self.modulus