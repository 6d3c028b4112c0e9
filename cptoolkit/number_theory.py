"""Prime sieves, factorisation and small integer helpers."""

from __future__ import annotations

import math

SIEVE_SIZE = 1_000_005


def _clear_multiples(flags: list[bool], start: int, step: int) -> None:
    flags[start::step] = [False] * len(range(start, len(flags), step))


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with multiplicity."""
    if n < 1:
        raise ValueError(f"cannot factorise {n}")
    result: list[int] = []
    while n % 2 == 0:
        result.append(2)
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            result.append(divisor)
            n //= divisor
        divisor += 2
    if n > 2:
        result.append(n)
    return result


def ncr(n: int, r: int) -> int:
    """Return the exact binomial coefficient C(n, r); 0 for invalid arguments."""
    if r > n or r < 0 or n < 0:
        return 0
    return math.comb(n, r)


def factors(n: int) -> list[int]:
    """Return all divisors of ``n``, each small divisor followed by its cofactor."""
    result: list[int] = []
    for d in range(1, math.isqrt(n) + 1 if n > 0 else 1):
        if n % d == 0:
            result.append(d)
            if n // d != d:
                result.append(n // d)
    return result


def sieve(limit: int = SIEVE_SIZE) -> list[bool]:
    """Return primality flags for the integers ``0 .. limit - 1``."""
    if limit < 0:
        raise ValueError(f"sieve size must be non-negative, got {limit}")
    flags = [True] * limit
    flags[:2] = [False] * min(limit, 2)
    for i in range(2, math.isqrt(limit) + 1):
        if i < limit and flags[i]:
            _clear_multiples(flags, i * i, i)
    return flags


def primes_up_to(n: int) -> list[int]:
    """Return every prime not greater than ``n``."""
    return [p for p, is_prime in enumerate(sieve(max(n + 1, 0))) if is_prime]


def segmented_sieve(low: int, high: int) -> list[bool]:
    """Return primality flags for the integers ``low .. high`` inclusive."""
    if low < 0:
        raise ValueError(f"lower bound must be non-negative, got {low}")
    if low > high:
        raise ValueError(f"empty range {low}..{high}")
    flags = [True] * (high - low + 1)
    for p in primes_up_to(math.isqrt(high)):
        start = max(p * p, -(-low // p) * p)
        _clear_multiples(flags, start - low, p)
    for value in range(low, min(2, high + 1)):
        flags[value - low] = False
    return flags


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``."""
    return a * b // math.gcd(a, b)


def ceil_div(x: int, y: int) -> int:
    """Return ``x / y`` rounded up."""
    return -(-x // y)


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` below 2 gives 1."""
    return math.factorial(n) if n >= 2 else 1


def is_integer(x: float) -> bool:
    """Return whether ``x`` has no fractional part (infinities count as whole)."""
    value = float(x)
    return math.isinf(value) or value.is_integer()