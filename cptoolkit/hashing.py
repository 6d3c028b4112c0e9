"""SplitMix64 hashing and double polynomial rolling hashes of strings."""

from __future__ import annotations

import time

from cptoolkit.modular import mod_inverse, mul_mod, sub_mod

_MASK64 = (1 << 64) - 1

PRIMES = (1_000_000_009, 100_000_007)
BASE = 31


def splitmix64(x: int) -> int:
    """Return the SplitMix64 mix of the 64-bit value ``x``."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x ^ (x >> 31)


class SplitMixHasher:
    """Seeded SplitMix64 hash for integer keys."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = time.monotonic_ns() if seed is None else seed

    def __call__(self, x: int) -> int:
        return splitmix64((x + self.seed) & _MASK64)


class RollingHash:
    """Prefix hashes of a lowercase string under two prime moduli."""

    def __init__(self, s: str) -> None:
        self.s = s
        n = len(s)
        self.powers: list[list[int]] = []
        self.prefix: list[list[int]] = []
        for p in PRIMES:
            powers = [1] * (n + 1)
            for j in range(1, n + 1):
                powers[j] = BASE * powers[j - 1] % p
            prefix = []
            total = 0
            for ch, power in zip(s, powers):
                total = (total + (ord(ch) - ord("a") + 1) * power) % p
                prefix.append(total)
            self.powers.append(powers)
            self.prefix.append(prefix)

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < len(self.s):
            raise IndexError(f"range [{left}, {right}] outside 0..{len(self.s) - 1}")

    def _span(self, k: int, left: int, right: int) -> int:
        prefix = self.prefix[k]
        before = prefix[left - 1] if left > 0 else 0
        return sub_mod(prefix[right], before, PRIMES[k])

    def get_hash(self, left: int, right: int) -> tuple[int, ...]:
        """Return the hashes of ``s[left..right]`` (inclusive), normalised to start at power 0."""
        self._check(left, right)
        return tuple(
            mul_mod(self._span(k, left, right), mod_inverse(self.powers[k][left], p), p)
            for k, p in enumerate(PRIMES)
        )

    def compare(self, l1: int, r1: int, l2: int, r2: int) -> bool:
        """Return whether the inclusive ranges ``[l1, r1]`` and ``[l2, r2]`` hash equal."""
        self._check(l1, r1)
        self._check(l2, r2)
        if l1 > l2:
            l1, r1, l2, r2 = l2, r2, l1, r1
        return all(
            mul_mod(self._span(k, l1, r1), self.powers[k][l2 - l1], p)
            == self._span(k, l2, r2)
            for k, p in enumerate(PRIMES)
        )