"""Randomised comparison of a brute-force solution against a fast one."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from cptoolkit.generators import random_int

DEFAULT_TRIALS = 10_000
DEFAULT_MAX_N = 10


@dataclass(frozen=True)
class Mismatch:
    """An input on which the two solutions disagreed."""

    values: tuple[int, ...]
    expected: Any
    actual: Any

    @property
    def n(self) -> int:
        return len(self.values)


def stress(
    brute: Callable[[list[int]], Any],
    fast: Callable[[list[int]], Any],
    trials: int = DEFAULT_TRIALS,
    max_n: int = DEFAULT_MAX_N,
    rng: random.Random | None = None,
) -> Mismatch | None:
    """Run both solutions on random arrays; return the first disagreement.

    Each trial draws a length ``n`` in ``[1, max_n]`` and ``n`` values in
    ``[1, n]``. Returns ``None`` when every trial agrees.
    """
    if max_n < 1:
        raise ValueError(f"max_n must be at least 1, got {max_n}")
    if rng is None:
        rng = random.Random()
    for _ in range(trials):
        n = random_int(1, max_n, rng)
        values = tuple(random_int(1, n, rng) for _ in range(n))
        expected = brute(list(values))
        actual = fast(list(values))
        if expected != actual:
            return Mismatch(values, expected, actual)
    return None


def format_report(mismatch: Mismatch) -> str:
    """Return the failure report: NO, the input size and values, then both answers."""
    values = "".join(f"{v} " for v in mismatch.values)
    return f"NO\n{mismatch.n}\n{values}\n{mismatch.expected}\n{mismatch.actual}\n"