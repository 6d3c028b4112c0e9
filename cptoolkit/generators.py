"""Random test-input generators: integer arrays and labelled trees."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

ARRAY_VALUE_RANGE = (1, 1_000_000)
TREE_SIZE_RANGE = (2, 5)


def _rng(rng: random.Random | None) -> random.Random:
    return random.Random() if rng is None else rng


def random_int(a: int, b: int, rng: random.Random | None = None) -> int:
    """Return a random integer in ``[a, b]`` drawn from 64 random bits."""
    if b < a:
        raise ValueError(f"empty range [{a}, {b}]")
    return _rng(rng).getrandbits(64) % (b - a + 1) + a


def random_array_cases(t: int, n: int, rng: random.Random | None = None) -> str:
    """Return ``t`` test cases, each an ``n`` line and ``n`` random values."""
    if t < 0 or n < 0:
        raise ValueError(f"counts must be non-negative, got t={t}, n={n}")
    rng = _rng(rng)
    low, high = ARRAY_VALUE_RANGE
    lines = [str(t)]
    for _ in range(t):
        lines.append(str(n))
        if n:
            lines.append(" ".join(str(random_int(low, high, rng)) for _ in range(n)))
    return "\n".join(lines) + "\n"


def random_tree(n: int, rng: random.Random | None = None) -> list[tuple[int, int]]:
    """Return the ``n - 1`` edges of a random tree on vertices ``1 .. n``.

    Vertices are relabelled by a random permutation, edges come in random
    order, and each edge's endpoints are randomly swapped.
    """
    if n < 1:
        raise ValueError(f"a tree needs at least one vertex, got {n}")
    rng = _rng(rng)
    edges = [(random_int(1, i - 1, rng), i) for i in range(2, n + 1)]
    labels = list(range(1, n + 1))
    rng.shuffle(labels)
    rng.shuffle(edges)
    result = []
    for a, b in edges:
        if random_int(1, 50, rng) % 2:
            a, b = b, a
        result.append((labels[a - 1], labels[b - 1]))
    return result


def format_tree(n: int, edges: Sequence[tuple[int, int]]) -> str:
    """Return the vertex count line followed by one ``a b`` line per edge."""
    return "".join([f"{n}\n", *(f"{a} {b}\n" for a, b in edges)])


def main(argv: Sequence[str] | None = None) -> int:
    """Print a generated test input to standard output."""
    parser = argparse.ArgumentParser(description="Generate random test inputs.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    commands = parser.add_subparsers(dest="command", required=True)
    array = commands.add_parser("array", help="t cases of n random integers")
    array.add_argument("t", type=int)
    array.add_argument("n", type=int)
    tree = commands.add_parser("tree", help="a random labelled tree")
    tree.add_argument("--n", type=int, default=None, help="number of vertices")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        if args.command == "array":
            output = random_array_cases(args.t, args.n, rng)
        else:
            n = args.n if args.n is not None else random_int(*TREE_SIZE_RANGE, rng)
            output = format_tree(n, random_tree(n, rng))
    except ValueError as exc:
        parser.error(str(exc))
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())