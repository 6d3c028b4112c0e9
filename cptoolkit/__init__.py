"""Algorithms, data structures and test-data helpers for competitive programming."""

__version__ = "0.1.0"

__all__ = [
    "debug",
    "dsu",
    "generators",
    "graph",
    "hashing",
    "modular",
    "number_theory",
    "ordered_set",
    "sequences",
    "stress",
    "tries",
]