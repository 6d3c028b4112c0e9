# cptoolkit

A collection of algorithms, data structures and test-data helpers for
competitive programming.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `cptoolkit.modular`: modular arithmetic (`powmod`, `mod_inverse`,
  `add_mod`, `sub_mod`, `mul_mod`, `div_mod`, `ncr_mod`), all defaulting to
  the modulus `MOD = 1_000_000_007`, and a precomputed `Combinatorics`
  table of factorials and inverse factorials with `ncr` and `npr`.
- `cptoolkit.number_theory`: `prime_factors`, `factors`, `ncr` (exact),
  `sieve`, `primes_up_to`, `segmented_sieve`, `lcm`, `ceil_div`,
  `factorial`, `is_integer`.
- `cptoolkit.sequences`: `max_subarray_sum` (Kadane), `binary_search`
  (returns -1 when the key is absent), `suffixes`, `sort_by_second`.
- `cptoolkit.dsu`: `DSU`, a disjoint-set union over `0 .. n - 1` with path
  compression and union by size; `merge` returns `False` when the two
  elements were already in one set.
- `cptoolkit.tries`: `Trie` for lowercase words (`insert`, `search`,
  `starts_with`) and `BitTrie`, a multiset of 32-bit integers answering
  `find_max_xor` queries.
- `cptoolkit.graph`: an undirected `Graph` whose `add` takes 1-based
  vertices and an optional edge cost, and whose `dfs` takes a 0-based
  vertex and returns the newly visited vertices in order; plus `in_grid`
  for bounds checks on 2-D grids and the `MOVES`/`DIRECTIONS` step tables.
- `cptoolkit.ordered_set`: `OrderedSet` with `find_by_order` and
  `order_of_key`.
- `cptoolkit.hashing`: `splitmix64`, a seeded `SplitMixHasher`, and a
  double-modulus `RollingHash` with `get_hash` and `compare` over
  inclusive ranges of a lowercase string.
- `cptoolkit.debug`: `format_value`, `format_debug`, `debug`,
  `case_prefix`, `format_vector`. `debug` writes to standard error and
  stays silent when the `ONLINE_JUDGE` environment variable is set.
- `cptoolkit.generators`: random test-data generators (`random_int`,
  `random_array_cases`, `random_tree`, `format_tree`) and the `main`
  behind the `cptoolkit-gen` command.
- `cptoolkit.stress`: `stress` runs a brute-force and a fast solution
  side by side on random arrays and returns a `Mismatch` when they
  disagree (or `None` when they never do); `format_report` renders it.

## Examples

```python
from cptoolkit.modular import Combinatorics, powmod
from cptoolkit.number_theory import prime_factors
from cptoolkit.tries import BitTrie

comb = Combinatorics(10, 1_000_000_007)
print(comb.ncr(10, 3))          # 120
print(powmod(2, 10, 1000))      # 24
print(prime_factors(60))        # [2, 2, 3, 5]

trie = BitTrie()
for x in (3, 10, 5):
    trie.insert(x)
print(trie.find_max_xor(8))     # 13
```

Stress-testing two solutions:

```python
from cptoolkit.stress import stress, format_report

def brute(values):
    return max(values)

def fast(values):
    return sorted(values)[-1]

mismatch = stress(brute, fast, trials=1000, max_n=10)
if mismatch is not None:
    print(format_report(mismatch))
```

## Command line

`cptoolkit-gen` prints random test data to standard output:

```
cptoolkit-gen array 3 5            # 3 cases of 5 integers in [1, 1000000]
cptoolkit-gen tree --n 6           # a random labelled tree on 6 vertices
cptoolkit-gen --seed 42 tree       # tree of 2 to 5 vertices, reproducible
```

Run `cptoolkit-gen --help` for all options.

## What it does not do

`stress` compares two Python callables; it does not compile or run
solution programs, nor read or write input files. The package offers no
solution skeleton or input-reading loop: it is a library to import.