import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cptoolkit.number_theory import (
    ceil_div,
    factorial,
    factors,
    is_integer,
    lcm,
    ncr,
    prime_factors,
    primes_up_to,
    segmented_sieve,
    sieve,
)

SMALL_SIEVE = sieve(10_001)


@given(st.integers(1, 10_000))
def test_prime_factors_multiply_back(n):
    result = prime_factors(n)
    assert math.prod(result) == n
    assert result == sorted(result)
    assert all(SMALL_SIEVE[p] for p in result)


@given(st.integers(2, 10_000))
def test_prime_of_itself(n):
    if SMALL_SIEVE[n]:
        assert prime_factors(n) == [n]


def test_prime_factors_of_one_is_empty():
    assert prime_factors(1) == []


def test_prime_factors_rejects_zero():
    with pytest.raises(ValueError):
        prime_factors(0)


@given(st.integers(-3, 60), st.integers(-3, 60))
def test_ncr_exact(n, r):
    expected = math.comb(n, r) if 0 <= r <= n else 0
    assert ncr(n, r) == expected


def test_ncr_invalid_is_zero():
    assert ncr(3, 5) == 0
    assert ncr(-1, 0) == 0


def test_factors_order_fixed():
    assert factors(12) == [1, 12, 2, 6, 3, 4]


@given(st.integers(1, 100_000))
def test_factors_invariants(n):
    result = factors(n)
    assert len(result) == len(set(result))
    assert all(n % d == 0 for d in result)
    assert 1 in result and n in result
    assert all(n // d in result for d in result)


@given(st.integers(1, 10_000))
def test_factors_count_matches_prime_exponents(n):
    exponents = {}
    for p in prime_factors(n):
        exponents[p] = exponents.get(p, 0) + 1
    assert len(factors(n)) == math.prod(e + 1 for e in exponents.values())


def test_factors_of_non_positive_is_empty():
    assert factors(0) == []


def test_sieve_default_size():
    flags = sieve()
    assert len(flags) == 1_000_005
    assert flags[1_000_003]
    assert not flags[1_000_001]


@given(st.integers(0, 3000))
def test_sieve_consistent_with_factorisation(n):
    flags = sieve(n + 1)
    assert len(flags) == n + 1
    for value, flag in enumerate(flags):
        if value >= 2:
            assert flag == (prime_factors(value) == [value])
        else:
            assert not flag


def test_sieve_negative_rejected():
    with pytest.raises(ValueError):
        sieve(-1)


@given(st.integers(-2, 3000))
def test_primes_up_to_matches_sieve(n):
    primes = primes_up_to(n)
    assert primes == [p for p, f in enumerate(SMALL_SIEVE[: max(n + 1, 0)]) if f]


@given(st.integers(0, 5000), st.integers(0, 5000))
def test_segmented_sieve_matches_sieve(a, b):
    low, high = min(a, b), max(a, b)
    assert segmented_sieve(low, high) == SMALL_SIEVE[low : high + 1]


def test_segmented_sieve_bad_ranges():
    with pytest.raises(ValueError):
        segmented_sieve(10, 5)
    with pytest.raises(ValueError):
        segmented_sieve(-1, 5)


@given(st.integers(1, 10**6), st.integers(1, 10**6))
def test_lcm_properties(a, b):
    result = lcm(a, b)
    assert result % a == 0 and result % b == 0
    assert result * math.gcd(a, b) == a * b


@given(st.integers(0, 10**9), st.integers(1, 10**6))
def test_ceil_div_bounds(x, y):
    q = ceil_div(x, y)
    assert (q - 1) * y < x <= q * y or (x == 0 and q == 0)


def test_ceil_div_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        ceil_div(5, 0)


@given(st.integers(2, 60))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


@given(st.integers(-10, 1))
def test_factorial_small_is_one(n):
    assert factorial(n) == 1


@given(st.integers(-(10**9), 10**9))
def test_is_integer_whole_numbers(n):
    assert is_integer(float(n))
    assert not is_integer(n + 0.5)


def test_is_integer_special_values():
    assert is_integer(math.inf)
    assert not is_integer(math.nan)