import pytest
from hypothesis import given
from hypothesis import strategies as st

from cptoolkit.hashing import PRIMES, RollingHash, SplitMixHasher, splitmix64


def test_splitmix64_known_first_output():
    assert splitmix64(0) == 0xE220A8397B1DCDAF


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_splitmix64_stays_in_64_bits(x):
    assert 0 <= splitmix64(x) < 2**64


def test_hasher_adds_seed():
    hasher = SplitMixHasher(seed=5)
    assert hasher(10) == splitmix64(15)
    assert hasher.seed == 5


def test_hasher_wraps_negative_keys():
    hasher = SplitMixHasher(seed=0)
    assert hasher(-1) == splitmix64(2**64 - 1)


def test_single_letter_hash():
    assert RollingHash("a").get_hash(0, 0) == (1, 1)


def test_hash_values_below_primes():
    h = RollingHash("zzzzzzzz").get_hash(0, 7)
    assert all(0 <= v < p for v, p in zip(h, PRIMES))


def test_repeated_substrings_match():
    rh = RollingHash("abcabc")
    assert rh.get_hash(0, 2) == rh.get_hash(3, 5)
    assert rh.compare(0, 2, 3, 5) is True
    assert rh.compare(3, 5, 0, 2) is True
    assert rh.compare(0, 1, 1, 2) is False


@given(st.text(alphabet="abcd", min_size=1, max_size=20), st.data())
def test_substring_hash_matches_fresh_hash(s, data):
    left = data.draw(st.integers(0, len(s) - 1))
    right = data.draw(st.integers(left, len(s) - 1))
    sub = s[left : right + 1]
    assert RollingHash(s).get_hash(left, right) == RollingHash(sub).get_hash(
        0, len(sub) - 1
    )


@given(st.text(alphabet="ab", min_size=2, max_size=12), st.data())
def test_compare_agrees_with_equality(s, data):
    length = data.draw(st.integers(1, len(s)))
    l1 = data.draw(st.integers(0, len(s) - length))
    l2 = data.draw(st.integers(0, len(s) - length))
    rh = RollingHash(s)
    same = s[l1 : l1 + length] == s[l2 : l2 + length]
    assert rh.compare(l1, l1 + length - 1, l2, l2 + length - 1) == same


@pytest.mark.parametrize("left,right", [(-1, 0), (0, 3), (2, 1)])
def test_bad_range_rejected(left, right):
    with pytest.raises(IndexError):
        RollingHash("abc").get_hash(left, right)