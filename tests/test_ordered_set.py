import pytest
from hypothesis import given
from hypothesis import strategies as st

from cptoolkit.ordered_set import OrderedSet


def test_keeps_distinct_sorted_values():
    s = OrderedSet([5, 1, 3, 1])
    assert list(s) == [1, 3, 5]
    assert len(s) == 3


def test_add_ignores_duplicates():
    s = OrderedSet()
    s.add(2)
    s.add(2)
    assert len(s) == 1
    assert 2 in s


def test_discard():
    s = OrderedSet([1, 2])
    s.discard(1)
    s.discard(42)
    assert list(s) == [2]
    assert 1 not in s


def test_find_by_order_and_order_of_key():
    s = OrderedSet([10, 20, 30])
    assert s.find_by_order(0) == 10
    assert s.find_by_order(2) == 30
    assert s.order_of_key(20) == 1
    assert s.order_of_key(25) == 2
    assert s.order_of_key(5) == 0


@pytest.mark.parametrize("k", [-1, 3])
def test_find_by_order_out_of_range(k):
    with pytest.raises(IndexError):
        OrderedSet([1, 2, 3]).find_by_order(k)


@given(st.lists(st.integers(-50, 50)))
def test_rank_round_trip(values):
    s = OrderedSet(values)
    assert list(s) == sorted(set(values))
    for k in range(len(s)):
        assert s.order_of_key(s.find_by_order(k)) == k