import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolutions.dynamic import (
    climb_stairs,
    len_longest_fib_subseq,
    longest_common_subsequence,
    longest_palindrome_subseq,
    min_cost_climbing_stairs,
    shortest_common_supersequence,
    unique_paths,
)

small_text = st.text(alphabet="abc", max_size=9)


def test_unique_paths_example():
    assert unique_paths(3, 7) == 28


@given(st.integers(1, 12), st.integers(1, 12))
def test_unique_paths_symmetric(m, n):
    assert unique_paths(m, n) == unique_paths(n, m)


@given(st.integers(2, 12), st.integers(2, 12))
def test_unique_paths_recurrence(m, n):
    assert unique_paths(m, n) == unique_paths(m - 1, n) + unique_paths(m, n - 1)


@given(st.integers(1, 20))
def test_unique_paths_single_row(n):
    assert unique_paths(1, n) == 1


@pytest.mark.parametrize("m, n", [(0, 3), (3, 0)])
def test_unique_paths_rejects_empty_grid(m, n):
    with pytest.raises(ValueError):
        unique_paths(m, n)


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 1
    assert climb_stairs(1) == 1


@given(st.integers(2, 60))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_rejects_negative():
    with pytest.raises(ValueError):
        climb_stairs(-1)


def test_min_cost_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_single_step_is_free():
    assert min_cost_climbing_stairs([7]) == 0


@given(st.lists(st.integers(0, 100), min_size=1, max_size=30))
def test_min_cost_bounded_by_alternating_paths(cost):
    result = min_cost_climbing_stairs(cost)
    assert 0 <= result <= min(sum(cost[0::2]), sum(cost[1::2]))


def test_min_cost_rejects_empty():
    with pytest.raises(ValueError):
        min_cost_climbing_stairs([])


@given(small_text)
def test_palindrome_subseq_of_palindrome_is_whole(s):
    palindrome = s + s[::-1]
    assert longest_palindrome_subseq(palindrome) == len(palindrome)


@given(small_text)
def test_palindrome_subseq_equals_lcs_with_reverse(s):
    result = longest_palindrome_subseq(s)
    assert result == longest_common_subsequence(s, s[::-1])
    assert result == longest_palindrome_subseq(s[::-1])
    assert result <= len(s)


def test_palindrome_subseq_empty():
    assert longest_palindrome_subseq("") == 0


def test_fib_subseq_example():
    assert len_longest_fib_subseq([1, 2, 3, 4, 5, 6, 7, 8]) == 5


def test_fib_subseq_whole_fibonacci_run():
    run = [1, 2, 3, 5, 8, 13, 21]
    assert len_longest_fib_subseq(run) == len(run)


def test_fib_subseq_none_found():
    assert len_longest_fib_subseq([1, 2, 4, 8, 16]) == 0


@given(st.sets(st.integers(1, 60), max_size=12))
def test_fib_subseq_bounds(values):
    arr = sorted(values)
    result = len_longest_fib_subseq(arr)
    assert result == 0 or 3 <= result <= len(arr)


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


@given(small_text, small_text)
def test_scs_contains_both_and_is_shortest(a, b):
    result = shortest_common_supersequence(a, b)
    assert _is_subsequence(a, result)
    assert _is_subsequence(b, result)
    assert len(result) == len(a) + len(b) - longest_common_subsequence(a, b)


@given(small_text)
def test_scs_with_itself(a):
    assert shortest_common_supersequence(a, a) == a
    assert shortest_common_supersequence(a, "") == a


@given(small_text, small_text)
def test_lcs_symmetric_and_bounded(a, b):
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert result <= min(len(a), len(b))


@given(small_text, small_text)
def test_lcs_of_contained_string(a, b):
    assert longest_common_subsequence(a, a + b) == len(a)
    assert longest_common_subsequence(a, "") == 0