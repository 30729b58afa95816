"""Dynamic-programming routines over grids, stairs and sequences."""

import math
from collections.abc import Sequence
from itertools import pairwise


def unique_paths(m: int, n: int) -> int:
    """Count monotone right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 1, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest cost to climb past the top of ``cost``.

    Climbing may start from step 0 or 1; each step taken costs its value.
    """
    if not cost:
        raise ValueError("cost must not be empty")
    two_back, one_back = 0, 0
    for earlier, later in pairwise(cost):
        two_back, one_back = one_back, min(one_back + later, two_back + earlier)
    return one_back


def longest_palindrome_subseq(s: str) -> int:
    """Return the length of the longest palindromic subsequence of ``s``."""
    n = len(s)
    if n == 0:
        return 0
    below = [0] * n
    for i in range(n - 1, -1, -1):
        row = [0] * n
        row[i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                row[j] = below[j - 1] + 2
            else:
                row[j] = max(below[j], row[j - 1])
        below = row
    return below[-1]


def len_longest_fib_subseq(arr: Sequence[int]) -> int:
    """Return the length of the longest Fibonacci-like subsequence, or 0."""
    position = {value: i for i, value in enumerate(arr)}
    lengths: dict[tuple[int, int], int] = {}
    best = 0
    for i, value in enumerate(arr):
        for j, previous in enumerate(arr[:i]):
            k = position.get(value - previous)
            if k is not None and k < j:
                length = lengths.get((k, j), 2) + 1
                lengths[j, i] = length
                best = max(best, length)
    return best if best >= 3 else 0


def _lcs_table(a: str, b: str) -> list[list[int]]:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, 1):
        for j, y in enumerate(b, 1):
            if x == y:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    return _lcs_table(text1, text2)[-1][-1]


def shortest_common_supersequence(str1: str, str2: str) -> str:
    """Return a shortest string having both inputs as subsequences."""
    table = _lcs_table(str1, str2)
    i, j = len(str1), len(str2)
    reversed_chars: list[str] = []
    while i > 0 and j > 0:
        if str1[i - 1] == str2[j - 1]:
            reversed_chars.append(str1[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            reversed_chars.append(str1[i - 1])
            i -= 1
        else:
            reversed_chars.append(str2[j - 1])
            j -= 1
    reversed_chars.extend(reversed(str1[:i]))
    reversed_chars.extend(reversed(str2[:j]))
    return "".join(reversed(reversed_chars))