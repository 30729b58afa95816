"""Small number-theoretic routines."""

import math
from itertools import pairwise


def check_powers_of_three(n: int) -> bool:
    """Tell whether ``n`` is a sum of distinct powers of three."""
    while n > 1:
        if n % 3 == 2:
            return False
        n //= 3
    return True


def closest_primes(left: int, right: int) -> list[int]:
    """Return the first pair of primes in ``[left, right]`` with the smallest gap.

    Returns ``[-1, -1]`` when the range holds fewer than two primes.
    """
    if right < 2:
        return [-1, -1]
    sieve = bytearray([1]) * (right + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(right) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, right + 1, i)))
    primes = [p for p in range(max(left, 2), right + 1) if sieve[p]]
    if len(primes) < 2:
        return [-1, -1]
    first, second = min(pairwise(primes), key=lambda pair: pair[1] - pair[0])
    return [first, second]


def colored_cells(n: int) -> int:
    """Number of cells coloured after ``n`` minutes of diamond growth."""
    if n <= 1:
        return 1
    return 1 + 2 * n * (n - 1)