"""Permutation generation and lexicographic sequence construction."""

from collections import Counter
from collections.abc import Iterator, MutableSequence, Sequence
from itertools import islice, permutations


def _advance(arr: MutableSequence[int]) -> bool:
    """Step ``arr`` to its next permutation in place.

    Returns False, leaving ``arr`` sorted ascending, if it was already the
    last permutation.
    """
    n = len(arr)
    pivot = next((i for i in range(n - 2, -1, -1) if arr[i] < arr[i + 1]), None)
    if pivot is None:
        arr.reverse()
        return False
    swap = next(i for i in range(n - 1, pivot, -1) if arr[i] > arr[pivot])
    arr[pivot], arr[swap] = arr[swap], arr[pivot]
    arr[pivot + 1 :] = arr[pivot + 1 :][::-1]
    return True


def next_permutation(arr: MutableSequence[int]) -> None:
    """Rearrange ``arr`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending) one.
    """
    _advance(arr)


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, by position, in index order."""
    return [list(p) for p in permutations(nums)]


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ordering of ``nums`` in ascending lexicographic order."""
    current = sorted(nums)
    result = [list(current)]
    while _advance(current):
        result.append(list(current))
    return result


def num_tile_possibilities(tiles: str) -> int:
    """Count the distinct non-empty sequences that can be spelled with ``tiles``."""
    counts = list(Counter(tiles).values())

    def build() -> int:
        ways = 0
        for i, remaining in enumerate(counts):
            if remaining:
                counts[i] -= 1
                ways += 1 + build()
                counts[i] += 1
        return ways

    return build()


def construct_distanced_sequence(n: int) -> list[int]:
    """Return the lexicographically largest sequence in which 1 occurs once and
    every ``i`` in ``2..n`` occurs twice, its two occurrences ``i`` apart."""
    if n < 1:
        raise ValueError("n must be at least 1")
    size = 2 * n - 1
    result = [0] * size
    used = [False] * (n + 1)

    def place(pos: int) -> bool:
        if pos == size:
            return True
        if result[pos]:
            return place(pos + 1)
        for value in range(n, 0, -1):
            if used[value]:
                continue
            if value == 1:
                used[1] = True
                result[pos] = 1
                if place(pos + 1):
                    return True
                used[1] = False
                result[pos] = 0
                continue
            partner = pos + value
            if partner < size and result[partner] == 0:
                used[value] = True
                result[pos] = result[partner] = value
                if place(pos + 1):
                    return True
                used[value] = False
                result[pos] = result[partner] = 0
        return False

    place(0)
    return result


def _happy_strings(n: int) -> Iterator[str]:
    """Yield the strings over ``abc`` of length ``n`` with no equal neighbours,
    in lexicographic order."""

    def extend(prefix: str) -> Iterator[str]:
        if len(prefix) == n:
            yield prefix
            return
        for ch in "abc":
            if not prefix or prefix[-1] != ch:
                yield from extend(prefix + ch)

    return extend("")


def get_happy_string(n: int, k: int) -> str:
    """Return the ``k``-th (1-based) happy string of length ``n``, or ``""``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    return next(islice(_happy_strings(n), k - 1, None), "")


def smallest_number(pattern: str) -> str:
    """Return the smallest digit string following an ``I``/``D`` pattern.

    Each character other than ``I`` is treated as a decrease.
    """
    n = len(pattern)
    stack: list[int] = []
    digits: list[int] = []
    for value in range(1, n + 2):
        stack.append(value)
        if value == n + 1 or pattern[value - 1] == "I":
            digits.extend(reversed(stack))
            stack.clear()
    return "".join(map(str, digits))