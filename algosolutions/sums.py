"""Pair, triple and quadruple sum searches over integer sequences."""

from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import combinations


def _pairs_with_sum(values: Sequence[int], lo: int, target: int) -> Iterator[tuple[int, int]]:
    """Yield distinct pairs from sorted ``values[lo:]`` whose sum is ``target``."""
    hi = len(values) - 1
    while lo < hi:
        total = values[lo] + values[hi]
        if total < target:
            lo += 1
        elif total > target:
            hi -= 1
        else:
            yield values[lo], values[hi]
            lo += 1
            hi -= 1
            while lo < hi and values[lo] == values[lo - 1]:
                lo += 1
            while lo < hi and values[hi] == values[hi + 1]:
                hi -= 1


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Like :func:`two_sum`, but with 1-based indices."""
    seen: dict[int, int] = {}
    for index, value in enumerate(numbers):
        complement = target - value
        if complement in seen:
            return [seen[complement] + 1, index + 1]
        seen[value] = index
    return []


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sorted triple of values summing to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        result.extend([first, b, c] for b, c in _pairs_with_sum(values, i + 1, -first))
    return result


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three values that lies closest to ``target``."""
    values = sorted(nums)
    if len(values) < 3:
        raise ValueError("at least three numbers are required")
    best = 0
    best_diff: int | None = None
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        lo, hi = i + 1, len(values) - 1
        while lo < hi:
            total = first + values[lo] + values[hi]
            diff = abs(target - total)
            if best_diff is None or diff < best_diff:
                best, best_diff = total, diff
            if total < target:
                lo += 1
            elif total > target:
                hi -= 1
            else:
                return total
    return best


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruple of values summing to ``target``."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            rest = target - values[i] - values[j]
            result.extend(
                [values[i], values[j], c, d] for c, d in _pairs_with_sum(values, j + 1, rest)
            )
    return result


def four_sum_count(
    nums1: Sequence[int], nums2: Sequence[int], nums3: Sequence[int], nums4: Sequence[int]
) -> int:
    """Count index tuples, one from each sequence, whose values sum to zero."""
    pair_sums = Counter(a + b for a in nums1 for b in nums2)
    return sum(pair_sums[-(c + d)] for c in nums3 for d in nums4)


def count_quadruplets(nums: Sequence[int]) -> int:
    """Count index quadruples a < b < c < d with nums[a] + nums[b] + nums[c] == nums[d]."""
    return sum(1 for a, b, c, d in combinations(nums, 4) if a + b + c == d)