"""Array scans: reachability, selection, prefix sums and sliding windows."""

import heapq
from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate, chain, cycle, islice

MODULUS = 10**9 + 7


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable from index 0.

    Each value is the longest jump allowed from its position.
    """
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def can_reach(arr: Sequence[int], start: int) -> bool:
    """Tell whether a zero can be reached from ``start``.

    From index ``i`` a move goes to ``i + arr[i]`` or ``i - arr[i]``.
    """
    size = len(arr)
    if not 0 <= start < size:
        raise ValueError(f"start {start} is outside the array")
    seen = {start}
    queue = deque([start])
    while queue:
        index = queue.popleft()
        jump = arr[index]
        if jump == 0:
            return True
        for target in (index + jump, index - jump):
            if 0 <= target < size and target not in seen:
                seen.add(target)
                queue.append(target)
    return False


def find_kth_largest(arr: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value (1-based, duplicates counted)."""
    if not 1 <= k <= len(arr):
        raise ValueError(f"k must lie between 1 and {len(arr)}")
    return heapq.nlargest(k, arr)[-1]


def num_of_subarrays(arr: Iterable[int]) -> int:
    """Count contiguous subarrays with an odd sum, modulo 10**9 + 7."""
    odd_prefixes, even_prefixes = 0, 1
    parity = 0
    result = 0
    for value in arr:
        parity ^= value & 1
        if parity:
            result += even_prefixes
            odd_prefixes += 1
        else:
            result += odd_prefixes
            even_prefixes += 1
    return result % MODULUS


def max_absolute_sum(nums: Iterable[int]) -> int:
    """Return the largest absolute sum of any (possibly empty) subarray."""
    prefixes = list(accumulate(nums, initial=0))
    return max(prefixes) - min(prefixes)


def pivot_array(nums: Iterable[int], pivot: int) -> list[int]:
    """Stable three-way partition: values below, equal to, then above ``pivot``."""
    below: list[int] = []
    equal: list[int] = []
    above: list[int] = []
    for value in nums:
        if value < pivot:
            below.append(value)
        elif value == pivot:
            equal.append(value)
        else:
            above.append(value)
    return below + equal + above


def apply_operations(nums: Sequence[int]) -> list[int]:
    """Double-and-zero equal neighbours left to right, then shift zeros to the end."""
    values = list(nums)
    for i in range(len(values) - 1):
        if values[i] == values[i + 1]:
            values[i] *= 2
            values[i + 1] = 0
    nonzero = [value for value in values if value != 0]
    return nonzero + [0] * (len(values) - len(nonzero))


def merge_arrays(
    nums1: Iterable[Sequence[int]], nums2: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Merge ``[id, value]`` pairs, summing values per id, ordered by id."""
    totals: defaultdict[int, int] = defaultdict(int)
    for key, value in chain(nums1, nums2):
        totals[key] += value
    return [[key, totals[key]] for key in sorted(totals)]


def find_missing_and_repeated_values(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return ``[repeated, missing]`` for an n-by-n grid meant to hold 1..n*n.

    ``repeated`` is 0 when no value appears exactly twice.
    """
    size = len(grid)
    counts = Counter(chain.from_iterable(grid))
    missing = None
    repeated = 0
    for number in range(1, size * size + 1):
        if number not in counts:
            missing = number
        elif counts[number] == 2:
            repeated = number
    if missing is None:
        raise ValueError("no value is missing from the grid")
    return [repeated, missing]


def number_of_alternating_groups(colors: Sequence[int], k: int) -> int:
    """Count windows of ``k`` circularly adjacent tiles whose colours alternate."""
    if not colors:
        raise ValueError("colors must not be empty")
    stop = max(1, len(colors) + k - 1)
    result = 0
    run = 1
    last = colors[0]
    for colour in islice(cycle(colors), 1, stop):
        if colour == last:
            run = 1
            continue
        run += 1
        if run >= k:
            result += 1
        last = colour
    return result


def minimum_recolors(blocks: str, k: int) -> int:
    """Fewest ``W`` blocks to repaint so that ``k`` consecutive blocks are ``B``."""
    if not 0 <= k <= len(blocks):
        raise ValueError(f"k must lie between 0 and {len(blocks)}")
    white = blocks[:k].count("W")
    best = white
    for leaving, entering in zip(blocks, blocks[k:]):
        white += (entering == "W") - (leaving == "W")
        best = min(best, white)
    return best