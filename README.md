# algosolutions

Plain-Python solutions to well-known algorithm problems, grouped by theme.
The package has no third-party dependencies.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `algosolutions.sums`

- `two_sum(nums, target)`: indices of the first pair adding up to `target`, or `[]`.
- `two_sum_sorted(numbers, target)`: the same with 1-based indices.
- `three_sum(nums)`: every distinct sorted triple summing to zero.
- `three_sum_closest(nums, target)`: the triple sum closest to `target`;
  raises `ValueError` for fewer than three numbers.
- `four_sum(nums, target)`: every distinct sorted quadruple summing to `target`.
- `four_sum_count(nums1, nums2, nums3, nums4)`: number of index tuples, one per
  sequence, whose values sum to zero.
- `count_quadruplets(nums)`: number of index quadruples `a < b < c < d` with
  `nums[a] + nums[b] + nums[c] == nums[d]`.

### `algosolutions.permutations`

- `next_permutation(arr)`: rearranges a list in place into its next
  lexicographic permutation; the last one wraps around to ascending order.
- `permute(nums)`: every ordering, by position.
- `permute_unique(nums)`: every distinct ordering, in ascending lexicographic order.
- `num_tile_possibilities(tiles)`: number of distinct non-empty sequences that
  can be spelled with the given letters.
- `construct_distanced_sequence(n)`: the lexicographically largest sequence in
  which 1 occurs once and each `i` in `2..n` occurs twice, `i` positions apart.
- `get_happy_string(n, k)`: the `k`-th string over `abc` of length `n` with no
  equal neighbours, or `""` if there are fewer than `k`.
- `smallest_number(pattern)`: the smallest digit string following an `I`/`D` pattern.

### `algosolutions.dynamic`

- `unique_paths(m, n)`, `climb_stairs(n)`, `min_cost_climbing_stairs(cost)`
- `longest_palindrome_subseq(s)`, `len_longest_fib_subseq(arr)`
- `longest_common_subsequence(text1, text2)`, `shortest_common_supersequence(str1, str2)`

### `algosolutions.trees`

- `TreeNode(val, left, right)`: a dataclass with `inorder()`, `preorder()` and
  `postorder()` returning lists of values.
- `find_target(root, k)`: whether two nodes of a search tree sum to `k`.
- `construct_from_pre_post(preorder, postorder)`: builds a tree from both traversals.
- `recover_from_preorder(traversal)`: rebuilds a tree from a dash-depth string
  such as `"1-2--3"`; raises `ValueError` on malformed input.
- `FindElements(root)`: recovers a tree whose root holds 0 and whose node `x`
  has children `2x + 1` and `2x + 2`; answers `find(target)` and `target in finder`.

### `algosolutions.arrays`

- `can_jump(nums)`, `can_reach(arr, start)`, `find_kth_largest(arr, k)`
- `num_of_subarrays(arr)` (odd-sum subarrays, modulo `10**9 + 7`), `max_absolute_sum(nums)`
- `pivot_array(nums, pivot)`, `apply_operations(nums)`, `merge_arrays(nums1, nums2)`
- `find_missing_and_repeated_values(grid)`, `number_of_alternating_groups(colors, k)`,
  `minimum_recolors(blocks, k)`

### `algosolutions.numtheory`

- `check_powers_of_three(n)`, `closest_primes(left, right)` (`[-1, -1]` when
  fewer than two primes lie in range), `colored_cells(n)`

### `algosolutions.text`

- `find_different_binary_string(nums)`, `is_vowel(c)`, `count_of_substrings(word, k)`

Functions raise `ValueError` for arguments they cannot work with, such as an
out-of-range `k` or `start`.

## Examples

```python
from algosolutions.sums import two_sum, three_sum
from algosolutions.dynamic import longest_common_subsequence
from algosolutions.trees import recover_from_preorder, FindElements

two_sum([2, 7, 11, 15], 9)                  # [0, 1]
three_sum([-1, 0, 1, 2, -1, -4])            # [[-1, -1, 2], [-1, 0, 1]]
longest_common_subsequence("abcde", "ace")  # 3

root = recover_from_preorder("1-2--3--4-5--6--7")
root.preorder()                             # [1, 2, 3, 4, 5, 6, 7]

finder = FindElements(root)
finder.find(2)                              # True
7 in finder                                 # False
```

## What it does not do

This is a library of functions only: it has no command-line tool and reads no
input files. Call the functions from your own Python code.