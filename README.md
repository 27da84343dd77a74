# algokit

A small library of classic algorithm routines written in plain Python with no
third-party dependencies. Every routine is an ordinary function that takes
Python lists, strings and integers and returns a new value; inputs are not
modified. Invalid input (an empty grid, a negative size, unbalanced brackets
and the like) raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.sorting`

- `sort_array(nums)`: stable merge sort, returns a new list.
- `count_smaller(nums)`: for each position, how many strictly smaller values
  lie to its right.
- `top_k_frequent(nums, k)`: the `k` most frequent values, ties going to the
  larger value.
- `remove_duplicates(nums)`: sorted values, each kept at most twice.
- `sum_subseq_widths(nums)`: sum of `max - min` over all non-empty
  subsequences, modulo 1e9+7.
- `group_anagrams(strs)`: words grouped by anagram, in first-seen order.

### `algokit.strings`

- `first_uniq_char(s)`, `decode_string(s)`, `compress(chars)`
- `find_lus_length(a, b)`, `find_lus_length_many(strs)`
- `find_min_difference(time_points)` for `HH:MM` times
- `full_justify(words, max_width)`
- `can_transform(start, result)` for the `XL -> LX`, `RX -> XR` moves
- `num_matching_subseq(s, words)`
- `find_replace_string(s, indices, sources, targets)`
- `find_and_replace_pattern(words, pattern)`
- `orderly_queue(s, k)`
- `num_decodings(s)` for digit strings read as `1 -> A` ... `26 -> Z`
- `longest_subsequence(words, groups)`

### `algokit.grids`

- `maximum_safeness_factor(grid)`, `swim_in_water(grid)` on square grids
- `longest_increasing_path(matrix)`
- `pacific_atlantic(heights)`
- `count_battleships(board)`
- `unique_paths(m, n)`, `min_path_sum(grid)`
- `word_exists(board, word)`
- `is_valid_sudoku(board)` on a 9x9 board of digits and `'.'`

### `algokit.trees`

- `TreeNode(val=0, left=None, right=None)`: a dataclass binary tree node.
- `rob(root)`: largest sum of node values with no two picked nodes directly
  linked.
- `construct_from_pre_post(preorder, postorder)`: rebuild a tree of distinct
  values; a lone child is placed on the left.

### `algokit.combinatorics`

- `combination_sum4(nums, target)`, `can_partition(nums)`
- `check_record(n)` (modulo 1e9+7)
- `split_array_same_average(nums)`, `tallest_billboard(rods)`
- `my_pow(x, n)` by repeated squaring
- `solve_n_queens(n)`, `subsets(nums)`, `gray_code(n)`
- `max_containers(n, w, max_weight)`, `min_sensors(n, m, k)`

## Examples

```python
from algokit.sorting import count_smaller, sort_array
from algokit.strings import compress, decode_string
from algokit.grids import unique_paths
from algokit.trees import TreeNode, rob
from algokit.combinatorics import gray_code, solve_n_queens

sort_array([5, 2, 3, 1])          # [1, 2, 3, 5]
count_smaller([5, 2, 6, 1])       # [2, 1, 1, 0]

decode_string("3[a2[c]]")         # "accaccacc"
compress(list("aabbccc"))         # ['a', '2', 'b', '2', 'c', '3']

unique_paths(3, 7)                # 28

root = TreeNode(3, TreeNode(2, None, TreeNode(3)), TreeNode(3, None, TreeNode(1)))
rob(root)                         # 7

len(solve_n_queens(4))            # 2
gray_code(2)                      # [0, 1, 3, 2]
```

## What the package does not do

algokit offers stateless functions only. It has no stateful data structures
(no range tracker, booking calendar, streaming k-th largest, run-length
iterator or weighted random picker), no general graph routines or union-find,
no interval merging, and no binary-search or jump-game array routines. It has
no command-line interface.