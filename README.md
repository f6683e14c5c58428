# algobox

A library of well-known algorithm solutions written as plain Python
functions. They take built-in types (lists, strings, integers) and return
built-in types. It has no dependencies beyond the standard library.

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

### `algobox.text`

String problems.

- `zigzag_convert(s, num_rows)`: lay `s` out in a zigzag over `num_rows` rows
  and read it row by row.
- `find_substring(haystack, needle)`: index of the first occurrence, or -1
  (0 for an empty needle).
- `push_dominoes(dominoes)`: final state of a row of `L`, `R` and `.` dominoes.
- `maximum_69_number(num)`: turn the first 6 into a 9.
- `maximum_gain(s, x, y)`: best score from removing `"ab"` (worth `x`) and
  `"ba"` (worth `y`).
- `make_fancy_string(s)`: drop characters so no three in a row are equal.
- `largest_good_integer(num)`: largest run of three equal digits, or `""`.
- `is_valid_word(word)`: at least three ASCII letters or digits, with at least
  one vowel and one consonant.
- `kth_character(k)` and `kth_character_with_operations(k, operations)`: the
  k-th character (1-based) of the doubling "next letter" word games.

### `algobox.bits`

Powers and bitwise tricks.

- `is_power_of_two(n)`, `is_power_of_three(n)`, `is_power_of_four(n)`.
  `is_power_of_three` covers powers up to 3^19.
- `reordered_power_of_2(n)`: whether the digits of `n` rearrange into a power
  of two no larger than 10^9.
- `subarray_bitwise_ors(arr)`: number of distinct ORs over all subarrays.
- `count_max_or_subsets(nums)`: number of subsets whose OR equals the OR of
  all elements.
- `smallest_subarrays(nums)`: for each start index, the shortest subarray
  reaching the largest OR from there.
- `product_queries(n, queries)`: products, modulo 10^9+7, of ranges of the
  powers of two that make up `n`.
- `number_of_ways(n, x)`: ways, modulo 10^9+7, to write `n` as a sum of
  distinct x-th powers.

### `algobox.arrays`

Array scans, sliding windows and counting.

`jump`, `can_jump`, `majority_element`, `h_index`, `four_sum_count`,
`total_fruit`, `find_lucky`, `longest_subarray`, `maximum_unique_subarray`,
`minimum_difference`, `count_hill_valley`, `zero_filled_subarray`,
`maximum_length_parity`, `maximum_length_mod`, `max_subarrays`, `max_sum`.

### `algobox.grids`

Matrix problems.

- `pascals_triangle(num_rows)`: the first rows of Pascal's triangle.
- `diagonal_order(matrix)`: elements along anti-diagonals, alternating
  direction.
- `count_squares(matrix)` and `count_submatrices(mat)`: square and
  rectangular submatrices made only of ones.
- `minimum_sum_three_rectangles(grid)`: smallest total area of three disjoint
  rectangles covering every one.
- `max_collected_fruits(fruits)`: most fruit three children collect walking
  from three corners of a square grid to the fourth.

### `algobox.trees`

- `TreeNode(val, left, right)` and `ListNode(val, next)`: dataclass nodes.
- `flatten(root)`: rewire a binary tree in place into a right-leaning chain in
  preorder.
- `decimal_value(head)`: the integer whose binary digits are the list values.
- `minimum_score(nums, edges)`: smallest spread of component XORs after
  removing two edges from a tree.

### `algobox.scheduling`

Intervals, meetings and assignment.

- `MaxSegmentTree(values)`: `update(index, value)`, `first_at_least(value)`
  (leftmost index holding at least `value`, or -1) and `len()`.
- `max_events(events)`, `max_value(events, k)`,
  `max_total_fruits(fruits, start_pos, k)`, `most_booked(n, meetings)`,
  `match_players_and_trainers(players, trainers)`,
  `max_free_time(event_time, k, start_time, end_time)`,
  `max_free_time_movable(event_time, start_time, end_time)`,
  `unplaced_fruits(fruits, baskets)` and `unplaced_fruits_fast(fruits, baskets)`.
  The last two give the same result; the second uses `MaxSegmentTree`.

### `algobox.puzzles`

Games and probability.

- `FindSumPairs(nums1, nums2)`: `add(index, value)` changes an element of the
  second list; `count(total)` counts pairs summing to `total`.
- `judge_point_24(nums)`, `soup_servings(n)`, `new_21_game(n, k, max_pts)`,
  `earliest_and_latest(n, first_player, second_player)`,
  `possible_string_count(word, k)`.

## Errors

Input a function cannot work with (an empty list where an element is needed,
a non-positive row or room count, a non-square grid, and the like) raises
`ValueError`. `MaxSegmentTree.update` raises `IndexError` for an index out of
range.

## Examples

```python
from algobox.text import zigzag_convert, push_dominoes
from algobox.bits import is_power_of_two
from algobox.grids import pascals_triangle
from algobox.puzzles import FindSumPairs

zigzag_convert("PAYPALISHIRING", 3)   # "PAHNAPLSIIGYIR"
push_dominoes(".L.R...LR..L..")       # "LL.RR.LLRRLL.."
is_power_of_two(16)                   # True
pascals_triangle(4)                   # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]

pairs = FindSumPairs([1, 1, 2, 2, 2, 3], [1, 4, 5, 2, 5, 4])
pairs.count(7)                        # 8
pairs.add(3, 2)
pairs.count(8)                        # 2
```

```python
from algobox.scheduling import MaxSegmentTree

tree = MaxSegmentTree([3, 6, 1])
tree.first_at_least(4)   # 1
tree.update(1, 0)
tree.first_at_least(4)   # -1
```

## What it does not do

algobox is a library only. It has no command-line program. Every function
works on values in memory and reads or writes no files.