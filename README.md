# algokit

Classic algorithms as small, self-contained Python functions: two-pointer
and prefix-sum techniques on lists, heap-based selection, matrix traversal,
string checks, and operations on singly linked lists. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

Where an input cannot be processed (an empty list where a value is needed,
a `k` out of range, and so on) the functions raise `ValueError`.

## `algokit.arrays`

```python
from algokit.arrays import max_area, three_sum, subarray_sum, largest_rectangle_area

max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])        # 49
three_sum([-1, 0, 1, 2, -1, -4])             # [[-1, -1, 2], [-1, 0, 1]]
subarray_sum([1, 1, 1], 2)                   # 2
largest_rectangle_area([2, 1, 5, 6, 2, 3])   # 10
```

Also in this module:

- `max_profit(prices)`: best profit from one buy and one later sale.
- `max_profit_multiple(prices)`: best profit with any number of trades.
- `max_score(card_points, k)`: best total of `k` cards taken from either end.
- `majority_element(nums)`: the candidate left by a pairing-off vote.
- `two_sum(nums, target)`: indices of two different elements adding up to
  `target`, or `[]`.
- `find_duplicate(nums)`: the smallest repeated value, or `None`.
- `find_duplicates(nums)`: one value for each adjacent equal pair after
  sorting.
- `subarrays_div_by_k(nums, k)`: number of contiguous sub-lists whose sum is
  divisible by `k`.
- `find_min_diff(packets, m)`: least difference between the largest and
  smallest of `m` chosen packets.

These change the list they are given in place:

- `remove_duplicates(nums)` moves one value of each run of equal values to
  the front and returns how many there are.
- `move_zeroes(nums)` moves zeros to the end, keeping the other values in
  order.
- `sort_colors(nums)` writes the 0s, 1s and 2s in order at the front.
- `merge_sorted(nums1, m, nums2, n)` copies the first `n` of `nums2` after
  the first `m` of `nums1`, then sorts `nums1`.

## `algokit.strings`

```python
from algokit.strings import is_valid_parentheses, valid_palindrome, remaining_string

is_valid_parentheses("()[]{}")                 # True
valid_palindrome("abca")                       # True: one deletion is enough
remaining_string("Thisisdemostring", "i", 3)   # "ng"
```

`is_palindrome_range(s, i, j)` checks whether `s[i..j]`, both ends included,
reads the same backwards.

## `algokit.heaps`

```python
from algokit.heaps import find_kth_largest, top_k_frequent, kth_smallest

find_kth_largest([3, 2, 1, 5, 6, 4], 2)                     # 5
top_k_frequent([1, 1, 1, 2, 2, 3], 2)                       # [2, 1]
kth_smallest([[1, 5, 9], [10, 11, 13], [12, 13, 15]], 8)    # 13
```

`top_k_frequent` lists the chosen values least frequent first.

## `algokit.matrix`

`spiral_order(matrix)` returns the values read clockwise from the top-left
corner. `set_zeroes(matrix)` zeroes, in place, every row and column that
holds a zero.

## `algokit.linked`

`ListNode` is a singly linked list node with `val` and `next`; iterating
over a node yields it and every node after it. `build_list(values)` and
`list_values(head)` convert between Python lists and linked lists.

```python
from algokit.linked import build_list, list_values, middle_node, delete_duplicates

list_values(delete_duplicates(build_list([1, 1, 2, 3, 3])))   # [1, 2, 3]
middle_node(build_list([1, 2, 3, 4, 5])).val                  # 3
```

Also: `get_decimal_value` (read the list as binary digits), `has_cycle`,
`get_intersection_node` and `remove_elements`.

## `algokit.linked_medium`

`sort_list` (merge sort), `merge_sorted_lists`, `reverse_list`,
`reverse_k_group`, `partition`, `add_two_numbers` (digits least significant
first), `add_two_numbers_forward` (digits most significant first),
`odd_even_list` and `delete_all_duplicates` (values occurring exactly once,
sorted). `copy_random_list` deep-copies a list of `RandomNode` objects, which
also carry a `random` link.

## `algokit.schedule` and the `algokit-schedule` command

`plan_study(limits, total)` takes a `(min, max)` pair for each day and a
total. It returns `None` when the day maxima add up to less than the total.
Otherwise it returns the hours for each day: the hours still to study start
at the first day's maximum; a day whose limits hold that number studies all
of it, and the hours still to study then become the total less what has been
studied so far; any other day gets 0. `format_plan(plan)` renders `NO`, or
`YES` followed by a line of the daily hours.

`algokit-schedule` reads the day count, the total and one `min max` pair per
day from standard input and prints the formatted plan:

```
printf '2 5\n0 1\n3 5\n' | algokit-schedule
```

prints `YES` and then `1 4 `. Input that is not made of integers, or holds
fewer pairs than the day count, is reported on standard error and the
command exits with status 1.