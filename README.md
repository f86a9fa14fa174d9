# algobox

A collection of classic algorithms and small data structures, written as
plain functions over Python lists, nested lists and simple node classes.
It has no dependencies beyond the standard library.

## Modules

### `algobox.linked`

Singly linked lists built from `ListNode` (fields `val` and `next`; nodes
compare by identity).

- `from_values(values)` builds a list and returns its head;
  `to_values(head)` reads an acyclic list back into a Python list.
- `add_two_numbers(l1, l2)` adds two numbers stored as reversed digit lists.
- `remove_nth_from_end(head, n)` unlinks the n-th node from the end; raises
  `ValueError` when `n` is below 1 or longer than the list.
- `reverse_k_group(head, k)` reverses groups of `k` nodes, leaving a short
  final group as it is.
- `rotate_right(head, k)`, `reverse_list(head)`, `sort_list(head)` (merge
  sort), `merge_two_lists(list1, list2)`, `odd_even_list(head)`.
- `has_cycle(head)` and `detect_cycle(head)` (the node where the cycle
  starts, or `None`).
- `get_intersection_node(head_a, head_b)` returns the first shared node.
- `is_palindrome_list(head)` checks the values and leaves the list intact.
- `middle_node(head)` returns the second middle for even lengths;
  `delete_middle(head)` unlinks the node at index `len // 2`.
- `delete_node(node)` removes a node given only that node; a tail node is
  left alone.

These functions relink the nodes they are given rather than copying them.

### `algobox.random_list`

`RandomNode` (fields `val`, `next`, `random`) and `copy_random_list(head)`,
which returns a deep copy and leaves the original list unchanged.

### `algobox.searching`

- On sorted sequences: `binary_search`, `search_insert`, `search_range`
  (a `(first, last)` tuple, or `(-1, -1)`), `first_occurrence`,
  `last_occurrence`, `single_non_duplicate`, `find_kth_positive`,
  `find_median_sorted_arrays` (raises `ValueError` when both are empty).
- On rotated sorted sequences: `search_rotated`,
  `search_rotated_with_duplicates`, `find_min_rotated`.
- `find_peak_element(nums)` returns the index of a peak.
- On matrices: `search_matrix` (rows sorted end to end) and
  `search_sorted_matrix` (rows and columns each sorted).
- Search over the answer: `min_eating_speed(piles, h)`,
  `ship_within_days(weights, days)`, `smallest_divisor(nums, threshold)`,
  `min_days(bloom_day, m, k)` (-1 when impossible) and `split_array(nums, k)`.

### `algobox.arrays`

`two_sum` (a tuple of indices, or `(-1, -1)`), `three_sum`, `four_sum`,
`max_area`, `max_sub_array`, `merge_intervals`, `max_profit`,
`longest_consecutive`, `single_number`, `majority_element` (-1 when there
is none), `majority_elements`, `missing_number`,
`find_max_consecutive_ones`, `subarray_sum`, `len_longest_fib_subseq`,
`num_equiv_domino_pairs`, `num_odd_sum_subarrays` (modulo 1 000 000 007),
`max_absolute_sum` and `rearrange_by_sign` (raises `ValueError` unless the
counts of negative and non-negative values match).

These change the list they are given: `remove_duplicates`,
`next_permutation`, `sort_colors`, `merge_sorted`, `rotate_array` and
`move_zeroes`.

### `algobox.matrix`

`rotate_image` (90 degrees clockwise, in place), `spiral_order`,
`set_zeroes` (in place) and `row_and_maximum_ones`, which returns a
`(row, count)` tuple.

### `algobox.integers`

`reverse_integer` (0 when the result leaves the 32-bit range),
`is_palindrome_number`, `pascal_row`, `generate_pascal`, `fib` and
`num_tilings` (modulo 1 000 000 007).

### `algobox.text`

`is_valid_parentheses`, `is_palindrome` (ASCII letters and digits, case
ignored) and `find_different_binary_string`.

### `algobox.stacks`

`MinStack` with `push`, `pop`, `top` and `get_min`; the last three raise
`IndexError` on an empty stack. Also the monotonic-stack helpers
`next_smaller`, `prev_smaller` and `largest_rectangle_area`.

### `algobox.trees`

`TreeNode` and `FindElements`, which restores a contaminated binary tree
(root 0, children `2x + 1` and `2x + 2`) and answers `find(target)`.

## Examples

```python
from algobox.arrays import two_sum, three_sum
from algobox.linked import from_values, to_values, reverse_k_group
from algobox.stacks import MinStack

two_sum([2, 7, 11, 15], 9)          # (0, 1)
three_sum([-1, 0, 1, 2, -1, -4])    # [[-1, -1, 2], [-1, 0, 1]]

head = from_values([1, 2, 3, 4, 5])
to_values(reverse_k_group(head, 2)) # [2, 1, 4, 3, 5]

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                     # 1
```

## What it does not do

The package is a library of functions only: it has no command-line tool
and reads or writes no files.

## Running the tests

```
pip install -e ".[test]"
pytest
```