# algokit

Plain-Python implementations of well-known algorithm problems, grouped by
technique. The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.nodes` | `ListNode`, `TreeNode`, `RandomNode`, and helpers to build and read them: `list_from_values`, `list_to_values`, `tree_from_level_order`, `tree_to_level_order` |
| `algokit.linked_lists` | reversal (`reverse_list`, `reverse_between`, `reverse_k_group`), cycle detection (`has_cycle`, `detect_cycle`, `detect_cycle_floyd`), merging (`merge_two_lists`, `merge_k_lists`), `sort_list`, `swap_pairs`, `add_two_numbers`, `remove_nth_from_end`, `remove_elements`, palindrome checks, `get_intersection_node`, deep copy with random pointers (`copy_random_list`) |
| `algokit.arrays` | `two_sum`, `group_anagrams`, `longest_consecutive`, `max_area`, `trap`, `max_sub_array`, `merge_intervals`, `rotate`, `move_zeroes`, `first_missing_positive`, `product_except_self`, `find_repeat_number`, `remove_element`, `remove_duplicates`, `majority_element` |
| `algokit.sliding_window` | `find_anagrams`, `max_sliding_window`, `subarray_sum`, `min_window`, `min_sub_array_len`, `length_of_longest_substring` |
| `algokit.trees` | traversals, `level_order`, `max_depth`, `is_same_tree`, `is_symmetric`, `invert_tree`, `is_valid_bst`, `kth_smallest`, `right_side_view`, `flatten`, `build_tree`, path sums, `lowest_common_ancestor`, `max_path_sum` |
| `algokit.search` | `first_true` (binary search over a monotone predicate), `search_insert`, `search_rotated`, `find_min`, `find_median_sorted_arrays` |
| `algokit.structures` | `LRUCache`, `MinStack`, `Trie`, `Codec` (preorder tree text), `bfs_serialize` / `bfs_deserialize`, `is_valid_parentheses` |
| `algokit.heaps` | `find_kth_largest`, `find_kth_largest_quickselect`, `top_k_frequent`, `k_smallest_pairs`, `quick_sort` |
| `algokit.dynamic` | `coin_change`, `change`, `climb_stairs`, `max_profit`, `jump`, `can_jump`, `h_index`, `longest_common_subsequence`, `length_of_lis`, `max_product`, `can_partition`, `word_break`, `num_squares`, `longest_palindrome`, `unique_paths`, `min_path_sum`, `generate_pascal`, and more |
| `algokit.backtracking` | `permute`, `subsets`, `combination_sum`, `combination_sum2`, `letter_combinations`, `generate_parenthesis`, `exist` (word search), `partition_palindromes` |
| `algokit.grids` | `num_islands`, `find_judge`, `can_finish`, `oranges_rotting`, `search_matrix`, `search_matrix_flat`, `rotate_matrix`, `spiral_order`, `partition_labels`, `maximal_square` |

## Examples

```python
from algokit.nodes import list_from_values, list_to_values
from algokit.linked_lists import reverse_list

head = list_from_values([1, 2, 3])
print(list_to_values(reverse_list(head)))  # [3, 2, 1]
```

```python
from algokit.structures import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)       # 1
cache.put(3, 3)    # evicts key 2
cache.get(2)       # -1
```

```python
from algokit.nodes import tree_from_level_order
from algokit.trees import level_order

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
print(level_order(root))  # [[3], [9, 20], [15, 7]]
```

```python
from algokit.dynamic import coin_change
from algokit.backtracking import generate_parenthesis

coin_change([1, 2, 5], 11)   # 3
generate_parenthesis(2)      # ['(())', '()()']
```

## Notes

- `ListNode`, `TreeNode` and `RandomNode` compare by identity, not by value;
  use `list_to_values` or `tree_to_level_order` to compare contents.
- Some functions rearrange their input in place, as the classic versions of
  these problems do (for example `move_zeroes`, `rotate`, `sort_colors`,
  `quick_sort`, `rotate_matrix`, and the linked-list and tree functions that
  relink nodes); pass a copy if you need to keep the original.
- Invalid arguments, such as an empty input where a value is required or a
  `k` out of range, raise `ValueError`; `MinStack` raises `IndexError` when
  read or popped while empty.

## What it does not do

`algokit` is a library only: it has no command-line tool and nothing to run
on its own. Import the functions and classes you need.