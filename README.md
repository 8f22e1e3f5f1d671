# codekata

A collection of small, well-known algorithm exercises written as plain
Python functions. There are no third-party dependencies.

The modules:

- `codekata.arrays`: two-sum, relative sort, running sums, concatenation,
  single number, duplicates, majority element, rotation, product except
  self, in-place compaction, merging sorted lists, search, plus-one,
  longest consecutive run, maximum products, summary ranges, nice
  subarrays, h-index and maximum beauty
- `codekata.strings`: palindromes, isomorphic strings, anagrams, the
  longest common prefix, substring search, the longest special substring
  occurring three times, Roman numerals
- `codekata.numbers`: reversing 32-bit integers, palindrome numbers,
  powers of two, ugly numbers, the maximum achievable number, climbing
  stairs
- `codekata.greedy`: stock profits, gas station, jump games, magnetic
  force between balls, job assignment, star graph centre, merging and
  inserting intervals, balloon arrows
- `codekata.linked_lists`: `ListNode` and operations on singly linked lists
- `codekata.trees`: `TreeNode` and operations on binary trees
- `codekata.min_stack`: `MinStack`, a stack that returns its minimum in
  constant time

## Installation

```
pip install .
```

To run the tests, install the test extra first:

```
pip install ".[test]"
pytest
```

## Examples

```python
from codekata.arrays import two_sum, summary_ranges
from codekata.strings import roman_to_int, is_palindrome
from codekata.greedy import merge_intervals

two_sum([2, 7, 11, 15], 9)          # [0, 1]
summary_ranges([0, 1, 2, 4, 5, 7])  # ['0->2', '4->5', '7']
roman_to_int("MCMXCIV")             # 1994
is_palindrome("A man, a plan, a canal: Panama")  # True
merge_intervals([[1, 3], [2, 6], [8, 10]])       # [[1, 6], [8, 10]]
```

`two_sum` returns an empty list when no pair adds up to the target.
Functions such as `rotate`, `sort_colors`, `merge_sorted`,
`remove_duplicates`, `remove_duplicates_at_most_twice` and
`remove_element` change the list they are given; the compacting ones
return the new length. Inputs that have no answer, such as an empty
price list, raise `ValueError`.

Linked lists and trees come with helpers to build them from plain lists
and to read them back:

```python
from codekata.linked_lists import from_values, to_values, reverse_list
from codekata.trees import build_tree, inorder_traversal, invert_tree, tree_to_list

to_values(reverse_list(from_values([1, 2, 3])))  # [3, 2, 1]

root = build_tree([4, 2, 7, 1, 3, 6, 9])
inorder_traversal(root)          # [1, 2, 3, 4, 6, 7, 9]
tree_to_list(invert_tree(root))  # [4, 7, 2, 9, 6, 3, 1]
```

`build_tree` takes values in level order, with `None` for a missing
child, and `tree_to_list` writes them back the same way without
trailing `None`s.

Most linked list operations (`reverse_list`, `sort_list`,
`insertion_sort_list`, `remove_nth_from_end`, `middle_node`,
`reverse_between`, `merge_two_lists_copy`) return a newly built list.
`merge_two_lists` and `rotate_right` relink the nodes they are given.
Among the tree operations, `invert_tree` and `merge_trees` change the
trees in place.

```python
from codekata.min_stack import MinStack

stack = MinStack()
for value in (-2, 0, -3):
    stack.push(value)
stack.get_min()  # -3
stack.pop()
stack.top()      # 0
stack.get_min()  # -2
len(stack)       # 2
```

`pop` on an empty stack does nothing; `top` and `get_min` on an empty
stack raise `IndexError`.

## What it does not do

This is a library only. It has no command-line program and reads no
input files; each function works on the Python values passed to it.