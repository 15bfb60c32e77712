# dsakit

`dsakit` is a collection of classic data structures and algorithms, written as
small, plain Python classes and functions. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

### Hashing (`dsakit.hashing`)

- `LinearProbingTable(size=10)` and `QuadraticProbingTable(size=10)` are
  fixed-size open-addressing tables of integers. A key's home slot is
  `key % size`. The linear table probes `h, h+1, h+2, ...` and the quadratic
  table probes `h, h+1, h+4, h+9, ...`.
  - `insert(key)` returns the index where the key was stored. It raises
    `TableFullError` when none of the probed slots is free.
  - Iterating over a table yields every slot in index order, with `None` for
    an empty slot. `len()` gives the table size, and the `count` property
    gives the number of keys stored.
  - A size below 1 raises `ValueError`.
- `division_method(size, keys)` places each key at `key % size`. It returns a
  `DivisionResult(table, collisions)`, where `collisions` lists the keys whose
  slot was already taken.
- `division_overwrite(size, keys)` also places keys at `key % size`, but a
  later key replaces an earlier one. It returns the table as a list.
- `mid_square(value)` returns the tens digit of `value ** 2`.
- `count_beautiful_pairs(values)` counts the index pairs `i < j` for which
  `values[i] == values[j] ** 2`.
- `digit_count_matches(num)` checks a string of digits: for every index `i`,
  digit `i` must occur exactly `num[i]` times. A string containing anything
  other than digits raises `ValueError`.
- `find_duplicates(nums)` returns the values that appear twice, in the order
  in which their second copy appears. Every value must lie in `[1, n]`;
  otherwise `ValueError` is raised.

### Expressions (`dsakit.infix`)

- `infix_to_postfix(expression)` converts an infix expression whose operands
  are single letters or digits into space-separated postfix. It handles
  `+ - * / ^` and parentheses, and treats every operator as left-associative.
  Whitespace is skipped. An unknown operator or an unmatched parenthesis
  raises `ValueError`.
- `priority(operator)` returns an operator's precedence, where `(` has the
  lowest. An unknown operator raises `ValueError`.

### Stacks and brackets (`dsakit.stack`, `dsakit.brackets`)

- `BoundedStack(capacity=5)` is a last-in, first-out stack.
  - `push(value)` returns the position where the value was stored. It raises
    `StackFullError` when the stack is at capacity.
  - `pop()` and `peek()` raise `StackEmptyError` when the stack is empty.
  - Iteration goes from top to bottom.
- `is_balanced(text)` checks that `()`, `[]` and `{}` are closed in the right
  order. All other characters are ignored.
- `is_matching_pair(opening, closing)` tells whether `closing` closes
  `opening`.

### Linked lists (`dsakit.linked_list`)

- `DoublyLinkedList(values=())` provides `push_front` and `push_back`. It can
  be iterated forwards and through `reversed()`, and supports `len()`.
  `str()` gives `1 <-> 2 <-> NULL`.
- `CircularLinkedList(values=())` provides `push_front`, `push_back`,
  `insert_after(position, value)`, `pop_front` and `pop_back`.
  - `insert_after` counts positions from 1, and positions past the end wrap
    around the circle.
  - Removing from an empty list, or inserting into one with `insert_after`,
    raises `EmptyListError`. A position below 1 raises `ValueError`.
  - `str()` gives `1->2->`.

### Streams (`dsakit.kth_largest`)

- `KthLargest(k, nums=())` keeps the `k` largest values it has seen.
  `add(val)` records a value and returns the k-th largest so far. It raises
  `ValueError` while fewer than `k` values have been seen.

### Sorting (`dsakit.bucket_sort`)

- `bucket_sort(values)` returns a new sorted list. It uses one counting bucket
  for each value from 0 to the maximum. Negative values raise `ValueError`.

### Trees (`dsakit.avl`)

- `AVLTree(keys=())` is a height-balanced binary search tree of distinct keys.
  - `insert` returns `False` for a key that is already present.
  - `delete` returns `False` for a key that is absent.
  - `preorder()` and `inorder()` return the keys as lists.
  - `height()` returns 0 for an empty tree.
  - The tree also supports `in` and `len()`.

## Example

```python
from dsakit.avl import AVLTree
from dsakit.brackets import is_balanced
from dsakit.infix import infix_to_postfix

tree = AVLTree([2, 1, 7, 4, 5, 3, 8])
tree.delete(3)
print(tree.preorder())              # [4, 2, 1, 7, 5, 8]

print(is_balanced("{[()]}"))        # True
print(infix_to_postfix("a+b*c"))    # a b c * +
```

## What it does not do

`dsakit` is a library only. It has no command-line program and no interactive
menu. The hash tables have a fixed size: they support insertion and
iteration, but not lookup, deletion or resizing. Nothing is saved to disk.