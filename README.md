# dsakit

Classic data structures written for plain Python values.

## Installation

```
pip install dsakit
```

## Contents

| Module | What it offers |
| --- | --- |
| `dsakit.stack` | `Stack` with an optional capacity (100 by default, `None` for unbounded), `StackFullError`, `StackEmptyError` |
| `dsakit.fifo` | `ArrayQueue` (bounded, 5 by default), `LinkedQueue` (unbounded), `StackQueue` (built from two stacks), `QueueFullError`, `QueueEmptyError` |
| `dsakit.linked_list` | `Node`, `SinglyLinkedList` with 1-based `insert`/`delete`, `reverse`, `reversed_values`, `bubble_sort`, `merge_sort` and 0-based `swap` |
| `dsakit.doubly_linked` | `DoublyLinkedList` with `push_front`, `push_back`, 0-based `insert`/`delete` and reverse iteration |
| `dsakit.circular` | `CircularLinkedList` with `append` and an endless `cycle()` traversal |
| `dsakit.avl` | `AVLTree`, an ordered set with `kth`, `rank`, `minimum`, `maximum`, traversals and `height`; `run_queries` for query scripts |
| `dsakit.binary_tree` | `TreeNode` and `preorder`, `inorder`, `postorder`, `bottom_view` |
| `dsakit.inheritance` | `Person`, `random_allele`, `create_family`, `format_family`: blood-type inheritance simulation |
| `dsakit.trie` | `Trie` of ASCII strings with `insert`, `search`, `delete`, `is_empty` and `in` |
| `dsakit.fenwick` | `FenwickTree` with `add`, `prefix_sum` and `range_sum` |

Empty stacks and queues raise `StackEmptyError` / `QueueEmptyError` (both
subclasses of `IndexError`); full ones raise `StackFullError` /
`QueueFullError` (subclasses of `OverflowError`). Out-of-range positions in the
lists and trees raise `IndexError`.

## Examples

```python
from dsakit.avl import AVLTree
from dsakit.fenwick import FenwickTree
from dsakit.linked_list import SinglyLinkedList
from dsakit.trie import Trie

tree = AVLTree()
for value in (5, 1, 9, 3):
    tree.insert(value)
tree.kth(0), tree.rank(9), tree.inorder()  # (1, 3, [1, 3, 5, 9])

fenwick = FenwickTree(5)
for index, value in enumerate([1, 2, 3, 4, 5]):
    fenwick.add(index, value)
fenwick.range_sum(0, 3)                    # 10

items = SinglyLinkedList([7, 6, 5, 4])
items.merge_sort()
list(items)                                # [4, 5, 6, 7]

words = Trie()
words.insert("hello")
"hello" in words                           # True
```

## Command-line tools

Answer order-statistic queries read from standard input. The first token gives
the number of queries; each query is an operation letter and a number: `I n`
inserts, `D n` deletes, `K n` prints the n-th smallest value (or `invalid`),
and any other letter, such as `C n`, prints how many values are below n:

```
dsakit-avl < queries.txt
```

Print a randomly generated family tree of blood types, three generations by
default; `--generations` changes the depth and `--seed` makes the result
repeatable:

```
dsakit-inheritance
dsakit-inheritance --generations 4 --seed 1
```

## Not included

The package offers no ready-made routines for plain Python lists (such as
sorting a list or searching an array); the sorting it provides works on
`SinglyLinkedList` only.

## Running the tests

```
pip install dsakit[test]
pytest
```