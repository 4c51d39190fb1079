# dsakit

A small library of classic data structures and algorithms in plain Python,
using nothing beyond the standard library. Functions take ordinary lists,
strings and edge lists and return new values; errors are raised as
exceptions.

## Modules

- `dsakit.sorting`: `insertion_sort` (with `reverse`), `selection_sort`,
  `bubble_sort`, `shell_sort`, `heap_sort`, `quick_sort`, `merge_sort` and
  `radix_sort`. Each takes any iterable and returns a new sorted list.
  `radix_sort` accepts only non-negative integers below 10**10 and raises
  `ValueError` otherwise.
- `dsakit.searching`: `min_max`, `prefix_sums`, `linear_search`,
  `binary_search` (both return -1 when the key is absent), `matrix_contains`,
  `max_subarray_sum` and `has_close_duplicate`.
- `dsakit.strings`: `prefix_function`, `kmp_search`, `rabin_karp_search`,
  `bad_char_table`, `boyer_moore_search`, a `SuffixTree` trie with a
  `search` method, and `suffix_array`.
- `dsakit.stacks`: `BoundedStack` (raises `StackOverflowError` and
  `StackUnderflowError`), `reverse_sentence`, `reverse_stack`,
  `evaluate_prefix`, `evaluate_postfix`, `precedence` and
  `infix_to_postfix`. The evaluators work on single-digit operands; in
  prefix expressions `^` is bitwise exclusive or, in postfix expressions it
  is exponentiation.
- `dsakit.queues`: `ArrayQueue` (a fixed number of pushes over its lifetime,
  raising `QueueFullError`), `TwoStackQueue` and `LinkedQueue`; removing from
  an empty queue raises `QueueEmptyError`.
- `dsakit.recursion`: `countdown` and `hanoi_moves`.
- `dsakit.linked_list`: `ListNode`, `LinkedList` (iterative, recursive and
  group-wise reversal, in-place merge sort) and `merge_sorted`.
- `dsakit.doubly_linked_list`: `DoublyLinkedList` with `delete_at` (1-based)
  and `remove`, iterable in both directions.
- `dsakit.circular_list`: `CircularLinkedList`.
- `dsakit.binary_tree`: `Node`, the four traversals, rebuilding a tree from
  preorder or postorder plus inorder, `sum_at_level`, `count_nodes`,
  `sum_nodes`, `height`, `diameter`, `sum_replace`, `left_view` and
  `right_view`.
- `dsakit.tree_queries`: `is_balanced`, `find_path`,
  `lowest_common_ancestor`, `distance_between`, `flatten`,
  `nodes_at_distance` and `max_path_sum`.
- `dsakit.bst`: `insert`, `search`, `inorder_successor`, `delete`,
  `from_preorder`, `is_bst`, `from_sorted`, `catalan` and `all_bsts`.
- `dsakit.graph_search`: `undirected_adjacency`, `bfs`, `dfs`,
  `has_cycle_undirected`, `has_cycle_directed`, `DisjointSet`,
  `has_cycle_union_find` and `topological_sort`.
- `dsakit.graph_paths`: `kruskal`, `prim`, `dijkstra`, `bellman_ford`
  (raises `NegativeCycleError`) and `floyd_warshall`. Unreachable nodes get
  `math.inf`.

## Installation

```
pip install .
```

## Examples

```python
from dsakit.sorting import quick_sort
from dsakit.strings import kmp_search
from dsakit.stacks import infix_to_postfix, evaluate_postfix
from dsakit.bst import from_sorted, search

print(quick_sort([1, 2, 367, 35, 23, 356]))
# [1, 2, 23, 35, 356, 367]

print(kmp_search("ABABDABACDABABCABAB", "ABABCABAB"))
# [10]

print(infix_to_postfix("(a-b/c)*(a/k-l)"))
# abc/-ak/l-*

print(evaluate_postfix("46+2/5*7+"))
# 32

root = from_sorted([10, 20, 30, 40, 50])
print(search(root, 40) is not None)
# True
```

Graph algorithms take plain `(u, v, weight)` edge lists:

```python
from dsakit.graph_paths import dijkstra, kruskal

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2)]
print(dijkstra(3, edges, 0))
# [0, 3, 1]
print(kruskal(edges))
# ([(0, 2), (2, 1)], 3)
```

## What it does not do

dsakit is a library only. It has no command-line programs or interactive
menus, it reads and writes no files, and it offers no file compression,
disk-based hashing or self-adjusting (splay) trees.

## Running the tests

```
pip install ".[test]"
pytest
```