# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Functions return new values rather than changing their inputs,
and operations that cannot proceed raise exceptions.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bucket_sort`, `insertion_sort`, `shell_sort`, `bubble_sort`, `radix_sort` |
| `dsakit.searching` | `contains_sorted`, `find_crossover`, `k_closest`, `linear_search`, `intersect_sorted`, `merge_three`, `insert_at_index` |
| `dsakit.arithmetic` | `largest_number`, `swap_bits`, `gcd`, `is_armstrong`, `factorial`, `fibonacci` |
| `dsakit.strings` | `compare_strings`, `is_palindrome`, `reverse_string`, `longest_common_subsequence` |
| `dsakit.matrix` | `diagonal_order`, `spiral_order`, `to_sparse` (yielding `SparseEntry` triples), `lower_triangular`, `upper_triangular`, `format_matrix` |
| `dsakit.linked_lists` | `Node`, `LinkedList`, `DoublyNode`, `from_values`, `length`, `intersect_point`, `doubly_from_values`, `make_doubly`, `backward` |
| `dsakit.stack` | `Stack` (bounded, default capacity 10) with `StackFullError` and `StackEmptyError` |
| `dsakit.graphs` | `Graph` (undirected, `bfs`), `DirectedGraph` (`dfs`, newest edge first), `Edge`, `adjacency_lists`, `bellman_ford` with `NegativeCycleError`, `prim_mst` |
| `dsakit.flow` | `ford_fulkerson` maximum flow over a capacity matrix |
| `dsakit.huffman` | `HuffmanNode`, `build_tree`, `huffman_codes` |
| `dsakit.avl` | `AVLTree` with `insert`, `delete`, `in`, ascending iteration and `render` |
| `dsakit.binary_trees` | `TreeNode`, `is_full_binary_tree`, `depth`, `is_perfect` |
| `dsakit.bplus_tree` | `BPlusTree` with `insert`, `search` and `render` |
| `dsakit.red_black` | `RedBlackTree` with traversals, `minimum`, `maximum`, `successor`, `predecessor` and `render` |
| `dsakit.fibonacci_heap` | `FibonacciHeap` with `insert`, `minimum`, `extract_min`, `decrease_key`, `delete` and `roots` |
| `dsakit.tictactoe` | `Board`, `GameStatus` and a two-player terminal game |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.sorting import radix_sort
from dsakit.searching import k_closest, linear_search
from dsakit.arithmetic import gcd
from dsakit.strings import longest_common_subsequence
from dsakit.avl import AVLTree
from dsakit.flow import ford_fulkerson

print(radix_sort([121, 432, 564, 23, 1, 45, 788]))
print(linear_search([1, 2, 3, 4, 5, 6, 7, 8], 10))   # None when absent
print(k_closest([12, 16, 22, 30, 35, 39, 42], 35, 4))
print(gcd(48, 18))
print(longest_common_subsequence("ACADB", "CBDA"))

tree = AVLTree([33, 13, 53, 9, 21, 61, 8, 11])
tree.delete(13)
print(list(tree))
print(tree.render())

capacity = [
    [0, 8, 0, 0, 3, 0],
    [0, 0, 9, 0, 0, 0],
    [0, 0, 0, 0, 7, 2],
    [0, 0, 0, 0, 0, 5],
    [0, 0, 7, 4, 0, 0],
    [0, 0, 0, 0, 0, 0],
]
print(ford_fulkerson(capacity, 0, 5))
```

## Errors

- `Stack.push` on a full stack raises `StackFullError`; `Stack.pop` on an
  empty one raises `StackEmptyError`.
- `bellman_ford` raises `NegativeCycleError` when a negative-weight cycle is
  reachable from the source; unreachable vertices get `math.inf`.
- `prim_mst` raises `ValueError` for a disconnected graph.
- `bucket_sort` (6 buckets of width 10 by default) and `radix_sort` raise
  `ValueError` for values they cannot place, such as negative numbers.
- `largest_number` raises `ValueError` when no number has the requested digit sum.
- `RedBlackTree.delete`, `successor` and `predecessor` raise `KeyError` for a
  missing key; `FibonacciHeap.decrease_key` and `delete` do the same, and an
  empty heap raises `IndexError` on `minimum` and `extract_min`.

## Tic-tac-toe

Two players take turns at the terminal, typing square numbers 1 to 9:

```
dsakit-tictactoe
```

The same game runs with `python -m dsakit.tictactoe`. An occupied or
unknown square prints `Invalid move` and the same player goes again. The game
ends with a win or a draw and exits with status 0; if standard input runs out
first it exits with status 1. The screen is cleared between turns only when
output goes to a terminal.

There is no computer opponent and no way to save or resume a game: both sides
are played by people at the same keyboard.