# dsakit

Classic data structures and algorithms in plain Python. It needs nothing
beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `sqrt_floor`, `move_zeroes`, `max_window_sum`, `longest_alternating_parity`, `find_subarray_with_sum`, `two_unique` |
| `dsakit.queues` | `kth_largest`, `sliding_window_max`, `drain_max_first`, `binary_numbers` |
| `dsakit.stacks` | `daily_temperatures`, `is_valid_parentheses` |
| `dsakit.dp` | `climb_stairs`, `fib_memo`, `fib_table`, `fibonacci_series`, `lcs_length` |
| `dsakit.counting` | `frequencies`, `count_sort` |
| `dsakit.maze` | `solve_maze`, `format_path` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.trie` | `Trie` |
| `dsakit.graph` | `MatrixGraph`, `Graph` |
| `dsakit.greedy` | `select_activities`, `min_platforms`, `greedy_change`, `InexactChangeError` |
| `dsakit.linked_list` | `LinkedList` |

## Examples

### Sequences, stacks and dynamic programming

```python
from dsakit.arrays import max_window_sum, find_subarray_with_sum, move_zeroes
from dsakit.queues import sliding_window_max, binary_numbers
from dsakit.dp import lcs_length, climb_stairs
from dsakit.stacks import is_valid_parentheses, daily_temperatures

max_window_sum([2, 1, 5, 1, 3, 2], 3)             # 9
find_subarray_with_sum([1, 2, 3, 7, 5], 12)       # (2, 4), 1-based positions
move_zeroes([0, 1, 0, 3, 12])                     # [1, 3, 12, 0, 0]
sliding_window_max([1, 3, -1, -3, 5, 3, 6, 7], 3) # [3, 3, 5, 5, 6, 7]
list(binary_numbers(5))                           # ['1', '10', '11', '100', '101']
lcs_length("abcde", "ace")                        # 3
climb_stairs(5)                                   # 8
is_valid_parentheses("{[()]}")                    # True
daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73])
# [1, 1, 4, 2, 1, 1, 0, 0]
```

`find_subarray_with_sum` returns `None` when no run sums to the target; it is
meant for non-negative values.

### Trees, tries, graphs and lists

```python
from dsakit.bst import BinarySearchTree
from dsakit.trie import Trie
from dsakit.graph import Graph
from dsakit.linked_list import LinkedList

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
tree.delete(20)             # True
60 in tree                  # True
tree.inorder()              # [30, 40, 50, 60, 70, 80]

trie = Trie()
trie.insert("apple")
trie.search("app")          # False
trie.starts_with("app")     # True

g = Graph(5)
for u, v in [(0, 1), (0, 2), (1, 2), (1, 3), (3, 4)]:
    g.add_edge(u, v)
g.bfs(0)                    # [0, 1, 2, 3, 4]
g.dfs(0)                    # [0, 1, 2, 3, 4]
g.is_cyclic()               # True
print(g.format())

items = LinkedList([1, 2, 3, 2, 1])
items.is_palindrome()       # True
items.delete_at_position(3) # 3
items.format()              # 'List: 1 -> 2 -> 2 -> 1 -> NULL'
```

`Trie` accepts only the letters `a` to `z` and raises `ValueError` for anything
else. `MatrixGraph` and `Graph` raise `IndexError` for a vertex outside
`0..vertices-1`.

### Greedy choices and the maze

```python
from dsakit.greedy import greedy_change, select_activities, min_platforms, InexactChangeError
from dsakit.maze import solve_maze, format_path

greedy_change([1, 2, 5, 10, 20, 50, 100, 500, 2000], 2758)
# [2000, 500, 100, 100, 50, 5, 2, 1]

try:
    greedy_change([5, 10], 12)
except InexactChangeError as err:
    err.used, err.remainder  # ([10], 2)

select_activities([1, 3, 0, 5, 8, 5], [2, 4, 6, 7, 9, 9])
# [(1, 2), (3, 4), (5, 7), (8, 9)]
min_platforms([900, 940, 950, 1100, 1500, 1800],
              [910, 1200, 1120, 1130, 1900, 2000])  # 3

maze = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [0, 1, 0, 0],
    [1, 1, 1, 1],
]
print(format_path(solve_maze(maze)))
```

`solve_maze` tries moving right before down and returns `None` when there is
no path.

## Errors

Where an operation cannot succeed, the functions raise an exception and do
not return a status value. For example, `max_window_sum` raises `ValueError`
when the window is larger than the input, `count_sort` raises `ValueError` for
negative values, `LinkedList.delete_at_end` raises `IndexError` on an empty
list, and `BinarySearchTree.minimum` raises `ValueError` on an empty tree.

## What it does not do

dsakit is a library only. It has no command-line program and reads no input
of its own; call the functions and classes from your own code.