# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Python 3.10 or later.

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

### `dsakit.sorting`

`bubble_sort`, `better_bubble_sort` (stops after a pass with no swap),
`heap_sort`, `insertion_sort`, `merge_sort` (stable), `quick_sort` (last item
as pivot) and `selection_sort`. Each takes any iterable and returns a new
sorted list; the input is left untouched.

### `dsakit.array_ops`

- `remove_elements(values, target)`: the items that differ from `target`.
- `move_zeroes(values)`: non-zero items in order, then the zeros.
- `merge_sorted(first, second)`: merges two ascending sequences; on ties the
  item from `first` comes first.
- `reverse_string(text)`.
- `linear_search(values, key)`, `binary_search(values, key)` and
  `binary_search_recursive(values, key)`: return an index, or `-1` if the key
  is absent. The binary searches expect ascending input.

### `dsakit.dynamic_array`

`DynamicArray` starts with room for two items and doubles its storage when
full. It has `append`, `insert(index, value)`, `pop(index=None)`,
`replace(index, value)` (an index equal to the current capacity appends
instead) and `capacity()`, plus indexing, `len()` and iteration. Bad indices
raise `IndexError`.

### `dsakit.hash_table`

`HashTable` maps integer keys to values in 128 slots with linear probing.
`insert(key, value)` replaces any earlier value and raises `OverflowError`
when every slot is used; `get(key)` and `remove(key)` raise `KeyError` for a
missing key; `items()` yields `(key, value)` pairs in slot order.

### `dsakit.exercises`

- `has_common_item_naive(first, second)` and `has_common_item(first, second)`.
  The naive version treats two empty sequences as matching.
- `find_pair_naive(values, total)`, `find_pair_sorted(values, total)` (two
  pointers, ascending input) and `find_pair_unsorted(values, total)`: return a
  pair of items summing to `total`, or `None`.
- `first_recurring(values)`: the first item seen twice, or `None`.

### `dsakit.recursion`

`factorial(n)`, `fibonacci(n)` (memoised, `fibonacci(0) == 0`),
`fibonacci_series(count)` and `reverse_recursive(text)`. Negative arguments
raise `ValueError`.

### `dsakit.hero`

`Hero`, a dataclass with `health` and a one-character `level`; `describe()`
returns both as two lines.

### Linked lists

- `dsakit.linked_list.LinkedList`: `append`, `prepend`,
  `insert(value, position)` with a 0-based position (at or past the end
  appends), `remove(position)` with a 1-based position, `get(index)` and
  `find(value)` (raises `ValueError` if absent).
- `dsakit.circular_list.CircularList`: `insert_at_beginning`, `insert_at_end`,
  `insert_at(value, index)`, `delete_at_beginning`, `delete_at_end`,
  `delete_at(index)`, all with 0-based indices, and `in` tests.
- `dsakit.doubly_linked_list.DoublyLinkedList`: `append`, `prepend`,
  `insert(value, position)` and `remove(position)` with 1-based positions,
  `reverse()` in place, and `reversed()` iteration.

All three support `len()` and iteration, and raise `IndexError` for bad
positions or deletes from an empty list.

### `dsakit.stacks`

`ArrayStack(capacity=128)` raises `StackOverflow` when full; `LinkedStack` is
unbounded. Both have `push`, `pop`, `len()` and iteration from top to bottom;
`ArrayStack` also has `peek()`. Reading an empty stack raises
`EmptyStackError`.

### `dsakit.queues`

- `LinkedQueue`: `enqueue`, `dequeue`, `len()`; iteration runs from the newest
  item to the oldest.
- `StackQueue`: a queue built from two stacks, with `enqueue`, `dequeue`,
  `peek` and `len()`.
- `PriorityQueue`: kept in ascending order of priority number, equal
  priorities in insertion order. `dequeue()` removes the value with the largest
  priority number; iteration yields `(priority, value)` pairs.

Empty queues raise `EmptyQueueError`.

### `dsakit.bst`

`BinarySearchTree` with `insert`, `delete`, `in`, `len()` and in-order
iteration. `delete` raises `EmptyTreeError` on an empty tree and `KeyError`
for a missing value.

### `dsakit.graphs`

- `DirectedGraph(vertex_count)` with `add_edge`, `neighbours` and
  `bfs(start)`, which returns the visiting order as a list.
- `adjacency_from_edges(vertex_count, edges)`: adjacency lists where each new
  edge goes to the front.
- `can_color(matrix, colors)`: whether an adjacency matrix can be coloured
  with at most `colors` colours.
- `dfs(matrix, start)`: depth-first order over an adjacency matrix.
- `dijkstra(matrix, source)`: distances over a weight matrix where 0 means no
  edge.
- `bellman_ford(vertex_count, edges, source)`: distances over
  `(source, target, weight)` edges; raises `NegativeCycleError` on a reachable
  negative cycle.

Unreachable vertices get `math.inf`; out-of-range vertices raise `IndexError`.

### `dsakit.backtracking`

- `solve_sudoku(board)`: returns a solved copy of a 9x9 board of `"1"`–`"9"`
  and `"."`; raises `ValueError` if malformed or unsolvable.
- `is_valid_placement(board, row, col, digit)`.
- `solve_maze(maze)`: a square grid of 1 (open) and 0 (wall); returns a matrix
  marking a path from top-left to bottom-right, or raises `ValueError`.

## Example

```python
from dsakit.sorting import merge_sort
from dsakit.array_ops import binary_search
from dsakit.graphs import DirectedGraph
from dsakit.stacks import LinkedStack

data = merge_sort([10, 9, 8, 7, 6])   # [6, 7, 8, 9, 10]
index = binary_search(data, 8)        # 2

graph = DirectedGraph(4)
for source, target in [(0, 1), (1, 2), (2, 3), (3, 0)]:
    graph.add_edge(source, target)
order = graph.bfs(0)                  # [0, 1, 2, 3]

stack = LinkedStack()
stack.push(10)
stack.push(20)
top = stack.pop()                     # 20
```

## What it does not do

dsakit is a library only: it has no command-line tool and prints nothing.
Operations that cannot succeed raise exceptions rather than printing warnings.