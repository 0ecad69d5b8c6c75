# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. It is a library: every structure and algorithm is called from
Python code and returns its result.

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

### `dsakit.linked_list`

Singly linked lists of integers. `None` is the empty list, and every function
takes the head `Node` and returns the new head where the list changes.

- `Node(data, next=None)`
- `from_values(values)` builds a list. `parse_list(tokens)` reads integers up
  to a `-1` sentinel. When given an iterator, it stops right after the sentinel,
  so several lists can be read from one stream.
- `iterate(head)` yields the nodes. `to_values(head)` returns the data as a Python list.
- `length(head)` and `length_recursive(head)`.
- `find_node(head, value)` gives the 0-based position of a value, or `-1` when it is absent.
- `delete_node(head, pos)` removes the node at `pos`. A position past the end changes nothing.
- `insert_node(head, pos, value)` inserts at `pos`. A position equal to the length
  appends, and a position beyond it changes nothing.
- `reverse(head)` reverses the list by relinking its nodes. `reverse_recursive(head)` does the same recursively.
- `append_last_n_to_first(head, n)` moves the last `n` nodes to the front.
  It raises `ValueError` if `n` is negative or larger than the list.
- `merge_sorted(first, second)` merges two ascending lists. On ties, nodes from `first` come first.

Negative positions raise `ValueError`.

```python
from dsakit.linked_list import from_values, reverse, to_values

head = from_values([1, 2, 3, 4])
print(to_values(reverse(head)))  # [4, 3, 2, 1]
```

### `dsakit.binary_tree`

`BinaryTreeNode(data, left=None, right=None)` and functions over it:

- `parse_level_order(tokens)` reads a tree from level-order data, with `-1` for a missing child.
- `parse_preorder(tokens)` reads a tree from pre-order data, with `-1` for an empty subtree.
- Both functions accept a whitespace-separated string or any iterable of tokens.
  They raise `ValueError` if the input ends early.
- `preorder`, `inorder` and `postorder` return the traversal as a list. `levels` returns one list per level.
- `height(root)` counts the nodes on the longest root-to-leaf path.
- `mirror(root)` swaps the children of every node in place.
- `level_order_description(root)` describes the nodes as lines of the form `D:L:X,R:Y`, using `-1` for a missing child.
- `tree_description(root)` describes the nodes in pre-order as `D:L<x>R<y>`.

The traversals use explicit stacks and queues, so deep trees do not reach the recursion limit.

```python
from dsakit.binary_tree import parse_level_order, inorder

root = parse_level_order("8 5 10 2 6 -1 -1 -1 -1 -1 7 -1 -1")
print(inorder(root))  # [2, 5, 6, 7, 8, 10]
```

### `dsakit.bst`

Binary search trees built from `BinaryTreeNode`. In these trees, values smaller
than a node go left, and values greater than or equal to it go right.

- `search(root, k)` tells whether `k` is in the tree.
- `is_bst(root)` checks that the tree has this property.
- `build_balanced(values)` builds a balanced tree from sorted values. For an even count, the first middle value becomes the root.
- `elements_in_range(root, low, high)` returns the values in that range, inclusive, in increasing order.
- `path_to_root(root, k)` returns the values from `k`'s node up to the root, or `[]` when `k` is absent.
- `to_sorted_linked_list(root)` returns the head of a `linked_list.Node` list holding the values in order.

### `dsakit.graph`

`Graph(vertex_count)` is an undirected graph stored as an adjacency matrix, with vertices numbered from 0.

- `add_edge(u, v, weight=1)` adds an edge. The weight must be non-zero, and a bad vertex raises `IndexError`.
- `bfs(start=0)` and `dfs(start=0)` return the vertices reachable from `start`.
- `bfs_all()` and `dfs_all()` cover every component, starting each one from its lowest unvisited vertex.
- `dijkstra(source=0)` returns the shortest distances, with `math.inf` for unreachable vertices.
- `prim()` returns a minimum spanning tree as `Edge` objects, or raises `ValueError` on a disconnected graph.

`Edge(source, dest, weight)` is a frozen dataclass. Its `normalized()` method
returns the same edge with the smaller vertex first.

`kruskal(vertex_count, edges)` takes `Edge` objects or `(u, v, weight)` tuples.
It returns the spanning tree's edges in the order they join the tree, and raises
`ValueError` if the edges do not connect all vertices.

```python
from dsakit.graph import Graph

g = Graph(4)
g.add_edge(0, 1, 3)
g.add_edge(0, 3, 5)
g.add_edge(1, 2, 1)
g.add_edge(2, 3, 8)
print(g.dijkstra(0))  # [0, 3, 4, 5]
```

### `dsakit.hashmap`

`OurMap` is a hash map from strings to values with separate chaining. It starts
with 5 buckets and doubles them when the load factor goes above 0.7.

- `insert(key, value)` adds a key or replaces its value.
- `get(key)` returns the value, or `None` when the key is absent.
- `remove(key)` returns the removed value, and raises `KeyError` when the key is absent.
- `load_factor()`, `len(m)` and `key in m` are also supported.
- Keys that are not strings raise `TypeError`.

Two helpers count with it:

- `highest_frequency(values)` returns the most frequent value. On a tie it returns the value that occurs first. An empty sequence raises `ValueError`.
- `intersection(first, second)` returns the common values in `second`'s order. Each value appears as many times as it occurs in both inputs.

### `dsakit.backtracking`

- `n_queens(n)` returns every placement of `n` non-attacking queens. Each board is a list of rows of `0`s and `1`s.
- `format_board(board)` puts all cells on one line, separated by spaces.
- `solve_sudoku(grid)` returns a solved copy of a 9 x 9 grid, with `0` marking an empty cell. Rows may be lists of integers or strings of digits. It raises `ValueError` on a malformed grid, on conflicting givens, or when the grid has no solution.

```python
from dsakit.backtracking import n_queens, format_board

for board in n_queens(4):
    print(format_board(board))
# 0 1 0 0 0 0 0 1 1 0 0 0 0 0 1 0
# 0 0 1 0 1 0 0 0 0 0 0 1 0 1 0 0
```

### `dsakit.queues`

Both queues support `enqueue`, `front`, `dequeue`, `len()` and iteration from front to back.
`front` and `dequeue` raise `IndexError` on an empty queue.

- `LinkedQueue()` is unbounded.
- `DynamicQueue(capacity)` keeps its elements in a circular buffer that doubles when full. Its current size is given by the `capacity` property.

### `dsakit.stack`

`LinkedStack()` supports `push`, `pop`, `top`, `len()` and iteration from the top down.
`pop` and `top` raise `IndexError` on an empty stack.

`run_queries(lines)` runs a query script against a fresh stack and returns the
output lines. The script starts with a count, followed by these queries:

| Query | Action |
| --- | --- |
| `1 x` | push `x` |
| `2` | pop |
| `3` | top |
| `4` | size |
| any other code | `true`/`false` for empty |

Popping or reading an empty stack outputs `-1`.

### `dsakit.generic_tree`

`TreeNode(data, children=[])` is a node with any number of children.

- `parse_level_order(tokens)` reads the root, then each node's child count and child values in breadth-first order.
- `parse_preorder(tokens)` reads a value, its child count, then each child in turn.
- `describe(root)` returns one `D:c1,c2,` line per node in pre-order.

### `dsakit.trie`

`Trie()` holds words over the letters `a`-`z`. It supports `insert(word)`,
`search(word)`, `remove(word)` and `word in trie`. Removal drops nodes that no
other word needs. Words with other characters raise `ValueError` from
`insert`, `search` and `remove`.

```python
from dsakit.trie import Trie

t = Trie()
t.insert("and")
t.insert("are")
print(t.search("and"))  # True
t.remove("and")
print(t.search("and"))  # False
```

## What it does not do

The package has no command-line program and reads nothing from standard input.
The `parse_*` functions and `run_queries` accept text you already hold, and
every result is returned to the caller rather than printed.