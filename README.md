# dsalgo

Textbook data structures and algorithms in plain Python. The package has no
dependencies outside the standard library.

## What is included

- `dsalgo.seqlist`: `SeqList`, a bounded sequential list (default capacity
  100) with 1-based indexing, `insert`, `delete` and `locate` (which returns
  0 when the value is absent). Inserting into a full list raises
  `OverflowError`; a bad position raises `IndexError`.
- `dsalgo.linklist`: `LinkedList`, a singly linked list with a head node
  (`get_node`, `locate`, `insert`, `delete`), built with
  `LinkedList.from_head_insert` or `LinkedList.from_tail_insert`, both of
  which stop at the end marker `9999`; `Node`; and `DoublyLinkedList`, which
  can also be iterated in reverse with `reversed()`.
- `dsalgo.stack`: `SeqStack`, a bounded stack (default capacity 50), and
  the unbounded `LinkedStack`, both with `push`, `pop`, `top` and
  `is_empty`; they raise `StackFullError` and `StackEmptyError`.
- `dsalgo.queues`: `CircularQueue`, a ring buffer that keeps one slot free
  so it holds at most `max_size - 1` items, and the unbounded
  `LinkedQueue`; they raise `QueueFullError` and `QueueEmptyError`.
- `dsalgo.trees`: `SeqBinaryTree` (level-by-level array storage, `None`
  for empty slots), `TreeNode` and `BinaryTree`, the generators
  `pre_order`, `in_order`, `post_order` and `level_order`, `ParentTree`
  (each node holds its parent's index, at most 50 nodes) and
  `ChildSiblingNode`.
- `dsalgo.threaded`: in-order threaded binary trees: `ThreadNode`,
  `thread_in_order`, `first_node`, `next_node` and `threaded_in_order`.
- `dsalgo.graph`: `Graph`, directed or undirected, with `add_edge`,
  `has_edge`, `neighbors` (ascending order), `degree`, `in_degree` and
  `out_degree`; and `bfs_traverse`, `dfs_traverse`, `bfs_min_distance` and
  `topological_sort` (which raises `ValueError` on a cycle or an
  undirected graph).
- `dsalgo.paths`: `dijkstra`, `trace_path`, `floyd`, `floyd_path`, `prim`
  and `kruskal` over adjacency matrices in which `dsalgo.paths.INF`
  (99999) marks a missing edge.
- `dsalgo.search`: `BinarySearchTree` (distinct keys, iterates in ascending
  order, supports `in`), `binary_search` and `sequential_search`, both
  returning -1 when the key is absent.
- `dsalgo.sorting`: in-place `bubble_sort`, `insert_sort`, `shell_sort`,
  `select_sort`, `partition` and `quick_sort`.

## Installation

```
pip install .
```

## Examples

```python
from dsalgo.stack import SeqStack
from dsalgo.queues import CircularQueue
from dsalgo.sorting import quick_sort
from dsalgo.search import binary_search

stack = SeqStack(3)
stack.push(1)
stack.push(2)
assert stack.pop() == 2

queue = CircularQueue(4)      # holds at most 3 elements
queue.enqueue("a")
assert queue.dequeue() == "a"

items = [5, 3, 8, 1]
quick_sort(items)             # low and high default to the whole list
assert items == [1, 3, 5, 8]
assert binary_search(items, 8) == 3
```

Graph traversal:

```python
from dsalgo.graph import Graph, bfs_traverse, topological_sort

g = Graph("abcd", directed=True)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(2, 3)
assert bfs_traverse(g) == [0, 1, 2, 3]
assert topological_sort(g) == [0, 2, 3, 1]
```

Weighted shortest paths:

```python
from dsalgo.paths import INF, dijkstra, trace_path

matrix = [
    [0, 4, 1],
    [INF, 0, INF],
    [INF, 2, 0],
]
dist, pred = dijkstra(matrix, 0)
assert dist[1] == 3
assert trace_path(pred, 1) == [0, 2, 1]
```

## What it does not do

`dsalgo` is a library only: it has no command-line program and reads no
input of its own. The head- and tail-insertion builders take any iterable
of values rather than reading from standard input.

## Running the tests

```
pip install .[test]
pytest
```