"""Binary trees in array and linked form, and general tree representations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

SEQ_TREE_SIZE = 100
PTREE_SIZE = 50


class SeqBinaryTree:
    """Binary tree stored level by level in an array; None marks an empty slot."""

    def __init__(self, values: Sequence[Any] = (), capacity: int = SEQ_TREE_SIZE) -> None:
        if len(values) > capacity:
            raise ValueError("more values than capacity")
        self.capacity = capacity
        self._data: list[Any] = list(values) + [None] * (capacity - len(values))
        self.size = sum(value is not None for value in self._data)

    def _check(self, index: int) -> None:
        if not 0 <= index < self.capacity:
            raise IndexError(f"index {index} out of range")

    def is_empty(self) -> bool:
        return self.size == 0

    def root(self) -> Any:
        """Return the root value, or None for an empty tree."""
        return None if self.is_empty() else self._data[0]

    def _child(self, index: int) -> Any:
        return self._data[index] if index < self.capacity else None

    def left_child(self, index: int) -> Any:
        self._check(index)
        return self._child(2 * index + 1)

    def right_child(self, index: int) -> Any:
        self._check(index)
        return self._child(2 * index + 2)

    def parent(self, index: int) -> Any:
        self._check(index)
        if index == 0:
            return None
        return self._data[(index - 1) // 2]


@dataclass(eq=False)
class TreeNode:
    """A linked binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinaryTree:
    """A linked binary tree addressed through its root."""

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    def is_empty(self) -> bool:
        return self.root is None

    def root_data(self) -> Any:
        if self.root is None:
            raise ValueError("tree is empty")
        return self.root.data


def pre_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data root, left, right."""
    if root is not None:
        yield root.data
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def in_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data left, root, right."""
    if root is not None:
        yield from in_order(root.left)
        yield root.data
        yield from in_order(root.right)


def post_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data left, right, root."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root.data


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data level by level, left to right."""
    if root is None:
        return
    pending = deque([root])
    while pending:
        node = pending.popleft()
        yield node.data
        pending.extend(child for child in (node.left, node.right) if child is not None)


@dataclass
class PTNode:
    data: Any
    parent: int


class ParentTree:
    """General tree stored as an array of nodes each holding its parent's index."""

    def __init__(self) -> None:
        self.nodes: list[PTNode] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def add(self, data: Any, parent: int = -1) -> int:
        """Add a node under *parent* (-1 for a root) and return its index."""
        if len(self.nodes) >= PTREE_SIZE:
            raise OverflowError("tree is full")
        if parent != -1 and not 0 <= parent < len(self.nodes):
            raise IndexError(f"no node at index {parent}")
        self.nodes.append(PTNode(data, parent))
        return len(self.nodes) - 1

    def parent_of(self, index: int) -> int:
        """Return the parent's index, -1 for a root."""
        return self.nodes[index].parent

    def children_of(self, index: int) -> list[int]:
        """Return the indices of the children of *index*."""
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"no node at index {index}")
        return [i for i, node in enumerate(self.nodes) if node.parent == index]


@dataclass(eq=False)
class ChildSiblingNode:
    """General tree node in first-child / next-sibling form."""

    data: Any
    first_child: ChildSiblingNode | None = field(default=None, repr=False)
    next_sibling: ChildSiblingNode | None = field(default=None, repr=False)

    def children(self) -> Iterator[ChildSiblingNode]:
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling