"""In-order threaded binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ThreadNode:
    """Binary tree node; a tag of 1 marks that link as a thread rather than a child."""

    data: Any
    lchild: ThreadNode | None = field(default=None, repr=False)
    rchild: ThreadNode | None = field(default=None, repr=False)
    ltag: int = 0
    rtag: int = 0


def _thread(node: ThreadNode | None, pre: ThreadNode | None) -> ThreadNode | None:
    if node is None:
        return pre
    pre = _thread(node.lchild, pre)
    if node.lchild is None:
        node.lchild = pre
        node.ltag = 1
    if pre is not None and pre.rchild is None:
        pre.rchild = node
        pre.rtag = 1
    return _thread(node.rchild, node)


def thread_in_order(root: ThreadNode | None) -> None:
    """Turn the tree under *root* into an in-order threaded tree, in place."""
    if root is None:
        return
    last = _thread(root, None)
    last.rchild = None
    last.rtag = 0


def first_node(node: ThreadNode) -> ThreadNode:
    """Return the first node in in-order of the subtree rooted at *node*."""
    while node.ltag == 0 and node.lchild is not None:
        node = node.lchild
    return node


def next_node(node: ThreadNode) -> ThreadNode | None:
    """Return the in-order successor of *node*, or None after the last."""
    if node.rtag == 0 and node.rchild is not None:
        return first_node(node.rchild)
    return node.rchild


def threaded_in_order(root: ThreadNode | None) -> Iterator[Any]:
    """Yield node data in in-order by following threads."""
    node = first_node(root) if root is not None else None
    while node is not None:
        yield node.data
        node = next_node(node)