from hypothesis import given, strategies as st

from dsalgo.threaded import (
    ThreadNode,
    first_node,
    next_node,
    thread_in_order,
    threaded_in_order,
)


def build_bst(values):
    root = None
    nodes = []
    for value in values:
        new = ThreadNode(value)
        nodes.append(new)
        if root is None:
            root = new
            continue
        node = root
        while True:
            side = "lchild" if value < node.data else "rchild"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, new)
                break
            node = child
    return root, nodes


def test_threaded_traversal_sorted():
    values = [4, 2, 6, 1, 3, 5, 7]
    root, _ = build_bst(values)
    thread_in_order(root)
    assert list(threaded_in_order(root)) == sorted(values)


def test_first_and_last_nodes():
    values = [4, 2, 6, 1, 3]
    root, nodes = build_bst(values)
    thread_in_order(root)
    first = first_node(root)
    assert first.data == min(values)
    assert first.ltag == 1 and first.lchild is None
    last = max(nodes, key=lambda n: n.data)
    assert next_node(last) is None
    assert last.rtag == 0


def test_empty_tree():
    thread_in_order(None)
    assert list(threaded_in_order(None)) == []


def test_single_node():
    node = ThreadNode("only")
    thread_in_order(node)
    assert list(threaded_in_order(node)) == ["only"]


@given(st.lists(st.integers(), min_size=1, max_size=40, unique=True))
def test_threads_point_to_neighbours(values):
    root, nodes = build_bst(values)
    thread_in_order(root)
    order = sorted(values)
    assert list(threaded_in_order(root)) == order
    rank = {value: i for i, value in enumerate(order)}
    for node in nodes:
        i = rank[node.data]
        if node.ltag == 1 and node.lchild is not None:
            assert node.lchild.data == order[i - 1]
        if node.rtag == 1:
            assert node.rchild.data == order[i + 1]