"""BST insert / search / traverse traces."""

import pytest

from algorithms import InputValidationError, insert_node, search_tree, traverse_tree


def build(values, width=800):
    root, steps = None, []
    for v in values:
        root = insert_node(root, v, steps, width=width)
    return root, steps


def values_of(root, ids):
    by_id = {n.id: n.value for n in root.iter_nodes()}
    return [by_id[i] for i in ids]


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def test_first_insert_creates_root():
    steps = []
    root = insert_node(None, 8, steps)

    assert (root.value, root.x, root.y) == (8, 400, 50)
    assert [s.explanation for s in steps] == ["Created root node with value 8"]
    assert steps[0].current == root.id
    assert steps[0].tree.value == 8


def test_insert_walks_and_lays_out():
    root, _ = build([8])
    steps = []
    new_root = insert_node(root, 3, steps)

    assert [s.explanation for s in steps] == [
        "Inserting 3... Starting at root",
        "3 < 8, going left",
        "Inserted 3",
    ]
    assert new_root.left.value == 3
    assert (new_root.left.x, new_root.left.y) == (200, 110)
    assert steps[-1].comparisons == 1


def test_insert_does_not_touch_previous_tree():
    root, _ = build([8])
    new_root = insert_node(root, 3, [])

    assert root.left is None
    assert new_root is not root
    assert new_root.id == root.id


def test_step_snapshots_are_frozen_in_time():
    root, _ = build([8])
    steps = []
    insert_node(root, 3, steps)

    assert steps[0].tree.left is None
    assert steps[-1].tree.left.value == 3


def test_duplicates_go_right():
    root, _ = build([8, 10])
    steps = []
    root = insert_node(root, 8, steps)

    assert "8 >= 8, going right" in [s.explanation for s in steps]
    assert "8 < 10, going left" in [s.explanation for s in steps]
    assert root.right.left.value == 8


def test_layout_positions_by_level():
    root, _ = build([50, 25, 75, 10, 30])
    assert (root.x, root.y) == (400, 50)
    assert (root.left.x, root.right.x) == (200, 600)
    assert (root.left.left.x, root.left.right.x) == (100, 300)
    assert root.left.left.y == 170


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def test_search_found():
    root, _ = build([8, 3, 10])
    steps = []

    assert search_tree(root, 10, steps) is True
    assert [s.explanation for s in steps] == [
        "Searching for 10...",
        "Checking 8...",
        "10 > 8, going right",
        "Checking 10...",
        "Found 10!",
    ]
    assert steps[-1].visited == [root.right.id]


def test_search_not_found():
    root, _ = build([8, 3, 10])
    steps = []

    assert search_tree(root, 5, steps) is False
    assert steps[-2].explanation == "5 > 3, going right"
    assert steps[-1].explanation == "5 not found in tree"
    assert steps[-1].comparisons == 2


def test_search_empty_tree():
    steps = []
    assert search_tree(None, 5, steps) is False
    assert [s.explanation for s in steps] == ["Searching for 5...", "5 not found in tree"]


# ---------------------------------------------------------------------------
# Traverse
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("order, expected", [
    ("inorder",   [1, 3, 8, 10]),
    ("preorder",  [8, 3, 1, 10]),
    ("postorder", [1, 3, 10, 8]),
])
def test_traversal_orders(order, expected):
    root, _ = build([8, 3, 10, 1])
    steps = []
    visited = traverse_tree(root, order, steps)

    assert values_of(root, visited) == expected
    assert steps[0].explanation == f"Starting {order} traversal"
    assert steps[-1].explanation == f"{order} traversal complete"
    assert len(steps) == 2 + len(expected)


def test_traversal_visited_is_cumulative():
    root, _ = build([2, 1, 3])
    steps = []
    traverse_tree(root, "inorder", steps)

    assert steps[0].visited == []
    assert [len(s.visited) for s in steps[1:-1]] == [1, 2, 3]
    assert steps[1].explanation == "Visiting 1 (Inorder)"


def test_traversal_of_empty_tree():
    steps = []
    assert traverse_tree(None, "preorder", steps) == []
    assert len(steps) == 2


def test_unknown_order_is_rejected():
    with pytest.raises(InputValidationError):
        traverse_tree(None, "levelorder", [])
