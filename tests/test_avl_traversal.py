"""Tests for the traversal strategies over hand-built and inserted trees."""

from __future__ import annotations

from typing import Optional

import pytest

from avl_traversal.model import AVLNode
from avl_traversal.traversal import (
    InvalidTraversalOrder,
    TraversalOrder,
    format_traversal,
    traverse,
)

ORDERS = ("preorder", "inorder", "postorder", "levelorder")


def _perfect_seven() -> AVLNode:
    return AVLNode(
        4,
        AVLNode(2, AVLNode(1), AVLNode(3)),
        AVLNode(6, AVLNode(5), AVLNode(7)),
    )


def _left_skewed(n: int) -> Optional[AVLNode]:
    root: Optional[AVLNode] = None
    for value in range(1, n + 1):
        root = AVLNode(value, left=root)
    return root


def _right_skewed(n: int) -> Optional[AVLNode]:
    root: Optional[AVLNode] = None
    for value in range(n, 0, -1):
        root = AVLNode(value, right=root)
    return root


def _zigzag(n: int) -> AVLNode:
    root = AVLNode(1)
    current = root
    for value in range(2, n + 1):
        child = AVLNode(value)
        if value % 2 == 0:
            current.left = child
        else:
            current.right = child
        current = child
    return root


@pytest.mark.parametrize("order", ORDERS)
def test_empty_tree_yields_empty_list(order: str) -> None:
    assert traverse(None, order) == []


@pytest.mark.parametrize("order", ORDERS)
def test_single_node(order: str) -> None:
    assert traverse(AVLNode(10), order) == [10]


@pytest.mark.parametrize(
    ("order", "expected"),
    [
        ("preorder", [4, 2, 1, 3, 6, 5, 7]),
        ("inorder", [1, 2, 3, 4, 5, 6, 7]),
        ("postorder", [1, 3, 2, 5, 7, 6, 4]),
        ("levelorder", [4, 2, 6, 1, 3, 5, 7]),
    ],
)
def test_perfect_tree(order: str, expected: list[int]) -> None:
    assert traverse(_perfect_seven(), order) == expected


@pytest.mark.parametrize(
    ("order", "expected"),
    [
        ("preorder", [5, 4, 3, 2, 1]),
        ("inorder", [1, 2, 3, 4, 5]),
        ("postorder", [1, 2, 3, 4, 5]),
        ("levelorder", [5, 4, 3, 2, 1]),
    ],
)
def test_left_skewed_tree(order: str, expected: list[int]) -> None:
    assert traverse(_left_skewed(5), order) == expected


@pytest.mark.parametrize(
    ("order", "expected"),
    [
        ("preorder", [1, 2, 3, 4, 5]),
        ("inorder", [1, 2, 3, 4, 5]),
        ("postorder", [5, 4, 3, 2, 1]),
        ("levelorder", [1, 2, 3, 4, 5]),
    ],
)
def test_right_skewed_tree(order: str, expected: list[int]) -> None:
    assert traverse(_right_skewed(5), order) == expected


@pytest.mark.parametrize(
    ("order", "expected"),
    [
        ("preorder", [10, 5, 7, 20, 30, 25]),
        ("inorder", [5, 7, 10, 20, 25, 30]),
        ("postorder", [7, 5, 25, 30, 20, 10]),
        ("levelorder", [10, 5, 20, 7, 30, 25]),
    ],
)
def test_sparse_tree(order: str, expected: list[int]) -> None:
    root = AVLNode(
        10,
        AVLNode(5, right=AVLNode(7)),
        AVLNode(20, right=AVLNode(30, left=AVLNode(25))),
    )
    assert traverse(root, order) == expected


def test_hand_built_tree_with_repeated_values_visits_every_node() -> None:
    root = AVLNode(2, AVLNode(1), AVLNode(2, left=AVLNode(1)))
    assert traverse(root, "preorder") == [2, 1, 2, 1]
    assert traverse(root, "inorder") == [1, 2, 1, 2]
    assert traverse(root, "postorder") == [1, 1, 2, 2]
    assert traverse(root, "levelorder") == [2, 1, 2, 1]


def test_zigzag_path() -> None:
    root = _zigzag(8)
    assert traverse(root, "preorder") == [1, 2, 3, 4, 5, 6, 7, 8]
    assert traverse(root, "inorder") == [2, 4, 6, 8, 7, 5, 3, 1]
    assert traverse(root, "postorder") == [8, 7, 6, 5, 4, 3, 2, 1]
    assert traverse(root, "levelorder") == [1, 2, 3, 4, 5, 6, 7, 8]


@pytest.mark.parametrize("order", ORDERS)
def test_deep_skewed_tree_beyond_recursion_limit(order: str) -> None:
    depth = 3_000
    values = traverse(_left_skewed(depth), order)
    assert len(values) == depth
    assert sorted(values) == list(range(1, depth + 1))


def test_order_is_case_insensitive() -> None:
    root = _perfect_seven()
    assert traverse(root, "InOrDeR") == traverse(root, "inorder")
    assert traverse(root, "  LEVELORDER ") == traverse(root, "levelorder")
    assert traverse(root, TraversalOrder.POSTORDER) == traverse(root, "postorder")


def test_invalid_order_raises_with_details() -> None:
    with pytest.raises(InvalidTraversalOrder) as excinfo:
        traverse(_perfect_seven(), "zigzag")
    error = excinfo.value
    assert isinstance(error, ValueError)
    assert error.order == "zigzag"
    assert error.valid_options == ORDERS
    assert str(error) == (
        "Invalid traversal type: zigzag. "
        "Valid options: preorder, inorder, postorder, levelorder"
    )


@pytest.mark.parametrize("order", [None, 3, ""])
def test_missing_or_non_string_order_is_rejected(order: object) -> None:
    with pytest.raises(InvalidTraversalOrder):
        traverse(None, order)  # type: ignore[arg-type]


def test_format_traversal() -> None:
    assert format_traversal([1, 2, 3], "inorder") == "inorder Traversal: 1, 2, 3"
    assert format_traversal([], "Preorder") == "Preorder Traversal: "
