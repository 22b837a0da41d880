from __future__ import annotations

from avl_traversal.display import (
    EMPTY_TREE,
    NodeBalance,
    balance_report,
    render_tree,
    structural_depth,
    summarize_tree,
)
from avl_traversal.model import AVLNode, AVLTree


def test_render_empty_tree() -> None:
    assert render_tree(None) == EMPTY_TREE == "Tree is empty"


def test_render_single_node() -> None:
    assert render_tree(AVLNode(7)) == "7"


def test_render_three_node_tree() -> None:
    tree = AVLTree([1, 2, 3])
    assert render_tree(tree.root) == "\n".join([" 2", "/ \\", "1 3"])


def test_render_marks_missing_children_with_blanks() -> None:
    tree = AVLTree([8, 4, 9, 2])
    expected = "\n".join(
        [
            "   8",
            "  / \\",
            " /   \\",
            " 4   9",
            "/",
            "2",
        ]
    )
    assert render_tree(tree.root) == expected


def test_structural_depth() -> None:
    assert structural_depth(None) == 0
    assert structural_depth(AVLNode(1, right=AVLNode(2, right=AVLNode(3)))) == 3


def test_balance_report_is_pre_order() -> None:
    tree = AVLTree([8, 4, 9, 2])
    report = balance_report(tree.root)
    assert [entry.value for entry in report] == [8, 4, 2, 9]
    assert [entry.balance for entry in report] == [1, 1, 0, 0]
    assert all(entry.balanced for entry in report)
    assert report[0].describe() == "Node 8: Balance = 1 (BALANCED)"


def test_balance_report_uses_actual_depth_for_hand_built_trees() -> None:
    # Cached heights are left at 1, the report must still see the skew.
    root = AVLNode(3, left=AVLNode(2, left=AVLNode(1)))
    report = balance_report(root)
    assert report[0] == NodeBalance(value=3, balance=2)
    assert not report[0].balanced
    assert report[0].describe() == "Node 3: Balance = 2 (UNBALANCED)"
    assert balance_report(None) == []


def test_summarize_tree() -> None:
    assert summarize_tree(None) is None
    tree = AVLTree([8, 4, 9, 7, 2, 13, 11, 46])
    summary = summarize_tree(tree.root)
    assert summary is not None
    assert summary.root_value == 8
    assert summary.node_count == 8
    assert summary.height == 4
    assert (summary.minimum, summary.maximum) == (2, 46)
    assert list(summary.inorder) == [2, 4, 7, 8, 9, 11, 13, 46]
    rows = dict(summary.as_rows())
    assert rows["Preorder"] == "8, 4, 2, 7, 11, 9, 13, 46"
    assert rows["Tree height"] == "4"
