"""Text renderings and reports for inspecting tree shape.

``render_tree`` draws the tree top-down with ``/`` and ``\\`` connectors, doubling
the spacing at every level above the leaves so that children sit underneath
their parents.  ``balance_report`` and ``summarize_tree`` back the "print tree"
and "tree information" menu entries.

Balance figures here are computed from the actual subtree depths rather than
the cached ``height`` field, so hand-assembled trees whose cached heights are
stale are still reported truthfully.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .model import AVLNode
from .traversal import TraversalOrder, traverse

EMPTY_TREE = "Tree is empty"

__all__ = [
    "EMPTY_TREE",
    "NodeBalance",
    "TreeSummary",
    "balance_report",
    "render_tree",
    "structural_depth",
    "summarize_tree",
]


def _subtree_depths(root: Optional[AVLNode]) -> Dict[int, int]:
    """Map ``id(node)`` to the depth of the subtree rooted at that node."""

    depths: Dict[int, int] = {}
    if root is None:
        return depths
    stack: List[Tuple[AVLNode, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if children_done:
            left = depths[id(node.left)] if node.left is not None else 0
            right = depths[id(node.right)] if node.right is not None else 0
            depths[id(node)] = 1 + max(left, right)
            continue
        stack.append((node, True))
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, False))
    return depths


def structural_depth(root: Optional[AVLNode]) -> int:
    """Return the number of levels below and including *root*."""

    if root is None:
        return 0
    levels = 0
    current: List[AVLNode] = [root]
    while current:
        levels += 1
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def render_tree(root: Optional[AVLNode]) -> str:
    """Render *root* as an ASCII diagram.

    Each level prints a row of values followed by ``2 ** (floor - 1)`` rows of
    connectors, where ``floor`` is the number of levels still below it. Rows
    are right-stripped and trailing blank rows are dropped.
    """

    if root is None:
        return EMPTY_TREE

    max_level = structural_depth(root)
    rows: List[str] = []
    nodes: List[Optional[AVLNode]] = [root]
    level = 1

    while any(node is not None for node in nodes):
        floor = max_level - level
        edge_lines = 2 ** max(floor - 1, 0)
        first_spaces = 2**floor - 1
        between_spaces = 2 ** (floor + 1) - 1

        parts: List[str] = [" " * first_spaces]
        next_nodes: List[Optional[AVLNode]] = []
        for node in nodes:
            if node is None:
                parts.append(" ")
                next_nodes.extend((None, None))
            else:
                parts.append(str(node.value))
                next_nodes.extend((node.left, node.right))
            parts.append(" " * between_spaces)
        rows.append("".join(parts))

        for i in range(1, edge_lines + 1):
            parts = []
            for node in nodes:
                parts.append(" " * max(first_spaces - i, 0))
                if node is None:
                    parts.append(" " * (edge_lines + edge_lines + i + 1))
                    continue
                parts.append("/" if node.left is not None else " ")
                parts.append(" " * (i + i - 1))
                parts.append("\\" if node.right is not None else " ")
                parts.append(" " * (edge_lines + edge_lines - i + 1))
            rows.append("".join(parts))

        nodes = next_nodes
        level += 1

    rows = [row.rstrip() for row in rows]
    while rows and not rows[-1]:
        rows.pop()
    return "\n".join(rows)


@dataclass(frozen=True)
class NodeBalance:
    """Balance factor observed at a single node."""

    value: int
    balance: int

    @property
    def balanced(self) -> bool:
        return abs(self.balance) <= 1

    def describe(self) -> str:
        status = "BALANCED" if self.balanced else "UNBALANCED"
        return f"Node {self.value}: Balance = {self.balance} ({status})"


def balance_report(root: Optional[AVLNode]) -> List[NodeBalance]:
    """Return the balance of every node of *root* in pre-order."""

    depths = _subtree_depths(root)
    report: List[NodeBalance] = []
    if root is None:
        return report
    stack: List[AVLNode] = [root]
    while stack:
        node = stack.pop()
        left = depths[id(node.left)] if node.left is not None else 0
        right = depths[id(node.right)] if node.right is not None else 0
        report.append(NodeBalance(value=node.value, balance=left - right))
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return report


@dataclass(frozen=True)
class TreeSummary:
    """Aggregate facts about a non-empty tree."""

    root_value: int
    node_count: int
    height: int
    minimum: int
    maximum: int
    inorder: Sequence[int]
    preorder: Sequence[int]

    def as_rows(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(label, value)`` pairs for tabular output."""

        yield "Root value", str(self.root_value)
        yield "Total nodes", str(self.node_count)
        yield "Tree height", str(self.height)
        yield "Minimum value", str(self.minimum)
        yield "Maximum value", str(self.maximum)
        yield "Inorder (sorted)", ", ".join(str(value) for value in self.inorder)
        yield "Preorder", ", ".join(str(value) for value in self.preorder)


def summarize_tree(root: Optional[AVLNode]) -> Optional[TreeSummary]:
    """Summarise *root*, returning ``None`` for an empty tree.

    Minimum and maximum are read from the in-order sequence, which is sorted
    for any tree built by insertion.
    """

    if root is None:
        return None
    inorder = traverse(root, TraversalOrder.INORDER)
    preorder = traverse(root, TraversalOrder.PREORDER)
    return TreeSummary(
        root_value=root.value,
        node_count=len(inorder),
        height=structural_depth(root),
        minimum=inorder[0],
        maximum=inorder[-1],
        inorder=tuple(inorder),
        preorder=tuple(preorder),
    )
