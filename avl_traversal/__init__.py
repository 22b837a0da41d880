"""AVL tree construction, traversal and inspection helpers."""

from .builder import build_and_traverse
from .display import (
    EMPTY_TREE,
    NodeBalance,
    TreeSummary,
    balance_report,
    render_tree,
    structural_depth,
    summarize_tree,
)
from .model import AVLNode, AVLTree, balance_factor, height
from .parsing import ParsedNumbers, parse_numbers, parse_order_choice
from .traversal import (
    InvalidTraversalOrder,
    TraversalOrder,
    format_traversal,
    traverse,
)

__all__ = [
    "AVLNode",
    "AVLTree",
    "EMPTY_TREE",
    "InvalidTraversalOrder",
    "NodeBalance",
    "ParsedNumbers",
    "TraversalOrder",
    "TreeSummary",
    "balance_factor",
    "balance_report",
    "build_and_traverse",
    "format_traversal",
    "height",
    "parse_numbers",
    "parse_order_choice",
    "render_tree",
    "structural_depth",
    "summarize_tree",
    "traverse",
]
