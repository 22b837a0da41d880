"""Build an AVL tree from a batch of numbers and traverse it in one call."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from .display import render_tree
from .model import AVLTree
from .traversal import OrderInput, TraversalOrder, format_traversal, traverse

logger = logging.getLogger(__name__)

__all__ = ["build_and_traverse"]


def build_and_traverse(
    numbers: Optional[Iterable[int]],
    order: OrderInput,
    *,
    reporter: Callable[[str], None] | None = None,
) -> List[int]:
    """Insert *numbers* into a fresh AVL tree and return its traversal.

    Values are inserted in iteration order and duplicates are ignored. The
    order is validated before any insertion takes place. When a *reporter*
    such as :func:`print` is supplied it receives the construction transcript:
    the rendered tree after every insertion, the final tree and the formatted
    traversal.
    """

    if numbers is None:
        raise ValueError("numbers cannot be None")
    parsed_order = TraversalOrder.parse(order)

    def emit(line: str) -> None:
        if reporter is not None:
            reporter(line)

    tree = AVLTree()
    emit("=== AVL Tree Construction ===")
    for number in numbers:
        emit(f"\n--- Inserting {number} ---")
        tree.insert(number)
        emit(render_tree(tree.root))

    emit("\n=== Final AVL Tree ===")
    emit(render_tree(tree.root))

    result = traverse(tree.root, parsed_order)
    logger.debug("Traversed %d nodes in %s order", len(result), parsed_order.value)
    emit(f"\n=== Traversal ({parsed_order.value}) ===")
    emit(format_traversal(result, parsed_order.value))
    return result
