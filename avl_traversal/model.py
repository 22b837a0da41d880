"""Self-balancing AVL tree storing unique integer keys.

The module provides the balanced tree engine used by the traversal helpers and
the interactive menu:

* ``AVLNode`` – a ``@dataclass`` holding a value, the cached subtree height and
  optional left/right children.
* ``AVLTree`` – owns the root node and keeps the AVL height-balance invariant
  across insertions by applying single and double rotations.
* ``height`` / ``balance_factor`` – O(1) helpers based on the cached heights.

Duplicate insertions are ignored rather than rejected, so callers that care
about the distinction check membership with ``in`` first.  Rotations are
reported on the module logger at ``DEBUG`` level only.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "AVLNode",
    "AVLTree",
    "balance_factor",
    "height",
]


@dataclass(slots=True)
class AVLNode:
    """Node of an AVL tree; ``height`` counts a leaf as 1."""

    value: int
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    height: int = 1

    def __post_init__(self) -> None:
        _require_int(self.value)

    def __str__(self) -> str:
        return str(self.value)


def _require_int(value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("AVL tree values must be integers")


def height(node: Optional[AVLNode]) -> int:
    """Return the cached height of *node*, or ``0`` when it is absent."""

    return 0 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Return ``height(left) - height(right)`` for *node* (``0`` when absent)."""

    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def _rotate_right(y: AVLNode) -> AVLNode:
    logger.debug("Right rotation around %d", y.value)
    x = y.left
    # Only called on a left-heavy node, so the left child exists.
    assert x is not None
    t2 = x.right

    x.right = y
    y.left = t2

    # y is now the child of x, so its height must be settled first.
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: AVLNode) -> AVLNode:
    logger.debug("Left rotation around %d", x.value)
    y = x.right
    # Only called on a right-heavy node, so the right child exists.
    assert y is not None
    t2 = y.left

    y.left = x
    x.right = t2

    _update_height(x)
    _update_height(y)
    return y


class AVLTree:
    """Height-balanced binary search tree of unique integers."""

    __slots__ = ("_root", "_size")

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._root: Optional[AVLNode] = None
        self._size = 0
        if values is not None:
            for value in values:
                self.insert(value)

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def insert(self, value: int) -> None:
        """Insert *value* and rebalance the path back to the root.

        Values already present leave the tree untouched. Non-integer values
        raise ``TypeError`` before any node is visited.
        """

        _require_int(value)
        self._root = self._insert(self._root, value)

    def clear(self) -> None:
        """Discard every node, leaving an empty tree."""

        self._root = None
        self._size = 0

    def _insert(self, node: Optional[AVLNode], value: int) -> AVLNode:
        if node is None:
            self._size += 1
            return AVLNode(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node

        _update_height(node)
        balance = balance_factor(node)

        if balance > 1 and value < node.left.value:
            logger.debug("Left-Left imbalance at %d", node.value)
            return _rotate_right(node)

        if balance < -1 and value > node.right.value:
            logger.debug("Right-Right imbalance at %d", node.value)
            return _rotate_left(node)

        if balance > 1 and value > node.left.value:
            logger.debug("Left-Right imbalance at %d", node.value)
            node.left = _rotate_left(node.left)
            return _rotate_right(node)

        if balance < -1 and value < node.right.value:
            logger.debug("Right-Left imbalance at %d", node.value)
            node.right = _rotate_right(node.right)
            return _rotate_left(node)

        return node

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[AVLNode]:
        """Root node, or ``None`` for an empty tree."""

        return self._root

    @property
    def height(self) -> int:
        return height(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height})"
