"""Traversal strategies that flatten a binary tree into a list of values.

Four strategies are supported and selected through ``TraversalOrder``:

* ``preorder`` – node, left subtree, right subtree.
* ``inorder`` – left subtree, node, right subtree (ascending for a BST).
* ``postorder`` – left subtree, right subtree, node.
* ``levelorder`` – breadth-first, left child queued before the right one.

Order names arrive as text from the menu and the command line, so
``TraversalOrder.parse`` is the one place strings are matched
(case-insensitively).  Unknown names raise ``InvalidTraversalOrder`` before
any node is visited.

The depth-first strategies walk the tree with an explicit stack.  Traversal
accepts any node shape, including hand-built skewed trees far deeper than the
interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Deque, Iterable, List, Optional, Union

from .model import AVLNode

__all__ = [
    "InvalidTraversalOrder",
    "TraversalOrder",
    "format_traversal",
    "traverse",
]


class TraversalOrder(str, Enum):
    """Closed set of supported traversal strategies."""

    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"
    LEVELORDER = "levelorder"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, order: object) -> "TraversalOrder":
        """Return the strategy named by *order*, ignoring case.

        ``TraversalOrder`` members are returned unchanged. ``None``, non-string
        inputs and unknown names raise :class:`InvalidTraversalOrder`.
        """

        if isinstance(order, TraversalOrder):
            return order
        if not isinstance(order, str):
            raise InvalidTraversalOrder(order)
        try:
            return cls(order.strip().lower())
        except ValueError:
            raise InvalidTraversalOrder(order) from None


class InvalidTraversalOrder(ValueError):
    """Raised when a traversal order is not one of the supported strategies."""

    def __init__(self, order: object) -> None:
        self.order = order
        self.valid_options = TraversalOrder.names()
        super().__init__(
            f"Invalid traversal type: {order}. "
            f"Valid options: {', '.join(self.valid_options)}"
        )


OrderInput = Union[str, TraversalOrder]


def _pre_order(root: AVLNode) -> List[int]:
    result: List[int] = []
    stack: List[AVLNode] = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def _in_order(root: AVLNode) -> List[int]:
    result: List[int] = []
    stack: List[AVLNode] = []
    node: Optional[AVLNode] = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def _post_order(root: AVLNode) -> List[int]:
    # Node-right-left pre-order, reversed.
    result: List[int] = []
    stack: List[AVLNode] = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def _level_order(root: AVLNode) -> List[int]:
    result: List[int] = []
    queue: Deque[AVLNode] = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


_STRATEGIES: dict[TraversalOrder, Callable[[AVLNode], List[int]]] = {
    TraversalOrder.PREORDER: _pre_order,
    TraversalOrder.INORDER: _in_order,
    TraversalOrder.POSTORDER: _post_order,
    TraversalOrder.LEVELORDER: _level_order,
}


def traverse(root: Optional[AVLNode], order: OrderInput) -> List[int]:
    """Return the values of the tree rooted at *root* in the requested *order*.

    The order is validated before the tree is inspected, so an invalid order
    fails even for an empty tree. ``None`` roots produce an empty list.
    """

    strategy = _STRATEGIES[TraversalOrder.parse(order)]
    if root is None:
        return []
    return strategy(root)


def format_traversal(values: Iterable[int], label: str) -> str:
    """Return ``"<label> Traversal: a, b, c"`` for reporting."""

    return f"{label} Traversal: " + ", ".join(str(value) for value in values)
