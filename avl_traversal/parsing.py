"""Parsing of user-typed number lists and traversal choices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .traversal import InvalidTraversalOrder, TraversalOrder

__all__ = [
    "ParsedNumbers",
    "parse_numbers",
    "parse_order_choice",
]

_MENU_ORDERS = {
    "1": TraversalOrder.PREORDER,
    "2": TraversalOrder.INORDER,
    "3": TraversalOrder.POSTORDER,
    "4": TraversalOrder.LEVELORDER,
}


@dataclass(frozen=True)
class ParsedNumbers:
    """Outcome of parsing a number list typed by the user."""

    accepted: tuple[int, ...] = field(default_factory=tuple)
    invalid: tuple[str, ...] = field(default_factory=tuple)
    negative: tuple[str, ...] = field(default_factory=tuple)
    duplicates: tuple[int, ...] = field(default_factory=tuple)


def parse_numbers(text: str, *, allow_negative: bool = False) -> ParsedNumbers:
    """Parse comma- or whitespace-separated integers from *text*.

    A comma anywhere in the input selects comma separation. Tokens that are
    not integers are collected in ``invalid``; negative values go to
    ``negative`` unless *allow_negative* is set. Repeated values keep their
    first occurrence and the extras are reported in ``duplicates``.
    """

    stripped = text.strip()
    if not stripped:
        return ParsedNumbers()
    tokens = stripped.split(",") if "," in stripped else stripped.split()

    accepted: List[int] = []
    seen: set[int] = set()
    invalid: List[str] = []
    negative: List[str] = []
    duplicates: List[int] = []

    for raw in tokens:
        token = raw.strip()
        if not token:
            continue
        try:
            number = int(token, 10)
        except ValueError:
            invalid.append(token)
            continue
        if number < 0 and not allow_negative:
            negative.append(token)
            continue
        if number in seen:
            duplicates.append(number)
            continue
        seen.add(number)
        accepted.append(number)

    return ParsedNumbers(
        accepted=tuple(accepted),
        invalid=tuple(invalid),
        negative=tuple(negative),
        duplicates=tuple(duplicates),
    )


def parse_order_choice(text: str) -> Optional[TraversalOrder]:
    """Map a menu answer (``1``-``4`` or an order name) to a traversal order."""

    answer = text.strip()
    if answer in _MENU_ORDERS:
        return _MENU_ORDERS[answer]
    try:
        return TraversalOrder.parse(answer)
    except InvalidTraversalOrder:
        return None
