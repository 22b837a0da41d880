"""Interactive console menu for building and inspecting an AVL tree.

The menu offers the classroom workflow for AVL trees: numbers are
added one at a time or in a batch, the tree can be drawn together with its
balance factors, traversed in any supported order, summarised and cleared.

All output goes through a ``rich`` console.  Input is read through a
``prompt`` callable (``console.input`` by default) so tests can script a
session without touching ``stdin``.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .builder import build_and_traverse
from .display import balance_report, render_tree, summarize_tree
from .model import AVLTree
from .parsing import parse_numbers, parse_order_choice
from .traversal import InvalidTraversalOrder, TraversalOrder, format_traversal, traverse

logger = logging.getLogger(__name__)

__all__ = ["AVLMenu"]

MENU_OPTIONS = (
    "Add Numbers Manually",
    "Build Tree And Traverse (Input Numbers + Order)",
    "Print AVL Tree Structure",
    "Perform Tree Traversal",
    "Display Tree Information",
    "Clear Tree",
    "Exit Program",
)

ORDER_HINTS = {
    TraversalOrder.PREORDER: "Root -> Left -> Right",
    TraversalOrder.INORDER: "Left -> Root -> Right, sorted",
    TraversalOrder.POSTORDER: "Left -> Right -> Root",
    TraversalOrder.LEVELORDER: "Breadth-first, level by level",
}

EXIT_CHOICE = len(MENU_OPTIONS)


class AVLMenu:
    """Menu-driven session operating on a single :class:`AVLTree`."""

    def __init__(
        self,
        console: Optional[Console] = None,
        prompt: Optional[Callable[[str], str]] = None,
        tree: Optional[AVLTree] = None,
    ) -> None:
        self.console = console if console is not None else Console()
        self._prompt = prompt if prompt is not None else self.console.input
        self.tree = tree if tree is not None else AVLTree()
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_numbers_manually,
            2: self.build_from_batch,
            3: self.print_tree,
            4: self.perform_traversal,
            5: self.display_tree_info,
            6: self.clear_tree,
        }

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def run(self) -> int:
        """Process menu choices until exit or end of input.

        Returns the number of actions executed, excluding the final exit.
        """

        self.console.print(
            Panel.fit(
                "[bold]AVL Tree Program[/]\n"
                "Build a self-balancing tree, view its structure and balance,\n"
                "and traverse it in pre-, in-, post- or level-order.",
                border_style="cyan",
            )
        )
        processed = 0
        while True:
            self._show_main_menu()
            try:
                choice = self._read_menu_choice()
                if choice == EXIT_CHOICE:
                    break
                self._actions[choice]()
            except EOFError:
                logger.debug("Input exhausted; leaving menu")
                break
            processed += 1
        self.console.print(Panel.fit("[bold green]Thank you for using the AVL tree program"))
        return processed

    def _show_main_menu(self) -> None:
        self.console.print("\n[bold]=== MAIN MENU ===[/]")
        for index, label in enumerate(MENU_OPTIONS, start=1):
            self._say(f"{index}. {label}")

    def _read_menu_choice(self) -> int:
        answer = self._ask(f"Please enter your choice (1-{EXIT_CHOICE}): ")
        while True:
            try:
                choice = int(answer)
            except ValueError:
                answer = self._ask(f"Invalid input! Please enter a number (1-{EXIT_CHOICE}): ")
                continue
            if 1 <= choice <= EXIT_CHOICE:
                return choice
            answer = self._ask(f"Please enter a number between 1 and {EXIT_CHOICE}: ")

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------
    def add_numbers_manually(self) -> None:
        self._header("ADD NUMBERS MANUALLY")
        self._say("Enter numbers one by one. Type 'done' to finish.")
        added = 0
        rejected = 0
        while True:
            answer = self._ask("Enter a number (or 'done' to finish): ")
            if answer.lower() == "done":
                break
            try:
                number = int(answer)
            except ValueError:
                self._say("Invalid input! Please enter a valid integer or 'done'.")
                continue
            if number in self.tree:
                self._say(f"Number {number} already exists in the tree. Skipping...")
                rejected += 1
                continue
            self._say(f"--- Inserting {number} ---")
            self.tree.insert(number)
            added += 1
            self._say(render_tree(self.tree.root))

        self._say(f"Numbers successfully added: {added}")
        self._say(f"Numbers rejected (duplicates): {rejected}")

    def build_from_batch(self) -> None:
        self._header("BUILD TREE AND TRAVERSE")
        self._say("Enter numbers comma-separated (8,4,9,7) or space-separated (8 4 9 7).")
        self._say("Only non-negative integers are accepted.")
        parsed = parse_numbers(self._ask("Enter numbers: "))
        if parsed.invalid:
            self._say(f"Ignored (not numbers): {', '.join(parsed.invalid)}")
        if parsed.negative:
            self._say(f"Rejected (negative numbers): {', '.join(parsed.negative)}")
        if parsed.duplicates:
            self._say(f"Duplicate numbers removed: {', '.join(map(str, parsed.duplicates))}")
        if not parsed.accepted:
            self._say("No valid numbers provided. Operation cancelled.")
            return

        order = self._read_order()
        start = time.perf_counter()
        try:
            result = build_and_traverse(parsed.accepted, order, reporter=self._say)
        except InvalidTraversalOrder as exc:
            logger.error("Build and traverse failed: %s", exc)
            self._say(f"Error during traversal: {exc}")
            return
        elapsed_ms = (time.perf_counter() - start) * 1_000

        self._header("EXECUTION COMPLETE")
        self._say(f"Execution time: {elapsed_ms:.3f} ms")
        self._say(f"Return value: {', '.join(map(str, result))}")
        self._say(f"Return length: {len(result)}")

    def print_tree(self) -> None:
        self._header("AVL TREE STRUCTURE")
        if self.tree.is_empty():
            self._say("The tree is empty. Please add some numbers first.")
            return
        self._say(render_tree(self.tree.root))
        self._header("Balance Information")
        for entry in balance_report(self.tree.root):
            self._say(entry.describe())

    def perform_traversal(self) -> None:
        if self.tree.is_empty():
            self._say("The tree is empty. Please add some numbers first.")
            return
        order = self._read_order()
        self._header(f"{order.value.upper()} TRAVERSAL")
        self._say(format_traversal(traverse(self.tree.root, order), order.value))

    def display_tree_info(self) -> None:
        self._header("TREE INFORMATION")
        summary = summarize_tree(self.tree.root)
        if summary is None:
            self._say("The tree is empty.")
            return
        table = Table(title="AVL Tree Summary")
        table.add_column("Property", style="cyan")
        table.add_column("Value")
        for label, value in summary.as_rows():
            table.add_row(label, value)
        self.console.print(table)

    def clear_tree(self) -> None:
        answer = self._ask("Are you sure you want to clear the tree? (yes/no): ")
        if answer.lower() in {"yes", "y"}:
            self.tree.clear()
            self._say("Tree cleared successfully!")
        else:
            self._say("Clear operation cancelled.")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _read_order(self) -> TraversalOrder:
        self._header("SELECT TRAVERSAL ORDER")
        for index, order in enumerate(TraversalOrder, start=1):
            self._say(f"{index}. {order.value:<10} ({ORDER_HINTS[order]})")
        answer = self._ask("Enter your choice (1-4 or the order name): ")
        while True:
            order = parse_order_choice(answer)
            if order is not None:
                return order
            answer = self._ask("Invalid choice! Please enter 1-4 or the order name: ")

    def _ask(self, message: str) -> str:
        return self._prompt(message).strip()

    def _header(self, title: str) -> None:
        self.console.print(f"\n[bold]=== {title} ===[/]")

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
