"""Command line front end for the AVL tree traversal toolkit.

By default the script builds an AVL tree from ``--numbers`` (the classroom
example ``8,4,9,7,2,13,11,46`` when omitted), prints the construction
transcript and the requested traversal.  ``--output-format json`` emits a
single JSON object instead, which is convenient for diffing in CI, and
``--interactive`` starts the full menu.

The heavy lifting lives in :mod:`avl_traversal`; this module only parses
arguments, configures logging and maps failures to exit codes.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from typing import List, Sequence

from avl_traversal import InvalidTraversalOrder, build_and_traverse, parse_numbers
from avl_traversal.menu import AVLMenu

logger = logging.getLogger(__name__)

DEFAULT_NUMBERS = "8,4,9,7,2,13,11,46"
DEFAULT_ORDER = "inorder"

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

# A value such as "-5,0,5" or "-5 0 5" that argparse would mistake for a flag.
_NEGATIVE_LIST = re.compile(r"^-\d")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build an AVL tree from a list of integers and traverse it.",
    )
    parser.add_argument(
        "--numbers",
        default=DEFAULT_NUMBERS,
        help=(
            "Comma- or space-separated integers inserted in the given order. "
            "Duplicates are ignored. Lists may start with a negative value "
            "(--numbers \"-5 0 5\" or --numbers=-5,0,5)."
        ),
    )
    parser.add_argument(
        "--order",
        default=DEFAULT_ORDER,
        help="Traversal order: preorder, inorder, postorder or levelorder (any case).",
    )
    parser.add_argument(
        "--output-format",
        choices=["text", "json"],
        default="text",
        help="Print the construction transcript as text or only the result as JSON.",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start the interactive menu instead of a single traversal.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity; DEBUG reports every rotation.",
    )
    return parser


def _attach_negative_numbers(argv: Sequence[str]) -> List[str]:
    """Fold ``--numbers -5,0,5`` into ``--numbers=-5,0,5`` for argparse."""

    folded: List[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        if (
            token == "--numbers"
            and index + 1 < len(argv)
            and _NEGATIVE_LIST.match(argv[index + 1])
        ):
            folded.append(f"--numbers={argv[index + 1]}")
            index += 2
            continue
        folded.append(token)
        index += 1
    return folded


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit code."""

    parser = _build_parser()
    args = parser.parse_args(
        _attach_negative_numbers(sys.argv[1:] if argv is None else argv)
    )
    logging.basicConfig(level=getattr(logging, args.log_level, logging.WARNING))

    if args.interactive:
        AVLMenu().run()
        return EXIT_OK

    parsed = parse_numbers(args.numbers, allow_negative=True)
    if parsed.invalid:
        logger.warning("Ignoring non-integer inputs: %s", ", ".join(parsed.invalid))
    if parsed.duplicates:
        logger.info(
            "Dropping duplicate values: %s", ", ".join(map(str, parsed.duplicates))
        )
    if not parsed.accepted:
        logger.error("No valid numbers supplied in %r", args.numbers)
        return EXIT_INVALID_INPUT

    reporter = print if args.output_format == "text" else None
    try:
        result = build_and_traverse(parsed.accepted, args.order, reporter=reporter)
    except InvalidTraversalOrder as exc:
        logger.error("%s", exc)
        return EXIT_INVALID_INPUT

    if args.output_format == "json":
        payload = {
            "numbers": list(parsed.accepted),
            "order": args.order.strip().lower(),
            "result": result,
        }
        print(json.dumps(payload))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
