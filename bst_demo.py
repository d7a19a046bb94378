"""Command line demonstration of :mod:`ordered_tree`.

Running the module builds three sample trees, prints the depth-first
traversals of the first one, lists every tree level by level, searches for a
couple of values and reports which trees are structurally equal.  Custom
insertion sequences can be supplied with ``--tree`` (one flag per tree).

The built-in samples carry their expected level listings; a mismatch aborts
the run with exit status 3 so the script doubles as a smoke test.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from ordered_tree import OrderedTree, trees_equal

logger = logging.getLogger(__name__)


class DemoExpectationError(RuntimeError):
    """Raised when a built-in demo tree does not have its documented shape."""


@dataclass(frozen=True)
class DemoCase:
    """An insertion sequence and, optionally, its expected level listing."""

    name: str
    values: Tuple[int, ...]
    expected_levels: Optional[Tuple[str, ...]] = None

    def build(self) -> OrderedTree[int]:
        """Materialise the tree described by this case."""

        return OrderedTree(self.values)


#       8
#     /   \
#    5     10
#   / \   /
#  1   6 9
_SAMPLE_LEVELS = ("depth 0: 8", "depth 1: 5 10", "depth 2: 1 6 9")

#       8
#     /   \
#    5     10
#   / \
#  1   6
#       \
#        7
_SKEWED_LEVELS = ("depth 0: 8", "depth 1: 5 10", "depth 2: 1 6", "depth 3: 7")

DEFAULT_SEARCHES: Tuple[Tuple[int, int], ...] = ((0, 6), (1, 13))


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase("Tree 1", (8, 5, 10, 1, 6, 9), _SAMPLE_LEVELS)
    yield DemoCase("Tree 2", (8, 5, 10, 1, 6, 9), _SAMPLE_LEVELS)
    yield DemoCase("Tree 3", (8, 5, 10, 1, 6, 7), _SKEWED_LEVELS)


def _format_values(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _traversal_rows(tree: OrderedTree[int]) -> List[Tuple[str, str]]:
    return [
        ("Pre-order", _format_values(tree.pre_order())),
        ("In-order", _format_values(tree.in_order())),
        ("Post-order", _format_values(tree.post_order())),
    ]


def _check_expectation(case: DemoCase, lines: List[str]) -> None:
    if case.expected_levels is None:
        return
    if tuple(lines) != case.expected_levels:
        raise DemoExpectationError(
            f"Demo case expectation mismatch: {case.name} expected"
            f" {list(case.expected_levels)} but received {lines}"
        )


def _format_search(case: DemoCase, tree: OrderedTree[int], target: int) -> str:
    outcome = "found" if tree.search(target) else "not found"
    return f"Node with value {target} in {case.name} {outcome}."


def _format_equality(
    first: Tuple[DemoCase, OrderedTree[int]], second: Tuple[DemoCase, OrderedTree[int]]
) -> str:
    verdict = "Yes" if trees_equal(first[1], second[1]) else "No"
    first_label = first[0].name.replace(" ", "").lower()
    second_label = second[0].name.replace(" ", "").lower()
    return f"Are {first_label} and {second_label} equal? {verdict}"


def render_report(
    cases: Sequence[DemoCase],
    searches: Sequence[Tuple[int, int]] = DEFAULT_SEARCHES,
) -> List[str]:
    """Return the plain-text demonstration output for *cases*.

    *searches* holds ``(case_index, value)`` pairs; pairs pointing past the
    last case are skipped with a warning.
    """

    built = [(case, case.build()) for case in cases]
    if not built:
        return []

    first_case, first_tree = built[0]
    lines = [f"{first_case.name} traversals:"]
    lines.extend(f"{label}: {values}" for label, values in _traversal_rows(first_tree))

    for case, tree in built:
        levels = tree.level_lines()
        _check_expectation(case, levels)
        lines.append("")
        lines.append(f"{case.name}:")
        lines.extend(levels)

    for index, target in searches:
        if index >= len(built):
            logger.warning("Skipping search for %d: no tree #%d", target, index + 1)
            continue
        case, tree = built[index]
        lines.append("")
        lines.append(_format_search(case, tree, target))

    if len(built) > 1:
        lines.append("")
        lines.extend(_format_equality(built[0], other) for other in built[1:])
    return lines


def _print_rich_traversals(console: Console, case: DemoCase) -> None:
    table = Table(title=f"{case.name} traversals")
    table.add_column("Order", style="cyan")
    table.add_column("Values")
    for label, values in _traversal_rows(case.build()):
        table.add_row(label, values)
    console.print(table)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Demonstrate binary search tree insertion, traversal and comparison",
    )
    parser.add_argument(
        "--tree",
        dest="trees",
        action="append",
        nargs="+",
        type=int,
        metavar="VALUE",
        help="Insertion sequence for one tree; repeat the flag for more trees",
    )
    parser.add_argument(
        "--search",
        dest="searches",
        action="append",
        type=int,
        metavar="VALUE",
        help="Value to look up in the first tree; repeatable",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Render the traversal summary as a table",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging level for execution",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Execute the demonstration flow and return the process exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level, logging.WARNING))

    if args.trees:
        cases = [
            DemoCase(f"Tree {number}", tuple(values))
            for number, values in enumerate(args.trees, start=1)
        ]
    else:
        cases = list(_iter_demo_cases())
    searches = (
        tuple((0, target) for target in args.searches)
        if args.searches
        else DEFAULT_SEARCHES
    )
    logger.info("Running demo with %d tree(s)", len(cases))

    try:
        lines = render_report(cases, searches)
    except DemoExpectationError as exc:
        logger.error("Demo aborted: %s", exc)
        return 3

    if args.rich and cases:
        # The table replaces the plain traversal header and its three rows.
        _print_rich_traversals(Console(), cases[0])
        lines = lines[4:]
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
