"""Command-line front end: choose a search strategy and solve the jug puzzle."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .problem import (
    DEFAULT_HEURISTIC,
    THREE_JUG_CAPACITIES,
    TWO_JUG_CAPACITIES,
    JugProblem,
    Method,
)
from .search import (
    Node,
    SearchLimitExceeded,
    depth_type_search,
    first_goal_test_search,
    first_insert_frontier_search,
    iterative_deepening_search,
    solution_lines,
)

_HEURISTIC_METHODS = (Method.GREEDY, Method.A_STAR, Method.GENERALIZED_A_STAR)


def run(
    method: Method,
    max_level: int = 0,
    alpha: float = 1.0,
    heuristic: int = DEFAULT_HEURISTIC,
    three_jugs: bool = False,
) -> Optional[Node]:
    """Solve the puzzle from empty jugs with ``method``; the goal node or None."""
    try:
        method = Method(method)
    except ValueError:
        raise ValueError(f"Unknown method: {method}") from None

    capacities = THREE_JUG_CAPACITIES if three_jugs else TWO_JUG_CAPACITIES
    problem = JugProblem(capacities, heuristic=heuristic)
    root = Node(problem.initial_state())
    if method in _HEURISTIC_METHODS:
        root.state.h_n = problem.heuristic_value(root.state, None)

    if method in (Method.BREADTH_FIRST, Method.GREEDY):
        return first_goal_test_search(problem, method, root, None)
    if method in (Method.DEPTH_FIRST, Method.DEPTH_LIMITED):
        return depth_type_search(problem, method, root, None, max_level)
    if method is Method.ITERATIVE_DEEPENING:
        return iterative_deepening_search(problem, root, None)
    return first_insert_frontier_search(problem, method, root, None, alpha)


def _menu() -> str:
    lines = [f"{m.value} --> {m.label}" for m in Method]
    return "\n".join(lines)


def _ask_number(prompt: str, kind: type):
    text = input(prompt)
    try:
        return kind(text.strip())
    except ValueError:
        raise ValueError(f"not a valid number: {text!r}") from None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jugsearch",
        description="Solve the water-jug puzzle with a choice of search strategies.",
    )
    parser.add_argument(
        "-m",
        "--method",
        type=int,
        choices=[m.value for m in Method],
        help="search method number; asked interactively when omitted",
    )
    parser.add_argument(
        "--max-level", type=int, help="maximum level for depth-limited search"
    )
    parser.add_argument("--alpha", type=float, help="alpha for generalized A* search")
    parser.add_argument(
        "--heuristic",
        type=int,
        choices=(0, 1, 2),
        default=DEFAULT_HEURISTIC,
        help="heuristic: 0 none, 1 goal indicator, 2 distance to target",
    )
    parser.add_argument(
        "--three-jugs", action="store_true", help="use jugs of 8, 5 and 3 units"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="trace every search step"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    max_level = args.max_level
    alpha = args.alpha
    try:
        if args.method is None:
            print(_menu())
            method_number = _ask_number("Select a method to solve the problem: ", int)
        else:
            method_number = args.method
        method = Method(method_number)
        if method is Method.DEPTH_LIMITED and max_level is None:
            max_level = _ask_number("Enter maximum level for depth-limited search : ", int)
        if method is Method.GENERALIZED_A_STAR and alpha is None:
            alpha = _ask_number(
                "Enter value of alpha for Generalized A* Search : ", float
            )
    except ValueError:
        print("ERROR: Unknown method.")
        return 1

    capacities = THREE_JUG_CAPACITIES if args.three_jugs else TWO_JUG_CAPACITIES
    print("======== SELECTION OF INITIAL STATE =============== ")
    print(f"Initial status: {JugProblem(capacities).initial_state()}")

    try:
        goal = run(
            method,
            max_level if max_level is not None else 0,
            alpha if alpha is not None else 1.0,
            args.heuristic,
            args.three_jugs,
        )
    except SearchLimitExceeded as exc:
        print(exc)
        goal = None

    print("\n".join(solution_lines(goal)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())