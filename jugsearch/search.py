"""Tree and graph search strategies over a water-jug problem."""

from __future__ import annotations

import itertools
import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from .hashtable import HASH_TABLE_BASED_SIZE, HashTable
from .problem import Action, JugProblem, Method, State

logger = logging.getLogger(__name__)

MAX_SEARCHED_NODE = 100_000_000

_FIRST_GOAL_TEST_METHODS = (Method.BREADTH_FIRST, Method.GREEDY)
_INSERT_FRONTIER_METHODS = (Method.UNIFORM_COST, Method.A_STAR, Method.GENERALIZED_A_STAR)
_DEPTH_METHODS = (Method.DEPTH_FIRST, Method.DEPTH_LIMITED, Method.ITERATIVE_DEEPENING)
_LEVEL_BOUNDED_METHODS = (Method.DEPTH_LIMITED, Method.ITERATIVE_DEEPENING)
_LAST_ACTION = max(Action)


class SearchLimitExceeded(RuntimeError):
    """The search tested more nodes than it is allowed to."""

    def __init__(self, searched: int) -> None:
        super().__init__(
            f"Maximum number of searched nodes is exceeded. {searched} nodes are "
            "searched, but the goal could not found."
        )
        self.searched = searched


@dataclass(eq=False)
class Node:
    """A search-tree node; nodes compare by identity."""

    state: State
    path_cost: float = 0.0
    action: Optional[Action] = None
    parent: Optional["Node"] = None
    child_count: int = 0

    def level(self) -> int:
        """Depth of the node in the search tree; the root is at level 0."""
        depth = 0
        node = self
        while node.parent is not None:
            node = node.parent
            depth += 1
        return depth

    def path(self) -> list["Node"]:
        """Nodes from the root down to this node."""
        nodes = []
        node: Optional[Node] = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes

    def describe(self) -> str:
        if self.parent is None:
            return f"NODE({self.state}:root)"
        return (
            f"NODE({self.state}, parent:{self.parent.state}, action:{self.action}, "
            f"path_cost: {self.path_cost:.1f} )"
        )


@dataclass
class SearchStats:
    """Counters kept during a search."""

    searched: int = 0
    generated: int = 1
    allocated: int = 1
    limit: int = MAX_SEARCHED_NODE


class Frontier:
    """Ordered collection of nodes waiting to be expanded."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self._nodes: deque[Node] = deque()
        if root is not None:
            self._nodes.append(root)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def pop(self) -> Node:
        """Remove and return the first node; IndexError when empty."""
        if not self._nodes:
            raise IndexError("pop from an empty frontier")
        node = self._nodes.popleft()
        logger.debug("POP: %s", node.describe())
        return node

    def push_back(self, node: Node) -> None:
        self._nodes.append(node)

    def push_front(self, node: Node) -> None:
        self._nodes.appendleft(node)

    def insert_ordered(self, node: Node, key: Callable[[Node], float]) -> None:
        """Insert before the first node whose key is strictly greater."""
        value = key(node)
        for index, existing in enumerate(self._nodes):
            if value < key(existing):
                self._nodes.insert(index, node)
                return
        self._nodes.append(node)

    def find(self, state: State) -> Optional[Node]:
        """The first node holding ``state``, or None."""
        return next((node for node in self._nodes if node.state == state), None)

    def remove(self, node: Node) -> None:
        """Drop ``node`` (matched by identity) if present."""
        self._nodes = deque(n for n in self._nodes if n is not node)

    def describe(self) -> str:
        return "QUEUE: [ " + " ,".join(n.describe() for n in self._nodes) + " ]"


def child_node(problem: JugProblem, parent: Node, action: Action) -> Optional[Node]:
    """The node reached by applying ``action`` to ``parent``, or None."""
    transition = problem.result(parent.state, action)
    if transition is None:
        return None
    child = Node(
        state=transition.new_state,
        path_cost=parent.path_cost + transition.step_cost,
        action=Action(action),
        parent=parent,
    )
    parent.child_count += 1
    return child


def _report(stats: SearchStats) -> None:
    logger.info("The number of searched nodes is : %d", stats.searched)
    logger.info("The number of generated nodes is : %d", stats.generated)
    logger.info("The number of generated nodes in memory is : %d", stats.allocated)


def _check_method(method: Method, allowed: tuple[Method, ...], where: str) -> Method:
    try:
        method = Method(method)
    except ValueError:
        raise ValueError(f"Unknown method in {where}: {method}") from None
    if method not in allowed:
        raise ValueError(f"Unknown method in {where}: {method.name}")
    return method


def _new_explored() -> HashTable:
    explored = HashTable(HASH_TABLE_BASED_SIZE)
    logger.debug("%s", explored.describe())
    return explored


def first_goal_test_search(
    problem: JugProblem, method: Method, root: Node, goal: Optional[State] = None
) -> Optional[Node]:
    """Breadth-first or greedy search that tests nodes when they are generated."""
    method = _check_method(method, _FIRST_GOAL_TEST_METHODS, "first_goal_test_search")
    stats = SearchStats()

    stats.searched += 1
    if problem.goal_test(root.state, goal):
        _report(stats)
        return root

    frontier = Frontier(root)
    logger.debug("%s", frontier.describe())
    explored = _new_explored()

    while stats.searched < stats.limit:
        if not frontier:
            return None
        node = frontier.pop()
        explored.insert(node.state)
        logger.debug("%s", explored.describe())

        for action in Action:
            child = child_node(problem, node, action)
            if child is None:
                continue
            stats.generated += 1
            stats.allocated += 1
            if child.state in explored or frontier.find(child.state) is not None:
                continue

            stats.searched += 1
            if problem.goal_test(child.state, goal):
                _report(stats)
                if method is Method.GREEDY:
                    child.state.h_n = problem.heuristic_value(child.state, goal)
                return child

            if method is Method.BREADTH_FIRST:
                frontier.push_back(child)
            else:
                child.state.h_n = problem.heuristic_value(child.state, goal)
                frontier.insert_ordered(child, lambda n: n.state.h_n)
            logger.debug("%s", frontier.describe())

    raise SearchLimitExceeded(stats.searched)


def first_insert_frontier_search(
    problem: JugProblem,
    method: Method,
    root: Node,
    goal: Optional[State] = None,
    alpha: float = 1.0,
) -> Optional[Node]:
    """Uniform-cost, A* or generalized A* search testing nodes when they are popped."""
    method = _check_method(
        method, _INSERT_FRONTIER_METHODS, "first_insert_frontier_search"
    )
    stats = SearchStats()

    frontier = Frontier(root)
    logger.debug("%s", frontier.describe())
    explored = _new_explored()

    def g(n: Node) -> float:
        return n.path_cost

    def f(n: Node) -> float:
        return n.path_cost + n.state.h_n

    def weighted(n: Node) -> float:
        return n.path_cost + alpha * n.state.h_n

    while stats.searched < stats.limit:
        if not frontier:
            return None
        node = frontier.pop()

        stats.searched += 1
        if problem.goal_test(node.state, goal):
            _report(stats)
            return node

        explored.insert(node.state)
        logger.debug("%s", explored.describe())

        for action in Action:
            child = child_node(problem, node, action)
            if child is None:
                continue
            stats.generated += 1
            stats.allocated += 1
            if child.state in explored:
                continue

            existing = frontier.find(child.state)
            if method is Method.UNIFORM_COST:
                if existing is not None:
                    if g(child) < g(existing):
                        frontier.remove(existing)
                    else:
                        continue
                frontier.insert_ordered(child, g)
            elif method is Method.A_STAR:
                if existing is not None:
                    if f(child) < f(existing):
                        frontier.remove(existing)
                    else:
                        continue
                child.state.h_n = problem.heuristic_value(child.state, goal)
                frontier.insert_ordered(child, f)
            else:
                if existing is not None:
                    child_fn = child.path_cost + alpha * problem.heuristic_value(
                        child.state, goal
                    )
                    existing_fn = existing.path_cost + alpha * problem.heuristic_value(
                        existing.state, goal
                    )
                    if child_fn < existing_fn:
                        frontier.remove(existing)
                    else:
                        continue
                child.state.h_n = problem.heuristic_value(child.state, goal)
                frontier.insert_ordered(child, weighted)
            logger.debug("%s", frontier.describe())

    raise SearchLimitExceeded(stats.searched)


def _clear_single(node: Node, stats: SearchStats) -> None:
    if node.parent is None:
        return
    logger.debug("CLEARING: %s", node.describe())
    node.parent.child_count -= 1
    stats.allocated -= 1


def _clear_branch(node: Node, stats: SearchStats) -> None:
    """Release ``node`` and every ancestor left without children."""
    while node.parent is not None:
        parent = node.parent
        _clear_single(node, stats)
        if parent.child_count != 0:
            return
        node = parent


def depth_type_search(
    problem: JugProblem,
    method: Method,
    root: Node,
    goal: Optional[State] = None,
    max_level: int = 0,
    stats: Optional[SearchStats] = None,
) -> Optional[Node]:
    """Depth-first, depth-limited or one iteration of iterative deepening.

    ``stats`` may be shared between calls so that counters accumulate.
    """
    method = _check_method(method, _DEPTH_METHODS, "depth_type_search")
    if stats is None:
        stats = SearchStats()

    stats.searched += 1
    if problem.goal_test(root.state, goal):
        _report(stats)
        return root

    frontier = Frontier(root)
    logger.debug("%s", frontier.describe())
    explored = _new_explored()

    while stats.searched < stats.limit:
        if not frontier:
            return None
        node = frontier.pop()
        explored.insert(node.state)
        logger.debug("%s", explored.describe())

        if method in _LEVEL_BOUNDED_METHODS and node.level() == max_level:
            _clear_branch(node, stats)
            continue

        for action in Action:
            child = child_node(problem, node, action)
            if child is not None:
                stats.generated += 1
                stats.allocated += 1
                if child.state in explored or frontier.find(child.state) is not None:
                    _clear_single(child, stats)
                else:
                    stats.searched += 1
                    if problem.goal_test(child.state, goal):
                        _report(stats)
                        return child
                    frontier.push_front(child)
                    logger.debug("%s", frontier.describe())

            if action is _LAST_ACTION and node.child_count == 0:
                _clear_branch(node, stats)

    raise SearchLimitExceeded(stats.searched)


def iterative_deepening_search(
    problem: JugProblem, root: Node, goal: Optional[State] = None
) -> Node:
    """Depth-limited searches with growing limits until a goal is found."""
    stats = SearchStats()
    for level in itertools.count():
        found = depth_type_search(
            problem, Method.ITERATIVE_DEEPENING, root, goal, level, stats
        )
        if found is not None:
            logger.info("The goal is found in level %d.", level)
            return found
    raise AssertionError("unreachable")


def solution_lines(goal: Optional[Node]) -> list[str]:
    """Lines describing the solution, from the goal back to the root."""
    if goal is None:
        return ["THE SOLUTION CAN NOT BE FOUND."]
    lines = [f"THE COST PATH IS {goal.path_cost:.2f}.", "THE SOLUTION PATH IS:"]
    node: Optional[Node] = goal
    while node is not None:
        lines.append(str(node.state))
        if node.parent is not None:
            lines.append(f"\taction({node.action})")
        node = node.parent
    return lines