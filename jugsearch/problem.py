"""The water-jug problem: states, actions, transitions, heuristics and goal test."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional

TWO_JUG_CAPACITIES = (5, 3)
THREE_JUG_CAPACITIES = (8, 5, 3)
DEFAULT_TARGET = 4
DEFAULT_HEURISTIC = 0
STEP_COST = 1.0


class _Move(enum.Enum):
    FILL = "fill"
    EMPTY = "empty"
    POUR = "pour"


class Action(enum.IntEnum):
    """Every move that can be made on up to three jugs."""

    FILL_JUG_0 = 0
    FILL_JUG_1 = 1
    FILL_JUG_2 = 2
    EMPTY_JUG_0 = 3
    EMPTY_JUG_1 = 4
    EMPTY_JUG_2 = 5
    POUR_0_TO_1 = 6
    POUR_1_TO_0 = 7
    POUR_0_TO_2 = 8
    POUR_1_TO_2 = 9
    POUR_2_TO_0 = 10
    POUR_2_TO_1 = 11

    @property
    def jugs(self) -> tuple[int, ...]:
        """Indices of the jugs this action touches."""
        return _ACTION_SPEC[self][1:]

    def __str__(self) -> str:
        return self.name


_ACTION_SPEC: dict[Action, tuple] = {
    Action.FILL_JUG_0: (_Move.FILL, 0),
    Action.FILL_JUG_1: (_Move.FILL, 1),
    Action.FILL_JUG_2: (_Move.FILL, 2),
    Action.EMPTY_JUG_0: (_Move.EMPTY, 0),
    Action.EMPTY_JUG_1: (_Move.EMPTY, 1),
    Action.EMPTY_JUG_2: (_Move.EMPTY, 2),
    Action.POUR_0_TO_1: (_Move.POUR, 0, 1),
    Action.POUR_1_TO_0: (_Move.POUR, 1, 0),
    Action.POUR_0_TO_2: (_Move.POUR, 0, 2),
    Action.POUR_1_TO_2: (_Move.POUR, 1, 2),
    Action.POUR_2_TO_0: (_Move.POUR, 2, 0),
    Action.POUR_2_TO_1: (_Move.POUR, 2, 1),
}


class Method(enum.IntEnum):
    """Search strategies, numbered as in the interactive menu."""

    BREADTH_FIRST = 1
    UNIFORM_COST = 2
    DEPTH_FIRST = 3
    DEPTH_LIMITED = 4
    ITERATIVE_DEEPENING = 5
    GREEDY = 6
    A_STAR = 7
    GENERALIZED_A_STAR = 8

    @property
    def label(self) -> str:
        return _METHOD_LABELS[self]


_METHOD_LABELS = {
    Method.BREADTH_FIRST: "Breadth-First Search",
    Method.UNIFORM_COST: "Uniform-Cost Search",
    Method.DEPTH_FIRST: "Depth-First Search",
    Method.DEPTH_LIMITED: "Depth-Limited Search",
    Method.ITERATIVE_DEEPENING: "Iterative Deepening Search",
    Method.GREEDY: "Greedy Search",
    Method.A_STAR: "A* Search",
    Method.GENERALIZED_A_STAR: "Generalized A* Search",
}


@dataclass(eq=True)
class State:
    """Water level in each jug plus the heuristic value attached during search.

    Two states are equal when their jug levels are equal.
    """

    jug_levels: tuple[int, ...]
    h_n: float = field(default=0.0, compare=False)

    def __post_init__(self) -> None:
        self.jug_levels = tuple(int(level) for level in self.jug_levels)

    def __hash__(self) -> int:
        return hash(self.jug_levels)

    def __str__(self) -> str:
        return " ".join(str(level) for level in self.jug_levels)


@dataclass(frozen=True)
class Transition:
    """The state an action leads to and what it costs."""

    new_state: State
    step_cost: float


class JugProblem:
    """A water-jug puzzle: reach a jug holding exactly ``target`` units."""

    def __init__(
        self,
        capacities: Iterable[int] = TWO_JUG_CAPACITIES,
        target: int = DEFAULT_TARGET,
        heuristic: int = DEFAULT_HEURISTIC,
    ) -> None:
        self.capacities = tuple(int(c) for c in capacities)
        if len(self.capacities) not in (2, 3):
            raise ValueError("the problem supports two or three jugs")
        if any(c <= 0 for c in self.capacities):
            raise ValueError("jug capacities must be positive")
        if heuristic not in (0, 1, 2):
            raise ValueError(f"unknown heuristic: {heuristic}")
        self.target = int(target)
        self.heuristic = heuristic

    def initial_state(self) -> State:
        """All jugs empty."""
        return State((0,) * len(self.capacities))

    def result(self, state: State, action: Action) -> Optional[Transition]:
        """Apply ``action`` to ``state``; ``None`` if it is not applicable."""
        move, *jugs = _ACTION_SPEC[Action(action)]
        if any(j >= len(self.capacities) for j in jugs):
            return None
        levels = list(state.jug_levels)
        caps = self.capacities
        if move is _Move.FILL:
            (j,) = jugs
            if levels[j] == caps[j]:
                return None
            levels[j] = caps[j]
        elif move is _Move.EMPTY:
            (j,) = jugs
            if levels[j] == 0:
                return None
            levels[j] = 0
        else:
            src, dst = jugs
            if levels[src] == 0 or levels[dst] == caps[dst]:
                return None
            amount = min(levels[src], caps[dst] - levels[dst])
            levels[src] -= amount
            levels[dst] += amount
        return Transition(State(tuple(levels), state.h_n), STEP_COST)

    def heuristic_value(self, state: State, goal: Optional[State] = None) -> float:
        """Estimated distance to a goal under the chosen heuristic."""
        if self.heuristic == 0:
            return 0.0
        if self.target in state.jug_levels:
            return 0.0
        if self.heuristic == 1:
            return 1.0
        return float(min(abs(level - self.target) for level in state.jug_levels))

    def goal_test(self, state: State, goal: Optional[State] = None) -> bool:
        """True when some jug holds exactly the target amount."""
        return self.target in state.jug_levels

    def applicable_actions(self, state: State) -> list[Action]:
        """Actions that change ``state``, in action order."""
        return [action for action in Action if self.result(state, action) is not None]