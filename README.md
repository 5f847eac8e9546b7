# jugsearch

Graph search strategies applied to the water-jug puzzle.

Every jug starts empty. The goal is reached as soon as any one jug holds
exactly the target amount (4 units by default). A move fills a jug, empties
a jug, or pours one jug into another until the source is empty or the target
is full; every move costs 1. The two-jug puzzle uses capacities 5 and 3, the
three-jug puzzle uses 8, 5 and 3.

## Search methods

| Number | `Method` member        | Strategy                   |
|--------|------------------------|----------------------------|
| 1      | `BREADTH_FIRST`        | Breadth-first search       |
| 2      | `UNIFORM_COST`         | Uniform-cost search        |
| 3      | `DEPTH_FIRST`          | Depth-first search         |
| 4      | `DEPTH_LIMITED`        | Depth-limited search       |
| 5      | `ITERATIVE_DEEPENING`  | Iterative deepening search |
| 6      | `GREEDY`               | Greedy search              |
| 7      | `A_STAR`               | A* search                  |
| 8      | `GENERALIZED_A_STAR`   | Generalized A* search      |

Generalized A* orders its frontier by `g(n) + alpha * h(n)`.

Heuristics (`--heuristic`, or the third argument of `JugProblem`):

- `0`: always zero (the default)
- `1`: zero once some jug holds the target amount, one otherwise
- `2`: zero once some jug holds the target amount, otherwise the smallest
  difference between any jug's level and the target

## Command line

```
jugsearch
```

Without `-m` the command prints the menu above and asks for a method number.
For depth-limited search it asks for the maximum level unless `--max-level`
is given, and for generalized A* it asks for alpha unless `--alpha` is given.
An invalid answer prints `ERROR: Unknown method.` and exits with status 1.

Options:

- `-m`, `--method N`: search method number (1 to 8)
- `--max-level N`: maximum level for depth-limited search
- `--alpha X`: alpha for generalized A* search
- `--heuristic {0,1,2}`: heuristic to use
- `--three-jugs`: use jugs of 8, 5 and 3 units
- `-v`, `--verbose`: trace every pop, frontier, explored set and cleared node

The command prints the initial state, the number of nodes searched, generated
and held in memory, the path cost and the solution path from the goal back to
the root. If the node limit is exceeded it says so and reports that no
solution was found.

## Library use

```python
from jugsearch.problem import JugProblem, Method
from jugsearch.search import Node, first_goal_test_search, solution_lines

problem = JugProblem((5, 3), 4, 0)
root = Node(problem.initial_state())
goal = first_goal_test_search(problem, Method.BREADTH_FIRST, root, None)
print("\n".join(solution_lines(goal)))
```

Modules:

- `jugsearch.problem`: `Action`, `Method`, `State`, `Transition` and
  `JugProblem` (`initial_state`, `result`, `heuristic_value`, `goal_test`,
  `applicable_actions`).
- `jugsearch.hashtable`: `HashTable`, the linear-probing explored set keyed by
  `state_key` (e.g. `"5,2"`), which grows past 70% load.
- `jugsearch.search`: `Node`, `Frontier`, `SearchStats`, `child_node`,
  `first_goal_test_search` (breadth-first, greedy),
  `first_insert_frontier_search` (uniform-cost, A*, generalized A*),
  `depth_type_search` (depth-first, depth-limited), `iterative_deepening_search`
  and `solution_lines`. A search that tests more than 100,000,000 nodes raises
  `SearchLimitExceeded`.
- `jugsearch.cli`: `run(method, max_level, alpha, heuristic, three_jugs)` runs
  a whole search without prompting and returns the goal node or `None`;
  `main` is the command.

Progress is reported through the `logging` module: counts at INFO, the search
trace at DEBUG.

## Limits

The command always starts from empty jugs and always targets 4 units; other
capacities or targets are only available through `JugProblem` in code. A
specific goal state cannot be chosen: the goal test looks only for a jug
holding the target amount.