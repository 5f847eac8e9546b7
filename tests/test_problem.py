import itertools

import pytest

from jugsearch.problem import (
    THREE_JUG_CAPACITIES,
    TWO_JUG_CAPACITIES,
    Action,
    JugProblem,
    Method,
    State,
)

POURS = [a for a in Action if a.name.startswith("POUR")]


def all_states(problem):
    ranges = [range(c + 1) for c in problem.capacities]
    return [State(levels) for levels in itertools.product(*ranges)]


def test_action_numbering_fixed():
    problem = JugProblem()
    assert [int(a) for a in problem.applicable_actions(problem.initial_state())] == [0, 1]
    assert [int(a) for a in problem.applicable_actions(State((5, 3)))] == [3, 4]
    assert Action(11) is Action.POUR_2_TO_1
    assert len(Action) == 12


def test_method_numbering_fixed():
    assert Method(1) is Method.BREADTH_FIRST
    assert Method(8) is Method.GENERALIZED_A_STAR
    with pytest.raises(ValueError):
        Method(9)


def test_state_str_and_equality_ignores_heuristic():
    a = State((5, 2), h_n=3.0)
    b = State([5, 2])
    assert str(a) == "5 2"
    assert a == b
    assert hash(a) == hash(b)


def test_initial_state_empty():
    problem = JugProblem(THREE_JUG_CAPACITIES)
    assert problem.initial_state().jug_levels == (0, 0, 0)


def test_fill_sets_capacity():
    problem = JugProblem()
    transition = problem.result(problem.initial_state(), Action.FILL_JUG_0)
    assert transition.new_state.jug_levels == (TWO_JUG_CAPACITIES[0], 0)
    assert transition.step_cost == 1.0


def test_fill_full_jug_not_applicable():
    problem = JugProblem()
    assert problem.result(State((5, 0)), Action.FILL_JUG_0) is None


def test_empty_empty_jug_not_applicable():
    problem = JugProblem()
    assert problem.result(State((0, 2)), Action.EMPTY_JUG_0) is None
    assert problem.result(State((0, 2)), Action.EMPTY_JUG_1).new_state == State((0, 0))


def test_third_jug_actions_unavailable_with_two_jugs():
    problem = JugProblem()
    third = [a for a in Action if 2 in a.jugs]
    for state in all_states(problem):
        for action in third:
            assert problem.result(state, action) is None


@pytest.mark.parametrize("capacities", [TWO_JUG_CAPACITIES, THREE_JUG_CAPACITIES])
def test_pours_conserve_water_and_respect_capacity(capacities):
    problem = JugProblem(capacities)
    for state in all_states(problem):
        for action in POURS:
            transition = problem.result(state, action)
            if transition is None:
                continue
            new = transition.new_state.jug_levels
            assert sum(new) == sum(state.jug_levels)
            assert all(0 <= lvl <= cap for lvl, cap in zip(new, capacities))
            src, dst = action.jugs
            assert new[src] == 0 or new[dst] == capacities[dst]


def test_applicable_actions_matches_result():
    problem = JugProblem(THREE_JUG_CAPACITIES)
    for state in all_states(problem):
        actions = problem.applicable_actions(state)
        assert actions == sorted(actions)
        assert all(problem.result(state, a) is not None for a in actions)
        assert all(problem.result(state, a) is None for a in Action if a not in actions)


def test_applicable_actions_from_start():
    problem = JugProblem()
    assert problem.applicable_actions(problem.initial_state()) == [
        Action.FILL_JUG_0,
        Action.FILL_JUG_1,
    ]


def test_goal_test():
    problem = JugProblem()
    assert problem.goal_test(State((4, 0)), None)
    assert problem.goal_test(State((0, 4)), None)
    assert not problem.goal_test(State((5, 3)), None)


def test_heuristics_zero_at_goal():
    for h in (0, 1, 2):
        problem = JugProblem(heuristic=h)
        assert problem.heuristic_value(State((4, 1)), None) == 0.0


def test_heuristic_zero_everywhere_for_choice_zero():
    problem = JugProblem(heuristic=0)
    assert {problem.heuristic_value(s, None) for s in all_states(problem)} == {0.0}


def test_heuristic_one_is_goal_indicator():
    problem = JugProblem(heuristic=1)
    for state in all_states(problem):
        expected = 0.0 if problem.goal_test(state, None) else 1.0
        assert problem.heuristic_value(state, None) == expected


def test_heuristic_two_is_distance_of_closest_jug():
    problem = JugProblem(heuristic=2)
    assert problem.heuristic_value(State((5, 3)), None) == 1.0
    for state in all_states(problem):
        value = problem.heuristic_value(state, None)
        assert value >= 0
        assert (value == 0) == problem.goal_test(state, None)


@pytest.mark.parametrize(
    "kwargs", [{"heuristic": 7}, {"capacities": (5,)}, {"capacities": (5, 3, 2, 1)}]
)
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        JugProblem(**kwargs)