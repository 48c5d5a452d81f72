#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import pytest

from dd_models.generic_tools.dd_problem import DdProblem, Decision, Variable, VarSet


class CountingProblem(DdProblem[int]):
    """Count the variables set to 1."""

    def __init__(self, n: int):
        self.n = n

    def nb_vars(self) -> int:
        return self.n

    def initial_state(self) -> int:
        return 0

    def initial_value(self) -> int:
        return 0

    def domain_of(self, state: int, var: Variable) -> tuple[int, ...]:
        return (0, 1)

    def transition(self, state: int, vars: VarSet, decision: Decision) -> int:
        return state + decision.value

    def transition_cost(self, state: int, vars: VarSet, decision: Decision) -> int:
        return decision.value


def test_variable_indexes_sequences():
    values = [10, 20, 30]
    assert values[Variable(2)] == 30
    assert Variable(0) < Variable(1)
    assert Variable(3) == Variable(3)
    assert len({Variable(1), Variable(1)}) == 1


def test_decision_is_hashable():
    d = Decision(variable=Variable(1), value=-1)
    assert d == Decision(Variable(1), -1)
    assert d != Decision(Variable(1), 1)
    assert hash(d) == hash(Decision(Variable(1), -1))


def test_varset_all():
    var_set = VarSet.all(4)
    assert list(var_set) == [Variable(0), Variable(1), Variable(2), Variable(3)]
    assert len(var_set) == 4
    assert len(VarSet.all(0)) == 0


def test_varset_add_remove():
    var_set = VarSet.all(5)
    var_set.remove(Variable(0))
    var_set.remove(Variable(3))
    assert list(var_set) == [Variable(1), Variable(2), Variable(4)]
    assert Variable(3) not in var_set
    assert var_set.contains(Variable(4))
    var_set.add(Variable(3))
    assert Variable(3) in var_set
    # removing twice is harmless
    var_set.remove(Variable(0))
    assert len(var_set) == 4


def test_varset_copy_is_independent():
    var_set = VarSet.from_variables([Variable(2), Variable(7)])
    other = var_set.copy()
    other.remove(Variable(2))
    assert list(var_set) == [Variable(2), Variable(7)]
    assert list(other) == [Variable(7)]
    assert var_set != other
    other.add(Variable(2))
    assert var_set == other


def test_default_contract():
    problem = CountingProblem(3)
    assert problem.all_vars() == VarSet.all(3)
    assert problem.impacted_by(problem.initial_state(), Variable(0))


def test_abstract_problem_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DdProblem()
