#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import logging
from collections.abc import Iterator
from typing import Union

import numpy as np

from dd_models.generic_tools.dd_problem import DdProblem, Decision, Variable, VarSet
from dd_models.max2sat.problem import Weighted2SatProblem, var_of

logger = logging.getLogger(__name__)

T = 1
F = -1
TF = (T, F)


def v(x: Variable) -> int:
    return 1 + x.id


def t(x: Variable) -> int:
    """Positive literal of x."""
    return v(x)


def f(x: Variable) -> int:
    """Negative literal of x."""
    return -v(x)


def pos(x: int) -> int:
    return max(0, x)


def linearize(lit: int) -> int:
    """Index of a signed literal in [0, 2n).

    Variable x (0-based) owns indices 2x (negative literal) and 2x+1 (positive
    literal): the mapping is a bijection between literals and [0, 2n).

    """
    sign = 1 if lit > 0 else 0
    return 2 * var_of(lit) + sign


class Max2SatState:
    """Net signed weight gained by setting each free variable true rather than false.

    Fixed variables hold 0.

    """

    def __init__(self, substates: list[int]):
        self.substates = substates

    def __getitem__(self, index: Union[Variable, int]) -> int:
        return self.substates[index]

    def __setitem__(self, index: Union[Variable, int], value: int) -> None:
        self.substates[index] = value

    def __len__(self) -> int:
        return len(self.substates)

    def __iter__(self) -> Iterator[int]:
        return iter(self.substates)

    def copy(self) -> "Max2SatState":
        return Max2SatState(list(self.substates))

    def rank(self) -> int:
        return sum(abs(x) for x in self.substates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Max2SatState):
            return NotImplemented
        return self.substates == other.substates

    def __hash__(self) -> int:
        return hash(tuple(self.substates))

    # ordering only compares ranks, it is not consistent with equality
    def __lt__(self, other: "Max2SatState") -> bool:
        return self.rank() < other.rank()

    def __le__(self, other: "Max2SatState") -> bool:
        return self.rank() <= other.rank()

    def __gt__(self, other: "Max2SatState") -> bool:
        return self.rank() > other.rank()

    def __ge__(self, other: "Max2SatState") -> bool:
        return self.rank() >= other.rank()

    def __repr__(self) -> str:
        return f"Max2SatState({self.substates})"


class Max2Sat(DdProblem[Max2SatState]):
    """Dynamic-programming model of the weighted max-2-sat problem.

    The weight of the clause made of literals x and y is stored in a flat
    (2n x 2n) matrix at `offset(x, y)`, which is symmetric in its arguments.

    """

    def __init__(self, problem: Weighted2SatProblem):
        n = problem.nb_vars
        self.problem = problem
        self._nb_vars = n
        self.initial = 0
        self.weights = np.zeros((2 * n) * (2 * n), dtype=np.int64)
        self.sum_of_clause_weights = np.zeros(n, dtype=np.int64)

        for clause, weight in problem.weights.items():
            self.weights[self.offset(clause.a, clause.b)] = weight
            self.sum_of_clause_weights[var_of(clause.a)] += weight
            if not clause.is_unit():
                self.sum_of_clause_weights[var_of(clause.b)] += weight
            if clause.is_tautology():
                self.initial += weight

        self.weights.flags.writeable = False
        self.sum_of_clause_weights.flags.writeable = False
        logger.debug(
            f"Max2Sat model with {n} variables, {problem.nb_clauses} clauses, "
            f"initial value {self.initial}"
        )

    def offset(self, x: int, y: int) -> int:
        a = min(x, y)
        b = max(x, y)
        return linearize(a) * 2 * self._nb_vars + linearize(b)

    def weight(self, x: int, y: int) -> int:
        return int(self.weights[self.offset(x, y)])

    def nb_vars(self) -> int:
        return self._nb_vars

    def initial_state(self) -> Max2SatState:
        return Max2SatState([0] * self._nb_vars)

    def initial_value(self) -> int:
        # sum of all tautologies
        return self.initial

    def domain_of(self, state: Max2SatState, var: Variable) -> tuple[int, ...]:
        return TF

    def transition(
        self, state: Max2SatState, vars: VarSet, decision: Decision
    ) -> Max2SatState:
        k = decision.variable
        ret = state.copy()
        ret[k] = 0
        if decision.value == F:
            for l in vars:
                ret[l] += self.weight(t(k), t(l)) - self.weight(t(k), f(l))
        else:
            for l in vars:
                ret[l] += self.weight(f(k), t(l)) - self.weight(f(k), f(l))
        return ret

    def transition_cost(
        self, state: Max2SatState, vars: VarSet, decision: Decision
    ) -> int:
        k = decision.variable
        if decision.value == F:
            res = pos(-state[k])
            total = self.weight(f(k), f(k))  # weight of the unit clause
            for l in vars:
                # satisfied by k = F
                wff = self.weight(f(k), f(l))
                wft = self.weight(f(k), t(l))
                # now depending on the value of l only
                wtt = self.weight(t(k), t(l))
                wtf = self.weight(t(k), f(l))
                total += (wff + wft) + min(pos(state[l]) + wtt, pos(-state[l]) + wtf)
        else:
            res = pos(state[k])
            total = self.weight(t(k), t(k))  # weight of the unit clause
            for l in vars:
                # satisfied by k = T
                wtt = self.weight(t(k), t(l))
                wtf = self.weight(t(k), f(l))
                # now depending on the value of l only
                wff = self.weight(f(k), f(l))
                wft = self.weight(f(k), t(l))
                total += (wtf + wtt) + min(pos(state[l]) + wft, pos(-state[l]) + wff)
        return res + total
