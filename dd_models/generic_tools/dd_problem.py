"""Minimal API of a dynamic-programming model driven by a decision-diagram solver."""

#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
from __future__ import annotations  # see annotations as str

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

State = TypeVar("State", bound=Hashable)


@dataclass(frozen=True, order=True)
class Variable:
    """Zero-based index of a decision variable."""

    id: int

    def __index__(self) -> int:
        return self.id


@dataclass(frozen=True)
class Decision:
    variable: Variable
    value: int


class VarSet:
    """Set of variables stored as an integer bitmask.

    Iteration yields the variables by increasing index.

    """

    def __init__(self, bits: int = 0):
        self.bits = bits

    @classmethod
    def all(cls, nb_vars: int) -> VarSet:
        return cls((1 << nb_vars) - 1)

    @classmethod
    def from_variables(cls, variables: Iterable[Variable]) -> VarSet:
        var_set = cls()
        for var in variables:
            var_set.add(var)
        return var_set

    def add(self, var: Variable) -> None:
        self.bits |= 1 << var.id

    def remove(self, var: Variable) -> None:
        self.bits &= ~(1 << var.id)

    def contains(self, var: Variable) -> bool:
        return (self.bits >> var.id) & 1 == 1

    def copy(self) -> VarSet:
        return VarSet(self.bits)

    def __contains__(self, var: Variable) -> bool:
        return self.contains(var)

    def __iter__(self) -> Iterator[Variable]:
        bits = self.bits
        while bits:
            low = bits & -bits
            yield Variable(low.bit_length() - 1)
            bits ^= low

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, VarSet) and self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def __repr__(self) -> str:
        return f"VarSet({[v.id for v in self]})"


class DdProblem(ABC, Generic[State]):
    """Base class for a dynamic-programming model.

    A solver compiles decision diagrams by repeatedly calling the methods below.
    `transition()` and `transition_cost()` must be pure functions of their
    arguments: they never modify the problem nor the given state, so that the
    solver can evaluate the decisions of a node in any order.

    The `vars` argument of both methods is the set of variables still free
    once the variable of the decision has been removed from it.

    """

    @abstractmethod
    def nb_vars(self) -> int:
        ...

    @abstractmethod
    def initial_state(self) -> State:
        ...

    @abstractmethod
    def initial_value(self) -> int:
        """Constant term of the objective, independent of any decision."""
        ...

    @abstractmethod
    def domain_of(self, state: State, var: Variable) -> tuple[int, ...]:
        """Admissible values for `var` in `state`. Never empty."""
        ...

    @abstractmethod
    def transition(self, state: State, vars: VarSet, decision: Decision) -> State:
        ...

    @abstractmethod
    def transition_cost(self, state: State, vars: VarSet, decision: Decision) -> int:
        ...

    def impacted_by(self, state: State, var: Variable) -> bool:
        """Tell whether a decision on `var` can change `state`.

        Answering True is always correct.

        """
        return True

    def all_vars(self) -> VarSet:
        return VarSet.all(self.nb_vars())
