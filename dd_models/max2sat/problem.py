#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


def var_of(lit: int) -> int:
    """Zero-based variable index of a signed (1-based) literal."""
    return abs(lit) - 1


@dataclass(frozen=True)
class Clause:
    """Clause of a weighted 2-sat instance.

    Literals are signed 1-based integers, as in the dimacs format.
    A unit clause repeats its literal (a == b).

    """

    a: int
    b: int

    def is_unit(self) -> bool:
        return self.a == self.b

    def is_tautology(self) -> bool:
        return self.a == -self.b

    def is_satisfied(self, assignment: Sequence[bool]) -> bool:
        return any(
            assignment[var_of(lit)] == (lit > 0) for lit in (self.a, self.b)
        )

    def __str__(self) -> str:
        if self.is_unit():
            return f"({self.a})"
        return f"({self.a} v {self.b})"


class Weighted2SatProblem:
    def __init__(self, nb_vars: int, weights: Optional[dict[Clause, int]] = None):
        self.nb_vars = nb_vars
        if weights is None:
            weights = {}
        self.weights = weights

    def add_clause(self, a: int, b: Optional[int] = None, weight: int = 1) -> None:
        """Add a clause, overwriting the weight of a clause on the same literals."""
        if b is None:
            b = a
        self.weights[Clause(a=min(a, b), b=max(a, b))] = weight

    @property
    def nb_clauses(self) -> int:
        return len(self.weights)

    def evaluate(self, assignment: Sequence[bool]) -> int:
        """Total weight of the clauses satisfied by a full assignment."""
        return sum(
            weight
            for clause, weight in self.weights.items()
            if clause.is_satisfied(assignment)
        )

    def __str__(self) -> str:
        return (
            f"Weighted2SatProblem(nb_vars={self.nb_vars}, "
            f"nb_clauses={self.nb_clauses})"
        )
