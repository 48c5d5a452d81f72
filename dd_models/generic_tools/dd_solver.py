#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from dd_models.generic_tools.dd_problem import DdProblem, Decision, Variable, VarSet

logger = logging.getLogger(__name__)


@dataclass
class DdSolution:
    value: int
    decisions: list[Decision] = field(default_factory=list)

    def assignment(self, nb_vars: int) -> list[Optional[int]]:
        """Decision value of each variable, by variable index."""
        values: list[Optional[int]] = [None] * nb_vars
        for d in self.decisions:
            values[d.variable.id] = d.value
        return values


@dataclass
class _Node:
    value: int
    decisions: tuple[Decision, ...]


class ExactDdSolver:
    """Compile the exact decision diagram of a DdProblem, layer by layer.

    Variables are decided in a fixed order. Two nodes of a layer holding equal
    states are the same node: only the best incoming path is kept. The size of
    the layers is not bounded, so this is only usable on small instances.

    """

    def __init__(
        self, problem: DdProblem, variable_order: Optional[Sequence[int]] = None
    ):
        self.problem = problem
        nb_vars = problem.nb_vars()
        if variable_order is None:
            variable_order = range(nb_vars)
        if sorted(variable_order) != list(range(nb_vars)):
            raise ValueError(
                f"variable_order must be a permutation of range({nb_vars})."
            )
        self.variable_order = [Variable(i) for i in variable_order]
        self.max_width = 0

    def solve(self) -> DdSolution:
        problem = self.problem
        free_vars = problem.all_vars()
        layer: dict[Hashable, _Node] = {
            problem.initial_state(): _Node(value=0, decisions=())
        }
        self.max_width = 1
        for depth, var in enumerate(self.variable_order):
            free_vars.remove(var)
            layer = self.next_layer(layer, var, free_vars)
            self.max_width = max(self.max_width, len(layer))
            logger.debug(f"Layer {depth + 1} ({var}): {len(layer)} nodes")
        best = max(layer.values(), key=lambda node: node.value)
        solution = DdSolution(
            value=problem.initial_value() + best.value,
            decisions=list(best.decisions),
        )
        logger.info(f"Objective = {solution.value}, max width = {self.max_width}")
        return solution

    def next_layer(
        self, layer: dict[Hashable, _Node], var: Variable, free_vars: VarSet
    ) -> dict[Hashable, _Node]:
        problem = self.problem
        next_layer: dict[Hashable, _Node] = {}
        for state, node in layer.items():
            domain = problem.domain_of(state, var)
            if len(domain) == 0:
                raise RuntimeError(f"Empty domain for {var} in state {state}.")
            impacted = problem.impacted_by(state, var)
            for value in domain:
                decision = Decision(variable=var, value=value)
                if impacted:
                    child = problem.transition(state, free_vars, decision)
                else:
                    child = state
                child_value = node.value + problem.transition_cost(
                    state, free_vars, decision
                )
                existing = next_layer.get(child)
                if existing is None or child_value > existing.value:
                    next_layer[child] = _Node(
                        value=child_value, decisions=node.decisions + (decision,)
                    )
        return next_layer
