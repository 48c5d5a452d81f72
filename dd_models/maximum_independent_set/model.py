#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Optional

import networkx as nx

from dd_models.generic_tools.dd_problem import DdProblem, Decision, Variable, VarSet

logger = logging.getLogger(__name__)

SELECT = 1
REJECT = 0
YES_NO = (SELECT, REJECT)
NO = (REJECT,)


def full_mask(nb_vars: int) -> int:
    return (1 << nb_vars) - 1


def is_set(mask: int, index: int) -> bool:
    return (mask >> index) & 1 == 1


class MisGraph:
    """Weighted graph under construction, vertices indexed from 0.

    Neighbourhoods are stored as integer bitmasks.
    Call `complement()` once the graph is complete.

    """

    def __init__(
        self,
        nb_vars: int,
        weights: Optional[Sequence[int]] = None,
        index_to_nodes: Optional[dict[int, Hashable]] = None,
    ):
        self.nb_vars = nb_vars
        if weights is None:
            weights = [1] * nb_vars
        self.weights = list(weights)
        if index_to_nodes is None:
            index_to_nodes = {i: i for i in range(nb_vars)}
        self.index_to_nodes = index_to_nodes
        self.adj_matrix = [0] * nb_vars

    @classmethod
    def from_networkx(cls, graph: nx.Graph, weight: str = "weight") -> "MisGraph":
        """Index the nodes of a networkx graph in sorted order.

        Nodes without the weight attribute weigh 1.

        """
        nodes = sorted(graph.nodes())
        nodes_to_index = {nodes[i]: i for i in range(len(nodes))}
        mis_graph = cls(
            nb_vars=len(nodes),
            weights=[graph.nodes[n].get(weight, 1) for n in nodes],
            index_to_nodes={i: nodes[i] for i in range(len(nodes))},
        )
        for n1, n2 in graph.edges():
            mis_graph.add_edge(nodes_to_index[n1], nodes_to_index[n2])
        return mis_graph

    def add_edge(self, i: int, j: int) -> None:
        if i == j:
            return
        self.adj_matrix[i] |= 1 << j
        self.adj_matrix[j] |= 1 << i

    def are_adjacent(self, i: int, j: int) -> bool:
        return is_set(self.adj_matrix[i], j)

    def evaluate(self, chosen: Sequence[int]) -> int:
        """Total weight of the chosen vertices."""
        return sum(self.weights[i] for i in range(self.nb_vars) if chosen[i])

    def is_independent(self, chosen: Sequence[int]) -> bool:
        mask = sum(1 << i for i in range(self.nb_vars) if chosen[i])
        return all(
            self.adj_matrix[i] & mask == 0
            for i in range(self.nb_vars)
            if chosen[i]
        )

    def complement(self) -> "ComplementGraph":
        everyone = full_mask(self.nb_vars)
        return ComplementGraph(
            nb_vars=self.nb_vars,
            weights=tuple(self.weights),
            adj_matrix=tuple(
                ~(self.adj_matrix[i] | (1 << i)) & everyone
                for i in range(self.nb_vars)
            ),
            index_to_nodes=tuple(
                self.index_to_nodes[i] for i in range(self.nb_vars)
            ),
        )


@dataclass(frozen=True)
class ComplementGraph:
    """Frozen complement of a MisGraph.

    `adj_matrix[i]` has bit j set iff i and j are distinct and not adjacent in
    the original graph.

    """

    nb_vars: int
    weights: tuple[int, ...]
    adj_matrix: tuple[int, ...]
    index_to_nodes: tuple[Hashable, ...]


class Misp(DdProblem[int]):
    """Dynamic-programming model of the maximum weighted independent set problem.

    A state is the bitmask of the vertices that can still be selected.

    """

    def __init__(self, graph: MisGraph):
        self.graph = graph.complement()
        logger.debug(f"Misp model with {self.graph.nb_vars} vertices")

    @classmethod
    def from_networkx(cls, graph: nx.Graph, weight: str = "weight") -> "Misp":
        return cls(MisGraph.from_networkx(graph, weight=weight))

    def nb_vars(self) -> int:
        return self.graph.nb_vars

    def initial_state(self) -> int:
        return full_mask(self.graph.nb_vars)

    def initial_value(self) -> int:
        return 0

    def domain_of(self, state: int, var: Variable) -> tuple[int, ...]:
        if is_set(state, var.id):
            return YES_NO
        else:
            return NO

    def transition(self, state: int, vars: VarSet, decision: Decision) -> int:
        bs = state & ~(1 << decision.variable.id)
        # drop adjacent vertices
        if decision.value == SELECT:
            bs &= self.graph.adj_matrix[decision.variable.id]
        return bs

    def transition_cost(self, state: int, vars: VarSet, decision: Decision) -> int:
        if decision.value == REJECT:
            return 0
        else:
            return self.graph.weights[decision.variable.id]

    def impacted_by(self, state: int, var: Variable) -> bool:
        return is_set(state, var.id)
