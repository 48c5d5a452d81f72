#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import logging

import networkx as nx

from dd_models.generic_tools.dd_solver import ExactDdSolver
from dd_models.maximum_independent_set.model import MisGraph, Misp
from dd_models.maximum_independent_set.parser import (
    dimacs_parser,
    get_data_available,
)

logging.basicConfig(level=logging.DEBUG)


def run_exact_solver():
    datasets = get_data_available()
    if len(datasets) > 0:
        graph = dimacs_parser(datasets[0])
    else:
        graph = nx.petersen_graph()
    mis_graph = MisGraph.from_networkx(graph)
    model = Misp(mis_graph)
    solver = ExactDdSolver(model)
    solution = solver.solve()
    chosen = solution.assignment(model.nb_vars())
    print(solution.value)
    print(mis_graph.is_independent(chosen))
    print([mis_graph.index_to_nodes[i] for i in range(len(chosen)) if chosen[i]])


if __name__ == "__main__":
    run_exact_solver()
