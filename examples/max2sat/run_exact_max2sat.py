#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import logging
import random

from dd_models.generic_tools.dd_solver import ExactDdSolver
from dd_models.max2sat.model import Max2Sat, T
from dd_models.max2sat.parser import get_data_available, parse_file
from dd_models.max2sat.problem import Weighted2SatProblem

logging.basicConfig(level=logging.DEBUG)


def random_problem(
    nb_vars: int, nb_clauses: int, seed: int = 0
) -> Weighted2SatProblem:
    rng = random.Random(seed)
    problem = Weighted2SatProblem(nb_vars=nb_vars)
    for _ in range(nb_clauses):
        a, b = (rng.choice([-1, 1]) * rng.randint(1, nb_vars) for _ in range(2))
        problem.add_clause(a, b, weight=rng.randint(1, 100))
    return problem


def run_exact_solver():
    datasets = get_data_available()
    if len(datasets) > 0:
        problem = parse_file(datasets[0])
    else:
        problem = random_problem(nb_vars=12, nb_clauses=40)
    model = Max2Sat(problem)
    solution = ExactDdSolver(model).solve()
    assignment = [value == T for value in solution.assignment(model.nb_vars())]
    print(solution.value)
    print(problem.evaluate(assignment) == solution.value)


if __name__ == "__main__":
    run_exact_solver()
