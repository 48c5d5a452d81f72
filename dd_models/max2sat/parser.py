#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import logging
from collections.abc import Iterable
from enum import Enum
from typing import Optional

from dd_models.datasets import list_data_folder
from dd_models.max2sat.problem import Weighted2SatProblem

logger = logging.getLogger(__name__)


def get_data_available(
    data_folder: Optional[str] = None, data_home: Optional[str] = None
) -> list[str]:
    """Get datasets available for max2sat.

    Params:
        data_folder: folder where datasets for max2sat should be found.
            If None, we look in "max2sat" subdirectory of `data_home`.
        data_home: root directory for all datasets. Is None, set by
            default to "~/dd_models_data"

    """
    return list_data_folder(
        subfolder="max2sat", data_folder=data_folder, data_home=data_home
    )


class WcnfPrefixes(Enum):
    PROBLEM = "p"
    COMMENT = "c"


def parse_lines(lines: Iterable[str]) -> Weighted2SatProblem:
    """Build a weighted 2-sat instance from the lines of a wcnf file.

    Each clause line is "<weight> <lit> [<lit>] 0". A clause with a single
    literal is a unit clause. The optional "top" field of the problem line is
    ignored: every clause is soft.

    """
    problem: Optional[Weighted2SatProblem] = None
    n_clauses = 0
    n_clause_lines = 0
    for line in lines:
        tokens = line.split()
        if len(tokens) == 0:
            # ignore empty lines
            continue
        prefix = tokens[0]
        if prefix == WcnfPrefixes.COMMENT.value:
            continue
        elif prefix == WcnfPrefixes.PROBLEM.value:
            assert problem is None, "The wcnf file can have only one problem line."
            if tokens[1] != "wcnf":
                raise NotImplementedError(
                    f"The problem format {tokens[1]} is not supported, expected 'wcnf'."
                )
            problem = Weighted2SatProblem(nb_vars=int(tokens[2]))
            n_clauses = int(tokens[3])
        else:
            assert (
                problem is not None
            ), "The problem line must appear before any clause."
            values = [int(token) for token in tokens]
            if values[-1] == 0:
                values = values[:-1]
            weight, literals = values[0], values[1:]
            if len(literals) not in (1, 2):
                raise ValueError(
                    f"Clause '{line.strip()}' must have one or two literals."
                )
            problem.add_clause(*literals, weight=weight)
            n_clause_lines += 1
    assert problem is not None, "The wcnf file has no problem line."
    assert (
        n_clause_lines == n_clauses
    ), "The problem line defines a number of clauses different from the number of clause lines."
    logger.debug(
        f"Parsed {n_clause_lines} clauses over {problem.nb_vars} variables, "
        f"{problem.nb_clauses} distinct"
    )
    return problem


def parse_file(file_path: str) -> Weighted2SatProblem:
    """From a file in wcnf format, initialise a Weighted2SatProblem instance.

    Args:
        file_path: path to the input file using wcnf format

    Returns: a Weighted2SatProblem instance
    """
    with open(file_path, "r") as input_data:
        return parse_lines(input_data)
