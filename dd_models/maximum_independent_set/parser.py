#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import logging
from enum import Enum
from typing import Optional

import networkx as nx

from dd_models.datasets import list_data_folder

logger = logging.getLogger(__name__)


def get_data_available(
    data_folder: Optional[str] = None, data_home: Optional[str] = None
) -> list[str]:
    """Get datasets available for misp.

    Params:
        data_folder: folder where datasets for misp should be found.
            If None, we look in "misp" subdirectory of `data_home`.
        data_home: root directory for all datasets. Is None, set by
            default to "~/dd_models_data"

    """
    return list_data_folder(
        subfolder="misp", data_folder=data_folder, data_home=data_home
    )


class DimacsPrefixes(Enum):
    PROBLEM = "p"
    COMMENT = "c"
    EDGE = "e"
    NODE = "n"


def dimacs_parser(filename: str) -> nx.Graph:
    """From a file in dimacs format, build a weighted graph.

    Nodes are labelled 1..n as in the file. Every node gets a "weight"
    attribute, set by "n <node> <weight>" lines and defaulting to 1.

    Args:
        filename: path to the input file using dimacs format

    See http://prolland.free.fr/works/research/dsat/dimacs.html for reference about dimacs format

    Returns: a networkx graph
    """
    n_nodes = 0
    n_edges = 0
    graph = nx.Graph()
    problem_line_read = False
    with open(filename, "r") as input_data:
        lines = input_data.readlines()
    for line in lines:
        tokens = line.split()
        if len(tokens) == 0:
            # ignore empty lines
            continue
        prefix = tokens[0]
        if prefix == DimacsPrefixes.COMMENT.value:
            # comment line: ignored
            continue
        elif prefix == DimacsPrefixes.PROBLEM.value:
            assert (
                not problem_line_read
            ), "The dimacs file can have only one problem line."
            problem_line_read = True
            assert tokens[1] in (
                "edge",
                "col",
            ), "The dimacs problem format must be 'edge' or 'col'."
            n_nodes = int(tokens[2])
            n_edges = int(tokens[3])
            graph.add_nodes_from(range(1, 1 + n_nodes), weight=1)
        elif prefix == DimacsPrefixes.EDGE.value:
            assert (
                problem_line_read
            ), "The problem line must appear before any edge descriptor."
            graph.add_edge(int(tokens[1]), int(tokens[2]))
        elif prefix == DimacsPrefixes.NODE.value:
            assert (
                problem_line_read
            ), "The problem line must appear before any node descriptor."
            graph.nodes[int(tokens[1])]["weight"] = int(tokens[2])
        else:
            raise NotImplementedError(
                f"The prefix {prefix} is not allowed by dimacs format."
            )
    assert (
        len(graph.edges) == n_edges
    ), "The problem line defines a number of edges different from the number of edge lines."
    assert (
        len(graph.nodes) == n_nodes
    ), "The problem line defines a number of nodes different from the max node id used by an edge."
    logger.debug(f"Parsed graph with {n_nodes} nodes and {n_edges} edges")
    return graph
