#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import os

import pytest

from dd_models.maximum_independent_set.parser import dimacs_parser

test_dir = os.path.dirname(__file__)


def test_dimacs_parser():
    filename = f"{test_dir}/myciel3.col"
    graph = dimacs_parser(filename)
    assert 11 in graph
    assert 0 not in graph
    assert len(graph.edges) == 20
    assert all(w == 1 for _, w in graph.nodes(data="weight"))


def test_dimacs_parser_node_weights():
    filename = f"{test_dir}/weighted.col"
    graph = dimacs_parser(filename)
    assert dict(graph.nodes(data="weight")) == {1: 3, 2: 10, 3: 4, 4: 2, 5: 1, 6: 1}
    assert len(graph[6]) == 0
    assert set(graph[2]) == {1, 3, 5}


@pytest.mark.parametrize(
    "content, error",
    [
        ("p edge 2 1\nx 1 2\n", NotImplementedError),
        ("e 1 2\np edge 2 1\n", AssertionError),
        ("p edge 2 2\ne 1 2\n", AssertionError),
        ("p edge 2 1\ne 1 3\n", AssertionError),
        ("p cnf 2 1\n", AssertionError),
    ],
)
def test_dimacs_parser_malformed(tmp_path, content, error):
    filename = tmp_path / "bad.col"
    filename.write_text(content)
    with pytest.raises(error):
        dimacs_parser(str(filename))
