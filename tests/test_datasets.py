#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.
import os

from dd_models.datasets import get_data_home
from dd_models.max2sat.parser import get_data_available as get_max2sat_data
from dd_models.maximum_independent_set.parser import (
    get_data_available as get_misp_data,
)


def test_data_home_from_env(fake_data_home):
    assert get_data_home() == fake_data_home
    assert os.path.isdir(fake_data_home)


def test_data_home_explicit(tmp_path):
    data_home = str(tmp_path / "explicit")
    assert get_data_home(data_home=data_home) == data_home
    assert os.path.isdir(data_home)


def test_get_data_available_missing_folder(fake_data_home):
    assert get_max2sat_data() == []
    assert get_misp_data() == []


def test_get_data_available(fake_data_home):
    os.makedirs(f"{fake_data_home}/max2sat")
    for name in ["b.wcnf", "a.wcnf"]:
        with open(f"{fake_data_home}/max2sat/{name}", "w") as f:
            f.write("p wcnf 1 0\n")
    datasets = get_max2sat_data()
    assert [os.path.basename(f) for f in datasets] == ["a.wcnf", "b.wcnf"]
    assert all(os.path.isabs(f) for f in datasets)
    assert get_misp_data() == []
