#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.

from pytest import fixture

from dd_models.datasets import DD_DEFAULT_DATAHOME_ENVVARNAME


@fixture
def fake_data_home(monkeypatch, tmp_path):
    data_home = str(tmp_path / "dd_models_data")
    monkeypatch.setenv(DD_DEFAULT_DATAHOME_ENVVARNAME, data_home)
    return data_home
