"""Locate instance files for examples and tests."""


#  Copyright (c) 2025 AIRBUS and its affiliates.
#  This source code is licensed under the MIT license found in the
#  LICENSE file in the root directory of this source tree.

import os
from typing import Optional

DD_DEFAULT_DATAHOME = "~/dd_models_data"
DD_DEFAULT_DATAHOME_ENVVARNAME = "DD_MODELS_DATA"


def get_data_home(data_home: Optional[str] = None) -> str:
    """Return the path of the dd-models data directory.

    This folder holds the instance files (weighted 2-sat in wcnf format, graphs
    in dimacs format) read by the parsers of each problem.
    By default the data dir is set to a folder named 'dd_models_data' in the
    user home folder.
    Alternatively, it can be set by the 'DD_MODELS_DATA' environment
    variable or programmatically by giving an explicit folder path. The '~'
    symbol is expanded to the user home folder.
    If the folder does not already exist, it is automatically created.

    Params:
        data_home : The path to dd-models data directory. If `None`, the default path
        is `~/dd_models_data`.

    """
    if data_home is None:
        data_home = os.environ.get(DD_DEFAULT_DATAHOME_ENVVARNAME, DD_DEFAULT_DATAHOME)
    data_home = os.path.expanduser(data_home)
    os.makedirs(data_home, exist_ok=True)
    return data_home


def list_data_folder(
    subfolder: str, data_folder: Optional[str] = None, data_home: Optional[str] = None
) -> list[str]:
    """List the absolute paths of the files found in a problem data folder.

    Params:
        subfolder: name of the subdirectory of `data_home` used when `data_folder` is None.
        data_folder: folder where the instances should be found.
        data_home: root directory for all datasets.

    """
    if data_folder is None:
        data_home = get_data_home(data_home=data_home)
        data_folder = f"{data_home}/{subfolder}"

    try:
        datasets = [
            os.path.abspath(os.path.join(data_folder, f))
            for f in os.listdir(data_folder)
        ]
    except FileNotFoundError:
        datasets = []
    return sorted(datasets)
