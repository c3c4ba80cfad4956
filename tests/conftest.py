import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from npyviewer import config


@pytest.fixture(autouse=True)
def restore_config():
    saved = dict(config.con_dict)
    yield
    config.con_dict.clear()
    config.con_dict.update(saved)


@pytest.fixture
def npy_file(tmp_path):
    """Write an array to a .npy file and return its path."""
    def _write(arr, name="data.npy"):
        path = tmp_path / name
        np.save(path, np.asarray(arr))
        return path
    return _write
