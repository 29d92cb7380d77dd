# Licensed under a 3-clause BSD style license - see LICENSE.rst
import pytest
import numpy as np


def pytest_configure(config):
    """Print some info ..."""
    from . import __version__

    print("")
    print(f"randomdist version: {__version__}")
    print(f"numpy version: {np.__version__}")


@pytest.fixture()
def random_state():
    return np.random.RandomState(seed=0)
