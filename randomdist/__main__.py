# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Run the randomdist command line interface as a module.

``python -m randomdist`` is equivalent to the ``randomdist`` executable,
e.g. ``python -m randomdist gauss --mean 10 --stddev 3 -n 20`` prints twenty
Gaussian random numbers, one per line.
"""
import sys
from .scripts.main import cli

if __name__ == "__main__":
    sys.exit(cli())  # pylint:disable=no-value-for-parameter
