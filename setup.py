#!/usr/bin/env python
# Licensed under a 3-clause BSD style license - see LICENSE.rst

# NOTE: The configuration for the package, including the name, version, and
# other information are set in the setup.cfg file.
import sys

# First provide helpful messages if contributors try and run legacy commands
# for tests.

TEST_HELP = """
Note: running tests is no longer done using 'python setup.py test'. Instead
you will need to run:

    pip install -e .[test]
    pytest

If you only want to run part of the test suite, you can also pass a path,
e.g. ``pytest randomdist/distributions``.
"""

if "test" in sys.argv:
    print(TEST_HELP)
    sys.exit(1)


# imports here so that people get the nice error messages above without needing
# build dependencies
from setuptools import setup  # noqa: E402

setup()
