# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
randomdist command line interface (scripts).
"""
