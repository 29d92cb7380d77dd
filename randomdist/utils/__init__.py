# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Utility functions and classes used throughout randomdist.

You have to import sub-modules of `randomdist.utils` directly,
the `randomdist.utils` namespace is empty.

Examples::

    from randomdist.utils.random import get_random_state
    from randomdist.utils.check import InvalidParameterError
"""
