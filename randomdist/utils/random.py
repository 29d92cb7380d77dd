# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Uniform random source shared by all generators."""
import numbers
import numpy as np

__all__ = ["draw_uniform", "get_random_state"]


def get_random_state(init):
    """Get a `numpy.random.RandomState` instance.

    The purpose of this utility function is to have a flexible way
    to initialise a `~numpy.random.RandomState` instance,
    a.k.a. a random number generator (``rng``).

    Parameters
    ----------
    init : {int, 'random-seed', 'global-rng', `~numpy.random.RandomState`}
        Available options to initialise the RandomState object:

        * ``int`` -- new RandomState instance seeded with this integer
          (calls `~numpy.random.RandomState` with ``seed=init``)
        * ``'random-seed'`` -- new RandomState instance seeded in a random way
          (calls `~numpy.random.RandomState` with ``seed=None``)
        * ``'global-rng'``, return the RandomState singleton used by ``numpy.random``.
        * `~numpy.random.RandomState` -- do nothing, return the input.

    Returns
    -------
    random_state : `~numpy.random.RandomState`
        RandomState instance.
    """
    if isinstance(init, (numbers.Integral, np.integer)) and not isinstance(init, bool):
        return np.random.RandomState(init)
    elif isinstance(init, np.random.RandomState):
        return init
    elif init == "random-seed":
        return np.random.RandomState(None)
    elif init == "global-rng":
        return np.random.mtrand._rand
    else:
        raise ValueError(
            f"{init!r} cannot be used to seed a numpy.random.RandomState instance"
        )


def draw_uniform(random_state):
    """Draw a single float uniformly distributed in [0, 1).

    Parameters
    ----------
    random_state : `~numpy.random.RandomState`
        Source of randomness.

    Returns
    -------
    value : float
        Uniform random number.
    """
    return float(random_state.uniform())
