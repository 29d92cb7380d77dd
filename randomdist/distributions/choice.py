# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Uniform choice of one element from a collection."""
from randomdist.utils.check import InvalidParameterError
from randomdist.utils.random import get_random_state

__all__ = ["uniform_choice"]


def uniform_choice(collection, random_state="random-seed"):
    """Return a uniformly chosen element of a collection.

    Parameters
    ----------
    collection : sequence
        Non-empty ordered sequence supporting ``len`` and indexing.
    random_state : {int, 'random-seed', 'global-rng', `~numpy.random.RandomState`}
        Defines random number generator initialisation.
        Passed to `~randomdist.utils.random.get_random_state`.

    Returns
    -------
    element : object
        One element of ``collection``, unchanged.

    Examples
    --------
    >>> from randomdist.distributions import uniform_choice
    >>> uniform_choice(["cold", "cool", "warm", "hot"], random_state=0) in ["cold", "cool", "warm", "hot"]
    True
    """
    if len(collection) == 0:
        raise InvalidParameterError("Cannot choose from an empty collection")

    random_state = get_random_state(random_state)
    index = int(random_state.randint(len(collection)))
    return collection[index]
