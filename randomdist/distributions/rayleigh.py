# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Rayleigh distributed random numbers."""
import numpy as np
from randomdist.utils.check import check_positive
from randomdist.utils.random import draw_uniform, get_random_state

__all__ = ["rayleigh_sample"]


def rayleigh_sample(sigma, random_state="random-seed"):
    """Draw one random number from a Rayleigh distribution.

    The Rayleigh distribution is the distribution of the modulus of a complex
    number whose real and imaginary parts are independent zero-mean normal
    variables with equal variance ``sigma ** 2``:

        f(x; sigma) = x exp(-x^2 / (2 sigma^2)) / sigma^2      for x >= 0

    It is sampled by inverting the cumulative distribution function.

    Parameters
    ----------
    sigma : float
        Scale parameter, must be positive.
    random_state : {int, 'random-seed', 'global-rng', `~numpy.random.RandomState`}
        Defines random number generator initialisation.
        Passed to `~randomdist.utils.random.get_random_state`.

    Returns
    -------
    value : float
        Non-negative random number, with mean ``sigma * sqrt(pi / 2)``.
    """
    sigma = check_positive(sigma, "sigma")
    random_state = get_random_state(random_state)

    u = draw_uniform(random_state)
    while u >= 1.0:
        u = draw_uniform(random_state)

    return sigma * float(np.sqrt(-2 * np.log1p(-u)))
