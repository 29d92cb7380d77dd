# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Gaussian random numbers from the polar Box-Muller transform."""
import logging
import numpy as np
from randomdist.utils.check import check_finite, check_positive
from randomdist.utils.random import draw_uniform, get_random_state

__all__ = ["GaussianGenerator", "create_gaussian_generator"]

log = logging.getLogger(__name__)


class GaussianGenerator:
    """Normal distribution random number generator.

    Uses the polar form of the Box-Muller transformation
    (http://www.design.caltech.edu/erik/Misc/Gaussian.html):
    a point ``(x1, x2)`` is drawn uniformly in the unit disk by rejection
    sampling and turned into two independent standard normal values
    ``y1, y2``. The values are returned one per call to `sample`, the
    second one is cached until the next call.

    Because results come in pairs, reseeding the random state after an odd
    number of calls would emit a stale cached value first. Call `reset`
    right after reseeding, or use `seed` which does both.

    Parameters
    ----------
    mean : float
        Mean of the distribution.
    stddev : float
        Standard deviation of the distribution, must be positive.
    random_state : {int, 'random-seed', 'global-rng', `~numpy.random.RandomState`}
        Defines random number generator initialisation.
        Passed to `~randomdist.utils.random.get_random_state`.

    Examples
    --------
    >>> from randomdist.distributions import GaussianGenerator
    >>> gauss = GaussianGenerator(mean=10, stddev=3, random_state=0)
    >>> value = gauss.sample()
    >>> gauss.has_cached_value
    True
    """

    def __init__(self, mean=0.0, stddev=1.0, random_state="random-seed"):
        self.mean = check_finite(mean, "mean")
        self.stddev = check_positive(stddev, "stddev")
        self.random_state = get_random_state(random_state)
        self.has_cached_value = False
        self.cached_value = None

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(mean={self.mean!r}, stddev={self.stddev!r})"
        )

    def _draw_pair(self):
        """Draw a pair of independent standard normal values."""
        while True:
            x1 = 2.0 * draw_uniform(self.random_state) - 1.0
            x2 = 2.0 * draw_uniform(self.random_state) - 1.0
            w = x1 * x1 + x2 * x2
            # w == 0 would take the log of zero
            if 0.0 < w <= 1.0:
                break

        factor = float(np.sqrt(-2.0 * np.log(w) / w))
        return x1 * factor, x2 * factor

    def sample(self):
        """Draw one random number.

        Returns
        -------
        value : float
            Normal distributed random number.
        """
        if self.has_cached_value:
            self.has_cached_value = False
            return self.mean + self.stddev * self.cached_value

        y1, y2 = self._draw_pair()
        self.cached_value = y2
        self.has_cached_value = True
        return self.mean + self.stddev * y1

    def reset(self):
        """Discard the cached second value of the last pair."""
        self.has_cached_value = False
        self.cached_value = None

    def seed(self, seed=None):
        """Reseed the random state and reset the generator.

        Parameters
        ----------
        seed : int, optional
            Seed passed to `numpy.random.RandomState.seed`.
        """
        log.debug(f"Reseeding {self!r} with seed={seed}")
        self.random_state.seed(seed)
        self.reset()


def create_gaussian_generator(mean, stddev, random_state="random-seed"):
    """Create a `GaussianGenerator`.

    Parameters
    ----------
    mean : float
        Mean of the distribution.
    stddev : float
        Standard deviation of the distribution, must be positive.
    random_state : {int, 'random-seed', 'global-rng', `~numpy.random.RandomState`}
        Defines random number generator initialisation.

    Returns
    -------
    generator : `GaussianGenerator`
        Generator, call ``generator.sample()`` for each new value.
    """
    return GaussianGenerator(mean=mean, stddev=stddev, random_state=random_state)
