# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Gaussian Unitary Ensemble (GUE) level spacing random integers."""
import logging
import numpy as np
from randomdist.utils.check import InvalidParameterError, check_positive
from randomdist.utils.random import draw_uniform, get_random_state

__all__ = [
    "EnsembleSpacingGenerator",
    "create_ensemble_spacing_generator",
    "gue_spacing_pdf",
]

log = logging.getLogger(__name__)


def gue_spacing_pdf(s):
    r"""Nearest-neighbour spacing density of the Gaussian Unitary Ensemble.

    .. math::
        p_2(s) = \frac{32}{\pi^2} s^2 \exp\left(-\frac{4}{\pi} s^2\right)

    The density is normalised and has unit mean spacing.

    Parameters
    ----------
    s : float or `~numpy.ndarray`
        Normalised spacing.

    Returns
    -------
    pdf : float or `~numpy.ndarray`
        Probability density.
    """
    s = np.asanyarray(s, dtype=float)
    return 32 / np.pi**2 * s**2 * np.exp(-4 / np.pi * s**2)


class EnsembleSpacingGenerator:
    """Random integers distributed like GUE level spacings.

    The GUE models Hamiltonians lacking time-reversal symmetry. The spacings
    of its ordered eigenvalues, divided by the mean spacing, follow
    `gue_spacing_pdf`. This generator returns integers whose distribution
    approximates that density stretched to a mean of ``average``.

    A cumulative table is built once, for ``i = 1 .. N`` with
    ``N = floor(4 * average + 0.5)``::

        cumulative[i] = cumulative[i - 1] + p2(i / average) / average

    and each call of `sample` inverts it with one uniform draw. The table is
    not normalised, the tail beyond ``4 * average`` is cut off, so draws
    above the last entry return ``N``.

    Parameters
    ----------
    average : float
        Average spacing, must be at least 0.125 so that ``N >= 1``.
    random_state : {int, 'random-seed', 'global-rng', `~numpy.random.RandomState`}
        Defines random number generator initialisation.
        Passed to `~randomdist.utils.random.get_random_state`.

    Examples
    --------
    >>> from randomdist.distributions import EnsembleSpacingGenerator
    >>> gue = EnsembleSpacingGenerator(average=4, random_state=0)
    >>> gue.n_max
    16
    >>> 1 <= gue.sample() <= 16
    True
    """

    def __init__(self, average, random_state="random-seed"):
        self.average = check_positive(average, "average")
        self.random_state = get_random_state(random_state)

        n_max = int(np.floor(4 * self.average + 0.5))
        if n_max < 1:
            raise InvalidParameterError(
                f"average must be at least 0.125 to give a non-empty table, got {average}"
            )

        s = np.arange(1, n_max + 1) / self.average
        weights = gue_spacing_pdf(s) / self.average

        cumulative = np.zeros(n_max + 1)
        cumulative[1:] = np.cumsum(weights)
        cumulative.flags.writeable = False
        self._cumulative = cumulative

        log.debug(
            f"GUE spacing table for average={self.average}: {n_max} entries, "
            f"total probability {cumulative[-1]:.6f}"
        )

    def __repr__(self):
        return f"{self.__class__.__name__}(average={self.average!r})"

    @property
    def cumulative(self):
        """Cumulative probability table, read-only (`~numpy.ndarray`)."""
        return self._cumulative

    @property
    def n_max(self):
        """Largest integer that can be drawn (int)."""
        return len(self._cumulative) - 1

    @property
    def probabilities(self):
        """Probability of each integer ``1 .. n_max`` (`~numpy.ndarray`)."""
        return np.diff(self._cumulative)

    def sample(self):
        """Draw one random integer.

        Returns
        -------
        value : int
            Random integer in the range ``1 .. n_max``.
        """
        ran = draw_uniform(self.random_state)
        # first index with cumulative[index] > ran, cumulative[0] == 0 <= ran
        index = np.searchsorted(self._cumulative, ran, side="right")
        return int(min(index, self.n_max))


def create_ensemble_spacing_generator(average, random_state="random-seed"):
    """Create an `EnsembleSpacingGenerator`.

    Parameters
    ----------
    average : float
        Average spacing.
    random_state : {int, 'random-seed', 'global-rng', `~numpy.random.RandomState`}
        Defines random number generator initialisation.

    Returns
    -------
    generator : `EnsembleSpacingGenerator`
        Generator, call ``generator.sample()`` for each new value.
    """
    return EnsembleSpacingGenerator(average=average, random_state=random_state)
