# Licensed under a 3-clause BSD style license - see LICENSE.rst
import math
import pytest
import numpy as np
import scipy.integrate
from numpy.testing import assert_allclose
from randomdist.distributions import (
    EnsembleSpacingGenerator,
    create_ensemble_spacing_generator,
    gue_spacing_pdf,
)
from randomdist.utils.check import InvalidParameterError
from randomdist.utils.testing import ReplayRandomState


def reference_table(average):
    cumulative = [0.0]
    for idx in range(1, math.floor(4 * average + 0.5) + 1):
        s = idx / average
        value = 32 / math.pi**2 * s**2 * math.exp(-4 / math.pi * s**2) / average
        cumulative.append(cumulative[-1] + value)
    return cumulative


def test_gue_spacing_pdf():
    assert_allclose(gue_spacing_pdf(0), 0)
    assert_allclose(gue_spacing_pdf(1), 32 / np.pi**2 * np.exp(-4 / np.pi))
    assert gue_spacing_pdf([0.5, 1, 2]).shape == (3,)


def test_gue_spacing_pdf_normalisation():
    def pdf(s):
        return float(gue_spacing_pdf(s))

    def mean(s):
        return s * float(gue_spacing_pdf(s))

    assert_allclose(scipy.integrate.quad(pdf, 0, np.inf)[0], 1)
    assert_allclose(scipy.integrate.quad(mean, 0, np.inf)[0], 1)


def test_gue_table():
    gue = EnsembleSpacingGenerator(average=4, random_state=0)

    assert gue.n_max == 16
    assert len(gue.cumulative) == 17
    assert gue.cumulative[0] == 0
    assert np.all(np.diff(gue.cumulative) >= 0)
    assert_allclose(gue.cumulative, reference_table(4), rtol=1e-12)
    assert_allclose(gue.cumulative[1], 0.0467855, rtol=1e-4)
    assert_allclose(gue.cumulative[-1], 1, rtol=1e-6)


@pytest.mark.parametrize("average", [0.125, 0.3, 1, 2.5, 20])
def test_gue_table_size(average):
    gue = EnsembleSpacingGenerator(average=average, random_state=0)
    assert gue.n_max == math.floor(4 * average + 0.5)
    assert_allclose(gue.cumulative, reference_table(average), rtol=1e-12)


def test_gue_table_read_only():
    gue = EnsembleSpacingGenerator(average=4, random_state=0)
    with pytest.raises(ValueError):
        gue.cumulative[1] = 0.5


def test_gue_table_not_normalised():
    gue = EnsembleSpacingGenerator(average=1, random_state=0)
    assert 0.98 < gue.cumulative[-1] < 0.99
    assert_allclose(gue.probabilities.sum(), gue.cumulative[-1])


def test_gue_sample_inversion():
    gue = EnsembleSpacingGenerator(average=4, random_state=0)
    cumulative = gue.cumulative

    gue.random_state = ReplayRandomState(
        [0.0, cumulative[1], cumulative[1] * 1.001, cumulative[5] - 1e-9, 0.5]
    )
    assert gue.sample() == 1
    # strictly greater than the draw
    assert gue.sample() == 2
    assert gue.sample() == 2
    assert gue.sample() == 5

    expected = np.argmax(cumulative > 0.5)
    assert gue.sample() == expected


def test_gue_sample_fallback():
    gue = EnsembleSpacingGenerator(average=1, random_state=ReplayRandomState([0.995]))
    assert gue.sample() == 4


def test_gue_sample_range():
    gue = create_ensemble_spacing_generator(average=4, random_state=0)
    values = np.array([gue.sample() for _ in range(10000)])

    assert values.min() >= 1
    assert values.max() <= 16
    assert isinstance(gue.sample(), int)


def test_gue_sample_distribution():
    gue = EnsembleSpacingGenerator(average=4, random_state=0)
    n_samples = 200000
    values = np.array([gue.sample() for _ in range(n_samples)])

    counts = np.bincount(values, minlength=gue.n_max + 1)[1:]
    assert_allclose(counts / n_samples, gue.probabilities, atol=0.003)
    # mean spacing is the average, up to the discretisation
    assert_allclose(values.mean(), 4.0, atol=0.05)


def test_gue_same_seed_same_sequence():
    gue1 = EnsembleSpacingGenerator(average=20, random_state=7)
    gue2 = EnsembleSpacingGenerator(average=20, random_state=7)

    assert [gue1.sample() for _ in range(100)] == [gue2.sample() for _ in range(100)]


@pytest.mark.parametrize("average", [0, -4, 0.1, np.nan, np.inf, "4"])
def test_gue_invalid_average(average):
    with pytest.raises(InvalidParameterError):
        EnsembleSpacingGenerator(average=average)


def test_gue_repr():
    gue = EnsembleSpacingGenerator(average=4, random_state=0)
    assert repr(gue) == "EnsembleSpacingGenerator(average=4.0)"
