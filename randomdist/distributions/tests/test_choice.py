# Licensed under a 3-clause BSD style license - see LICENSE.rst
import pytest
import numpy as np
from numpy.testing import assert_allclose
from randomdist.distributions import uniform_choice
from randomdist.utils.check import InvalidParameterError
from randomdist.utils.testing import ReplayRandomState


def test_uniform_choice_single():
    for seed in range(10):
        assert uniform_choice(["a"], random_state=seed) == "a"


def test_uniform_choice_empty():
    with pytest.raises(InvalidParameterError, match="empty collection"):
        uniform_choice([], random_state=0)


def test_uniform_choice_returns_element_unchanged():
    element = {"spam": 42}
    assert uniform_choice([element], random_state=0) is element


def test_uniform_choice_index():
    items = ["cold", "cool", "warm", "hot"]
    random_state = ReplayRandomState([0.0, 0.3, 0.6, 0.99])

    values = [uniform_choice(items, random_state=random_state) for _ in range(4)]
    assert values == items


def test_uniform_choice_sequences():
    assert uniform_choice((1, 2, 3), random_state=0) in (1, 2, 3)
    assert uniform_choice("xyz", random_state=0) in "xyz"
    assert uniform_choice(range(5, 10), random_state=0) in range(5, 10)


def test_uniform_choice_distribution(random_state):
    items = ["cold", "cool", "warm", "hot"]
    n_samples = 40000
    values = [
        uniform_choice(items, random_state=random_state) for _ in range(n_samples)
    ]

    fractions = [values.count(item) / n_samples for item in items]
    assert_allclose(fractions, 0.25, atol=0.01)


def test_uniform_choice_same_seed_same_sequence():
    items = list(range(100))
    random_state1 = np.random.RandomState(5)
    random_state2 = np.random.RandomState(5)

    values1 = [uniform_choice(items, random_state=random_state1) for _ in range(50)]
    values2 = [uniform_choice(items, random_state=random_state2) for _ in range(50)]
    assert values1 == values2
