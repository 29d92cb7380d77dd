# Licensed under a 3-clause BSD style license - see LICENSE.rst
import pytest
import numpy as np
from randomdist.utils.check import InvalidParameterError, check_finite, check_positive


def test_invalid_parameter_error_is_value_error():
    assert issubclass(InvalidParameterError, ValueError)


def test_check_finite():
    assert check_finite(-3, "mean") == -3.0
    assert isinstance(check_finite(np.float32(2), "mean"), float)

    with pytest.raises(InvalidParameterError, match="mean must be finite"):
        check_finite(np.nan, "mean")

    with pytest.raises(InvalidParameterError, match="mean must be a real number"):
        check_finite("3", "mean")

    with pytest.raises(InvalidParameterError):
        check_finite(True, "mean")


def test_check_positive():
    assert check_positive(3, "sigma") == 3.0

    with pytest.raises(InvalidParameterError, match="sigma must be positive, got 0.0"):
        check_positive(0, "sigma")

    with pytest.raises(InvalidParameterError, match="sigma must be positive"):
        check_positive(-1e-3, "sigma")

    with pytest.raises(InvalidParameterError, match="sigma must be finite"):
        check_positive(np.inf, "sigma")
