# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Parameter checks shared by the random generators."""
import numbers
import numpy as np

__all__ = ["InvalidParameterError", "check_finite", "check_positive"]


class InvalidParameterError(ValueError):
    """Error when a distribution parameter is outside its domain."""


def check_finite(value, name):
    """Check that a parameter is a finite real number.

    Parameters
    ----------
    value : float
        Parameter value.
    name : str
        Parameter name, used in the error message.

    Returns
    -------
    value : float
        The input converted to `float`.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, np.number)):
        raise InvalidParameterError(
            f"{name} must be a real number, got {value!r} of type {type(value)}"
        )

    if not np.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}")

    return float(value)


def check_positive(value, name):
    """Check that a parameter is a finite and strictly positive real number.

    Parameters
    ----------
    value : float
        Parameter value.
    name : str
        Parameter name, used in the error message.

    Returns
    -------
    value : float
        The input converted to `float`.
    """
    value = check_finite(value, name)

    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")

    return value
