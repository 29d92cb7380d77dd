# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Utilities for testing"""
import sys
import numpy as np

__all__ = ["ReplayRandomState", "run_cli"]


def run_cli(cli, args, exit_code=0):
    """Run Click command line tool.

    Thin wrapper around `click.testing.CliRunner`
    that prints info to stderr if the command fails.

    Parameters
    ----------
    cli : click.Command
        Click command
    args : list of str
        Argument list
    exit_code : int
        Expected exit code of the command

    Returns
    -------
    result : `click.testing.Result`
        Result
    """
    from click.testing import CliRunner

    result = CliRunner().invoke(cli, args, catch_exceptions=False)

    if result.exit_code != exit_code:
        sys.stderr.write("Exit code mismatch!\n")
        sys.stderr.write("Output:\n")
        sys.stderr.write(result.output)

    return result


class ReplayRandomState(np.random.RandomState):
    """RandomState that replays a fixed list of uniform draws.

    Only ``uniform()`` and ``randint()`` are replayed, both consume the
    next value from ``values``. Running out of values raises `IndexError`.

    Parameters
    ----------
    values : list of float
        Uniform values in [0, 1) returned by successive draws.
    """

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)
        self.n_draws = 0

    def _next(self):
        value = self.values[self.n_draws]
        self.n_draws += 1
        return value

    def uniform(self, low=0.0, high=1.0, size=None):
        return low + (high - low) * self._next()

    def randint(self, low, high=None, size=None, dtype=int):
        if high is None:
            low, high = 0, low
        return low + int(self._next() * (high - low))
