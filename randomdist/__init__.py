# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""randomdist: scalar random numbers for a few non-uniform distributions.

The top-level `randomdist` namespace is almost empty,
it only contains this:

::

 __version__         --- randomdist version string


The functionality is available for import from
the following sub-packages (e.g. `randomdist.distributions`):

::

 distributions  --- Gaussian, GUE spacing, Rayleigh and uniform choice generators
 config         --- Configuration of sampling runs
 scripts        --- Command line interface
 utils          --- Utility functions and classes
"""

__all__ = ["__version__"]

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # package is not installed
    __version__ = "unknown"
del version, PackageNotFoundError
