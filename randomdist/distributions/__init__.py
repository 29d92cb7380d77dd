# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""Scalar random number generators for several distributions."""
from .choice import uniform_choice
from .gauss import GaussianGenerator, create_gaussian_generator
from .gue import (
    EnsembleSpacingGenerator,
    create_ensemble_spacing_generator,
    gue_spacing_pdf,
)
from .rayleigh import rayleigh_sample

__all__ = [
    "create_ensemble_spacing_generator",
    "create_gaussian_generator",
    "EnsembleSpacingGenerator",
    "GaussianGenerator",
    "gue_spacing_pdf",
    "rayleigh_sample",
    "uniform_choice",
]
