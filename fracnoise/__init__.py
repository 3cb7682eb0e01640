"""Fracnoise public API."""

from .base import MultiFractal, NoiseFn, Seedable
from .constant import Constant
from .fractal import FractalParams, HybridMulti, build_sources
from .permutation_table import PermutationTable
from .perlin import Perlin

__all__ = [
    "NoiseFn",
    "Seedable",
    "MultiFractal",
    "Constant",
    "Perlin",
    "HybridMulti",
    "FractalParams",
    "PermutationTable",
    "build_sources",
]

__version__ = "0.1.0"
