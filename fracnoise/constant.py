# fracnoise/constant.py
"""Constant-valued noise source."""

from dataclasses import dataclass

import numpy as np

from .base import NoiseFn


@dataclass(frozen=True)
class Constant(NoiseFn):
    """
    Outputs the same value at every point of any dimensionality.

    Not very useful on its own, but handy as a source for composite
    generators and their tests.
    """
    value: float = 0.0

    def get(self, point) -> float:
        return self.value

    def get_many(self, points) -> np.ndarray:
        return np.full(len(points), self.value, dtype=np.float64)
