# fracnoise/base.py
"""Common interfaces shared by all noise generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

import numpy as np

Point = Tuple[float, ...]

SUPPORTED_DIMENSIONS = (2, 3, 4)


def as_point(point: Sequence[float]) -> Point:
    """Coerce a 2, 3 or 4 element sequence into a tuple of floats."""
    coords = tuple(float(c) for c in point)
    if len(coords) not in SUPPORTED_DIMENSIONS:
        raise ValueError(f"Point must have 2, 3 or 4 coordinates, got {len(coords)}")
    return coords


def as_points(points) -> np.ndarray:
    """Coerce an (n, D) array-like into a contiguous float64 array."""
    arr = np.ascontiguousarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] not in SUPPORTED_DIMENSIONS:
        raise ValueError(f"Points must have shape (n, 2), (n, 3) or (n, 4), got {arr.shape}")
    return arr


class NoiseFn(ABC):
    """Anything that can be evaluated at a point to give a scalar."""

    @abstractmethod
    def get(self, point: Sequence[float]) -> float:
        ...

    def __call__(self, point: Sequence[float]) -> float:
        return self.get(point)


class Seedable(ABC):
    """Generators whose output is driven by a 32-bit seed."""

    @property
    @abstractmethod
    def seed(self) -> int:
        ...

    @abstractmethod
    def with_seed(self, seed: int) -> "Seedable":
        """Return a generator using `seed`, or self if the seed is unchanged."""

    def set_seed(self, seed: int) -> "Seedable":
        return self.with_seed(seed)


class MultiFractal(ABC):
    """Generators built from several octaves of a source noise."""

    @abstractmethod
    def with_octaves(self, octaves: int) -> "MultiFractal":
        ...

    @abstractmethod
    def with_frequency(self, frequency: float) -> "MultiFractal":
        ...

    @abstractmethod
    def with_lacunarity(self, lacunarity: float) -> "MultiFractal":
        ...

    @abstractmethod
    def with_persistence(self, persistence: float) -> "MultiFractal":
        ...

    def set_octaves(self, octaves: int) -> "MultiFractal":
        return self.with_octaves(octaves)

    def set_frequency(self, frequency: float) -> "MultiFractal":
        return self.with_frequency(frequency)

    def set_lacunarity(self, lacunarity: float) -> "MultiFractal":
        return self.with_lacunarity(lacunarity)

    def set_persistence(self, persistence: float) -> "MultiFractal":
        return self.with_persistence(persistence)
