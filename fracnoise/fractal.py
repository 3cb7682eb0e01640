# fracnoise/fractal.py
"""
Hybrid multifractal noise.

Several octaves of Perlin noise are layered, each one weighted by the
product of the octaves before it. A quiet octave therefore damps all the
detail above it, which gives valleys smooth bottoms at every altitude while
peaks stay rough.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

import numpy as np
from numba import jit

from .base import MultiFractal, NoiseFn, Seedable, as_point, as_points
from .math_utils import mul2, mul3, mul4
from .perlin import Perlin, perlin_noise_2d, perlin_noise_3d, perlin_noise_4d
from .permutation_table import normalize_seed

logger = logging.getLogger(__name__)

MAX_OCTAVES = 32

# ----------------------------------------------------------------------
# Parameters and sources
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class FractalParams:
    """Parameters of a multifractal generator"""
    seed: int = 0
    octaves: int = 6              # Number of layered octaves, clamped to [1, 32]
    frequency: float = 2.0        # Cycles per unit length of the first octave
    lacunarity: float = math.pi * 2.0 / 3.0  # Frequency multiplier between octaves
    persistence: float = 0.25     # Amplitude multiplier between octaves

    def __post_init__(self):
        object.__setattr__(self, "seed", normalize_seed(self.seed))
        object.__setattr__(self, "octaves", clamp_octaves(self.octaves))


def clamp_octaves(octaves: int) -> int:
    return min(max(int(octaves), 1), MAX_OCTAVES)


def build_sources(seed: int, octaves: int) -> Tuple[Perlin, ...]:
    """One Perlin source per octave, octave i seeded with seed + i (mod 2**32)"""
    logger.debug("Building %d Perlin sources from seed %d", octaves, seed)
    return tuple(Perlin((seed + i) & 0xFFFFFFFF) for i in range(octaves))


def _stack_tables(sources) -> np.ndarray:
    perms = np.stack([source.permutation_table.values for source in sources])
    perms.flags.writeable = False
    return perms

# ----------------------------------------------------------------------
# Kernels
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def hybrid_multi_2d(x: float, y: float, perms: np.ndarray,
                    frequency: float, lacunarity: float, persistence: float) -> float:
    """
    2D hybrid multifractal noise

    Args:
        x, y: Coordinates
        perms: One permutation table per octave, shape (octaves, 512)
        frequency: Frequency of the first octave
        lacunarity: Frequency multiplier between octaves
        persistence: Amplitude multiplier between octaves
    """
    # First octave sets both the result and the initial weight
    point = mul2((x, y), frequency)
    result = perlin_noise_2d(point[0], point[1], perms[0]) * persistence
    weight = result

    for i in range(1, perms.shape[0]):
        # Prevent divergence
        weight = max(weight, 1.0)

        point = mul2(point, lacunarity)
        signal = perlin_noise_2d(point[0], point[1], perms[i])
        signal *= persistence ** i

        result += weight * signal
        weight *= signal

    # Rescale to roughly [-1, 1]
    return result * 3.0

@jit(nopython=True, cache=True)
def hybrid_multi_3d(x: float, y: float, z: float, perms: np.ndarray,
                    frequency: float, lacunarity: float, persistence: float) -> float:
    """3D hybrid multifractal noise, see hybrid_multi_2d"""
    point = mul3((x, y, z), frequency)
    result = perlin_noise_3d(point[0], point[1], point[2], perms[0]) * persistence
    weight = result

    for i in range(1, perms.shape[0]):
        weight = max(weight, 1.0)

        point = mul3(point, lacunarity)
        signal = perlin_noise_3d(point[0], point[1], point[2], perms[i])
        signal *= persistence ** i

        result += weight * signal
        weight *= signal

    return result * 3.0

@jit(nopython=True, cache=True)
def hybrid_multi_4d(x: float, y: float, z: float, w: float, perms: np.ndarray,
                    frequency: float, lacunarity: float, persistence: float) -> float:
    """4D hybrid multifractal noise, see hybrid_multi_2d"""
    point = mul4((x, y, z, w), frequency)
    result = perlin_noise_4d(point[0], point[1], point[2], point[3], perms[0]) * persistence
    weight = result

    for i in range(1, perms.shape[0]):
        weight = max(weight, 1.0)

        point = mul4(point, lacunarity)
        signal = perlin_noise_4d(point[0], point[1], point[2], point[3], perms[i])
        signal *= persistence ** i

        result += weight * signal
        weight *= signal

    return result * 3.0

@jit(nopython=True, cache=True)
def hybrid_multi_array(points: np.ndarray, perms: np.ndarray,
                       frequency: float, lacunarity: float, persistence: float) -> np.ndarray:
    """Hybrid multifractal noise for every row of an (n, D) array, D in 2..4"""
    n, dims = points.shape
    result = np.empty(n, dtype=np.float64)
    for i in range(n):
        if dims == 2:
            result[i] = hybrid_multi_2d(points[i, 0], points[i, 1], perms,
                                        frequency, lacunarity, persistence)
        elif dims == 3:
            result[i] = hybrid_multi_3d(points[i, 0], points[i, 1], points[i, 2], perms,
                                        frequency, lacunarity, persistence)
        else:
            result[i] = hybrid_multi_4d(points[i, 0], points[i, 1], points[i, 2], points[i, 3],
                                        perms, frequency, lacunarity, persistence)
    return result

_KERNELS = {2: hybrid_multi_2d, 3: hybrid_multi_3d, 4: hybrid_multi_4d}

# ----------------------------------------------------------------------
# Generator
# ----------------------------------------------------------------------

class HybridMulti(NoiseFn, Seedable, MultiFractal):
    """
    Hybrid multifractal generator over independently seeded Perlin sources.

    Instances never change. The with_* methods return a new generator, or
    the same one when nothing would change. Only a new seed or octave count
    rebuilds the per-octave sources; frequency, lacunarity and persistence
    changes share them.
    """

    DEFAULT_SEED = 0
    DEFAULT_OCTAVES = 6
    DEFAULT_FREQUENCY = 2.0
    DEFAULT_LACUNARITY = math.pi * 2.0 / 3.0
    DEFAULT_PERSISTENCE = 0.25
    MAX_OCTAVES = MAX_OCTAVES

    def __init__(self, params: Optional[FractalParams] = None, **overrides):
        """
        Args:
            params: Generator parameters, defaults to FractalParams()
            **overrides: Individual FractalParams fields to replace
        """
        params = params or FractalParams()
        if overrides:
            params = replace(params, **overrides)
        self._params = params
        self._sources = build_sources(params.seed, params.octaves)
        self._perms = _stack_tables(self._sources)

    @classmethod
    def _sharing_sources(cls, other: "HybridMulti", params: FractalParams) -> "HybridMulti":
        obj = cls.__new__(cls)
        obj._params = params
        obj._sources = other._sources
        obj._perms = other._perms
        return obj

    @property
    def params(self) -> FractalParams:
        return self._params

    @property
    def sources(self) -> Tuple[Perlin, ...]:
        return self._sources

    @property
    def seed(self) -> int:
        return self._params.seed

    @property
    def octaves(self) -> int:
        return self._params.octaves

    @property
    def frequency(self) -> float:
        return self._params.frequency

    @property
    def lacunarity(self) -> float:
        return self._params.lacunarity

    @property
    def persistence(self) -> float:
        return self._params.persistence

    def with_seed(self, seed: int) -> "HybridMulti":
        seed = normalize_seed(seed)
        if seed == self.seed:
            return self
        return HybridMulti(replace(self._params, seed=seed))

    def with_octaves(self, octaves: int) -> "HybridMulti":
        octaves = clamp_octaves(octaves)
        if octaves == self.octaves:
            return self
        return HybridMulti(replace(self._params, octaves=octaves))

    def with_frequency(self, frequency: float) -> "HybridMulti":
        return self._sharing_sources(self, replace(self._params, frequency=frequency))

    def with_lacunarity(self, lacunarity: float) -> "HybridMulti":
        return self._sharing_sources(self, replace(self._params, lacunarity=lacunarity))

    def with_persistence(self, persistence: float) -> "HybridMulti":
        return self._sharing_sources(self, replace(self._params, persistence=persistence))

    def get(self, point) -> float:
        coords = as_point(point)
        p = self._params
        return _KERNELS[len(coords)](
            *coords, self._perms, float(p.frequency), float(p.lacunarity), float(p.persistence)
        )

    def get_many(self, points) -> np.ndarray:
        """Evaluate an (n, D) array of points, returning an (n,) array"""
        arr = as_points(points)
        p = self._params
        return hybrid_multi_array(
            arr, self._perms, float(p.frequency), float(p.lacunarity), float(p.persistence)
        )

    def __repr__(self) -> str:
        p = self._params
        return (f"HybridMulti(seed={p.seed}, octaves={p.octaves}, frequency={p.frequency}, "
                f"lacunarity={p.lacunarity}, persistence={p.persistence})")
