# fracnoise/perlin.py
"""
Perlin gradient noise in 2, 3 and 4 dimensions.

The 2D and 3D kernels smooth the fractional offsets with the quintic curve
and blend the corner contributions as a polynomial in (u, v[, w]). The 4D
kernel sums radially attenuated "surflets" around every corner of the
hypercube instead, which keeps its statistics close to the lower
dimensional kernels without a 16-way interpolation.
"""

from __future__ import annotations

import numpy as np
from numba import jit

from .base import NoiseFn, Seedable, as_point, as_points
from .gradients import grad2_dot, grad3_dot, get4
from .math_utils import (
    add2, add3, add4, clamp, dot4, floor2, floor3, floor4, s_curve5,
    sub2, sub3, sub4, to_int2, to_int3, to_int4,
)
from .permutation_table import PermutationTable, hash2, hash3, hash4, normalize_seed

# Empirical factor that brings the 4D surflet sum to [-1, 1]
SCALE_4D = 4.424369240215691

# ----------------------------------------------------------------------
# 2D
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def perlin_noise_2d(x: float, y: float, perm: np.ndarray) -> float:
    """
    2D Perlin noise

    Args:
        x, y: Coordinates
        perm: Doubled permutation table (length 512)

    Returns:
        Noise value, nominally in [-1, 1]
    """
    point = (x, y)
    floored = floor2(point)
    near = to_int2(floored)
    far = add2(near, (1, 1))
    near_d = sub2(point, floored)
    far_d = sub2(near_d, (1.0, 1.0))

    u = s_curve5(near_d[0])
    v = s_curve5(near_d[1])

    a = grad2_dot(hash2(perm, near[0], near[1]), near_d[0], near_d[1])
    b = grad2_dot(hash2(perm, far[0], near[1]), far_d[0], near_d[1])
    c = grad2_dot(hash2(perm, near[0], far[1]), near_d[0], far_d[1])
    d = grad2_dot(hash2(perm, far[0], far[1]), far_d[0], far_d[1])

    k0 = a
    k1 = b - a
    k2 = c - a
    k3 = a + d - b - c

    return k0 + k1 * u + k2 * v + k3 * u * v

# ----------------------------------------------------------------------
# 3D
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def perlin_noise_3d(x: float, y: float, z: float, perm: np.ndarray) -> float:
    """
    3D Perlin noise

    Args:
        x, y, z: Coordinates
        perm: Doubled permutation table (length 512)

    Returns:
        Noise value, nominally in [-1, 1]
    """
    point = (x, y, z)
    floored = floor3(point)
    near = to_int3(floored)
    far = add3(near, (1, 1, 1))
    n = sub3(point, floored)
    f = sub3(n, (1.0, 1.0, 1.0))

    u = s_curve5(n[0])
    v = s_curve5(n[1])
    w = s_curve5(n[2])

    a = grad3_dot(hash3(perm, near[0], near[1], near[2]), n[0], n[1], n[2])
    b = grad3_dot(hash3(perm, far[0], near[1], near[2]), f[0], n[1], n[2])
    c = grad3_dot(hash3(perm, near[0], far[1], near[2]), n[0], f[1], n[2])
    d = grad3_dot(hash3(perm, far[0], far[1], near[2]), f[0], f[1], n[2])
    e = grad3_dot(hash3(perm, near[0], near[1], far[2]), n[0], n[1], f[2])
    g = grad3_dot(hash3(perm, far[0], near[1], far[2]), f[0], n[1], f[2])
    h = grad3_dot(hash3(perm, near[0], far[1], far[2]), n[0], f[1], f[2])
    i = grad3_dot(hash3(perm, far[0], far[1], far[2]), f[0], f[1], f[2])

    k0 = a
    k1 = b - a
    k2 = c - a
    k3 = e - a
    k4 = a + d - b - c
    k5 = a + g - b - e
    k6 = a + h - c - e
    k7 = b + c + e + i - a - d - g - h

    return (k0 + k1 * u + k2 * v + k3 * w
            + k4 * u * v + k5 * u * w + k6 * v * w + k7 * u * v * w)

# ----------------------------------------------------------------------
# 4D
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def _surflet(perm, cx, cy, cz, cw, distance) -> float:
    attn = 1.0 - dot4(distance, distance)
    if attn > 0.0:
        return attn ** 4 * dot4(distance, get4(hash4(perm, cx, cy, cz, cw)))
    return 0.0

@jit(nopython=True, cache=True)
def perlin_noise_4d(x: float, y: float, z: float, w: float, perm: np.ndarray) -> float:
    """
    4D Perlin noise built from surflets

    Args:
        x, y, z, w: Coordinates
        perm: Doubled permutation table (length 512)

    Returns:
        Noise value clamped to [-1, 1]
    """
    point = (x, y, z, w)
    floored = floor4(point)
    near = to_int4(floored)
    far = add4(near, (1, 1, 1, 1))
    n = sub4(point, floored)
    f = sub4(n, (1.0, 1.0, 1.0, 1.0))

    # Corners in order 0000, 1000, 0100, 1100, ..., 1111 (x bit first)
    total = 0.0
    for corner in range(16):
        bx = corner & 1
        by = (corner >> 1) & 1
        bz = (corner >> 2) & 1
        bw = (corner >> 3) & 1
        distance = (
            f[0] if bx else n[0],
            f[1] if by else n[1],
            f[2] if bz else n[2],
            f[3] if bw else n[3],
        )
        total += _surflet(
            perm,
            far[0] if bx else near[0],
            far[1] if by else near[1],
            far[2] if bz else near[2],
            far[3] if bw else near[3],
            distance,
        )

    return clamp(total * SCALE_4D, -1.0, 1.0)

# ----------------------------------------------------------------------
# Array versions
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def perlin_noise_2d_array(points: np.ndarray, perm: np.ndarray) -> np.ndarray:
    """2D Perlin noise for every row of an (n, 2) array"""
    result = np.empty(points.shape[0], dtype=np.float64)
    for i in range(points.shape[0]):
        result[i] = perlin_noise_2d(points[i, 0], points[i, 1], perm)
    return result

@jit(nopython=True, cache=True)
def perlin_noise_3d_array(points: np.ndarray, perm: np.ndarray) -> np.ndarray:
    """3D Perlin noise for every row of an (n, 3) array"""
    result = np.empty(points.shape[0], dtype=np.float64)
    for i in range(points.shape[0]):
        result[i] = perlin_noise_3d(points[i, 0], points[i, 1], points[i, 2], perm)
    return result

@jit(nopython=True, cache=True)
def perlin_noise_4d_array(points: np.ndarray, perm: np.ndarray) -> np.ndarray:
    """4D Perlin noise for every row of an (n, 4) array"""
    result = np.empty(points.shape[0], dtype=np.float64)
    for i in range(points.shape[0]):
        result[i] = perlin_noise_4d(
            points[i, 0], points[i, 1], points[i, 2], points[i, 3], perm
        )
    return result

_KERNELS = {2: perlin_noise_2d, 3: perlin_noise_3d, 4: perlin_noise_4d}
_ARRAY_KERNELS = {2: perlin_noise_2d_array, 3: perlin_noise_3d_array, 4: perlin_noise_4d_array}

# ----------------------------------------------------------------------
# Generator
# ----------------------------------------------------------------------

class Perlin(NoiseFn, Seedable):
    """Seeded Perlin noise generator for 2D, 3D and 4D points"""

    DEFAULT_SEED = 0

    def __init__(self, seed: int = DEFAULT_SEED):
        """
        Args:
            seed: Seed of the permutation table
        """
        self._table = PermutationTable(seed)

    @property
    def seed(self) -> int:
        return self._table.seed

    @property
    def permutation_table(self) -> PermutationTable:
        return self._table

    def with_seed(self, seed: int) -> "Perlin":
        # Same seed, same table: skip the rebuild
        seed = normalize_seed(seed)
        if seed == self.seed:
            return self
        return Perlin(seed)

    def get(self, point) -> float:
        coords = as_point(point)
        return _KERNELS[len(coords)](*coords, self._table.values)

    def get_many(self, points) -> np.ndarray:
        """Evaluate an (n, D) array of points, returning an (n,) array"""
        arr = as_points(points)
        return _ARRAY_KERNELS[arr.shape[1]](arr, self._table.values)

    def __repr__(self) -> str:
        return f"Perlin(seed={self.seed})"
