# fracnoise/gradients.py
"""
Gradient directions for Perlin noise.

2D gradients need no table: the low two bits of the hash pick one of the
four diagonals directly. 3D uses the 12 cube edge midpoints, reached
through a 16-case map so the low four bits of the hash can be used as is.
4D uses the 32 directions with one zero component, normalized to unit
length.
"""

import numpy as np
from numba import jit

# ----------------------------------------------------------------------
# Tables
# ----------------------------------------------------------------------

GRAD3 = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1]
], dtype=np.float64)

# Cases 12..15 repeat four of the directions above
GRAD3_CASES = np.array([
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11,
    0, 1, 9, 11
], dtype=np.int64)

_DIAG4 = 1.0 / np.sqrt(3.0)

GRAD4 = np.array([
    [0, 1, 1, 1], [0, 1, 1, -1], [0, 1, -1, 1], [0, 1, -1, -1],
    [0, -1, 1, 1], [0, -1, 1, -1], [0, -1, -1, 1], [0, -1, -1, -1],
    [1, 0, 1, 1], [1, 0, 1, -1], [1, 0, -1, 1], [1, 0, -1, -1],
    [-1, 0, 1, 1], [-1, 0, 1, -1], [-1, 0, -1, 1], [-1, 0, -1, -1],
    [1, 1, 0, 1], [1, 1, 0, -1], [1, -1, 0, 1], [1, -1, 0, -1],
    [-1, 1, 0, 1], [-1, 1, 0, -1], [-1, -1, 0, 1], [-1, -1, 0, -1],
    [1, 1, 1, 0], [1, 1, -1, 0], [1, -1, 1, 0], [1, -1, -1, 0],
    [-1, 1, 1, 0], [-1, 1, -1, 0], [-1, -1, 1, 0], [-1, -1, -1, 0]
], dtype=np.float64) * _DIAG4

GRAD3.flags.writeable = False
GRAD3_CASES.flags.writeable = False
GRAD4.flags.writeable = False

# ----------------------------------------------------------------------
# Gradient selection
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def grad2_dot(h: int, x: float, y: float) -> float:
    """Dot product of the hashed 2D diagonal with (x, y)"""
    case = h & 3
    if case == 0:
        return x + y    # ( 1,  1)
    if case == 1:
        return -x + y   # (-1,  1)
    if case == 2:
        return x - y    # ( 1, -1)
    return -x - y       # (-1, -1)

@jit(nopython=True, cache=True)
def grad3_dot(h: int, x: float, y: float, z: float) -> float:
    """Dot product of the hashed 3D edge direction with (x, y, z)"""
    index = GRAD3_CASES[h & 15]
    assert 0 <= index < 12
    g = GRAD3[index]
    # Every direction has exactly one zero component
    if g[0] == 0.0:
        return g[1] * y + g[2] * z
    if g[1] == 0.0:
        return g[0] * x + g[2] * z
    return g[0] * x + g[1] * y

@jit(nopython=True, cache=True)
def get4(h: int):
    """Hashed 4D gradient as a tuple"""
    g = GRAD4[h & 31]
    return (g[0], g[1], g[2], g[3])
