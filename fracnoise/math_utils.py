# fracnoise/math_utils.py
"""
Small fixed-size vector helpers and interpolation curves.

Points are plain tuples so numba can keep them in registers. Flooring stays in
floating point (np.floor) and only to_int* converts to lattice integers.
Every helper is compiled in nopython mode, which lets the noise kernels
inline them.
"""

import numpy as np

from numba import jit

# ----------------------------------------------------------------------
# Interpolation
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b"""
    return a + t * (b - a)

@jit(nopython=True, cache=True)
def s_curve5(t: float) -> float:
    """Quintic smoothing curve 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)

@jit(nopython=True, cache=True)
def clamp(value, lower, upper):
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value

# ----------------------------------------------------------------------
# 2D
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def add2(a, b):
    return (a[0] + b[0], a[1] + b[1])

@jit(nopython=True, cache=True)
def sub2(a, b):
    return (a[0] - b[0], a[1] - b[1])

@jit(nopython=True, cache=True)
def mul2(a, s):
    return (a[0] * s, a[1] * s)

@jit(nopython=True, cache=True)
def floor2(a):
    return (np.floor(a[0]), np.floor(a[1]))

@jit(nopython=True, cache=True)
def to_int2(a):
    return (int(a[0]), int(a[1]))

@jit(nopython=True, cache=True)
def dot2(a, b):
    return a[0] * b[0] + a[1] * b[1]

# ----------------------------------------------------------------------
# 3D
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def add3(a, b):
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])

@jit(nopython=True, cache=True)
def sub3(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])

@jit(nopython=True, cache=True)
def mul3(a, s):
    return (a[0] * s, a[1] * s, a[2] * s)

@jit(nopython=True, cache=True)
def floor3(a):
    return (np.floor(a[0]), np.floor(a[1]), np.floor(a[2]))

@jit(nopython=True, cache=True)
def to_int3(a):
    return (int(a[0]), int(a[1]), int(a[2]))

@jit(nopython=True, cache=True)
def dot3(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

# ----------------------------------------------------------------------
# 4D
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def add4(a, b):
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2], a[3] + b[3])

@jit(nopython=True, cache=True)
def sub4(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2], a[3] - b[3])

@jit(nopython=True, cache=True)
def mul4(a, s):
    return (a[0] * s, a[1] * s, a[2] * s, a[3] * s)

@jit(nopython=True, cache=True)
def floor4(a):
    return (np.floor(a[0]), np.floor(a[1]), np.floor(a[2]), np.floor(a[3]))

@jit(nopython=True, cache=True)
def to_int4(a):
    return (int(a[0]), int(a[1]), int(a[2]), int(a[3]))

@jit(nopython=True, cache=True)
def dot4(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]
