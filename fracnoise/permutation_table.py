# fracnoise/permutation_table.py
"""
Seeded permutation table used to hash integer lattice coordinates.

The table is the identity permutation of 0..255 shuffled by
``numpy.random.RandomState(seed)``. RandomState is NumPy's legacy MT19937
generator whose stream is frozen across releases, so a seed always yields
the same table on every platform. The 256 values are stored twice in a row
so that ``perm[perm[x] + y]`` never needs a second mask.
"""

import logging
import warnings

import numpy as np
from numba import jit

logger = logging.getLogger(__name__)

TABLE_SIZE = 256
_MASK = TABLE_SIZE - 1
_U32 = 0xFFFFFFFF


def normalize_seed(seed: int) -> int:
    """Bring a seed into the unsigned 32-bit range, warning if it had to wrap"""
    seed = int(seed)
    if seed < 0 or seed > _U32:
        wrapped = seed & _U32
        warnings.warn(f"Seed {seed} is outside the 32-bit range, using {wrapped}")
        return wrapped
    return seed

# ----------------------------------------------------------------------
# Hashing
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def hash2(perm: np.ndarray, x: int, y: int) -> int:
    """Hash of a 2D lattice coordinate, in [0, 255]"""
    return int(perm[int(perm[x & _MASK]) + (y & _MASK)])

@jit(nopython=True, cache=True)
def hash3(perm: np.ndarray, x: int, y: int, z: int) -> int:
    """Hash of a 3D lattice coordinate, in [0, 255]"""
    h = int(perm[int(perm[x & _MASK]) + (y & _MASK)])
    return int(perm[h + (z & _MASK)])

@jit(nopython=True, cache=True)
def hash4(perm: np.ndarray, x: int, y: int, z: int, w: int) -> int:
    """Hash of a 4D lattice coordinate, in [0, 255]"""
    h = int(perm[int(perm[x & _MASK]) + (y & _MASK)])
    h = int(perm[h + (z & _MASK)])
    return int(perm[h + (w & _MASK)])

# ----------------------------------------------------------------------
# Table
# ----------------------------------------------------------------------

class PermutationTable:
    """Immutable shuffled lookup table derived from a 32-bit seed"""

    def __init__(self, seed: int = 0):
        """
        Build the table.

        Args:
            seed: Seed for the shuffle, wrapped into [0, 2**32)
        """
        self._seed = normalize_seed(seed)
        values = np.arange(TABLE_SIZE, dtype=np.uint8)
        # Fisher-Yates from the last position down to the second
        np.random.RandomState(self._seed).shuffle(values)
        self._values = np.concatenate([values, values])
        self._values.flags.writeable = False
        logger.debug("Built permutation table for seed %d", self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def values(self) -> np.ndarray:
        """Read-only doubled table (512 entries of dtype uint8)"""
        return self._values

    def get2(self, corner) -> int:
        return hash2(self._values, int(corner[0]) & _MASK, int(corner[1]) & _MASK)

    def get3(self, corner) -> int:
        return hash3(
            self._values,
            int(corner[0]) & _MASK, int(corner[1]) & _MASK, int(corner[2]) & _MASK,
        )

    def get4(self, corner) -> int:
        return hash4(
            self._values,
            int(corner[0]) & _MASK, int(corner[1]) & _MASK,
            int(corner[2]) & _MASK, int(corner[3]) & _MASK,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __hash__(self) -> int:
        return hash(self._values.tobytes())

    def __repr__(self) -> str:
        return f"PermutationTable(seed={self._seed})"
