import itertools

import numpy as np
import pytest

from fracnoise import Perlin
from fracnoise.gradients import GRAD3, GRAD4, get4, grad2_dot, grad3_dot
from fracnoise.perlin import SCALE_4D

# Direction picked by each value of the low four hash bits
EXPECTED_3D = [
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
    (1, 1, 0), (-1, 1, 0), (0, -1, 1), (0, -1, -1),
]


def test_grad2_picks_diagonals_from_low_bits() -> None:
    assert [grad2_dot(h, 1.0, 10.0) for h in range(4)] == [11.0, 9.0, -9.0, -11.0]
    for h in range(4, 256):
        assert grad2_dot(h, 1.0, 10.0) == grad2_dot(h & 3, 1.0, 10.0)


def test_grad3_cases_and_aliases() -> None:
    x, y, z = 0.3, 0.5, 0.7
    for h, (gx, gy, gz) in enumerate(EXPECTED_3D):
        expected = gx * x + gy * y + gz * z
        assert grad3_dot(h, x, y, z) == pytest.approx(expected, abs=1e-15)
        assert grad3_dot(h + 16, x, y, z) == grad3_dot(h, x, y, z)


def test_grad3_table_is_the_twelve_edge_directions() -> None:
    assert GRAD3.shape == (12, 3)
    assert {tuple(int(c) for c in row) for row in GRAD3} == set(EXPECTED_3D[:12])


def test_grad4_rows_are_unit_length_with_one_zero() -> None:
    assert GRAD4.shape == (32, 4)
    assert len({tuple(row) for row in GRAD4.tolist()}) == 32
    for row in GRAD4:
        assert np.linalg.norm(row) == pytest.approx(1.0)
        assert np.count_nonzero(row == 0.0) == 1


def test_get4_uses_low_five_bits() -> None:
    for h in range(256):
        assert get4(h) == tuple(GRAD4[h & 31])


def _reference_4d(perlin, point):
    near = [int(np.floor(c)) for c in point]
    offset = [c - np.floor(c) for c in point]
    table = perlin.permutation_table
    total = 0.0
    for bits in itertools.product((0, 1), repeat=4):
        # x varies fastest
        bx, by, bz, bw = bits[::-1]
        step = (bx, by, bz, bw)
        corner = [near[a] + step[a] for a in range(4)]
        d = [offset[a] - step[a] for a in range(4)]
        attn = 1.0 - sum(c * c for c in d)
        if attn > 0.0:
            g = GRAD4[table.get4(corner) & 31]
            total += attn ** 4 * sum(d[a] * g[a] for a in range(4))
    return min(max(total * 4.424369240215691, -1.0), 1.0)


def test_4d_scale_constant() -> None:
    assert SCALE_4D == 4.424369240215691


@pytest.mark.parametrize("point", [
    (0.1, 0.2, 0.3, 0.4),
    (3.75, -1.5, 0.05, 2.9),
    (-7.3, 12.6, -0.45, 5.55),
])
def test_4d_matches_surflet_sum_from_tables(point) -> None:
    perlin = Perlin(17)
    assert perlin.get(point) == pytest.approx(_reference_4d(perlin, point), rel=1e-12, abs=1e-15)


def test_4d_point_on_x_edge() -> None:
    # Only the two corners along x lie inside the unit radius of (0.5, 0, 0, 0)
    perlin = Perlin(23)
    table = perlin.permutation_table
    g_near = GRAD4[table.get4((0, 0, 0, 0)) & 31]
    g_far = GRAD4[table.get4((1, 0, 0, 0)) & 31]
    attn = 1.0 - 0.25
    expected = attn ** 4 * (0.5 * g_near[0] - 0.5 * g_far[0]) * 4.424369240215691
    assert perlin.get((0.5, 0.0, 0.0, 0.0)) == pytest.approx(expected, abs=1e-15)
