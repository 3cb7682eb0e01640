import numpy as np

from fracnoise import Constant, NoiseFn


def test_constant_returns_value_everywhere() -> None:
    source = Constant(5.0)
    for point in [(0.0, 0.0), (1.5, -2.5, 3.0), (9.0, 8.0, 7.0, 6.0), (1.0,), (float("nan"), 0.0)]:
        assert source.get(point) == 5.0
        assert source(point) == 5.0


def test_constant_default_and_many() -> None:
    assert Constant().get((1.0, 2.0)) == 0.0
    values = Constant(-0.5).get_many(np.zeros((7, 3)))
    assert values.shape == (7,)
    assert np.all(values == -0.5)


def test_constant_is_a_noise_fn() -> None:
    assert isinstance(Constant(1.0), NoiseFn)
