import pytest

from chartkit.ema_series import EMASeries

EMA_X = [float(v) for v in range(1, 51)]
EMA_Y = [1.0, 2.0, 3.0, 4.0, 5.0, 4.0, 3.0, 2.0] * 6 + [1.0, 2.0]
EMA_EXPECTED = [
    1,
    1.074074074,
    1.216735254,
    1.422903013,
    1.68787316,
    1.859141815,
    1.943649828,
    1.947823915,
    1.877614736,
    1.886680311,
    1.969148437,
    2.119581886,
    2.33294619,
    2.456431658,
    2.496695979,
    2.459903685,
    2.351762671,
    2.325706177,
    2.375653867,
    2.495975803,
    2.681459077,
    2.779128775,
    2.795489607,
    2.73656445,
    2.607930047,
    2.562898191,
    2.595276103,
    2.699329725,
    2.869749746,
    2.953471987,
    2.956918506,
    2.886035654,
    2.746329309,
    2.691045657,
    2.713931163,
    2.809195522,
    2.971477335,
    3.047664199,
    3.044133518,
    2.966790294,
    2.821102124,
    2.760279745,
    2.778036801,
    2.868552593,
    3.026437586,
    3.098553321,
    3.091253075,
    3.010419514,
    2.86149955,
    2.797684768,
]
EMA_DELTA = 0.0001


class MockValues:
    def __init__(self, xs, ys):
        self.xs = xs
        self.ys = ys

    def __len__(self):
        return len(self.xs)

    def get_values(self, index):
        return self.xs[index], self.ys[index]


def test_ema_series():
    mock = MockValues(EMA_X, EMA_Y)
    assert len(mock) == 50
    ema = EMASeries(inner_series=mock, period=26)
    assert ema.sigma == 2.0 / (26.0 + 1)
    yvalues = [ema.get_values(i)[1] for i in range(len(ema))]
    for actual, expected in zip(yvalues, EMA_EXPECTED):
        assert actual == pytest.approx(expected, abs=EMA_DELTA)
    lvx, lvy = ema.get_last_values()
    assert lvx == 50.0
    assert lvy == pytest.approx(EMA_EXPECTED[49], abs=EMA_DELTA)


def test_first_values():
    ema = EMASeries(inner_series=MockValues(EMA_X, EMA_Y), period=26)
    assert ema.get_first_values() == (1.0, 1.0)


def test_get_values_returns_inner_x():
    ema = EMASeries(inner_series=MockValues(EMA_X, EMA_Y), period=26)
    assert ema.get_values(10)[0] == EMA_X[10]


def test_default_period():
    ema = EMASeries(inner_series=MockValues(EMA_X, EMA_Y))
    assert ema.effective_period == 12
    assert ema.sigma == 2.0 / 13.0


def test_missing_inner_series():
    ema = EMASeries()
    assert ema.get_values(0) == (0.0, 0.0)
    assert ema.get_last_values() == (0.0, 0.0)
    with pytest.raises(ValueError):
        ema.validate()
    with pytest.raises(ValueError):
        len(ema)