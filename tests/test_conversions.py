import pytest

from core.radiant.conversions import to_celsius, to_fahrenheit


@pytest.mark.parametrize(
    "fahrenheit, celsius",
    [(32, 0), (212, 100), (68, 20), (-40, -40)],
)
def test_known_points(fahrenheit, celsius):
    assert to_celsius(fahrenheit) == pytest.approx(celsius, abs=1e-9)
    assert to_fahrenheit(celsius) == pytest.approx(fahrenheit, rel=1e-12, abs=1e-9)


def test_freezing_and_boiling_are_exact():
    assert to_celsius(32) == 0
    assert to_celsius(212) == 100
    assert to_fahrenheit(0) == 32
    assert to_fahrenheit(100) == 212


@pytest.mark.parametrize("fahrenheit", [-459.67, -12.3, 0.0, 71.6, 98.6, 1e6])
def test_conversions_are_inverse(fahrenheit):
    assert to_fahrenheit(to_celsius(fahrenheit)) == pytest.approx(fahrenheit, rel=1e-12, abs=1e-9)
