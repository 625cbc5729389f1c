import pytest

from intrange.util.number_theory import extended_gcd, sign, ceil_div


@pytest.mark.parametrize("a, b, expected", [
    (708, 853, (1, 100, -83)),
    (305, 583, (1, 216, -113)),
    (414, 780, (6, 49, -26)),
    (117, -643, (1, 11, 2)),
    (788, -987, (1, -124, -99)),
    (621, 812, (1, 17, -13)),
    (-507, -706, (1, -149, 107)),
    (484, -576, (4, 25, 21)),
    (-858, 728, (26, 11, 13)),
    (175, -165, (5, -16, -17)),
])
def test_extended_gcd(a, b, expected):
    assert extended_gcd(a, b) == expected

    gcd, u, v = expected
    assert a * u + b * v == gcd


def test_extended_gcd_with_zero():
    assert extended_gcd(0, 12) == (12, 0, 1)
    assert extended_gcd(12, 0) == (12, 1, 0)


def test_sign():
    assert sign(-17) == -1
    assert sign(0) == 0
    assert sign(3) == 1


@pytest.mark.parametrize("a, b, expected", [
    (7, 2, 4),
    (6, 2, 3),
    (-7, 2, -3),
    (0, 5, 0),
    (7, -2, -3),
])
def test_ceil_div(a, b, expected):
    assert ceil_div(a, b) == expected
