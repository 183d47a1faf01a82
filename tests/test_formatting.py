import math

from exprcalc.formatting import format_number

from pytest import mark


@mark.parametrize('value, expected', [
    (0.3, '0.3'),
    (2.0, '2'),
    (0.1 + 0.2, '0.3'),
    (-0.0, '0'),
    (1.5, '1.5'),
    (-2.50, '-2.5'),
    (1 / 3, '0.333333333333'),
    (2 / 3, '0.666666666667'),
    (123456789012345.0, '123456789012000'),
    (1e20, '100000000000000000000'),
    (1e21, '1e+21'),
    (1e-5, '0.00001'),
    (1e-6, '0.000001'),
    (-2.5e-5, '-0.000025'),
    (1.2345e-5, '0.000012345'),
    (1e-7, '1e-07'),
    (7.257415615307994e306, '7.25741561531e+306'),
])
def test_finite(value, expected):
    assert format_number(value) == expected


@mark.parametrize('value, expected', [
    (math.inf, 'inf'),
    (-math.inf, '-inf'),
    (math.nan, 'nan'),
])
def test_non_finite(value, expected):
    assert format_number(value) == expected


def test_precision():
    assert format_number(math.pi, 3) == '3.14'
    assert format_number(math.pi) == '3.14159265359'


def test_integers_are_accepted():
    assert format_number(42) == '42'


def test_small_quotients_stay_positional():
    assert format_number(1 / 100000) == '0.00001'
    assert format_number(1 / 3 / 10000) == '0.0000333333333333'
