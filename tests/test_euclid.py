# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random

import pytest
import sympy

from rsaprimer import euclid

gcd_cases = [
    (0, 0),
    (0, 7),
    (7, 0),
    (1, 1),
    (12, 18),
    (18, 12),
    (240, 46),
    (17, 3120),
    (3120, 17),
    (2**127 - 1, 2**61 - 1),
    (2**64 * 3, 2**32 * 9),
]


@pytest.mark.parametrize("a,b", gcd_cases)
def test_gcd(a, b):
    assert euclid.gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", gcd_cases)
def test_extended_gcd_bezout(a, b):
    g, x, y = euclid.extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_extended_gcd_known():
    assert euclid.extended_gcd(240, 46) == (2, -9, 47)
    assert euclid.extended_gcd(3120, 17) == (1, 2, -367)
    assert euclid.extended_gcd(17, 3120) == (1, -367, 2)


def test_extended_gcd_random_matches_sympy():
    rng = random.Random(2025)
    for _ in range(200):
        a = rng.getrandbits(256)
        b = rng.getrandbits(256)
        g, x, y = euclid.extended_gcd(a, b)
        assert g == sympy.gcd(a, b)
        assert a * x + b * y == g


@pytest.mark.parametrize("a,m,expected", [(17, 3120, 2753), (3, 11, 4), (10, 17, 12), (1, 8, 1), (-3, 11, 7),
                                          (3137, 3120, 2753)])
def test_modular_inverse(a, m, expected):
    assert euclid.modular_inverse(a, m) == expected


def test_modular_inverse_matches_sympy():
    rng = random.Random(7)
    modulus = sympy.prevprime(2**127)
    for _ in range(100):
        a = rng.randrange(1, modulus)
        inv = euclid.modular_inverse(a, modulus)
        assert 0 <= inv < modulus
        assert inv == sympy.mod_inverse(a, modulus)


@pytest.mark.parametrize("a,m", [(6, 9), (0, 7), (12, 3120), (4, 1), (3, 0), (3, -5)])
def test_modular_inverse_validates(a, m):
    with pytest.raises(ValueError):
        euclid.modular_inverse(a, m)


@pytest.mark.parametrize("a,m", [(17, 3120), (3, 11), (65537, 2**64 - 59)])
def test_extended_gcd_coefficient_is_inverse(a, m):
    g, x, _ = euclid.extended_gcd(a, m)
    assert g == 1
    assert a * x % m == 1
    assert euclid.modular_inverse(a, m) == x % m
