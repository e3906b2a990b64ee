"""Euclidean algorithms used to derive the private exponent.

Provides the plain greatest common divisor used to screen public exponent candidates and the extended variant that
yields Bezout coefficients, from which the modular inverse is read off.

Typical usage example:

    gcd(65537, 3120)
    g, x, y = extended_gcd(17, 3120)
    d = modular_inverse(17, 3120)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two natural numbers.

    Iterative form of gcd(a, b) = gcd(b mod a, a) with gcd(0, x) = x.

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        The greatest common divisor of `a` and `b`.
    """
    while a != 0:
        a, b = b % a, a
    return b


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Greatest common divisor together with its Bezout coefficients.

    Divides the running remainders until the last one vanishes, carrying for each remainder the signed multiples of
    `a` and `b` that produce it. When `a` and `b` are coprime the multiple of `a` is an inverse candidate for `a`
    modulo `b`, still to be reduced into [0, b) by `modular_inverse()`.

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Tuple of (g, x, y) with a*x + b*y == g == gcd(a, b). `x` and `y` may be negative.
    """
    remainder, next_remainder = a, b
    coeff_a, next_coeff_a = 1, 0
    coeff_b, next_coeff_b = 0, 1
    while next_remainder != 0:
        quotient = remainder // next_remainder
        remainder, next_remainder = next_remainder, remainder - quotient * next_remainder
        coeff_a, next_coeff_a = next_coeff_a, coeff_a - quotient * next_coeff_a
        coeff_b, next_coeff_b = next_coeff_b, coeff_b - quotient * next_coeff_b
    return remainder, coeff_a, coeff_b


def modular_inverse(a: int, modulus: int) -> int:
    """Computes the multiplicative inverse of `a` modulo `modulus`.

    Reads the coefficient of `a` from a*x + modulus*y = 1. Taken modulo `modulus` the second term drops out, leaving
    a*x = 1, so `x` is the inverse up to a multiple of `modulus`.

    Args:
        a: The number to invert.
        modulus: The modulus. Must be > 1.

    Returns:
        The unique `x` in [0, modulus) with a*x = 1 (mod modulus).

    Raises:
        ValueError: If `a` is not invertible modulo `modulus`.
    """
    if modulus < 2:
        raise ValueError("Modulus must be greater than 1.")
    g, x, _ = extended_gcd(a % modulus, modulus)
    if g != 1:
        raise ValueError(f"{a} is not invertible modulo {modulus}.")
    # Bezout coefficients may be negative, Python's modulo lands in [0, modulus).
    return x % modulus
