"""Number theory primitives backing key generation.

Greatest common divisor, the Extended Euclidean Algorithm and the modular inverse derived from it. All functions
work on plain Python integers, so magnitude is only bounded by memory.

Typical usage example:

    gcd(24, 9)
    g, x, y = extended_gcd(15, 56)
    d = modular_inverse(9, 31)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from toyrsa.errors import InverseUndefinedError


def gcd(a: int, b: int) -> int:
    """Computes the greatest common divisor using the Euclidean algorithm.

    Args:
        a: The first natural number.
        b: The second natural number. Must be non-zero.

    Returns:
        The last non-zero divisor of the remainder chain.

    Raises:
        ValueError: If `b` is zero.
    """
    if b == 0:
        raise ValueError("b must be non-zero")
    while a % b != 0:
        a, b = b, a % b
    return b


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Computes gcd(a, b) together with Bezout coefficients.

    Runs the remainder sequence iteratively, carrying the coefficients along, so that a*x + b*y == g holds at the
    end. Conventionally `a` is the smaller value, although any order works.

    Args:
        a: The first natural number.
        b: The second natural number. May be zero.

    Returns:
        The tuple `(g, x, y)`. For `b == 0` this is `(a, 1, 0)`.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def modular_inverse(a: int, m: int) -> int:
    """Computes the inverse of `a` modulo `m`.

    Uses the Bezout coefficient of `a` from `extended_gcd`, normalized into `[0, m)`.

    Args:
        a: The value to invert.
        m: The modulus. Must be positive.

    Returns:
        The unique `d` in `[0, m)` with `(a * d) % m == 1 % m`.

    Raises:
        ValueError: If `m` is not positive.
        InverseUndefinedError: If `a` and `m` are not coprime.
    """
    if m <= 0:
        raise ValueError("Modulus must be positive.")
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise InverseUndefinedError(f"{a} has no inverse modulo {m}, gcd is {g}.")
    return x % m
