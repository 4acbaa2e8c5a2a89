# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random
import warnings

import pytest
import sympy

from toyrsa import keygen
from toyrsa.errors import NonTerminatingSearchError

test_ranges = [
    (100, 1000),
    (300, 400),
    (1000, 5000),
    pytest.param(10**6, 2 * 10**6, marks=pytest.mark.slow),
]


def test_totient():
    assert keygen.totient(61, 53) == 3120
    assert keygen.totient(2, 3) == 2


@pytest.mark.parametrize("low,high", test_ranges)
def test_generate_key_pair_invariants(low, high, seeded_rng):
    kp = keygen.generate_key_pair(low, high, distinct_primes=True, expose_primes=True, rng=seeded_rng)
    (d, n), (e, pub_n) = kp.private_key, kp.public_key
    p, q = kp.primes
    phi = (p - 1) * (q - 1)
    assert sympy.isprime(p) and sympy.isprime(q)
    assert low <= p <= high and low <= q <= high
    assert p != q
    assert n == pub_n == p * q
    assert 1 <= e <= phi
    assert math.gcd(e, phi) == 1
    assert (e * d) % phi == 1
    assert 0 <= d < phi


def test_generate_key_pair_roundcryption(seeded_rng):
    kp = keygen.generate_key_pair(distinct_primes=True, rng=seeded_rng)
    (d, n), (e, _) = kp.private_key, kp.public_key
    for message in (0, 1, 65, 255, n - 1):
        assert pow(pow(message, e, n), d, n) == message


def test_generate_key_pair_hides_primes():
    kp = keygen.generate_key_pair(distinct_primes=True)
    assert kp.primes is None
    assert isinstance(kp.public_key, keygen.PublicKey)
    assert isinstance(kp.private_key, keygen.PrivateKey)


def test_generate_key_pair_is_tuple_shaped():
    kp = keygen.generate_key_pair(distinct_primes=True)
    private_key, public_key = kp[:2]
    assert private_key.modulus == public_key.modulus
    assert tuple(public_key) == (public_key.exponent, public_key.modulus)


def test_generate_key_pair_functional(mocker):
    src_p, src_q = 61, 53
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[src_p, src_q])
    rng = random.Random()
    mocker.patch.object(rng, "randint", side_effect=[3120, 1560, 17])
    kp = keygen.generate_key_pair(expose_primes=True, rng=rng)
    assert kp.primes == (src_p, src_q)
    assert kp.public_key == (17, 3233)
    assert kp.private_key == (2753, 3233)
    assert rng.randint.call_count == 3
    rng.randint.assert_called_with(1, 3120)


def test_generate_key_pair_fresh_rng_per_call(mocker):
    spy = mocker.spy(keygen.primes, "new_rng")
    keygen.generate_key_pair(distinct_primes=True)
    keygen.generate_key_pair(distinct_primes=True)
    assert spy.call_count == 2


def test_generate_key_pair_equal_primes_warns(mocker):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[101, 101])
    with pytest.warns(RuntimeWarning, match="Both primes are equal!"):
        kp = keygen.generate_key_pair(expose_primes=True)
    assert kp.primes == (101, 101)
    assert kp.public_key.modulus == 101 * 101


def test_generate_key_pair_distinct_redraws(mocker):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[101, 101, 101, 103])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        kp = keygen.generate_key_pair(distinct_primes=True, expose_primes=True)
    assert kp.primes == (101, 103)
    assert keygen.primes.generate_prime.call_count == 4


def test_generate_key_pair_distinct_impossible():
    with pytest.raises(NonTerminatingSearchError):
        keygen.generate_key_pair(7, 7, distinct_primes=True, max_attempts=10)


def test_generate_key_pair_small_modulus_warns():
    with pytest.warns(RuntimeWarning, match="too small to encrypt every byte value"):
        kp = keygen.generate_key_pair(11, 13, distinct_primes=True)
    assert kp.public_key.modulus == 143


def test_generate_key_pair_exponent_exhausted(mocker):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[101, 103])
    rng = random.Random()
    mocker.patch.object(rng, "randint", return_value=10200)
    with pytest.raises(NonTerminatingSearchError, match="coprime"):
        keygen.generate_key_pair(max_attempts=25, rng=rng)
    assert rng.randint.call_count == 25


def test_generate_key_pair_no_primes():
    with pytest.raises(NonTerminatingSearchError):
        keygen.generate_key_pair(24, 28, max_attempts=50)


@pytest.mark.parametrize("low,high,attempts", [(1000, 100, 10), (100, 1000, 0)])
def test_generate_key_pair_validates(low, high, attempts):
    with pytest.raises(ValueError):
        keygen.generate_key_pair(low, high, max_attempts=attempts)


@pytest.mark.extreme
def test_generate_key_pair_every_prime_pair():
    candidates = list(sympy.primerange(100, 1001))
    for p in candidates:
        for q in candidates:
            if p == q:
                continue
            phi = keygen.totient(p, q)
            e = 65537 % phi
            while math.gcd(e, phi) != 1:
                e += 1
            d = pow(e, -1, phi)
            assert all(pow(pow(m, e, p * q), d, p * q) == m for m in range(256))
