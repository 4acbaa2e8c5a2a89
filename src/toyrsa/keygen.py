"""Toy RSA key pair generation.

Derives a key pair from two randomly drawn small primes: the modulus is their product, the public exponent is drawn
at random among values coprime to the totient, and the private exponent is its modular inverse.

Typical usage example:

    kp = generate_key_pair()
    kp = generate_key_pair(300, 5000, distinct_primes=True)
    (d, n), (e, _) = kp.private_key, kp.public_key
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random
import typing
import warnings

from toyrsa import primes
from toyrsa.errors import NonTerminatingSearchError
from toyrsa.numtheory import gcd
from toyrsa.numtheory import modular_inverse

logger = logging.getLogger(__name__)


class PublicKey(typing.NamedTuple):
    """Public half of a key pair, `(e, n)`."""
    exponent: int
    modulus: int


class PrivateKey(typing.NamedTuple):
    """Private half of a key pair, `(d, n)`."""
    exponent: int
    modulus: int


class KeyPair(typing.NamedTuple):
    """A generated key pair.

    Attributes:
        private_key: The private key `(d, n)`.
        public_key: The public key `(e, n)`.
        primes: The primes `(p, q)` behind the modulus, only set if requested at generation.
    """
    private_key: PrivateKey
    public_key: PublicKey
    primes: tuple[int, int] | None = None


def totient(p: int, q: int) -> int:
    """Euler's totient of `p * q` for distinct primes `p` and `q`."""
    return (p - 1) * (q - 1)


def _draw_exponent(phi: int, max_attempts: int | None, rng: random.Random) -> int:
    """Draw a public exponent from `[1, phi]` coprime to `phi`.

    Raises:
        NonTerminatingSearchError: If no coprime exponent was drawn within `max_attempts`.
    """
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = rng.randint(1, phi)
        if gcd(candidate, phi) == 1:
            return candidate
    raise NonTerminatingSearchError(f"No exponent coprime to {phi} found after {max_attempts} attempts.")


def generate_key_pair(low: int = primes.DEFAULT_RANGE.low,
                      high: int = primes.DEFAULT_RANGE.high,
                      *,
                      max_attempts: int | None = primes.DEFAULT_MAX_ATTEMPTS,
                      distinct_primes: bool = False,
                      expose_primes: bool = False,
                      rng: random.Random | None = None) -> KeyPair:
    """Generates a toy RSA key pair.

    Draws two primes from `[low, high]`, then a public exponent coprime to the totient and its inverse as the private
    exponent. Both primes are drawn independently, so they may coincide unless `distinct_primes` is set. A coinciding
    pair is kept, but a warning is issued, as the totient (and therefore decryption) is wrong for it.

    Args:
        low: Lower bound of the prime range, inclusive.
        high: Upper bound of the prime range, inclusive. To encrypt arbitrary bytes, make sure `p * q > 255`.
        max_attempts: Bound for each rejection sampling search. None for unbounded searches.
        distinct_primes: Whether to redraw `q` until it differs from `p`. Defaults to False.
        expose_primes: Whether to attach `(p, q)` to the returned pair. Defaults to False.
        rng: Random source. A fresh OS-seeded one is created per call if not provided.

    Returns:
        The generated key pair.

    Raises:
        ValueError: If the range is empty or `max_attempts` is not positive.
        NonTerminatingSearchError: If any of the searches runs out of attempts.
    """
    primes.check_attempts(max_attempts)
    if rng is None:
        rng = primes.new_rng()
    p = primes.generate_prime(low, high, max_attempts=max_attempts, rng=rng)
    q = primes.generate_prime(low, high, max_attempts=max_attempts, rng=rng)
    redraws = 0
    while distinct_primes and p == q:
        if max_attempts is not None and redraws >= max_attempts:
            raise NonTerminatingSearchError(f"No second prime distinct from {p} found after {max_attempts} attempts.")
        redraws += 1
        q = primes.generate_prime(low, high, max_attempts=max_attempts, rng=rng)
    if p == q:
        warnings.warn("Both primes are equal! Decryption with this key pair is unreliable.", RuntimeWarning)
    n = p * q
    if n <= 255:
        warnings.warn(f"Modulus {n} is too small to encrypt every byte value.", RuntimeWarning)
    phi = totient(p, q)
    e = _draw_exponent(phi, max_attempts, rng)
    d = modular_inverse(e, phi)
    logger.debug("Generated key pair with modulus %d and public exponent %d.", n, e)
    kp = KeyPair(PrivateKey(d, n), PublicKey(e, n))
    if not expose_primes:
        del p, q
        return kp
    return kp._replace(primes=(p, q))
