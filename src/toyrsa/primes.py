"""Primality testing and small prime generation.

Primes are found by rejection sampling over a bounded integer range, each candidate being checked with exact trial
division. This is intended for the small demonstration ranges used by toy keys, and is not at all suitable for
cryptographic-size integers.

Typical usage example:

    is_prime(11)
    p = generate_prime(100, 1000)
    q = generate_prime(*DEFAULT_RANGE, max_attempts=None)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math
import random
import secrets
import typing

from toyrsa.errors import NonTerminatingSearchError

logger = logging.getLogger(__name__)


class PrimeRange(typing.NamedTuple):
    """Inclusive bounds for prime candidates."""
    low: int
    high: int


DEFAULT_RANGE = PrimeRange(100, 1000)
DEFAULT_MAX_ATTEMPTS: int = 10000


def new_rng() -> random.Random:
    """Create a fresh, OS-seeded random source for a single operation."""
    return secrets.SystemRandom()


def check_attempts(max_attempts: int | None) -> None:
    """Validate an attempt bound, None meaning unbounded."""
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be >= 1 or None.")


def is_prime(n: int) -> bool:
    """Exact primality test by trial division.

    Tries every odd divisor up to the integer square root of `n`. Deterministic and exact, but the cost grows with
    the square root of `n`, so only use this on small values.

    Args:
        n: The candidate to test.

    Returns:
        True if `n` is prime, False otherwise.
    """
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for i in range(3, math.isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True


def generate_prime(low: int = DEFAULT_RANGE.low,
                   high: int = DEFAULT_RANGE.high,
                   *,
                   max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
                   rng: random.Random | None = None) -> int:
    """Draw a random prime from `[low, high]`.

    Samples uniformly from the range and discards composites until a prime turns up. The range must contain at least
    one prime, otherwise the search only ends once `max_attempts` is exhausted.

    Args:
        low: Lower bound of the range, inclusive.
        high: Upper bound of the range, inclusive.
        max_attempts: Maximum number of candidates to draw. Defaults to `DEFAULT_MAX_ATTEMPTS`.
            If None, keeps drawing until a prime is found.
        rng: Random source to draw from. A fresh OS-seeded one is created per call if not provided.

    Returns:
        A prime `p` with `low <= p <= high`.

    Raises:
        ValueError: If the range is empty or `max_attempts` is not positive.
        NonTerminatingSearchError: If no prime was drawn within `max_attempts` candidates.
    """
    if low > high:
        raise ValueError(f"Empty prime range [{low}, {high}].")
    check_attempts(max_attempts)
    if rng is None:
        rng = new_rng()
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = rng.randint(low, high)
        if is_prime(candidate):
            logger.debug("Found prime in [%d, %d] after %d attempts.", low, high, attempts)
            return candidate
    raise NonTerminatingSearchError(f"No prime found in [{low}, {high}] after {max_attempts} attempts.")
