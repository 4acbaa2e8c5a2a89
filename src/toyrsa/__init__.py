"""A toy RSA cryptosystem in an Academic Sense.

Provides byte-wise textbook RSA: key pair generation from small random primes, encryption and decryption, as well as
the number theory primitives underneath. Warning! Unsecure, for demonstration purposes only.

Typical usage example:

    kp = generate_key_pair(300, 1000)
    c = encrypt(kp.public_key, "Hi there!")
    r = decrypt(kp.private_key, c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from toyrsa.errors import InvalidModulusError
from toyrsa.errors import InverseUndefinedError
from toyrsa.errors import NonTerminatingSearchError
from toyrsa.errors import ToyRSAError
from toyrsa.keygen import generate_key_pair
from toyrsa.keygen import KeyPair
from toyrsa.keygen import PrivateKey
from toyrsa.keygen import PublicKey
from toyrsa.keygen import totient
from toyrsa.numtheory import extended_gcd
from toyrsa.numtheory import gcd
from toyrsa.numtheory import modular_inverse
from toyrsa.primes import DEFAULT_RANGE
from toyrsa.primes import generate_prime
from toyrsa.primes import is_prime
from toyrsa.primes import PrimeRange
from toyrsa.rsa import decrypt
from toyrsa.rsa import encrypt

__version__ = "0.1.0"
__all__ = [
    "ToyRSAError",
    "InvalidModulusError",
    "InverseUndefinedError",
    "NonTerminatingSearchError",
    "KeyPair",
    "PrivateKey",
    "PublicKey",
    "PrimeRange",
    "DEFAULT_RANGE",
    "gcd",
    "extended_gcd",
    "modular_inverse",
    "is_prime",
    "generate_prime",
    "totient",
    "generate_key_pair",
    "encrypt",
    "decrypt",
]
