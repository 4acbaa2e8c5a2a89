"""Exceptions raised by toyrsa.

Every failure specific to the toy cryptosystem derives from `ToyRSAError`. The concrete errors also derive from the
builtin exception a caller would otherwise expect (`ValueError` or `RuntimeError`), so existing handlers keep working.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class ToyRSAError(Exception):
    """Base class for all toyrsa errors."""


class InvalidModulusError(ToyRSAError, ValueError):
    """A value does not fit the range implied by the modulus.

    Raised when a plaintext byte is not smaller than the modulus, a ciphertext block is out of range, or a decrypted
    value does not fit into a single byte.
    """


class NonTerminatingSearchError(ToyRSAError, RuntimeError):
    """A rejection sampling search ran out of attempts."""


class InverseUndefinedError(ToyRSAError, ValueError):
    """A modular inverse was requested for arguments that are not coprime."""
