"""Byte-wise textbook RSA encryption and decryption.

Every plaintext byte is raised to the key exponent modulo the key modulus on its own, so a ciphertext is a sequence of
blocks, one per plaintext byte, each holding the minimal little-endian encoding of the result. There is no padding and
no chaining between bytes. Warning! Unsecure, for demonstration only.

Typical usage example:

    kp = generate_key_pair()
    blocks = encrypt(kp.public_key, "Hello World")
    clear = decrypt(kp.private_key, blocks)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Iterable

from toyrsa.errors import InvalidModulusError
from toyrsa.keygen import PrivateKey
from toyrsa.keygen import PublicKey


def encrypt(public_key: PublicKey | tuple[int, int], plaintext: bytes | str, encoding: str = "utf-8") -> list[bytes]:
    """Encrypts every byte of the plaintext with the public key.

    Args:
        public_key: The public key `(e, n)`.
        plaintext: The message to encrypt. Strings are encoded with `encoding` first.
        encoding: Encoding used for string plaintexts. Defaults to utf-8.

    Returns:
        One ciphertext block per plaintext byte, in plaintext order.

    Raises:
        InvalidModulusError: If a plaintext byte is not smaller than the modulus.
    """
    e, n = public_key
    if isinstance(plaintext, str):
        plaintext = plaintext.encode(encoding)
    blocks = []
    for b in plaintext:
        if b >= n:
            raise InvalidModulusError(f"Byte value {b} does not fit modulus {n}.")
        blocks.append(integer_to_bytes(pow(b, e, n)))
    return blocks


def decrypt(private_key: PrivateKey | tuple[int, int], blocks: Iterable[bytes]) -> bytes:
    """Decrypts a sequence of ciphertext blocks with the private key.

    The whole operation fails if any block does not decrypt to a single byte, rather than dropping that block.

    Args:
        private_key: The private key `(d, n)`.
        blocks: Ciphertext blocks as produced by `encrypt`.

    Returns:
        The recovered plaintext bytes.

    Raises:
        InvalidModulusError: If a block is out of range for the modulus, or decrypts to a value above 255.
    """
    d, n = private_key
    clear = bytearray()
    for block in blocks:
        c = bytes_to_integer(block)
        if c >= n:
            raise InvalidModulusError(f"Ciphertext block {c} is out of range for modulus {n}.")
        value = pow(c, d, n)
        if value > 0xff:
            raise InvalidModulusError(f"Decrypted value {value} does not fit a byte, modulus {n} is likely too small.")
        clear.append(value)
    return bytes(clear)


def bytes_to_integer(block: bytes) -> int:
    """Converts a little-endian block to an unsigned integer.

    Args:
        block: The bytes to convert. An empty block reads as zero.

    Returns:
        The representative integer.
    """
    return int.from_bytes(block, byteorder="little", signed=False)


def integer_to_bytes(value: int) -> bytes:
    """Converts an unsigned integer to its minimal little-endian representation.

    Zero is represented by a single null byte.

    Args:
        value: The integer to convert. Must be non-negative.

    Returns:
        The representative bytes.

    Raises:
        ValueError: If `value` is negative.
    """
    if value < 0:
        raise ValueError("Value must be non-negative.")
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), byteorder="little", signed=False)
