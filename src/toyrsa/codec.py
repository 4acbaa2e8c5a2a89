"""Text armoring of keys and ciphertexts.

Keys and ciphertexts only ever live in memory, but to move them between command line invocations they are DER encoded
and then base64 armored. Public keys use the PKCS1 `RSAPublicKey` structure, private keys and ciphertexts use small
wrappers of our own as there is no standard structure for a key without primes or for byte-wise ciphertext.

Typical usage example:

    text = armor_public_key(kp.public_key)
    pub = dearmor_public_key(text)
    ctext = armor_ciphertext(encrypt(pub, "Hi there!"))
    blocks = dearmor_ciphertext(ctext)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii

from pyasn1 import error
from pyasn1.codec.der import decoder
from pyasn1.codec.der import encoder
from pyasn1.codec.native import encoder as localize
from pyasn1.type import namedtype
from pyasn1.type import univ
from pyasn1_modules import rfc8017

from toyrsa.keygen import PrivateKey
from toyrsa.keygen import PublicKey

# No OID exists for byte-wise RSAEP, so we extend the "baseline" rsaEncryption to branch 1
id_RSAES_bytewise = rfc8017.rsaEncryption + (1,)


class ToyPrivateKey(univ.Sequence):
    """Private key without primes or CRT components, which PKCS1 does not allow for.

    Leads with the algorithm identifier, so it cannot be mistaken for the two-integer `RSAPublicKey`.
    """
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("keyAlgorithm", rfc8017.AlgorithmIdentifier()),
        namedtype.NamedType("modulus", univ.Integer()),
        namedtype.NamedType("privateExponent", univ.Integer()),
    )


class CipherBlocks(univ.SequenceOf):
    componentType = univ.OctetString()


class ToyRSAMessage(univ.Sequence):
    """Ciphertext wrapper, one octet string per encrypted plaintext byte."""
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("encryptionAlgorithm", rfc8017.AlgorithmIdentifier()),
        namedtype.NamedType("encryptedBlocks", CipherBlocks()),
    )


def _bytewise_id() -> rfc8017.AlgorithmIdentifier:
    enc_id = rfc8017.AlgorithmIdentifier()
    enc_id["algorithm"] = id_RSAES_bytewise
    enc_id["parameters"] = univ.Null("")
    return enc_id


def _armor(payload) -> str:
    return base64.b64encode(encoder.encode(payload)).decode("ascii")


def _dearmor(text: str, spec):
    """Decode armored text against an ASN.1 spec.

    Raises:
        ValueError: If the text is not valid base64 or not a valid DER encoding of `spec`.
    """
    name = type(spec).__name__
    try:
        raw = base64.b64decode(text.strip().encode("ascii"), validate=True)
        if not raw:
            raise ValueError(f"Empty armored {name}.")
        decoded, rest = decoder.decode(raw, asn1Spec=spec)
    except (binascii.Error, UnicodeEncodeError, error.PyAsn1Error) as exc:
        raise ValueError(f"Malformed armored {name}.") from exc
    if rest:
        raise ValueError(f"Trailing data after armored {name}.")
    return decoded


def _check_key(exponent: int, modulus: int) -> None:
    if modulus <= 0 or exponent < 0:
        raise ValueError("Key components must be non-negative with a positive modulus.")


def armor_public_key(key: PublicKey | tuple[int, int]) -> str:
    """Armor a public key `(e, n)` as base64 PKCS1 DER."""
    e, n = key
    keydata = rfc8017.RSAPublicKey()
    keydata["modulus"] = n
    keydata["publicExponent"] = e
    return _armor(keydata)


def dearmor_public_key(text: str) -> PublicKey:
    """Restore a public key from its armored form.

    Args:
        text: Output of `armor_public_key`.

    Returns:
        The public key.

    Raises:
        ValueError: If the text is malformed or holds an invalid key.
    """
    pykeyd = localize.encode(_dearmor(text, rfc8017.RSAPublicKey()))
    _check_key(pykeyd["publicExponent"], pykeyd["modulus"])
    return PublicKey(pykeyd["publicExponent"], pykeyd["modulus"])


def armor_private_key(key: PrivateKey | tuple[int, int]) -> str:
    """Armor a private key `(d, n)`."""
    d, n = key
    keydata = ToyPrivateKey()
    keydata["keyAlgorithm"] = _bytewise_id()
    keydata["modulus"] = n
    keydata["privateExponent"] = d
    return _armor(keydata)


def dearmor_private_key(text: str) -> PrivateKey:
    """Restore a private key from its armored form.

    Args:
        text: Output of `armor_private_key`.

    Returns:
        The private key.

    Raises:
        ValueError: If the text is malformed or holds an invalid key.
    """
    keydata = _dearmor(text, ToyPrivateKey())
    if keydata["keyAlgorithm"]["algorithm"] != id_RSAES_bytewise:
        raise ValueError("Unknown private key algorithm.")
    pykeyd = localize.encode(keydata)
    _check_key(pykeyd["privateExponent"], pykeyd["modulus"])
    return PrivateKey(pykeyd["privateExponent"], pykeyd["modulus"])


def armor_ciphertext(blocks: list[bytes]) -> str:
    """Armor a sequence of ciphertext blocks."""
    seq = CipherBlocks()
    seq.clear()  # An empty ciphertext still has to be a valid value.
    seq.extend(blocks)
    pld = ToyRSAMessage()
    pld["encryptionAlgorithm"] = _bytewise_id()
    pld["encryptedBlocks"] = seq
    return _armor(pld)


def dearmor_ciphertext(text: str) -> list[bytes]:
    """Restore ciphertext blocks from their armored form.

    Args:
        text: Output of `armor_ciphertext`.

    Returns:
        The ciphertext blocks, in order.

    Raises:
        ValueError: If the text is malformed or was produced by another algorithm.
    """
    pld = _dearmor(text, ToyRSAMessage())
    if pld["encryptionAlgorithm"]["algorithm"] != id_RSAES_bytewise:
        raise ValueError("Unknown encryption algorithm.")
    return [block.asOctets() for block in pld["encryptedBlocks"]]
