# Copyright (c) 2026 Signer — MIT License

"""EMSA-PKCS1-v1_5 verification for SHA-256 (RFC 8017 §9.2).

The big-endian encoded message for a k-byte modulus is fully determined
by the digest:

    EM = 0x00 || 0x01 || PS (0xFF * (k - 54)) || 0x00 || T

    T  = DigestInfo prefix (19 bytes) || SHA-256 digest (32 bytes)

so verification rebuilds the expected EM and compares it with the
recovered one in constant time.  The result is the AND of every
per-field check (prefix bytes, separator, padding run, DigestInfo,
digest) without revealing which one failed.

In the little-endian buffer produced by the arithmetic layer the same
bytes appear mirrored: digest reversed at [0, 32), DigestInfo reversed
at [32, 51), 0x00 at 51, PS from 52, then 0x01 and 0x00.
"""

from .bytes_util import ct_equal
from .errors import InvalidModulus
from .mgf1 import HASH_LEN

# DER of DigestInfo { AlgorithmIdentifier { id-sha256, NULL }, OCTET STRING (32) }
SHA256_DIGEST_INFO_PREFIX = bytes([
    0x30, 0x31, 0x30, 0x0D, 0x06, 0x09, 0x60, 0x86, 0x48, 0x01,
    0x65, 0x03, 0x04, 0x02, 0x01, 0x05, 0x00, 0x04, 0x20,
])

# 0x00 0x01 || PS || 0x00 || DigestInfo || H
_FIXED_LEN = 3 + len(SHA256_DIGEST_INFO_PREFIX) + HASH_LEN   # 54


def pkcs1v15_check_length(byte_length):
    """Raise InvalidModulus if a *byte_length*-byte modulus cannot hold
    the encoding (PS may be empty, nothing shorter).
    """
    if byte_length < _FIXED_LEN:
        raise InvalidModulus(
            f"{byte_length}-byte modulus too short for PKCS#1 v1.5 "
            f"with SHA-256 (needs at least {_FIXED_LEN})")


def emsa_pkcs1v15_encode(message_hash, em_len):
    """Expected EM for *message_hash* in an *em_len*-byte modulus.

    Raises ValueError if em_len is too short for the encoding.
    """
    ps_len = em_len - _FIXED_LEN
    if ps_len < 0:
        raise ValueError(
            f"intended encoded message length {em_len} too short "
            f"(needs at least {_FIXED_LEN})")
    return (b"\x00\x01" + b"\xff" * ps_len + b"\x00"
            + SHA256_DIGEST_INFO_PREFIX + bytes(message_hash))


def pkcs1v15_verify(message_hash, em):
    """True iff *em* (big-endian, k bytes) is the PKCS#1 v1.5 encoding of
    *message_hash*.  Never raises for malformed EM.
    """
    if len(message_hash) != HASH_LEN:
        return False
    try:
        expected = emsa_pkcs1v15_encode(message_hash, len(em))
    except ValueError:
        return False
    return ct_equal(em, expected)
