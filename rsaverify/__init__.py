# Copyright (c) 2026 Signer — MIT License

"""RSA signature verification over SHA-256 (RFC 8017).

Schemes:
    RSASSA-PSS        — MGF1-SHA256, 32-byte salt, trailer 0xBC.
    RSASSA-PKCS1-v1_5 — SHA-256 DigestInfo.

Any modulus size is accepted, including non-byte-aligned ones such as
1025 bits.  Public exponents: 3 and 65537.

Layers (leaf first):
    bytes_util  — byte-order reversal, zero-padded slicing, constant-time
                  comparison, secure wiping (libsodium via PyNaCl when present).
    bignum      — RSAModulus: 120-bit limbs, Barrett reduction context,
                  little-endian serialisation.
    modexp      — unrolled s^3 / s^65537 mod N.
    mgf1        — MGF1 with SHA-256.
    pss         — EMSA-PSS-VERIFY.
    pkcs1v15    — EMSA-PKCS1-v1_5 comparison.
    verifier    — SignatureVerifier and the verify_* entry points.
"""

from .errors import (
    RSAVerifyError, InvalidExponent, InvalidModulus, MaskTooLong,
    VerificationError, InvalidTrailer, InvalidEncoding, MaskedBitsNonzero,
    InvalidPadding, HashMismatch,
)
from .bytes_util import reverse, slice_padded, BACKEND
from .bignum import RSAModulus, LIMB_BITS, split_limbs, join_limbs
from .modexp import mod_exp, SUPPORTED_EXPONENTS
from .mgf1 import mgf1, HASH_LEN
from .pss import emsa_pss_verify, pss_verify, SALT_LEN, PSS_TRAILER
from .pkcs1v15 import pkcs1v15_verify, SHA256_DIGEST_INFO_PREFIX
from .verifier import SignatureVerifier, verify_pss, verify_pkcs1v15

__all__ = [
    # Verification
    "verify_pss", "verify_pkcs1v15", "SignatureVerifier",
    # Building blocks
    "RSAModulus", "split_limbs", "join_limbs", "mod_exp", "mgf1",
    "emsa_pss_verify", "pss_verify", "pkcs1v15_verify",
    "reverse", "slice_padded",
    # Constants
    "HASH_LEN", "SALT_LEN", "PSS_TRAILER", "SUPPORTED_EXPONENTS",
    "LIMB_BITS", "SHA256_DIGEST_INFO_PREFIX", "BACKEND",
    # Errors
    "RSAVerifyError", "InvalidExponent", "InvalidModulus", "MaskTooLong",
    "VerificationError", "InvalidTrailer", "InvalidEncoding",
    "MaskedBitsNonzero", "InvalidPadding", "HashMismatch",
]
