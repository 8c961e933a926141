# Copyright (c) 2026 Signer — MIT License

"""RSA signature verification over SHA-256 digests.

    verify_pss(message_hash, signature, modulus, exponent=65537)      -> bool
    verify_pkcs1v15(message_hash, signature, modulus, exponent=65537) -> bool

or, with the key size fixed once:

    verifier = SignatureVerifier(modulus)
    verifier.verify_pss(message_hash, signature)

Both paths share one pipeline: exponentiate, serialise little-endian,
reverse once to the big-endian EM, decode.

Error contract:
    - An unsupported exponent or a message hash that is not 32 bytes
      raises (InvalidExponent / ValueError); these are caller bugs.
    - A modulus too short for the encoding raises InvalidModulus.
    - Anything wrong with the signature itself (out of range, bad
      padding, wrong trailer, hash mismatch) returns False.
"""

from .bignum import RSAModulus
from .bytes_util import reverse
from .mgf1 import HASH_LEN
from .modexp import check_exponent, mod_exp_le_bytes
from .pkcs1v15 import pkcs1v15_check_length, pkcs1v15_verify
from .pss import pss_lengths, pss_verify


def _check_hash(message_hash):
    if len(message_hash) != HASH_LEN:
        raise ValueError(
            f"message hash must be {HASH_LEN} bytes (SHA-256), got {len(message_hash)}")


class SignatureVerifier:
    """Verifies PSS and PKCS#1 v1.5 signatures under one RSA modulus."""

    def __init__(self, modulus):
        if not isinstance(modulus, RSAModulus):
            modulus = RSAModulus(modulus)
        self.modulus = modulus

    def __repr__(self):
        return f"SignatureVerifier(bits={self.modulus.bits})"

    def recover_em(self, signature, exponent=65537):
        """Big-endian EM = signature^e mod N, or None if s is out of range.

        Raises InvalidExponent for an unsupported exponent.
        """
        check_exponent(exponent)
        if isinstance(signature, bool) or not isinstance(signature, int):
            return None
        if not 0 <= signature < self.modulus.n:
            return None
        return reverse(mod_exp_le_bytes(signature, exponent, self.modulus))

    def verify_pss(self, message_hash, signature, exponent=65537):
        """RSASSA-PSS-VERIFY (SHA-256, MGF1-SHA256, 32-byte salt)."""
        _check_hash(message_hash)
        # Undersized modulus is a configuration error, raise before decoding.
        pss_lengths(self.modulus.bits)
        em = self.recover_em(signature, exponent)
        if em is None:
            return False
        return pss_verify(message_hash, em, self.modulus.bits)

    def verify_pkcs1v15(self, message_hash, signature, exponent=65537):
        """RSASSA-PKCS1-V1_5-VERIFY with SHA-256."""
        _check_hash(message_hash)
        pkcs1v15_check_length(self.modulus.byte_length)
        em = self.recover_em(signature, exponent)
        if em is None:
            return False
        return pkcs1v15_verify(message_hash, em)


def verify_pss(message_hash, signature, modulus, exponent=65537):
    """Verify an RSA-PSS signature over a SHA-256 digest.

    Args:
        message_hash: 32-byte SHA-256 digest.
        signature: Signature as an int (big-endian interpretation of the
            signature octets).
        modulus: RSAModulus or int N.
        exponent: 3 or 65537.

    Returns:
        True if valid, False otherwise.
    """
    return SignatureVerifier(modulus).verify_pss(message_hash, signature, exponent)


def verify_pkcs1v15(message_hash, signature, modulus, exponent=65537):
    """Verify an RSA PKCS#1 v1.5 signature over a SHA-256 digest.

    Same arguments and return value as verify_pss.
    """
    return SignatureVerifier(modulus).verify_pkcs1v15(message_hash, signature, exponent)
