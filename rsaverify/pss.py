# Copyright (c) 2026 Signer — MIT License

"""EMSA-PSS verification with SHA-256 / MGF1-SHA256 (RFC 8017 §9.1.2).

Parameters are fixed: hLen = sLen = 32, trailer field 0xBC.

The encoded message EM is the big-endian octet string of length
keyLen = ceil(modBits / 8).  EMSA-PSS works on emLen = ceil((modBits-1)/8)
bytes, so when modBits = 8k + 1 (e.g. a 1025-bit modulus) EM carries one
extra leading byte which is skipped unread:

    EM = [pad]? || maskedDB (emLen - hLen - 1) || H (hLen) || 0xBC

Layout of the unmasked data block:

    DB = PS (zeros) || 0x01 || salt (sLen)

Failures are signalled with VerificationError subclasses from
``emsa_pss_verify``; ``pss_verify`` collapses them into a boolean.
Checks on the zero run and the hash comparison do not exit early.
"""

import hashlib

from .bytes_util import (
    ct_equal, ct_is_zero, secure_zero, slice_padded, xor_bytes,
)
from .errors import (
    HashMismatch, InvalidEncoding, InvalidModulus, InvalidPadding,
    InvalidTrailer, MaskedBitsNonzero, VerificationError,
)
from .mgf1 import HASH_LEN, mgf1

SALT_LEN = 32
PSS_TRAILER = 0xBC

_M_PRIME_PADDING = b"\x00" * 8


def pss_lengths(mod_bits):
    """Return (em_bits, em_len, key_len) for a modulus of *mod_bits* bits.

    Raises InvalidModulus when the modulus is too short to hold
    hLen + sLen + 2 bytes of encoding.
    """
    em_bits = mod_bits - 1
    em_len = (em_bits + 7) // 8
    key_len = (mod_bits + 7) // 8
    if em_len < HASH_LEN + SALT_LEN + 2:
        raise InvalidModulus(
            f"{mod_bits}-bit modulus too short for PSS with "
            f"hLen={HASH_LEN}, sLen={SALT_LEN}")
    return em_bits, em_len, key_len


def emsa_pss_verify(message_hash, em, mod_bits):
    """EMSA-PSS-VERIFY on a big-endian EM.

    Args:
        message_hash: 32-byte SHA-256 digest of the message (mHash).
        em: keyLen-byte encoded message (signature^e mod N, big-endian).
        mod_bits: Bit length of the modulus.

    Raises:
        InvalidModulus: Modulus too short (caller error, not a
            verification failure).
        VerificationError: Any structural or hash mismatch.
    """
    em_bits, em_len, key_len = pss_lengths(mod_bits)
    if len(em) != key_len:
        raise InvalidEncoding(f"EM must be {key_len} bytes, got {len(em)}")

    if em[-1] != PSS_TRAILER:
        raise InvalidTrailer("EM does not end with 0xBC")

    # Non-zero only when mod_bits % 8 == 1: skip the leading byte.
    offset = key_len - em_len

    db_mask_len = em_len - HASH_LEN - 1
    masked_db = bytearray(
        slice_padded(em, offset, offset + db_mask_len, db_mask_len))
    h = slice_padded(em, offset + db_mask_len, key_len - 1, HASH_LEN)

    db = bytearray()
    salt = bytearray()
    try:
        bits_to_mask = 8 * em_len - em_bits
        top_mask = (0xFF << (8 - bits_to_mask)) & 0xFF
        if masked_db[0] & top_mask:
            raise MaskedBitsNonzero("leftmost bits of maskedDB are set")

        ps_len = em_len - HASH_LEN - SALT_LEN - 2
        db = xor_bytes(masked_db, mgf1(h, db_mask_len))
        if ps_len:
            db[0] = 0
        else:
            # DB[0] is the 0x01 separator; clear only the bits above emBits.
            db[0] &= ~top_mask & 0xFF

        # Both checks always run; no early exit on the zero run.
        if (not ct_is_zero(db[:ps_len])) | (db[ps_len] != 0x01):
            raise InvalidPadding("DB zero run or 0x01 separator malformed")

        salt = bytearray(
            slice_padded(db, db_mask_len - SALT_LEN, db_mask_len, SALT_LEN))
        h_prime = hashlib.sha256(
            _M_PRIME_PADDING + bytes(message_hash) + bytes(salt)).digest()

        if not ct_equal(h, h_prime):
            raise HashMismatch("H != H'")
    finally:
        secure_zero(masked_db)
        secure_zero(db)
        secure_zero(salt)


def pss_verify(message_hash, em, mod_bits):
    """Boolean form of emsa_pss_verify.

    Returns False on any VerificationError.  InvalidModulus still
    propagates: an undersized modulus is a configuration error.
    """
    try:
        emsa_pss_verify(message_hash, em, mod_bits)
    except VerificationError:
        return False
    return True
