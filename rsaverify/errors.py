# Copyright (c) 2026 Signer — MIT License

"""Exception types for RSA signature verification.

Two families:

    Caller errors (hard failures, always raised to the caller):
        InvalidExponent, InvalidModulus, MaskTooLong

    Verification failures (raised only inside the decoders and converted
    to ``False`` by the public verify functions):
        InvalidTrailer, InvalidEncoding, MaskedBitsNonzero,
        InvalidPadding, HashMismatch

Everything derives from ValueError so callers that already catch
ValueError for malformed input keep working.
"""


class RSAVerifyError(ValueError):
    """Base class for all rsaverify errors."""


class InvalidExponent(RSAVerifyError):
    """Public exponent is not one of the supported values (3, 65537)."""


class InvalidModulus(RSAVerifyError):
    """Modulus parameters are inconsistent or too small for the encoding."""


class MaskTooLong(RSAVerifyError):
    """Requested MGF1 mask length is >= 2^32 * hLen."""


class VerificationError(RSAVerifyError):
    """Encoded message does not decode to a valid signature."""


class InvalidTrailer(VerificationError):
    """Last EM byte is not 0xBC."""


class InvalidEncoding(VerificationError):
    """EM has the wrong length or a nonzero byte above emBits."""


class MaskedBitsNonzero(VerificationError):
    """High bits of maskedDB[0] above emBits are set."""


class InvalidPadding(VerificationError):
    """DB zero run or 0x01 separator is malformed."""


class HashMismatch(VerificationError):
    """Recomputed H' does not match H."""
