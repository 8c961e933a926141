# Copyright (c) 2026 Signer — MIT License

"""Public-exponent modular exponentiation (RSAVP1, RFC 8017 §5.2.2).

Only e = 3 and e = 65537 are supported, so instead of a general
square-and-multiply the ladder is unrolled and has the same sequence of
multiplications for every signature value:

    e = 3:      s^2 * s
    e = 65537:  s^(2^16) * s   (sixteen squarings, one multiply)
"""

from .errors import InvalidExponent

SUPPORTED_EXPONENTS = (3, 65537)


def check_exponent(exponent):
    """Raise InvalidExponent unless *exponent* is 3 or 65537."""
    if isinstance(exponent, bool) or exponent not in SUPPORTED_EXPONENTS:
        raise InvalidExponent(
            f"public exponent must be one of {SUPPORTED_EXPONENTS}, got {exponent!r}")


def mod_exp(s, exponent, modulus):
    """Compute s^exponent mod N for a reduced signature 0 <= s < N.

    Args:
        s: Signature representative.
        exponent: 3 or 65537.
        modulus: RSAModulus.

    Raises:
        InvalidExponent: For any other exponent.
        ValueError: If s is outside [0, N).
    """
    check_exponent(exponent)
    if not 0 <= s < modulus.n:
        raise ValueError("signature representative out of range")

    if exponent == 3:
        return modulus.mul(modulus.mul(s, s), s)

    x = s
    for _ in range(16):
        x = modulus.mul(x, x)
    return modulus.mul(x, s)


def mod_exp_le_bytes(s, exponent, modulus):
    """mod_exp serialised little-endian, modulus.byte_length bytes."""
    return modulus.to_le_bytes(mod_exp(s, exponent, modulus))
