# Copyright (c) 2026 Signer — MIT License

"""Byte-order and buffer helpers shared by the RSA verification modules.

The arithmetic layer (bignum.py) serialises integers least-significant
byte first; RFC 8017 encodings are read most-significant byte first.
``reverse`` is the single conversion point between the two.

Constant-time helpers follow the same best-effort rules as the rest of
the package: no early exit on byte comparisons, OR-accumulation instead
of short-circuiting loops.  CPython cannot guarantee hardware-level
constant time; these remove the *algorithmic* timing differences only.
"""

import hmac

# ── Constant-time backend ──────────────────────────────────────
# pynacl (libsodium) provides sodium_memcmp / sodium_memzero.
# Pure Python fallbacks are used when it is not installed.
_HAS_NACL = False
try:
    import nacl.bindings
    _HAS_NACL = True
except ImportError:
    pass

_HAS_SODIUM = False
try:
    from nacl._sodium import ffi as _ffi, lib as _lib
    _HAS_SODIUM = True
except ImportError:
    pass

BACKEND = "sodium" if _HAS_SODIUM else "pure"


def secure_zero(buf):
    """Securely wipe a mutable buffer (bytearray / memoryview).

    Immutable objects (bytes) are silently skipped.
    """
    if not isinstance(buf, (bytearray, memoryview)):
        return
    n = len(buf)
    if n == 0:
        return
    if _HAS_SODIUM:
        _lib.sodium_memzero(_ffi.from_buffer(buf), n)
    else:
        for i in range(n):
            buf[i] = 0


def ct_equal(a, b):
    """Constant-time equality of two byte strings.

    Lengths are public; a length mismatch returns False immediately.
    """
    a = bytes(a)
    b = bytes(b)
    if len(a) != len(b):
        return False
    if _HAS_NACL:
        return nacl.bindings.sodium_memcmp(a, b)
    return hmac.compare_digest(a, b)


def ct_is_zero(buf):
    """True if every byte of *buf* is zero.  Reads the whole buffer."""
    acc = 0
    for b in buf:
        acc |= b
    return acc == 0


def reverse(buf):
    """Full byte-order flip (little-endian <-> big-endian)."""
    return bytes(buf[::-1])


def slice_padded(src, start, end, out_len):
    """Copy ``src[start:end]`` into a zero-filled buffer of *out_len* bytes.

    Raises ValueError if the range is negative or longer than *out_len*.
    Positions at or past ``len(src)`` read as zero, so the source is never
    indexed outside its bounds.
    """
    if start < 0 or end < start:
        raise ValueError(f"invalid slice range [{start}, {end})")
    if end - start > out_len:
        raise ValueError(
            f"slice of {end - start} bytes does not fit in {out_len}-byte buffer")
    out = bytearray(out_len)
    count = min(end - start, out_len)
    avail = max(0, min(count, len(src) - start))
    out[:avail] = src[start:start + avail]
    return bytes(out)


def xor_bytes(a, b):
    """Byte-wise XOR of two equal-length byte strings into a bytearray."""
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} != {len(b)}")
    return bytearray(x ^ y for x, y in zip(a, b))
