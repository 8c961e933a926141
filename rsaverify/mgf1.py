# Copyright (c) 2026 Signer — MIT License

"""MGF1 mask generation with SHA-256 (RFC 8017 Appendix B.2.1).

    T = H(seed || I2OSP(0, 4)) || H(seed || I2OSP(1, 4)) || ...
    mask = T[:mask_len]

Output is prefix-stable: mgf1(seed, a) is a prefix of mgf1(seed, b)
for a <= b.
"""

import hashlib
import struct

from .errors import MaskTooLong

HASH_LEN = 32  # SHA-256 digest size

_MAX_MASK_LEN = (1 << 32) * HASH_LEN


def mgf1(seed, mask_len):
    """Generate *mask_len* bytes of mask from *seed*.

    Raises:
        MaskTooLong: If mask_len >= 2^32 * 32 or is negative.
    """
    if mask_len < 0 or mask_len >= _MAX_MASK_LEN:
        raise MaskTooLong(f"mask length {mask_len} outside [0, 2^32 * {HASH_LEN})")

    seed = bytes(seed)
    out = bytearray()
    for counter in range(mask_len // HASH_LEN + 1):
        out += hashlib.sha256(seed + struct.pack(">I", counter)).digest()
    return bytes(out[:mask_len])
