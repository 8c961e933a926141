# Copyright (c) 2026 Signer — MIT License

"""RSA modulus parameters and modular multiplication.

An RSAModulus carries everything the verifier needs to know about N:

    n            the modulus as a Python int
    bits         modulus bit length (may be non-byte-aligned, e.g. 1025)
    byte_length  ceil(bits / 8), the length of signatures and EM
    limbs        N split into 120-bit limbs, least significant first
    redc_param   Barrett reduction parameter floor(2^(2*bits + 4) / N)

The limb layout matches the parameter files produced by the RSA
parameter generator (hex strings, 120-bit limbs), so a modulus can be
rebuilt from those with ``RSAModulus.from_limbs``.

Modular multiplication uses Barrett reduction with a single branchless
conditional subtraction instead of Python's variable-time ``%``.  Inputs
to ``mul`` must already be reduced (0 <= a, b < N).

Serialisation is little-endian (``to_le_bytes``); callers that need the
RFC 8017 big-endian octet string reverse it once at their boundary.
"""

from .errors import InvalidModulus

LIMB_BITS = 120
_LIMB_MASK = (1 << LIMB_BITS) - 1

# Extra precision bits in the Barrett parameter.  With s = 2k + 4 the
# quotient estimate is never more than 1 below the true quotient for
# x < N^2, so one conditional subtraction suffices.
_BARRETT_OVERFLOW_BITS = 4


def _limb_count(bits):
    return (bits + LIMB_BITS - 1) // LIMB_BITS


def split_limbs(x, bits):
    """Split non-negative *x* into ceil(bits/120) 120-bit limbs (LSB first)."""
    if x < 0:
        raise ValueError("cannot split a negative integer into limbs")
    count = _limb_count(bits)
    if x >> (count * LIMB_BITS):
        raise ValueError(f"integer does not fit in {count} limbs of {LIMB_BITS} bits")
    return tuple((x >> (LIMB_BITS * i)) & _LIMB_MASK for i in range(count))


def join_limbs(limbs):
    """Inverse of split_limbs.  Every limb must be in [0, 2^120)."""
    x = 0
    for i, limb in enumerate(limbs):
        if not 0 <= limb <= _LIMB_MASK:
            raise ValueError(f"limb {i} out of range for {LIMB_BITS}-bit limbs")
        x |= limb << (LIMB_BITS * i)
    return x


def barrett_parameter(n, bits):
    """floor(2^(2*bits + 4) / n)."""
    return (1 << (2 * bits + _BARRETT_OVERFLOW_BITS)) // n


class RSAModulus:
    """Immutable RSA modulus with its reduction context.

    Raises InvalidModulus if *bits* disagrees with the bit length of *n*.
    """

    __slots__ = ("n", "bits", "byte_length", "limbs",
                 "redc_param", "_shift", "_sign_shift")

    def __init__(self, n, bits=None):
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"modulus must be an int, got {type(n).__name__}")
        if n <= 1:
            raise InvalidModulus("modulus must be greater than 1")
        if bits is None:
            bits = n.bit_length()
        if n.bit_length() != bits:
            raise InvalidModulus(
                f"modulus has {n.bit_length()} bits, parameters declare {bits}")

        set_ = object.__setattr__
        set_(self, "n", n)
        set_(self, "bits", bits)
        set_(self, "byte_length", (bits + 7) // 8)
        set_(self, "limbs", split_limbs(n, bits))
        set_(self, "redc_param", barrett_parameter(n, bits))
        set_(self, "_shift", 2 * bits + _BARRETT_OVERFLOW_BITS)
        # Residues before the final subtraction are < 2N < 2^(bits+1).
        set_(self, "_sign_shift", bits + 2)

    def __setattr__(self, name, value):
        raise AttributeError("RSAModulus is immutable")

    def __delattr__(self, name):
        raise AttributeError("RSAModulus is immutable")

    def __repr__(self):
        return f"RSAModulus(bits={self.bits}, n=0x{self.n:x})"

    def __eq__(self, other):
        if isinstance(other, RSAModulus):
            return self.n == other.n and self.bits == other.bits
        return NotImplemented

    def __hash__(self):
        return hash((self.n, self.bits))

    # ── Constructors ───────────────────────────────────────────────

    @classmethod
    def from_limbs(cls, limbs, bits):
        """Rebuild a modulus from 120-bit limbs (least significant first).

        The limb count must be exactly ceil(bits / 120).
        """
        limbs = tuple(limbs)
        if len(limbs) != _limb_count(bits):
            raise InvalidModulus(
                f"{bits}-bit modulus needs {_limb_count(bits)} limbs, got {len(limbs)}")
        try:
            n = join_limbs(limbs)
        except ValueError as exc:
            raise InvalidModulus(str(exc)) from exc
        return cls(n, bits)

    @classmethod
    def from_bytes(cls, data):
        """Modulus from its big-endian octet string (leading zeros ignored)."""
        return cls(int.from_bytes(bytes(data), "big"))

    # ── Parameter export ───────────────────────────────────────────

    @property
    def redc_limbs(self):
        # redc_param <= 2^(bits + 5), one bit wider than that bound.
        return split_limbs(self.redc_param,
                           self.bits + _BARRETT_OVERFLOW_BITS + 2)

    def limbs_hex(self):
        """Modulus and Barrett parameter limbs as ``0x..`` hex strings."""
        return ([f"0x{limb:x}" for limb in self.limbs],
                [f"0x{limb:x}" for limb in self.redc_limbs])

    # ── Signature helpers ──────────────────────────────────────────

    def signature_from_limbs(self, limbs):
        """Signature integer from limbs laid out like the modulus.

        Only the shape is checked here; a value >= N is left for the
        verifier to reject.
        """
        limbs = tuple(limbs)
        if len(limbs) != len(self.limbs):
            raise ValueError(
                f"signature needs {len(self.limbs)} limbs, got {len(limbs)}")
        return join_limbs(limbs)

    def signature_from_bytes(self, data):
        """Signature integer from its big-endian octet string (k bytes)."""
        if len(data) != self.byte_length:
            raise ValueError(
                f"signature must be {self.byte_length} bytes, got {len(data)}")
        return int.from_bytes(bytes(data), "big")

    # ── Arithmetic ─────────────────────────────────────────────────

    def reduce(self, x):
        """Barrett reduction: x mod N for 0 <= x < N^2."""
        q = (x * self.redc_param) >> self._shift
        r = x - q * self.n
        # r is in [0, 2N).  Branchless conditional subtraction:
        # sign is 1 when r < N (r_sub negative), 0 otherwise.
        r_sub = r - self.n
        sign = (r_sub >> self._sign_shift) & 1
        mask = -sign
        return (r & mask) | (r_sub & ~mask)

    def mul(self, a, b):
        """(a * b) mod N for reduced operands."""
        return self.reduce(a * b)

    def to_le_bytes(self, x):
        """Little-endian serialisation, byte_length bytes."""
        return x.to_bytes(self.byte_length, "little")
