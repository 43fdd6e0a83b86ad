"""
Field arithmetic for both engines.

Byte engine: GF(2^8) with the AES reducing polynomial
  x^8 + x^4 + x^3 + x + 1  (0x11B)
Addition is XOR, multiplication is carry-less and reduced into one byte.

Text engine: integers modulo 26. Python's % already returns the
non-negative residue for negative operands, so subtraction wraps
correctly (-3 % 26 == 23).

Matrices are flat 16-entry sequences in column-major order, the same
layout as the state: entry (row r, col c) is at index c*4 + r.
"""

AES_MODULUS = 0x11B
ALPHABET_SIZE = 26


# ===========================================================================
# GF(2^8)
# ===========================================================================

def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ 0x1b) & 0xff if a & 0x80 else (a << 1) & 0xff


def gf_add(a: int, b: int) -> int:
    """Add in GF(2^8)."""
    return a ^ b


def gf_mul(a: int, b: int) -> int:
    """Multiply in GF(2^8) using shift-and-add."""
    a &= 0xff
    b &= 0xff
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result


def gf_pow(a: int, n: int) -> int:
    """Raise a to the n-th power in GF(2^8)."""
    result = 1
    base = a & 0xff
    while n > 0:
        if n & 1:
            result = gf_mul(result, base)
        base = gf_mul(base, base)
        n >>= 1
    return result


def gf_inverse(a: int) -> int:
    """Multiplicative inverse in GF(2^8); 0 maps to 0."""
    if a == 0:
        return 0
    # a^(2^8 - 2) = a^-1
    return gf_pow(a, 254)


def mix_column_gf(matrix: tuple[int, ...], column: list[int]) -> list[int]:
    """Left-multiply a 4-byte column by a column-major matrix over GF(2^8)."""
    out = []
    for row in range(4):
        acc = 0
        for col in range(4):
            acc ^= gf_mul(matrix[col * 4 + row], column[col])
        out.append(acc)
    return out


# ===========================================================================
# Integers mod 26
# ===========================================================================

def mod_add(a: int, b: int, modulus: int = ALPHABET_SIZE) -> int:
    """Add modulo the alphabet size."""
    return (a + b) % modulus


def mod_sub(a: int, b: int, modulus: int = ALPHABET_SIZE) -> int:
    """Subtract modulo the alphabet size (always non-negative)."""
    return (a - b) % modulus


def mod_mul(a: int, b: int, modulus: int = ALPHABET_SIZE) -> int:
    """Multiply modulo the alphabet size."""
    return (a * b) % modulus


def mix_column_mod(
    matrix: tuple[int, ...],
    column: list[int],
    modulus: int = ALPHABET_SIZE,
) -> list[int]:
    """Hill-cipher step: left-multiply a 4-symbol column modulo 26."""
    out = []
    for row in range(4):
        acc = 0
        for col in range(4):
            acc += matrix[col * 4 + row] * column[col]
        out.append(acc % modulus)
    return out


def matrix_product(
    a: tuple[int, ...],
    b: tuple[int, ...],
    add,
    mul,
) -> tuple[int, ...]:
    """Multiply two column-major 4x4 matrices under the given arithmetic.

    Used to check that a mix matrix and its inverse multiply to identity.
    """
    out = [0] * 16
    for row in range(4):
        for col in range(4):
            acc = 0
            for k in range(4):
                acc = add(acc, mul(a[k * 4 + row], b[col * 4 + k]))
            out[col * 4 + row] = acc
    return tuple(out)


IDENTITY_MATRIX = (
    1, 0, 0, 0,
    0, 1, 0, 0,
    0, 0, 1, 0,
    0, 0, 0, 1,
)
