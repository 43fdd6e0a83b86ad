"""
Offline generators and printers for the substitution tables.

Nothing here runs on the encryption path. The byte S-box generator
recomputes the Rijndael table from its definition:

  SubBytes(x) = Affine( InvGF256(x) )
  Affine(b)   = b ^ rotl(b,1) ^ rotl(b,2) ^ rotl(b,3) ^ rotl(b,4) ^ 0x63

The bigram generator draws a fresh random permutation of 0..675. Its
output is only useful for building a *new* table; the shipped table in
tables.py is fixed.
"""

from __future__ import annotations

import logging
import random

from .arithmetic import ALPHABET_SIZE, gf_inverse
from .tables import ALPHABET

logger = logging.getLogger(__name__)

AFFINE_CONSTANT = 0x63


def rotl8(x: int, n: int) -> int:
    """Rotate-left an 8-bit integer by n bits."""
    x &= 0xFF
    n &= 7
    return ((x << n) | (x >> (8 - n))) & 0xFF


def affine_transform(b: int) -> int:
    """Rijndael affine transform over GF(2)."""
    return (
        b ^ rotl8(b, 1) ^ rotl8(b, 2) ^ rotl8(b, 3) ^ rotl8(b, 4)
    ) ^ AFFINE_CONSTANT


def generate_byte_sbox() -> bytes:
    """Compute the 256-entry Rijndael S-box."""
    return bytes(affine_transform(gf_inverse(x)) for x in range(256))


def invert_permutation(table) -> list[int]:
    """Return inv such that inv[table[i]] == i.

    Raises:
        ValueError: If table is not a permutation of 0..len(table)-1
    """
    size = len(table)
    if sorted(table) != list(range(size)):
        raise ValueError(f"Table is not a permutation of 0..{size - 1}")
    inverse = [0] * size
    for i, v in enumerate(table):
        inverse[v] = i
    return inverse


def generate_bigram_sbox(
    seed: int | None = None,
    alphabet_size: int = ALPHABET_SIZE,
) -> tuple[list[int], list[int]]:
    """Draw a random bigram substitution and its inverse.

    Args:
        seed: Optional seed; the same seed always yields the same table
        alphabet_size: Number of letters (table has alphabet_size**2 entries)

    Returns:
        Tuple of (sbox, inverse_sbox)
    """
    size = alphabet_size * alphabet_size
    rng = random.Random(seed)
    sbox = list(range(size))
    rng.shuffle(sbox)
    logger.debug("generated bigram S-box of %d entries (seed=%s)", size, seed)
    return sbox, invert_permutation(sbox)


def format_table(table, per_line: int = ALPHABET_SIZE, width: int = 3) -> str:
    """Render a table as zero-padded rows, per_line entries per row."""
    lines = []
    for start in range(0, len(table), per_line):
        chunk = table[start:start + per_line]
        lines.append(" ".join(f"{v:0{width}d}" for v in chunk))
    return "\n".join(lines)


def format_bigram_grid(table, alphabet: str = ALPHABET) -> str:
    """Render a bigram table as a grid of letter pairs.

    Row y, column x shows the substitute for the bigram (y, x).
    """
    n = len(alphabet)
    lines = []
    for y in range(n):
        pairs = []
        for x in range(n):
            v = table[y * n + x]
            pairs.append(alphabet[v // n] + alphabet[v % n])
        lines.append(" ".join(pairs))
    return "\n".join(lines)
