"""Byte-domain engine: Rijndael with any whole-word key and any round count.

encrypt128/192/256 fix (Nk, R) to (4, 10), (6, 12) and (8, 14). The
generic encrypt/decrypt take the round count from the caller and do not
enforce R = Nk + 6; a 64-byte key with 28 rounds is accepted but
matches no published standard.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .algebras import get_algebra
from .errors import InvalidLengthError
from .modes import ecb_apply
from .pipeline import decrypt_state, encrypt_state
from .primitives import STATE_SIZE, WORD_SIZE
from .utils import to_hex

if TYPE_CHECKING:
    from .trace import TraceRecorder

# key bits -> (Nk, rounds)
KEY_SIZES = {
    128: (4, 10),
    192: (6, 12),
    256: (8, 14),
}

_ALGEBRA = get_algebra("rijndael")


def _check_block(data: bytes, what: str) -> None:
    if len(data) != STATE_SIZE:
        raise InvalidLengthError(f"{what} must be {STATE_SIZE} bytes, got {len(data)}")


def standard_rounds(key: bytes) -> int:
    """Return Nk + 6 for the given key (the AES relationship)."""
    if not key or len(key) % WORD_SIZE:
        raise InvalidLengthError(
            f"Key must be a non-zero multiple of {WORD_SIZE} bytes, got {len(key)}"
        )
    return len(key) // WORD_SIZE + 6


def encrypt(
    plaintext: bytes,
    key: bytes,
    rounds: int,
    tracer: "TraceRecorder | None" = None,
) -> bytes:
    """Encrypt one 16-byte block with an Nk-word key and R rounds.

    Args:
        plaintext: 16-byte block
        key: Key whose length is a non-zero multiple of 4 bytes
        rounds: Number of rounds (>= 1), supplied by the caller
        tracer: Optional trace recorder

    Returns:
        16-byte ciphertext
    """
    _check_block(plaintext, "Plaintext")
    return bytes(encrypt_state(list(plaintext), list(key), rounds, _ALGEBRA, tracer))


def decrypt(
    ciphertext: bytes,
    key: bytes,
    rounds: int,
    tracer: "TraceRecorder | None" = None,
) -> bytes:
    """Decrypt one 16-byte block; exact inverse of encrypt."""
    _check_block(ciphertext, "Ciphertext")
    return bytes(decrypt_state(list(ciphertext), list(key), rounds, _ALGEBRA, tracer))


def _fixed(bits: int, key: bytes) -> int:
    nk, rounds = KEY_SIZES[bits]
    if len(key) != nk * WORD_SIZE:
        raise InvalidLengthError(
            f"AES-{bits} key must be {nk * WORD_SIZE} bytes, got {len(key)}"
        )
    return rounds


def encrypt128(plaintext: bytes, key: bytes) -> bytes:
    """AES-128 block encryption (Nk=4, R=10)."""
    return encrypt(plaintext, key, _fixed(128, key))


def decrypt128(ciphertext: bytes, key: bytes) -> bytes:
    """AES-128 block decryption (Nk=4, R=10)."""
    return decrypt(ciphertext, key, _fixed(128, key))


def encrypt192(plaintext: bytes, key: bytes) -> bytes:
    """AES-192 block encryption (Nk=6, R=12)."""
    return encrypt(plaintext, key, _fixed(192, key))


def decrypt192(ciphertext: bytes, key: bytes) -> bytes:
    """AES-192 block decryption (Nk=6, R=12)."""
    return decrypt(ciphertext, key, _fixed(192, key))


def encrypt256(plaintext: bytes, key: bytes) -> bytes:
    """AES-256 block encryption (Nk=8, R=14)."""
    return encrypt(plaintext, key, _fixed(256, key))


def decrypt256(ciphertext: bytes, key: bytes) -> bytes:
    """AES-256 block decryption (Nk=8, R=14)."""
    return decrypt(ciphertext, key, _fixed(256, key))


def encrypt_ecb(
    data: bytes,
    key: bytes,
    rounds: int,
    tracer: "TraceRecorder | None" = None,
) -> bytes:
    """Encrypt every 16-byte block independently (no padding)."""
    return ecb_apply(bytes(data), lambda b: encrypt(b, key, rounds, tracer), what="Plaintext")


def decrypt_ecb(
    data: bytes,
    key: bytes,
    rounds: int,
    tracer: "TraceRecorder | None" = None,
) -> bytes:
    """Decrypt every 16-byte block independently."""
    return ecb_apply(bytes(data), lambda b: decrypt(b, key, rounds, tracer), what="Ciphertext")


__all__ = [
    "KEY_SIZES",
    "standard_rounds",
    "encrypt",
    "decrypt",
    "encrypt128",
    "decrypt128",
    "encrypt192",
    "decrypt192",
    "encrypt256",
    "decrypt256",
    "encrypt_ecb",
    "decrypt_ecb",
    "to_hex",
]
