"""
Text-domain engine: the Rijndael structure over the letters A-Z.

Blocks and keys are 16 uppercase letters. ECB encryption pads the
plaintext on the right with 'X' to a multiple of 16; decryption leaves
the filler in place, since it cannot be told apart from real text.
"""

from __future__ import annotations

import logging
import random
import secrets
from typing import TYPE_CHECKING, Sequence

from .algebras import get_algebra
from .errors import InvalidLengthError, InvalidSymbolError
from .interfaces import TEXT_ROUNDS
from .modes import ecb_apply, pad_right
from .pipeline import decrypt_state, encrypt_state
from .primitives import STATE_SIZE
from .tables import ALPHABET

if TYPE_CHECKING:
    from .trace import TraceRecorder

logger = logging.getLogger(__name__)

PAD_SYMBOL = "X"
KEY_LENGTH = 16

_ALGEBRA = get_algebra("text")


def text_to_numbers(text: str, alphabet: str = ALPHABET) -> list[int]:
    """Map letters to 0..len(alphabet)-1.

    Raises:
        InvalidSymbolError: If a character is not in the alphabet
    """
    numbers = []
    for position, c in enumerate(text):
        index = alphabet.find(c)
        if index < 0:
            raise InvalidSymbolError(
                f"Character {c!r} at position {position} is not in the alphabet"
            )
        numbers.append(index)
    return numbers


def numbers_to_text(numbers: Sequence[int], alphabet: str = ALPHABET) -> str:
    """Map 0..len(alphabet)-1 back to letters."""
    for position, n in enumerate(numbers):
        if not 0 <= n < len(alphabet):
            raise InvalidSymbolError(
                f"Value {n!r} at position {position} is outside 0..{len(alphabet) - 1}"
            )
    return "".join(alphabet[n] for n in numbers)


def _check_length(text: str, what: str) -> None:
    if len(text) != STATE_SIZE:
        raise InvalidLengthError(f"{what} must be {STATE_SIZE} letters, got {len(text)}")


def encrypt_numbers(
    block: Sequence[int],
    key: Sequence[int],
    rounds: int = TEXT_ROUNDS,
    tracer: "TraceRecorder | None" = None,
) -> list[int]:
    """Encrypt 16 numbers in 0..25 under a key of any whole number of words."""
    return encrypt_state(block, key, rounds, _ALGEBRA, tracer)


def decrypt_numbers(
    block: Sequence[int],
    key: Sequence[int],
    rounds: int = TEXT_ROUNDS,
    tracer: "TraceRecorder | None" = None,
) -> list[int]:
    """Inverse of encrypt_numbers."""
    return decrypt_state(block, key, rounds, _ALGEBRA, tracer)


def encrypt_block(
    plaintext: str,
    key: str,
    rounds: int = TEXT_ROUNDS,
    tracer: "TraceRecorder | None" = None,
) -> str:
    """Encrypt a 16-letter block under a 16-letter key.

    Raises:
        InvalidLengthError: If plaintext or key is not 16 letters
        InvalidSymbolError: If either contains a non A-Z character
    """
    _check_length(plaintext, "Plaintext")
    _check_length(key, "Key")
    state = text_to_numbers(plaintext)
    numkey = text_to_numbers(key)
    return numbers_to_text(encrypt_numbers(state, numkey, rounds, tracer))


def decrypt_block(
    ciphertext: str,
    key: str,
    rounds: int = TEXT_ROUNDS,
    tracer: "TraceRecorder | None" = None,
) -> str:
    """Decrypt a 16-letter block under a 16-letter key."""
    _check_length(ciphertext, "Ciphertext")
    _check_length(key, "Key")
    state = text_to_numbers(ciphertext)
    numkey = text_to_numbers(key)
    return numbers_to_text(decrypt_numbers(state, numkey, rounds, tracer))


def encrypt_ecb(
    plaintext: str,
    key: str,
    rounds: int = TEXT_ROUNDS,
    tracer: "TraceRecorder | None" = None,
) -> str:
    """Pad with 'X' to a multiple of 16 and encrypt each block."""
    _check_length(key, "Key")
    # Validate everything before the first block is produced
    text_to_numbers(plaintext)
    text_to_numbers(key)
    padded = pad_right(plaintext, PAD_SYMBOL)
    logger.debug(
        "ECB encrypt: %d letters, %d filler, %d blocks",
        len(plaintext), len(padded) - len(plaintext), len(padded) // STATE_SIZE,
    )
    return ecb_apply(padded, lambda block: encrypt_block(block, key, rounds, tracer), what="Plaintext")


def decrypt_ecb(
    ciphertext: str,
    key: str,
    rounds: int = TEXT_ROUNDS,
    tracer: "TraceRecorder | None" = None,
) -> str:
    """Decrypt each 16-letter block; the length must be a multiple of 16.

    The filler added by encrypt_ecb is returned as part of the text.
    """
    _check_length(key, "Key")
    text_to_numbers(ciphertext)
    text_to_numbers(key)
    return ecb_apply(ciphertext, lambda block: decrypt_block(block, key, rounds, tracer), what="Ciphertext")


def generate_random_key(
    length: int = KEY_LENGTH,
    rng: random.Random | None = None,
) -> str:
    """Draw a key uniformly from the alphabet.

    Convenience only; this is not a key-derivation function. Pass a
    seeded random.Random for reproducible keys.
    """
    if length <= 0:
        raise InvalidLengthError(f"Key length must be positive, got {length}")
    if rng is None:
        return "".join(secrets.choice(ALPHABET) for _ in range(length))
    return "".join(rng.choice(ALPHABET) for _ in range(length))
