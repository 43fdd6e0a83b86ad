"""Letter-domain algebra: the A-Z analogue of Rijndael.

Differences from the byte algebra:
- S-box substitutes bigrams (pairs of letters) through a 676-entry table
- Round keys are added / subtracted mod 26 (Vigenere instead of XOR)
- MixColumns is a Hill cipher over the integers mod 26
- Round constants are letters: Rcon(j) = [j mod 26, 0, 0, 0]
"""

from __future__ import annotations

from typing import Sequence

from ..arithmetic import ALPHABET_SIZE, mix_column_mod, mod_add
from ..interfaces import CipherAlgebra
from ..primitives import mix_columns, mod_add_into, mod_sub_into, substitute_bigrams
from ..tables import BIGRAM_SBOX, BIGRAM_SBOX_INV, HILL_MATRIX, HILL_MATRIX_INV


class TextAlgebra(CipherAlgebra):
    """Letters 0..25, bigram S-box, Hill-cipher mixing, mod-26 round keys."""

    name = "text"
    description = "AES-like cipher over the 26-letter alphabet"
    symbol_count = ALPHABET_SIZE

    substitute_label = "SubBigrams"
    combine_label = "AddRoundKey"
    # Not self-inverse: decryption subtracts
    uncombine_label = "SubtractRoundKey"

    def substitute(self, symbols: list[int]) -> None:
        substitute_bigrams(symbols, BIGRAM_SBOX, ALPHABET_SIZE)

    def inverse_substitute(self, symbols: list[int]) -> None:
        substitute_bigrams(symbols, BIGRAM_SBOX_INV, ALPHABET_SIZE)

    def mix_columns(self, state: list[int]) -> None:
        mix_columns(state, HILL_MATRIX, mix_column_mod)

    def inverse_mix_columns(self, state: list[int]) -> None:
        mix_columns(state, HILL_MATRIX_INV, mix_column_mod)

    def add_round_key(self, state: list[int], round_key: Sequence[int]) -> None:
        mod_add_into(state, round_key)

    def subtract_round_key(self, state: list[int], round_key: Sequence[int]) -> None:
        mod_sub_into(state, round_key)

    def add_words(self, a: Sequence[int], b: Sequence[int]) -> list[int]:
        return [mod_add(x, y) for x, y in zip(a, b)]

    def round_constant(self, j: int) -> list[int]:
        # A, B, C, ..., Z, A, B, ...
        return [j % ALPHABET_SIZE, 0, 0, 0]
