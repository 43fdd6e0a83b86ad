"""Byte-domain algebra: standard Rijndael over GF(2^8)."""

from __future__ import annotations

from typing import Sequence

from ..arithmetic import gf_pow, mix_column_gf
from ..interfaces import CipherAlgebra
from ..primitives import mix_columns, substitute_bytes, xor_into
from ..tables import INV_MIX_MATRIX, INV_SBOX, MIX_MATRIX, SBOX


class RijndaelAlgebra(CipherAlgebra):
    """Bytes, XOR round keys, 256-entry S-box, GF(2^8) MixColumns."""

    name = "rijndael"
    description = "Rijndael/AES over GF(2^8) bytes"
    symbol_count = 256

    substitute_label = "SubBytes"
    combine_label = "AddRoundKey"
    # XOR is its own inverse
    uncombine_label = "AddRoundKey"

    def substitute(self, symbols: list[int]) -> None:
        substitute_bytes(symbols, SBOX)

    def inverse_substitute(self, symbols: list[int]) -> None:
        substitute_bytes(symbols, INV_SBOX)

    def mix_columns(self, state: list[int]) -> None:
        mix_columns(state, MIX_MATRIX, mix_column_gf)

    def inverse_mix_columns(self, state: list[int]) -> None:
        mix_columns(state, INV_MIX_MATRIX, mix_column_gf)

    def add_round_key(self, state: list[int], round_key: Sequence[int]) -> None:
        xor_into(state, round_key)

    def subtract_round_key(self, state: list[int], round_key: Sequence[int]) -> None:
        xor_into(state, round_key)

    def add_words(self, a: Sequence[int], b: Sequence[int]) -> list[int]:
        return [x ^ y for x, y in zip(a, b)]

    def round_constant(self, j: int) -> list[int]:
        """Rcon(j) = [x^(j-1), 0, 0, 0] in GF(2^8)."""
        return [gf_pow(0x02, j - 1), 0x00, 0x00, 0x00]
