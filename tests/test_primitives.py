"""Tests for the shared state transform primitives."""

import random

import pytest

from spn_cipher.primitives import (
    shift_rows,
    inv_shift_rows,
    rot_word,
    substitute_bytes,
    substitute_bigrams,
    mix_columns,
    xor_into,
    mod_add_into,
    mod_sub_into,
)
from spn_cipher.arithmetic import mix_column_gf, mix_column_mod
from spn_cipher.tables import (
    SBOX,
    INV_SBOX,
    BIGRAM_SBOX,
    BIGRAM_SBOX_INV,
    MIX_MATRIX,
    INV_MIX_MATRIX,
    HILL_MATRIX,
    HILL_MATRIX_INV,
)


class TestShiftRows:

    def test_index_mapping(self):
        state = list(range(16))
        shift_rows(state)
        assert state == [
            0, 5, 10, 15,
            4, 9, 14, 3,
            8, 13, 2, 7,
            12, 1, 6, 11,
        ]

    def test_row_zero_untouched(self):
        state = list(range(16))
        shift_rows(state)
        assert [state[c * 4] for c in range(4)] == [0, 4, 8, 12]

    def test_inverse(self):
        rng = random.Random(3)
        for _ in range(50):
            original = [rng.randrange(26) for _ in range(16)]
            state = list(original)
            shift_rows(state)
            inv_shift_rows(state)
            assert state == original

    def test_four_shifts_is_identity(self):
        state = list(range(16))
        for _ in range(4):
            shift_rows(state)
        assert state == list(range(16))


def test_rot_word():
    assert rot_word([1, 2, 3, 4]) == [2, 3, 4, 1]


class TestSubstitution:

    def test_bytes_round_trip(self):
        state = list(range(0, 256, 16))
        substitute_bytes(state, SBOX)
        assert state[0] == 0x63
        substitute_bytes(state, INV_SBOX)
        assert state == list(range(0, 256, 16))

    def test_bigram_lookup(self):
        # (A, A) -> 19 -> (0, 19); (A, B) -> 534 -> (20, 14)
        state = [0, 0, 0, 1]
        substitute_bigrams(state, BIGRAM_SBOX, 26)
        assert state == [0, 19, 20, 14]

    def test_bigram_round_trip_all_pairs(self):
        for a in range(26):
            state = []
            for b in range(26):
                state.extend([a, b])
            original = list(state)
            substitute_bigrams(state, BIGRAM_SBOX, 26)
            substitute_bigrams(state, BIGRAM_SBOX_INV, 26)
            assert state == original

    def test_bigram_odd_length_rejected(self):
        with pytest.raises(ValueError, match="even length"):
            substitute_bigrams([0, 1, 2], BIGRAM_SBOX, 26)


class TestMixColumns:

    def test_gf_round_trip(self):
        rng = random.Random(4)
        original = [rng.randrange(256) for _ in range(16)]
        state = list(original)
        mix_columns(state, MIX_MATRIX, mix_column_gf)
        assert state != original
        mix_columns(state, INV_MIX_MATRIX, mix_column_gf)
        assert state == original

    def test_hill_round_trip(self):
        rng = random.Random(5)
        original = [rng.randrange(26) for _ in range(16)]
        state = list(original)
        mix_columns(state, HILL_MATRIX, mix_column_mod)
        mix_columns(state, HILL_MATRIX_INV, mix_column_mod)
        assert state == original

    def test_columns_mixed_independently(self):
        state = [1, 0, 0, 0] + [0] * 12
        mix_columns(state, HILL_MATRIX, mix_column_mod)
        assert state[:4] == [2, 3, 1, 1]
        assert state[4:] == [0] * 12


class TestRoundKeyCombination:

    def test_xor_self_inverse(self):
        rng = random.Random(6)
        x = [rng.randrange(256) for _ in range(16)]
        k = [rng.randrange(256) for _ in range(16)]
        state = list(x)
        xor_into(state, k)
        xor_into(state, k)
        assert state == x

    def test_mod_add_then_subtract(self):
        rng = random.Random(7)
        x = [rng.randrange(26) for _ in range(16)]
        k = [rng.randrange(26) for _ in range(16)]
        state = list(x)
        mod_add_into(state, k)
        mod_sub_into(state, k)
        assert state == x

    def test_mod_add_not_self_inverse(self):
        state = [1] * 16
        mod_add_into(state, [1] * 16)
        mod_add_into(state, [1] * 16)
        assert state == [3] * 16
