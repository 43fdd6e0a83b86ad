"""Tests for the generalised key schedule."""

import pytest

from spn_cipher.algebras import RijndaelAlgebra, TextAlgebra
from spn_cipher.errors import InvalidLengthError, InvalidRoundsError, InvalidSymbolError
from spn_cipher.key_schedule import expand_key, expand_key_words, round_key
from spn_cipher.text_cipher import text_to_numbers, numbers_to_text
from spn_cipher.utils import hex_to_bytes


def _word_hex(words: list[int], i: int) -> str:
    return bytes(words[i * 4:i * 4 + 4]).hex()


class TestRijndaelExpansion:
    """FIPS-197 Appendix A key expansions."""

    @pytest.fixture
    def algebra(self):
        return RijndaelAlgebra()

    def test_aes128(self, algebra):
        key = hex_to_bytes("2b7e151628aed2a6abf7158809cf4f3c")
        words = expand_key_words(list(key), 10, algebra)

        assert len(words) == 44 * 4
        assert _word_hex(words, 4) == "a0fafe17"
        assert _word_hex(words, 43) == "b6630ca6"
        assert bytes(round_key(words, 10)).hex() == "d014f9a8c9ee2589e13f0cc8b6630ca6"

    def test_aes192(self, algebra):
        key = hex_to_bytes("8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7b")
        words = expand_key_words(list(key), 12, algebra)

        assert len(words) == 52 * 4
        assert _word_hex(words, 6) == "fe0c91f7"
        assert _word_hex(words, 51) == "01002202"

    def test_aes256(self, algebra):
        key = hex_to_bytes(
            "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
        )
        words = expand_key_words(list(key), 14, algebra)

        assert len(words) == 60 * 4
        assert _word_hex(words, 8) == "9ba35411"
        # i % Nk == 4 uses SubWord without RotWord
        assert _word_hex(words, 12) == "a8b09c1a"
        assert _word_hex(words, 59) == "706c631e"

    def test_round_key_zero_is_key(self, algebra):
        key = list(range(16))
        assert expand_key(key, 10, algebra)[0] == key

    def test_length_depends_on_rounds(self, algebra):
        key = list(range(16))
        short = expand_key(key, 4, algebra)
        long = expand_key(key, 10, algebra)
        assert len(short) == 5
        assert len(long) == 11
        assert short == long[:5]

    def test_round_constants(self, algebra):
        assert [algebra.round_constant(j)[0] for j in range(1, 11)] == [
            0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1b, 0x36,
        ]


class TestTextExpansion:
    """Letter-domain expansion (reference values for the shipped tables)."""

    @pytest.fixture
    def algebra(self):
        return TextAlgebra()

    def test_last_round_key_of_all_a(self, algebra):
        keys = expand_key(text_to_numbers("AAAAAAAAAAAAAAAA"), 10, algebra)
        assert numbers_to_text(keys[10]) == "KWHBVQZPCIBXOIYT"

    def test_first_round_key(self, algebra):
        keys = expand_key(text_to_numbers("ABCDEFGHIJKLMNOP"), 10, algebra)
        assert numbers_to_text(keys[0]) == "ABCDEFGHIJKLMNOP"
        assert numbers_to_text(keys[1]) == "CCLEGHRLOQBWADPL"

    def test_eight_word_key_uses_subword_branch(self, algebra):
        key = text_to_numbers("THEQUICKBROWNFOXJUMPSOVERLAZYDOG")
        words = expand_key_words(key, 14, algebra)
        assert len(words) == 60 * 4
        assert numbers_to_text(words[48:52]) == "NWHM"

    def test_round_constant_letters(self, algebra):
        assert algebra.round_constant(1) == [1, 0, 0, 0]
        assert algebra.round_constant(26) == [0, 0, 0, 0]
        assert algebra.round_constant(27) == [1, 0, 0, 0]


class TestValidation:

    def test_zero_rounds_rejected(self):
        with pytest.raises(InvalidRoundsError):
            expand_key(list(range(16)), 0, RijndaelAlgebra())

    @pytest.mark.parametrize("length", [0, 3, 15, 17])
    def test_partial_word_key_rejected(self, length):
        with pytest.raises(InvalidLengthError):
            expand_key([0] * length, 10, RijndaelAlgebra())

    def test_out_of_range_symbol_rejected(self):
        with pytest.raises(InvalidSymbolError):
            expand_key([26] + [0] * 15, 10, TextAlgebra())
