"""Tests for the offline table generators."""

import pytest

from spn_cipher.sbox_tools import (
    affine_transform,
    generate_bigram_sbox,
    invert_permutation,
    format_table,
    format_bigram_grid,
    rotl8,
)
from spn_cipher.tables import BIGRAM_SBOX


class TestGenerators:

    def test_affine_of_zero(self):
        assert affine_transform(0) == 0x63

    def test_rotl8(self):
        assert rotl8(0x80, 1) == 0x01
        assert rotl8(0x01, 8) == 0x01

    def test_bigram_sbox_is_permutation(self):
        sbox, inverse = generate_bigram_sbox(seed=1)
        assert sorted(sbox) == list(range(676))
        for i in range(676):
            assert inverse[sbox[i]] == i

    def test_seed_is_deterministic(self):
        assert generate_bigram_sbox(seed=5) == generate_bigram_sbox(seed=5)
        assert generate_bigram_sbox(seed=5)[0] != generate_bigram_sbox(seed=6)[0]

    def test_invert_permutation_rejects_duplicates(self):
        with pytest.raises(ValueError, match="not a permutation"):
            invert_permutation([0, 0, 1])


class TestFormatting:

    def test_format_table_rows(self):
        text = format_table(list(range(30)), per_line=26)
        lines = text.splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("000 001 002")
        assert lines[1] == "026 027 028 029"

    def test_bigram_grid_first_cell(self):
        grid = format_bigram_grid(BIGRAM_SBOX)
        lines = grid.splitlines()
        assert len(lines) == 26
        # (A, A) -> 19 -> "AT"; (A, B) -> 534 -> "UO"
        assert lines[0].split()[:2] == ["AT", "UO"]
