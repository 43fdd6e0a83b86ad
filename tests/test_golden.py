"""Tests for golden reference AES implementation."""

import pytest
from Crypto.Cipher import AES

from spn_cipher.golden import (
    golden_encrypt,
    golden_decrypt,
    validate_against_golden,
    FIPS_197_TEST_VECTORS,
)


class TestGoldenEncrypt:
    """Tests for golden_encrypt function."""

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS)
    def test_fips_197_all_vectors(self, vec: dict) -> None:
        """Test all FIPS-197 test vectors."""
        result = golden_encrypt(vec["key"], vec["plaintext"])
        assert result == vec["ciphertext"]

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS)
    def test_fips_197_decrypt(self, vec: dict) -> None:
        """Golden decryption inverts every vector."""
        assert golden_decrypt(vec["key"], vec["ciphertext"]) == vec["plaintext"]

    def test_invalid_key_length(self) -> None:
        """Test that invalid key length raises ValueError."""
        with pytest.raises(ValueError, match="Key must be 16, 24 or 32 bytes"):
            golden_encrypt(bytes(15), bytes(16))

        with pytest.raises(ValueError, match="Key must be 16, 24 or 32 bytes"):
            golden_encrypt(bytes(64), bytes(16))

    def test_invalid_plaintext_length(self) -> None:
        """Test that invalid plaintext length raises ValueError."""
        with pytest.raises(ValueError, match="Plaintext must be 16 bytes"):
            golden_encrypt(bytes(16), bytes(15))

    def test_matches_pycryptodome_directly(self) -> None:
        """Verify golden_encrypt matches direct PyCryptodome usage."""
        key = bytes(range(32))
        plaintext = bytes(range(16, 32))

        cipher = AES.new(key, AES.MODE_ECB)
        assert golden_encrypt(key, plaintext) == cipher.encrypt(plaintext)


class TestValidateAgainstGolden:
    """Tests for validate_against_golden function."""

    def test_correct_ciphertext_passes(self) -> None:
        vec = FIPS_197_TEST_VECTORS[0]
        is_correct, error = validate_against_golden(
            vec["key"], vec["plaintext"], vec["ciphertext"]
        )

        assert is_correct is True
        assert error == ""

    def test_single_bit_difference_fails(self) -> None:
        """Test that even a single bit difference fails."""
        vec = FIPS_197_TEST_VECTORS[0]
        wrong = bytearray(vec["ciphertext"])
        wrong[0] ^= 0x01

        is_correct, error = validate_against_golden(
            vec["key"], vec["plaintext"], bytes(wrong)
        )

        assert is_correct is False
        assert "mismatch" in error.lower()
