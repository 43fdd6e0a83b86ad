"""Golden reference AES implementation using PyCryptodome."""

from Crypto.Cipher import AES

AES_KEY_SIZES = (16, 24, 32)


def golden_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt a single block using PyCryptodome as golden reference.

    Args:
        key: 16-, 24- or 32-byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        ValueError: If key or plaintext has an unsupported length
    """
    if len(key) not in AES_KEY_SIZES:
        raise ValueError(f"Key must be 16, 24 or 32 bytes, got {len(key)}")
    if len(plaintext) != 16:
        raise ValueError(f"Plaintext must be 16 bytes, got {len(plaintext)}")

    cipher = AES.new(key, AES.MODE_ECB)
    return cipher.encrypt(plaintext)


def golden_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt a single block using PyCryptodome."""
    if len(key) not in AES_KEY_SIZES:
        raise ValueError(f"Key must be 16, 24 or 32 bytes, got {len(key)}")
    if len(ciphertext) != 16:
        raise ValueError(f"Ciphertext must be 16 bytes, got {len(ciphertext)}")

    cipher = AES.new(key, AES.MODE_ECB)
    return cipher.decrypt(ciphertext)


def validate_against_golden(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """Validate a candidate ciphertext against the golden reference.

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = golden_encrypt(key, plaintext)
    if candidate_ciphertext == expected:
        return True, ""
    else:
        return False, (
            f"Ciphertext mismatch: expected {expected.hex()}, "
            f"got {candidate_ciphertext.hex()}"
        )


# FIPS-197 Appendix C and additional NIST vectors
FIPS_197_TEST_VECTORS = [
    # Appendix C.1 - AES-128
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    # Appendix C.2 - AES-192
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f1011121314151617"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("dda97ca4864cdfe06eaf70a0ec0d7191"),
    },
    # Appendix C.3 - AES-256
    {
        "key": bytes.fromhex(
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
        ),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("8ea2b7ca516745bfeafc49904b496089"),
    },
    # FIPS-197 Appendix B
    {
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("f34481ec3cc627bacd5dc3fb08f273e6"),
        "ciphertext": bytes.fromhex("0336763e966d92595a567cc9ce537f5e"),
    },
    {
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]
