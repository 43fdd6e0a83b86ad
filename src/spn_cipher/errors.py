"""Exceptions raised by the cipher engines.

All of them derive from ValueError: every failure is a bad-input failure
detected before any output is produced.
"""


class CipherError(ValueError):
    """Base class for invalid cipher input."""


class InvalidLengthError(CipherError):
    """Plaintext, ciphertext or key has the wrong number of symbols."""


class InvalidSymbolError(CipherError):
    """Input contains a symbol outside the engine's alphabet."""


class InvalidRoundsError(CipherError):
    """Round count is not a positive integer."""
