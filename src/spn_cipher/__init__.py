"""Rijndael-structured block ciphers over bytes and over the letters A-Z."""

__version__ = "0.1.0"

from .errors import CipherError, InvalidLengthError, InvalidSymbolError, InvalidRoundsError
from .interfaces import CipherAlgebra, CipherConfig
from .algebras import get_algebra, RijndaelAlgebra, TextAlgebra
from .pipeline import encrypt_state, decrypt_state
from .key_schedule import expand_key
from .trace import TraceRecorder

__all__ = [
    "CipherError",
    "InvalidLengthError",
    "InvalidSymbolError",
    "InvalidRoundsError",
    "CipherAlgebra",
    "CipherConfig",
    "get_algebra",
    "RijndaelAlgebra",
    "TextAlgebra",
    "encrypt_state",
    "decrypt_state",
    "expand_key",
    "TraceRecorder",
]
