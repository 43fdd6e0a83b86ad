"""Core interfaces and configuration for the SPN engines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidLengthError, InvalidRoundsError, InvalidSymbolError
from .primitives import STATE_SIZE, WORD_SIZE

ENGINES = ("rijndael", "text")

# Round count used by the text engine's block API
TEXT_ROUNDS = 10


@dataclass
class CipherConfig:
    """Configuration for one engine invocation.

    The engine itself never derives the round count; effective_rounds is
    a convenience for callers (such as the CLI) that want the standard
    relationship R = Nk + 6 for the byte engine.
    """

    # Which algebra drives the round pipeline
    engine: str = "rijndael"

    # Key length in bits (byte engine) or letters * 8 (text engine)
    key_bits: int = 128

    # Explicit round count; None means the engine default
    rounds: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.engine not in ENGINES:
            raise ValueError(f"Unknown engine: {self.engine}")
        if self.key_bits <= 0 or self.key_bits % 32:
            raise InvalidLengthError(
                f"key_bits must be a positive multiple of 32, got {self.key_bits}"
            )
        if self.rounds is not None and self.rounds < 1:
            raise InvalidRoundsError(f"rounds must be >= 1, got {self.rounds}")

    @classmethod
    def for_text_key(cls, key_letters: int = 16, rounds: int | None = None) -> "CipherConfig":
        """Build a text-engine config from a key length in letters."""
        return cls(engine="text", key_bits=key_letters * 8, rounds=rounds)

    @property
    def key_symbols(self) -> int:
        """Key length in symbols (bytes or letters)."""
        return self.key_bits // 8

    @property
    def nk(self) -> int:
        """Key length in 4-symbol words."""
        return self.key_symbols // WORD_SIZE

    @property
    def effective_rounds(self) -> int:
        """Explicit rounds, else Nk + 6 (rijndael) or 10 (text)."""
        if self.rounds is not None:
            return self.rounds
        if self.engine == "text":
            return TEXT_ROUNDS
        return self.nk + 6


class CipherAlgebra(ABC):
    """Arithmetic and substitution capabilities for one symbol domain.

    The round pipeline and key schedule are written once against this
    interface. All state-changing methods work in place.
    """

    # Class attributes to be overridden by subclasses
    name: str = "base"
    description: str = "Base algebra (abstract)"

    # Number of distinct symbols (256 for bytes, 26 for letters)
    symbol_count: int = 0

    # Operation labels used in traces
    substitute_label: str = "Substitute"
    combine_label: str = "AddRoundKey"
    uncombine_label: str = "AddRoundKey"

    @abstractmethod
    def substitute(self, symbols: list[int]) -> None:
        """Forward substitution of a state or key word."""
        raise NotImplementedError

    @abstractmethod
    def inverse_substitute(self, symbols: list[int]) -> None:
        """Inverse substitution."""
        raise NotImplementedError

    @abstractmethod
    def mix_columns(self, state: list[int]) -> None:
        """Column mixing."""
        raise NotImplementedError

    @abstractmethod
    def inverse_mix_columns(self, state: list[int]) -> None:
        """Inverse column mixing."""
        raise NotImplementedError

    @abstractmethod
    def add_round_key(self, state: list[int], round_key: Sequence[int]) -> None:
        """Combine a round key into the state (encryption direction)."""
        raise NotImplementedError

    @abstractmethod
    def subtract_round_key(self, state: list[int], round_key: Sequence[int]) -> None:
        """Remove a round key from the state (decryption direction)."""
        raise NotImplementedError

    @abstractmethod
    def add_words(self, a: Sequence[int], b: Sequence[int]) -> list[int]:
        """Symbol-wise addition of two key-schedule words."""
        raise NotImplementedError

    @abstractmethod
    def round_constant(self, j: int) -> list[int]:
        """Round-constant word for key-schedule iteration j."""
        raise NotImplementedError

    def validate_symbols(self, symbols: Sequence[int], what: str) -> None:
        """Reject symbols outside 0..symbol_count-1."""
        for i, s in enumerate(symbols):
            if not 0 <= s < self.symbol_count:
                raise InvalidSymbolError(
                    f"{what} symbol {s!r} at position {i} is outside "
                    f"0..{self.symbol_count - 1}"
                )

    def validate_state(self, state: Sequence[int], what: str = "State") -> None:
        """Check a block has exactly 16 in-range symbols."""
        if len(state) != STATE_SIZE:
            raise InvalidLengthError(
                f"{what} must be {STATE_SIZE} symbols, got {len(state)}"
            )
        self.validate_symbols(state, what)

    def validate_key(self, key: Sequence[int]) -> None:
        """Check the key is a non-empty whole number of words."""
        if not key or len(key) % WORD_SIZE:
            raise InvalidLengthError(
                f"Key must be a non-zero multiple of {WORD_SIZE} symbols, got {len(key)}"
            )
        self.validate_symbols(key, "Key")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
