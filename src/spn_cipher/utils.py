"""
Utility functions for parsing and formatting cipher data.

States are printed in storage order, column by column:
  symbol[0..3] is column 0, symbol[4..7] is column 1, ...
"""

from typing import Callable, Sequence

from .tables import ALPHABET


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes (whitespace is ignored).
    """
    return bytes.fromhex(hex_str)


def to_hex(data: Sequence[int], uppercase: bool = True, separator: str = "") -> str:
    """
    Render bytes as hex pairs for display.

    Args:
        data: bytes or byte values
        uppercase: Use A-F instead of a-f
        separator: String placed between pairs

    Returns:
        Hex string, e.g. "66E94BD4..."
    """
    fmt = "{:02X}" if uppercase else "{:02x}"
    return separator.join(fmt.format(b) for b in data)


def symbol_hex(value: int) -> str:
    return f"{value:02x}"


def symbol_letter(value: int) -> str:
    return ALPHABET[value]


def format_state_line(
    state: Sequence[int],
    fmt: Callable[[int], str] = symbol_hex,
) -> str:
    """
    Format state as a single line (hex pairs or letters).
    """
    return "".join(fmt(s) for s in state)
