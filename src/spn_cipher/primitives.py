"""
State transform primitives shared by both engines.

The state is a flat list of 16 symbols read as a 4x4 matrix in
column-major order:

  [0, 4,  8, 12]
  [1, 5,  9, 13]
  [2, 6, 10, 14]
  [3, 7, 11, 15]

Every function here mutates its first argument in place and returns
None, except rot_word which builds a new word.
"""

from typing import Callable, Sequence

from .arithmetic import mod_add, mod_sub

STATE_SIZE = 16
WORD_SIZE = 4


def shift_rows(state: list[int]) -> None:
    """Rotate row r left by r positions (row 0 untouched)."""
    for row in range(1, 4):
        values = [state[col * 4 + row] for col in range(4)]
        values = values[row:] + values[:row]
        for col in range(4):
            state[col * 4 + row] = values[col]


def inv_shift_rows(state: list[int]) -> None:
    """Rotate row r right by r positions."""
    for row in range(1, 4):
        values = [state[col * 4 + row] for col in range(4)]
        values = values[-row:] + values[:-row]
        for col in range(4):
            state[col * 4 + row] = values[col]


def rot_word(word: Sequence[int]) -> list[int]:
    """Left-rotate a 4-symbol word by one position."""
    return [word[1], word[2], word[3], word[0]]


def substitute_bytes(symbols: list[int], table: Sequence[int]) -> None:
    """Replace every symbol x by table[x]."""
    for i, x in enumerate(symbols):
        symbols[i] = table[x]


def substitute_bigrams(
    symbols: list[int],
    table: Sequence[int],
    radix: int,
) -> None:
    """Replace each adjacent pair (a, b) via table[a*radix + b].

    Pairs are (0,1), (2,3), ...; the looked-up value v is split back
    into (v // radix, v % radix).
    """
    if len(symbols) % 2:
        raise ValueError(f"Bigram substitution needs an even length, got {len(symbols)}")
    for i in range(0, len(symbols), 2):
        v = table[symbols[i] * radix + symbols[i + 1]]
        symbols[i] = v // radix
        symbols[i + 1] = v % radix


def mix_columns(
    state: list[int],
    matrix: tuple[int, ...],
    mix_column: Callable[[tuple[int, ...], list[int]], list[int]],
) -> None:
    """Apply mix_column(matrix, column) to each of the 4 columns."""
    for col in range(4):
        start = col * 4
        state[start:start + 4] = mix_column(matrix, state[start:start + 4])


def xor_into(state: list[int], round_key: Sequence[int]) -> None:
    """state[i] ^= round_key[i]."""
    for i in range(len(state)):
        state[i] ^= round_key[i]


def mod_add_into(state: list[int], round_key: Sequence[int]) -> None:
    """state[i] = (state[i] + round_key[i]) mod 26."""
    for i in range(len(state)):
        state[i] = mod_add(state[i], round_key[i])


def mod_sub_into(state: list[int], round_key: Sequence[int]) -> None:
    """state[i] = (state[i] - round_key[i]) mod 26."""
    for i in range(len(state)):
        state[i] = mod_sub(state[i], round_key[i])
