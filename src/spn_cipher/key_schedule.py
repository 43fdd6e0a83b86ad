"""
Generalised Rijndael key schedule.

For a key of Nk words and R rounds, 4*(R+1) words are produced:

  i <  Nk                      W[i] = K[i]
  i % Nk == 0                  W[i] = W[i-Nk] + SubWord(RotWord(W[i-1])) + Rcon(i/Nk)
  Nk > 6 and i % Nk == 4       W[i] = W[i-Nk] + SubWord(W[i-1])
  otherwise                    W[i] = W[i-Nk] + W[i-1]

"+" is the algebra's word addition (XOR or mod 26). The schedule
length depends on R, so a schedule is only valid for the round count it
was expanded for.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .errors import InvalidRoundsError
from .interfaces import CipherAlgebra
from .primitives import STATE_SIZE, WORD_SIZE, rot_word

logger = logging.getLogger(__name__)


def _get_word(data: Sequence[int], offset: int) -> list[int]:
    """Extract the 4-symbol word at word offset."""
    start = offset * WORD_SIZE
    return list(data[start:start + WORD_SIZE])


def _set_word(data: list[int], word: Sequence[int], offset: int) -> None:
    """Store a 4-symbol word at word offset."""
    start = offset * WORD_SIZE
    data[start:start + WORD_SIZE] = word


def _sub_word(word: list[int], algebra: CipherAlgebra) -> list[int]:
    result = list(word)
    algebra.substitute(result)
    return result


def expand_key_words(
    key: Sequence[int],
    rounds: int,
    algebra: CipherAlgebra,
) -> list[int]:
    """Expand a key into 4*(rounds+1) words, returned flat.

    Args:
        key: Key symbols (length a multiple of 4)
        rounds: Number of cipher rounds R
        algebra: Arithmetic and substitution for the symbol domain

    Returns:
        Flat list of 16*(rounds+1) symbols
    """
    if rounds < 1:
        raise InvalidRoundsError(f"rounds must be >= 1, got {rounds}")
    algebra.validate_key(key)

    nk = len(key) // WORD_SIZE
    total_words = WORD_SIZE * (rounds + 1)
    w = [0] * (total_words * WORD_SIZE)

    for i in range(total_words):
        if i < nk:
            _set_word(w, _get_word(key, i), i)
            continue

        prev = _get_word(w, i - 1)
        if i % nk == 0:
            temp = _sub_word(rot_word(prev), algebra)
            temp = algebra.add_words(temp, algebra.round_constant(i // nk))
        elif nk > 6 and i % nk == 4:
            temp = _sub_word(prev, algebra)
        else:
            temp = prev
        _set_word(w, algebra.add_words(_get_word(w, i - nk), temp), i)

    logger.debug(
        "expanded %d-word key into %d words for %d rounds (%s)",
        nk, total_words, rounds, algebra.name,
    )
    return w


def expand_key(
    key: Sequence[int],
    rounds: int,
    algebra: CipherAlgebra,
) -> list[list[int]]:
    """Expand a key into rounds+1 round keys of 16 symbols each."""
    words = expand_key_words(key, rounds, algebra)
    return [round_key(words, r) for r in range(rounds + 1)]


def round_key(schedule: Sequence[int], r: int) -> list[int]:
    """Slice round key r out of a flat schedule."""
    start = r * STATE_SIZE
    return list(schedule[start:start + STATE_SIZE])
