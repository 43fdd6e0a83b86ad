"""
Round pipeline shared by both engines.

Encryption:
  AddRoundKey(0)
  rounds 1..R-1:  Substitute -> ShiftRows -> MixColumns -> AddRoundKey(r)
  round R:        Substitute -> ShiftRows -> AddRoundKey(R)

Decryption undoes each step in reverse order:
  SubtractRoundKey(R) -> InvShiftRows -> InvSubstitute
  rounds R-1..1:  SubtractRoundKey(r) -> InvMixColumns -> InvShiftRows -> InvSubstitute
  SubtractRoundKey(0)

Stages reported to the tracer: "initial", "round", "final".
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from .interfaces import CipherAlgebra
from .key_schedule import expand_key
from .primitives import inv_shift_rows, shift_rows

if TYPE_CHECKING:
    from .trace import TraceRecorder

logger = logging.getLogger(__name__)


def _trace(
    tracer: "TraceRecorder | None",
    round_num: int,
    stage: str,
    operation: str,
    state: list[int],
    round_key: list[int] | None = None,
) -> None:
    if tracer is None:
        return
    entry = {
        "round": round_num,
        "stage": stage,
        "operation": operation,
        "state": list(state),
    }
    if round_key is not None:
        entry["round_key"] = list(round_key)
    tracer.record(**entry)


def encrypt_state(
    block: Sequence[int],
    key: Sequence[int],
    rounds: int,
    algebra: CipherAlgebra,
    tracer: "TraceRecorder | None" = None,
) -> list[int]:
    """Encrypt one 16-symbol block.

    Args:
        block: 16 plaintext symbols
        key: Key symbols (Nk words)
        rounds: Number of rounds R (>= 1)
        algebra: Symbol-domain arithmetic
        tracer: Optional trace recorder

    Returns:
        16 ciphertext symbols (a new list; block is not modified)
    """
    algebra.validate_state(block, "Plaintext")
    round_keys = expand_key(key, rounds, algebra)
    state = list(block)
    logger.debug("encrypt block: engine=%s rounds=%d", algebra.name, rounds)

    algebra.add_round_key(state, round_keys[0])
    _trace(tracer, 0, "initial", algebra.combine_label, state, round_keys[0])

    for r in range(1, rounds):
        algebra.substitute(state)
        _trace(tracer, r, "round", algebra.substitute_label, state)
        shift_rows(state)
        _trace(tracer, r, "round", "ShiftRows", state)
        algebra.mix_columns(state)
        _trace(tracer, r, "round", "MixColumns", state)
        algebra.add_round_key(state, round_keys[r])
        _trace(tracer, r, "round", algebra.combine_label, state, round_keys[r])

    algebra.substitute(state)
    _trace(tracer, rounds, "final", algebra.substitute_label, state)
    shift_rows(state)
    _trace(tracer, rounds, "final", "ShiftRows", state)
    algebra.add_round_key(state, round_keys[rounds])
    _trace(tracer, rounds, "final", algebra.combine_label, state, round_keys[rounds])

    return state


def decrypt_state(
    block: Sequence[int],
    key: Sequence[int],
    rounds: int,
    algebra: CipherAlgebra,
    tracer: "TraceRecorder | None" = None,
) -> list[int]:
    """Decrypt one 16-symbol block; exact inverse of encrypt_state."""
    algebra.validate_state(block, "Ciphertext")
    round_keys = expand_key(key, rounds, algebra)
    state = list(block)
    logger.debug("decrypt block: engine=%s rounds=%d", algebra.name, rounds)

    algebra.subtract_round_key(state, round_keys[rounds])
    _trace(tracer, rounds, "final", algebra.uncombine_label, state, round_keys[rounds])
    inv_shift_rows(state)
    _trace(tracer, rounds, "final", "InvShiftRows", state)
    algebra.inverse_substitute(state)
    _trace(tracer, rounds, "final", "Inv" + algebra.substitute_label, state)

    for r in range(rounds - 1, 0, -1):
        algebra.subtract_round_key(state, round_keys[r])
        _trace(tracer, r, "round", algebra.uncombine_label, state, round_keys[r])
        algebra.inverse_mix_columns(state)
        _trace(tracer, r, "round", "InvMixColumns", state)
        inv_shift_rows(state)
        _trace(tracer, r, "round", "InvShiftRows", state)
        algebra.inverse_substitute(state)
        _trace(tracer, r, "round", "Inv" + algebra.substitute_label, state)

    algebra.subtract_round_key(state, round_keys[0])
    _trace(tracer, 0, "initial", algebra.uncombine_label, state, round_keys[0])

    return state
