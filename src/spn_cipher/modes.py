"""Electronic-codebook slicing and right padding."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from .errors import InvalidLengthError
from .primitives import STATE_SIZE

T = TypeVar("T", str, bytes)


def pad_right(data: str, filler: str, block_size: int = STATE_SIZE) -> str:
    """Append filler until len(data) is a multiple of block_size.

    Data that already fits is returned unchanged; there is no
    length marker, so padding cannot be removed unambiguously.
    """
    remainder = len(data) % block_size
    if remainder == 0:
        return data
    return data + filler * (block_size - remainder)


def split_blocks(data: Sequence, block_size: int = STATE_SIZE, what: str = "Input") -> list:
    """Slice data into consecutive blocks of block_size.

    Raises:
        InvalidLengthError: If len(data) is not a multiple of block_size
    """
    if len(data) % block_size != 0:
        raise InvalidLengthError(
            f"{what} length {len(data)} is not a multiple of {block_size}"
        )
    return [data[i:i + block_size] for i in range(0, len(data), block_size)]


def ecb_apply(
    data: T,
    block_fn: Callable[[T], T],
    block_size: int = STATE_SIZE,
    what: str = "Input",
) -> T:
    """Apply block_fn to every block independently and concatenate.

    All blocks are validated by split_blocks before block_fn runs.
    """
    blocks = split_blocks(data, block_size, what)
    return data[:0].join(block_fn(block) for block in blocks)
