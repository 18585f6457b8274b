from __future__ import annotations

from typing import Iterator, Union

import numpy as np

from sha1sum.constants import BLOCK_SIZE, WORDS_PER_BLOCK
from sha1sum.errors import BlockSizeError

BufferLike = Union[bytes, bytearray, memoryview, np.ndarray]

# network byte order, 4 bytes per word
BIG_ENDIAN_WORD = np.dtype(">u4")


def to_bytes(data: BufferLike) -> bytes:
    """Copy any buffer of single-byte items into ``bytes``.

    Text and buffers of wider items (``uint32`` arrays, ``"I"`` memoryviews)
    raise ``TypeError``.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        raise TypeError("text must be encoded before hashing")

    try:
        view = memoryview(data)
    except TypeError:
        raise TypeError(f"data must be bytes-like, not {type(data).__name__}") from None

    with view:
        if view.itemsize != 1:
            raise TypeError(f"buffer items must be single bytes, got format {view.format!r}")
        return view.tobytes()


def block_words(buffer: bytes) -> np.ndarray:
    """Decode a padded buffer into an ``(n_blocks, 16)`` array of big-endian words."""
    if len(buffer) % BLOCK_SIZE:
        raise BlockSizeError(len(buffer))
    return np.frombuffer(buffer, dtype=BIG_ENDIAN_WORD).reshape(-1, WORDS_PER_BLOCK)


def iter_blocks(buffer: bytes) -> Iterator[list[int]]:
    """Yield the 16 words of every 64-byte block in order, as plain ints."""
    for row in block_words(buffer):
        yield row.tolist()
