from __future__ import annotations

from typing import Sequence

from sha1sum.buffers import BufferLike, block_words, to_bytes
from sha1sum.constants import BLOCK_SIZE, ROUNDS, WORDS_PER_BLOCK
from sha1sum.errors import BlockSizeError
from sha1sum.words import rotl32


def expand_words(words: Sequence[int]) -> list[int]:
    """Expand the 16 words of one block into the 80-word message schedule.

    Words 16 onward are filled forward in index order from
    ``W[t-3] ^ W[t-8] ^ W[t-14] ^ W[t-16]`` rotated left by one.
    """
    if len(words) != WORDS_PER_BLOCK:
        raise ValueError(f"a block holds {WORDS_PER_BLOCK} words, got {len(words)}")

    w = [0] * ROUNDS
    w[:WORDS_PER_BLOCK] = words
    for t in range(WORDS_PER_BLOCK, ROUNDS):
        w[t] = rotl32(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1)
    return w


def expand_block(block: BufferLike) -> list[int]:
    block = to_bytes(block)
    if len(block) != BLOCK_SIZE:
        raise BlockSizeError(len(block), expected="exactly 64")
    return expand_words(block_words(block)[0].tolist())
