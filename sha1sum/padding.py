from __future__ import annotations

import logging
from typing import Optional

from sha1sum.buffers import BufferLike, to_bytes
from sha1sum.constants import BLOCK_SIZE, LENGTH_FIELD_SIZE, MAX_MESSAGE_BITS
from sha1sum.errors import MessageTooLargeError

log = logging.getLogger(__name__)


def padded_length(length: int) -> int:
    """Smallest multiple of 64 that fits ``length`` bytes, the 0x80 marker and the length field."""
    minimum = length + 1 + LENGTH_FIELD_SIZE
    return -(-minimum // BLOCK_SIZE) * BLOCK_SIZE


def check_message_length(total_length: int) -> None:
    if total_length * 8 >= MAX_MESSAGE_BITS:
        raise MessageTooLargeError(total_length)


def pad_message(message: BufferLike, total_length: Optional[int] = None) -> bytes:
    """Pad the final part of a message to a whole number of 64-byte blocks.

    ``message`` is the not yet ingested tail of the message (or the whole of
    it). ``total_length`` is the byte length of the complete original message
    across every chunk and defaults to ``len(message)``; its bit count is
    written big-endian into the last 8 bytes.
    """
    message = to_bytes(message)
    if total_length is None:
        total_length = len(message)
    if total_length < len(message):
        raise ValueError(
            f"total length {total_length} is smaller than the {len(message)} bytes being padded"
        )
    check_message_length(total_length)

    zeros = padded_length(len(message)) - len(message) - 1 - LENGTH_FIELD_SIZE
    padded = message + b"\x80" + b"\x00" * zeros + (total_length * 8).to_bytes(LENGTH_FIELD_SIZE, "big")

    log.debug("padded %d tail bytes to %d (message length %d)", len(message), len(padded), total_length)
    return padded
