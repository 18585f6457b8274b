"""SHA-1 digest engine and the streaming hasher built on top of it.

``SHA1`` is the block-level engine: it only accepts buffers that are already
padded to whole 64-byte blocks. ``Hasher`` does the buffering, the length
bookkeeping and the one explicit padding step at the end of the message.

Neither class locks. One instance belongs to one message and one caller;
threads that share an instance must serialise their calls themselves.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from sha1sum.buffers import BufferLike, iter_blocks, to_bytes
from sha1sum.compress import compress
from sha1sum.constants import BLOCK_SIZE, DEFAULT_CHUNK_SIZE, DIGEST_SIZE
from sha1sum.errors import DigestFinalizedError
from sha1sum.padding import check_message_length, pad_message
from sha1sum.schedule import expand_words
from sha1sum.state import HashState

log = logging.getLogger(__name__)


class SHA1:
    block_size: int = BLOCK_SIZE
    digest_size: int = DIGEST_SIZE

    def __init__(self) -> None:
        self._state = HashState.initial()
        self._blocks = 0

    @classmethod
    def from_state(cls, state: HashState) -> "SHA1":
        """Engine resuming from an intermediate hash state."""
        if not isinstance(state, HashState):
            raise TypeError(f"state must be a HashState, not {type(state).__name__}")
        engine = cls()
        engine._state = state
        return engine

    @property
    def state(self) -> HashState:
        return self._state

    @property
    def blocks(self) -> int:
        return self._blocks

    def ingest(self, buffer: BufferLike) -> "SHA1":
        """Compress every 64-byte block of an already padded buffer, in order.

        Raises ``BlockSizeError`` before touching the state when the length is
        not a multiple of 64.
        """
        state = self._state
        count = 0
        for words in iter_blocks(to_bytes(buffer)):
            state = compress(state, expand_words(words))
            count += 1

        self._state = state
        self._blocks += count
        log.debug("ingested %d block(s), %d in total", count, self._blocks)
        return self

    def digest(self) -> str:
        return self._state.hexdigest()

    def __str__(self) -> str:
        return self.digest()


class Hasher:
    """Incremental SHA-1 over a message delivered in arbitrary chunks."""

    name: str = "sha1"
    block_size: int = BLOCK_SIZE
    digest_size: int = DIGEST_SIZE

    def __init__(self, data: Optional[BufferLike] = None) -> None:
        self._engine = SHA1()
        self._unprocessed = b""
        self._message_byte_length = 0
        self._hexdigest: Optional[str] = None

        if data is not None:
            self.update(data)

    @property
    def finalized(self) -> bool:
        return self._hexdigest is not None

    @property
    def message_length(self) -> int:
        return self._message_byte_length

    def update(self, data: BufferLike) -> "Hasher":
        if self.finalized:
            raise DigestFinalizedError()

        chunk = to_bytes(data)
        check_message_length(self._message_byte_length + len(chunk))
        self._message_byte_length += len(chunk)

        buffer = self._unprocessed + chunk
        split = len(buffer) - len(buffer) % self.block_size
        if split:
            self._engine.ingest(buffer[:split])
        self._unprocessed = buffer[split:]
        return self

    def finalize(self) -> str:
        """Pad the remaining tail, ingest it and fix the digest.

        Later calls return the same digest without touching the state.
        """
        if self._hexdigest is None:
            self._engine.ingest(pad_message(self._unprocessed, self._message_byte_length))
            self._unprocessed = b""
            self._hexdigest = self._engine.digest()
            log.debug("finalized %d byte message: %s", self._message_byte_length, self._hexdigest)
        return self._hexdigest

    def hexdigest(self) -> str:
        return self.finalize()

    def digest_bytes(self) -> bytes:
        return bytes.fromhex(self.finalize())

    def copy(self) -> "Hasher":
        if self.finalized:
            raise DigestFinalizedError()
        clone = Hasher()
        clone._engine = SHA1.from_state(self._engine.state)
        clone._unprocessed = self._unprocessed
        clone._message_byte_length = self._message_byte_length
        return clone


def sha1_hex(data: BufferLike) -> str:
    return Hasher(data).hexdigest()


def hash_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    if chunk_size <= 0:
        raise ValueError(f"chunk size must be positive, got {chunk_size}")

    hasher = Hasher()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        hasher.update(chunk)
    return hasher.hexdigest()


def hash_file(path: Union[str, Path], chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    with open(path, "rb") as src:
        return hash_stream(src, chunk_size)
