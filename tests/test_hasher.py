"""
tests/test_hasher.py – unit tests for the streaming hasher and its helpers.
"""
from __future__ import annotations

import hashlib
import io
import random

import pytest

from sha1sum.engine import Hasher, hash_file, hash_stream, sha1_hex
from sha1sum.errors import DigestFinalizedError, MessageTooLargeError

LONG_MESSAGE = (
    b"this is a longer message to be digested that causes multiple 512-bit blocks to be processed"
)


def _chunks(data: bytes, rng: random.Random):
    pos = 0
    while pos < len(data):
        size = rng.randint(0, 150)
        yield data[pos:pos + size]
        pos += size


# ---------------------------------------------------------------------------
# chunking
# ---------------------------------------------------------------------------

def test_one_shot_vectors():
    assert sha1_hex(b"") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"
    assert sha1_hex(b"test") == "a94a8fe5ccb19ba61c4c0873d391e987982fbbd3"
    assert sha1_hex(b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_long_message_split_matches_one_shot():
    split = Hasher()
    split.update(LONG_MESSAGE[:10]).update(LONG_MESSAGE[10:70]).update(LONG_MESSAGE[70:])
    assert split.hexdigest() == sha1_hex(LONG_MESSAGE) == hashlib.sha1(LONG_MESSAGE).hexdigest()


@pytest.mark.parametrize("seed", range(10))
def test_random_chunking_matches_hashlib(seed):
    rng = random.Random(seed)
    data = rng.randbytes(rng.randint(0, 1000))
    hasher = Hasher()
    for chunk in _chunks(data, rng):
        hasher.update(chunk)
    assert hasher.message_length == len(data)
    assert hasher.hexdigest() == hashlib.sha1(data).hexdigest()


def test_byte_at_a_time():
    data = bytes(range(256)) * 2
    hasher = Hasher()
    for i in range(len(data)):
        hasher.update(data[i:i + 1])
    assert hasher.hexdigest() == hashlib.sha1(data).hexdigest()


def test_empty_updates_change_nothing():
    hasher = Hasher(b"abc")
    hasher.update(b"").update(bytearray())
    assert hasher.hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_accepts_memoryview_and_rejects_text():
    assert Hasher(memoryview(b"abc")).hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"
    with pytest.raises(TypeError):
        Hasher("abc")


# ---------------------------------------------------------------------------
# finalisation
# ---------------------------------------------------------------------------

def test_finalize_is_idempotent():
    hasher = Hasher(LONG_MESSAGE)
    assert not hasher.finalized
    first = hasher.finalize()
    assert hasher.finalized
    assert hasher.finalize() == first
    assert hasher.hexdigest() == first


def test_update_after_finalize_fails():
    hasher = Hasher(b"abc")
    hasher.hexdigest()
    with pytest.raises(DigestFinalizedError):
        hasher.update(b"d")
    assert hasher.hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_update_past_length_limit_fails_and_keeps_length():
    hasher = Hasher()
    # 2**64 - 8 bits already seen: one more byte overflows the length field
    hasher._message_byte_length = (1 << 61) - 1
    with pytest.raises(MessageTooLargeError):
        hasher.update(b"x")
    assert hasher.message_length == (1 << 61) - 1
    assert not hasher.finalized


def test_update_up_to_length_limit_is_accepted():
    hasher = Hasher()
    hasher._message_byte_length = (1 << 61) - 2
    hasher.update(b"x")
    assert hasher.message_length == (1 << 61) - 1


def test_digest_bytes():
    hasher = Hasher(b"abc")
    assert hasher.digest_bytes() == hashlib.sha1(b"abc").digest()
    assert len(hasher.digest_bytes()) == Hasher.digest_size


# ---------------------------------------------------------------------------
# copy
# ---------------------------------------------------------------------------

def test_copy_shares_prefix_only():
    prefix = b"p" * 100
    hasher = Hasher(prefix)
    clone = hasher.copy()
    hasher.update(b"left")
    clone.update(b"right")
    assert hasher.hexdigest() == hashlib.sha1(prefix + b"left").hexdigest()
    assert clone.hexdigest() == hashlib.sha1(prefix + b"right").hexdigest()


def test_copy_after_finalize_fails():
    hasher = Hasher(b"abc")
    hasher.finalize()
    with pytest.raises(DigestFinalizedError):
        hasher.copy()


# ---------------------------------------------------------------------------
# stream and file helpers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("chunk_size", [1, 7, 64, 65536])
def test_hash_stream(chunk_size):
    data = LONG_MESSAGE * 5
    assert hash_stream(io.BytesIO(data), chunk_size) == hashlib.sha1(data).hexdigest()


def test_hash_stream_rejects_bad_chunk_size():
    with pytest.raises(ValueError):
        hash_stream(io.BytesIO(b"abc"), 0)


def test_hash_file(tmp_path):
    path = tmp_path / "input.bin"
    path.write_bytes(LONG_MESSAGE)
    assert hash_file(path) == hashlib.sha1(LONG_MESSAGE).hexdigest()
    assert hash_file(str(path), chunk_size=3) == hashlib.sha1(LONG_MESSAGE).hexdigest()


def test_hash_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        hash_file(tmp_path / "missing.bin")
