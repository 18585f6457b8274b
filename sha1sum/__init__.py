from sha1sum.compress import compress
from sha1sum.constants import BLOCK_SIZE, DIGEST_SIZE, INITIAL_STATE, round_constant
from sha1sum.engine import SHA1, Hasher, hash_file, hash_stream, sha1_hex
from sha1sum.errors import BlockSizeError, DigestFinalizedError, MessageTooLargeError, Sha1Error
from sha1sum.padding import pad_message, padded_length
from sha1sum.schedule import expand_block, expand_words
from sha1sum.state import HashState
from sha1sum.words import ch, maj, parity, rotl32, round_function

__all__ = [
    "BLOCK_SIZE",
    "DIGEST_SIZE",
    "INITIAL_STATE",
    "SHA1",
    "BlockSizeError",
    "DigestFinalizedError",
    "HashState",
    "Hasher",
    "MessageTooLargeError",
    "Sha1Error",
    "ch",
    "compress",
    "expand_block",
    "expand_words",
    "hash_file",
    "hash_stream",
    "maj",
    "pad_message",
    "padded_length",
    "parity",
    "rotl32",
    "round_constant",
    "round_function",
    "sha1_hex",
]
