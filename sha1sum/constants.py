ONES = 0xFFFFFFFF

BLOCK_SIZE = 64
DIGEST_SIZE = 20
ROUNDS = 80
WORDS_PER_BLOCK = BLOCK_SIZE // 4

# 8 bytes of big-endian bit length close every padded message
LENGTH_FIELD_SIZE = 8
MAX_MESSAGE_BITS = 1 << 64

DEFAULT_CHUNK_SIZE = 1 << 16

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def round_constant(t: int) -> int:
    if not 0 <= t < ROUNDS:
        raise IndexError(f"invalid round index for K(): {t}")
    return ROUND_CONSTANTS[t // 20]
