from sha1sum.constants import ONES, ROUNDS


def rotl32(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & ONES


def ch(x: int, y: int, z: int) -> int:
    return (x & y) ^ ((~x & ONES) & z)


def parity(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def maj(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


def round_function(x: int, y: int, z: int, t: int) -> int:
    """Nonlinear function ``f`` of step ``t``: ch, parity, maj, parity by 20-step quarter."""
    if 0 <= t < 20:
        return ch(x, y, z)
    if 20 <= t < 40 or 60 <= t < ROUNDS:
        return parity(x, y, z)
    if 40 <= t < 60:
        return maj(x, y, z)
    raise IndexError(f"invalid round index for f(): {t}")
