from __future__ import annotations

from typing import Sequence

from sha1sum.constants import ONES, ROUNDS, round_constant
from sha1sum.state import HashState
from sha1sum.words import rotl32, round_function


def compress(state: HashState, schedule: Sequence[int]) -> HashState:
    """Run the 80 SHA-1 steps of one block over ``state`` and return the next state.

    Steps are strictly sequential: every step reads the working variables
    written by the one before it.
    """
    if len(schedule) != ROUNDS:
        raise ValueError(f"message schedule must hold {ROUNDS} words, got {len(schedule)}")

    a, b, c, d, e = state.words

    for t in range(ROUNDS):
        temp = (rotl32(a, 5) + round_function(b, c, d, t) + e + round_constant(t) + schedule[t]) & ONES
        e = d
        d = c
        c = rotl32(b, 30)
        b = a
        a = temp

    return HashState(
        (state.h0 + a) & ONES,
        (state.h1 + b) & ONES,
        (state.h2 + c) & ONES,
        (state.h3 + d) & ONES,
        (state.h4 + e) & ONES,
    )
