from __future__ import annotations

from dataclasses import astuple, dataclass

from sha1sum.constants import INITIAL_STATE, ONES


@dataclass(frozen=True)
class HashState:
    h0: int
    h1: int
    h2: int
    h3: int
    h4: int

    def __post_init__(self) -> None:
        for word in astuple(self):
            if not isinstance(word, int) or isinstance(word, bool):
                raise TypeError(f"hash state words must be int, not {type(word).__name__}")
            if not 0 <= word <= ONES:
                raise ValueError(f"hash state word out of 32-bit range: {word:#x}")

    @classmethod
    def initial(cls) -> "HashState":
        return cls(*INITIAL_STATE)

    @classmethod
    def from_words(cls, *words: int) -> "HashState":
        if len(words) != 5:
            raise ValueError(f"hash state needs 5 words, got {len(words)}")
        return cls(*words)

    @property
    def words(self) -> tuple[int, int, int, int, int]:
        return astuple(self)

    def to_bytes(self) -> bytes:
        return b"".join(word.to_bytes(4, "big") for word in self.words)

    def hexdigest(self) -> str:
        return "".join(f"{word:08x}" for word in self.words)
