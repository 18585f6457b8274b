class Sha1Error(ValueError):
    """Base class for recoverable errors raised by the digest core."""


class BlockSizeError(Sha1Error):
    def __init__(self, size: int, expected: str = "a multiple of 64") -> None:
        super().__init__(f"bad message size: {size} bytes is not {expected}")
        self.size = size


class MessageTooLargeError(Sha1Error):
    def __init__(self, length: int) -> None:
        super().__init__(f"message of {length} bytes exceeds the 2**64 bit limit")
        self.length = length


class DigestFinalizedError(Sha1Error):
    def __init__(self) -> None:
        super().__init__("digest already finalized, start a new hasher")
