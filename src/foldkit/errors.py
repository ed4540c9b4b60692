"""Error types raised by foldkit."""


class FoldkitError(Exception):
    """Base class for all foldkit errors."""


class InvalidArgument(FoldkitError, ValueError):
    """Raised when an argument has the wrong type or an unusable value."""


class LengthMismatch(FoldkitError, ValueError):
    """Raised when a strict zip receives sequences of different lengths."""

    def __init__(self, left_length: int, right_length: int):
        super().__init__(
            f"Sequences differ in length: {left_length} != {right_length}"
        )
        self.left_length = left_length
        self.right_length = right_length
