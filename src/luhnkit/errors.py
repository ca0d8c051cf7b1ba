"""Exception types for the raising channel of the Luhn engines.

The plain operations (``valid``, ``checksum`` and their array variants) never
raise on bad input; they answer ``False`` / ``None``. Callers that need to know
*why* a sequence was rejected use ``checksum_or_raise()`` / ``ensure_valid()``,
which raise the types below.
"""

from __future__ import annotations


class LuhnError(ValueError):
    """Base class for every rejection reported by luhnkit."""


class EmptyInputError(LuhnError):
    """Raised when a checksum is requested for an empty body."""

    def __init__(self) -> None:
        super().__init__("empty input has no check digit")


class InvalidSymbolError(LuhnError):
    """Raised when a symbol falls outside the engine alphabet."""

    def __init__(self, code: int, position: int) -> None:
        self.code = code
        self.position = position
        super().__init__(f"invalid symbol {self.symbol!r} at position {position}")

    @property
    def symbol(self) -> str:
        return chr(self.code)


class InvalidCheckDigitError(LuhnError):
    """Raised when every symbol decodes but the weighted sum is not 0 mod 10."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"check digit mismatch in {value!r}")


class WidthMismatchError(LuhnError):
    """Raised when an array variant gets a sequence of the wrong length."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} symbols, got {actual}")
