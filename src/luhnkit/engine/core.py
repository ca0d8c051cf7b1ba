"""
The Luhn transform shared by every engine.

What this does
--------------
Walks a sequence of symbols from the rightmost one leftward, turns each symbol
into decimal digits with an engine-specific *decoder*, doubles every second
digit (folding 10..18 back to 1..9) and sums everything. The sum then answers
either "is this sequence valid?" or "which digit must be appended?".

Decoders
--------
A decoder is a plain function ``decode(code) -> tuple of digits | None``.
``code`` is the integer value of one symbol (a byte, or ``ord()`` of a str
character). The returned digits are most significant first; most decoders
return exactly one digit, the ISIN-style decoder returns two for letters.
``None`` means the symbol is outside the alphabet, which fails the whole call.

Input shapes
------------
``is_valid`` / ``check_digit`` take any length. ``is_valid_array`` /
``check_digit_array`` run through a walker specialized for one width and cached
per ``(decoder, width)``; for inputs of that width both shapes agree.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Iterator, Optional, Tuple, Union

from ..errors import (
    EmptyInputError,
    InvalidCheckDigitError,
    InvalidSymbolError,
    LuhnError,
    WidthMismatchError,
)

Symbols = Union[str, bytes, bytearray, memoryview]
Digits = Tuple[int, ...]
Decoder = Callable[[int], Optional[Digits]]
Walker = Callable[[Symbols, bool], Optional[int]]

# 2*d with 9 subtracted once it exceeds 9, i.e. the digit sum of 2*d.
DOUBLED: Digits = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)


def _reversed_codes(seq: Symbols) -> Iterator[int]:
    if isinstance(seq, str):
        return map(ord, reversed(seq))
    return reversed(seq)


def _encode(digit: int, like: Symbols) -> Union[str, bytes]:
    """Render a check digit in the same family as the input (str or bytes)."""
    if isinstance(like, str):
        return chr(48 + digit)
    return bytes((48 + digit,))


def luhn_sum(decode: Decoder, seq: Symbols, double_first: bool) -> Optional[int]:
    """
    Weighted Luhn sum of ``seq``, or ``None`` if any symbol fails to decode.

    ``double_first`` says whether the rightmost digit is doubled: ``False`` when
    the sequence already ends in its check digit, ``True`` when computing the
    digit to append.
    """
    total = 0
    double = double_first
    for code in _reversed_codes(seq):
        digits = decode(code)
        if digits is None:
            return None
        for d in reversed(digits):
            total += DOUBLED[d] if double else d
            double = not double
    return total


def _finish_valid(total: Optional[int]) -> bool:
    return total is not None and total % 10 == 0


def _finish_checksum(total: Optional[int], like: Symbols) -> Optional[Union[str, bytes]]:
    if total is None:
        return None
    return _encode((10 - total % 10) % 10, like)


def is_valid(decode: Decoder, seq: Symbols) -> bool:
    if len(seq) == 0:
        return False
    return _finish_valid(luhn_sum(decode, seq, False))


def check_digit(decode: Decoder, body: Symbols) -> Optional[Union[str, bytes]]:
    if len(body) == 0:
        return None
    return _finish_checksum(luhn_sum(decode, body, True), body)


# ---- Width-specialized walkers ---------------------------------------------------------

@lru_cache(maxsize=128)
def specialize(decode: Decoder, width: int) -> Walker:
    """
    Build a walker that only accepts sequences of exactly ``width`` symbols.

    The walker indexes from ``width - 1`` down to 0 and holds no per-symbol
    state, so a cached walker costs the same for any width.
    """
    last = width - 1

    def walk(seq: Symbols, double_first: bool) -> Optional[int]:
        if len(seq) != width:
            raise WidthMismatchError(width, len(seq))
        text = isinstance(seq, str)
        total = 0
        double = double_first
        for i in range(last, -1, -1):
            digits = decode(ord(seq[i]) if text else seq[i])
            if digits is None:
                return None
            for d in reversed(digits):
                total += DOUBLED[d] if double else d
                double = not double
        return total

    return walk


def is_valid_array(decode: Decoder, seq: Symbols, width: Optional[int] = None) -> bool:
    walk = specialize(decode, len(seq) if width is None else width)
    total = walk(seq, False)
    return len(seq) > 0 and _finish_valid(total)


def check_digit_array(
    decode: Decoder, body: Symbols, width: Optional[int] = None
) -> Optional[Union[str, bytes]]:
    walk = specialize(decode, len(body) if width is None else width)
    total = walk(body, True)
    if len(body) == 0:
        return None
    return _finish_checksum(total, body)


# ---- Diagnostics -----------------------------------------------------------------------

def diagnose(decode: Decoder, seq: Symbols) -> Optional[LuhnError]:
    """
    Return the reason ``seq`` cannot be processed, or ``None`` if every symbol
    decodes. Positions in the returned error count from the left.
    """
    if len(seq) == 0:
        return EmptyInputError()
    for position, symbol in enumerate(seq):
        code = ord(symbol) if isinstance(symbol, str) else symbol
        if decode(code) is None:
            return InvalidSymbolError(code, position)
    return None


def check_digit_or_raise(decode: Decoder, body: Symbols) -> Union[str, bytes]:
    error = diagnose(decode, body)
    if error is not None:
        raise error
    return _encode((10 - luhn_sum(decode, body, True) % 10) % 10, body)


def ensure_valid(decode: Decoder, seq: Symbols) -> None:
    error = diagnose(decode, seq)
    if error is not None:
        raise error
    if not is_valid(decode, seq):
        raise InvalidCheckDigitError(seq)
