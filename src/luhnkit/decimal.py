"""
Luhn check digits over decimal-only input.

Covers credit-card numbers, IMEI and SIN. Only ``'0'..'9'`` is accepted; any
other symbol (including letters, so an ISIN is rejected even when its check
digit is right) makes ``valid`` return False and ``checksum`` return None.

    >>> from luhnkit import decimal
    >>> decimal.valid("4012888888881881")
    True
    >>> decimal.valid(b"US5949181045")
    False
    >>> decimal.checksum("401288888888188")
    '1'
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from .engine import core
from .engine.core import Digits, Symbols

_TABLE: Dict[int, Digits] = {48 + d: (d,) for d in range(10)}


def decode(code: int) -> Optional[Digits]:
    return _TABLE.get(code)


def valid(seq: Symbols) -> bool:
    """True if ``seq`` is all decimal digits and its last digit is a correct Luhn check digit."""
    return core.is_valid(decode, seq)


def valid_array(seq: Symbols, width: Optional[int] = None) -> bool:
    """
    Same answer as ``valid``, through a walker specialized for ``width`` symbols.

    ``width`` defaults to ``len(seq)``; passing a different length raises
    ``WidthMismatchError``.
    """
    return core.is_valid_array(decode, seq, width)


def checksum(body: Symbols) -> Optional[Union[str, bytes]]:
    """
    Check digit to append to ``body``.

    Returns a one-character str for str input and a one-byte bytes otherwise,
    so ``body + checksum(body)`` is always valid. None if ``body`` is empty or
    holds a non-digit.
    """
    return core.check_digit(decode, body)


def checksum_array(body: Symbols, width: Optional[int] = None) -> Optional[Union[str, bytes]]:
    return core.check_digit_array(decode, body, width)


def checksum_or_raise(body: Symbols) -> Union[str, bytes]:
    """Like ``checksum`` but raises ``EmptyInputError`` / ``InvalidSymbolError``."""
    return core.check_digit_or_raise(decode, body)


def ensure_valid(seq: Symbols) -> None:
    """Raise a ``LuhnError`` subclass describing why ``seq`` is not valid."""
    core.ensure_valid(decode, seq)
