"""
Luhn check digits with letters expanded to two digits (ISIN, ISO 6166).

Every letter is replaced by the two decimal digits of its base-36 value
(``'A'`` -> ``1 0``, ``'U'`` -> ``3 0``) and each of those digits takes its
own weighting position, exactly as if the identifier had been rewritten as a
longer decimal string first. Digits behave as in ``luhnkit.decimal``.

    >>> from luhnkit import expanded
    >>> expanded.valid("US38259P5089")
    True
    >>> expanded.checksum("US594918104")
    '5'
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from .engine import core
from .engine.core import Digits, Symbols

_TABLE: Dict[int, Digits] = {48 + d: (d,) for d in range(10)}
_TABLE.update({65 + i: divmod(10 + i, 10) for i in range(26)})


def decode(code: int) -> Optional[Digits]:
    return _TABLE.get(code)


def valid(seq: Symbols) -> bool:
    return core.is_valid(decode, seq)


def valid_array(seq: Symbols, width: Optional[int] = None) -> bool:
    return core.is_valid_array(decode, seq, width)


def checksum(body: Symbols) -> Optional[Union[str, bytes]]:
    return core.check_digit(decode, body)


def checksum_array(body: Symbols, width: Optional[int] = None) -> Optional[Union[str, bytes]]:
    return core.check_digit_array(decode, body, width)


def checksum_or_raise(body: Symbols) -> Union[str, bytes]:
    return core.check_digit_or_raise(decode, body)


def ensure_valid(seq: Symbols) -> None:
    core.ensure_valid(decode, seq)
