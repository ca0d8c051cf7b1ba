"""
Luhn check digits over decimal digits and uppercase Latin letters.

Letters take their base-36 value (``'A'`` = 10 ... ``'Z'`` = 35) folded to
its last decimal digit, so ``'A'`` weighs like ``'0'``, ``'B'`` like ``'1'`` and
``'Z'`` like ``'5'``. Each symbol keeps exactly one weighting position. For the
ISIN rule where a letter contributes both of its digits, see
``luhnkit.expanded``.

Lowercase letters and anything outside ``'0'..'9'``/``'A'..'Z'`` are rejected.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from .engine import core
from .engine.core import Digits, Symbols

_TABLE: Dict[int, Digits] = {48 + d: (d,) for d in range(10)}
_TABLE.update({65 + i: ((10 + i) % 10,) for i in range(26)})


def decode(code: int) -> Optional[Digits]:
    return _TABLE.get(code)


def valid(seq: Symbols) -> bool:
    return core.is_valid(decode, seq)


def valid_array(seq: Symbols, width: Optional[int] = None) -> bool:
    """Same answer as ``valid`` for sequences of ``width`` symbols (default: ``len(seq)``)."""
    return core.is_valid_array(decode, seq, width)


def checksum(body: Symbols) -> Optional[Union[str, bytes]]:
    """Check digit for ``body``: always a decimal digit, or None on empty/invalid input."""
    return core.check_digit(decode, body)


def checksum_array(body: Symbols, width: Optional[int] = None) -> Optional[Union[str, bytes]]:
    return core.check_digit_array(decode, body, width)


def checksum_or_raise(body: Symbols) -> Union[str, bytes]:
    return core.check_digit_or_raise(decode, body)


def ensure_valid(seq: Symbols) -> None:
    core.ensure_valid(decode, seq)
