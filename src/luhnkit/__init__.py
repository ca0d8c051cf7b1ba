"""
Luhn check digits over decimal and alphanumeric input.

Three engines share one transform:

- ``luhnkit.decimal``   digits only (cards, IMEI, SIN)
- ``luhnkit.alphanum``  digits and ``A..Z``, letters folded mod 10
- ``luhnkit.expanded``  digits and ``A..Z``, letters expanded to two digits (ISIN)

The alphanumeric engine's operations are also available at package level.
"""

from . import alphanum, decimal, expanded
from .alphanum import checksum, checksum_array, valid, valid_array
from .engine.mixer import Mixer
from .errors import (
    EmptyInputError,
    InvalidCheckDigitError,
    InvalidSymbolError,
    LuhnError,
    WidthMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    "alphanum",
    "decimal",
    "expanded",
    "checksum",
    "checksum_array",
    "valid",
    "valid_array",
    "Mixer",
    "EmptyInputError",
    "InvalidCheckDigitError",
    "InvalidSymbolError",
    "LuhnError",
    "WidthMismatchError",
]
