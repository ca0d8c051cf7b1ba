"""Luhn transform core and the streaming mixer."""

from .core import DOUBLED, Decoder, Symbols, diagnose, luhn_sum, specialize
from .mixer import Mixer

__all__ = [
    "DOUBLED",
    "Decoder",
    "Symbols",
    "diagnose",
    "luhn_sum",
    "specialize",
    "Mixer",
]
