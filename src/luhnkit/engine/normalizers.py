"""
Caller-side normalizers applied by the pipeline before an engine sees a value.

Why this file exists
--------------------
The engines themselves never clean up input: a space or a lowercase letter is
a rejected symbol, full stop. People, however, paste card numbers as
"4111-1111 1111-1111" and ISINs in lowercase. The batch pipeline and the CLI
run these normalizers first (as configured), then hand the canonical form to
an engine.
"""

from __future__ import annotations

from typing import Callable, Dict, List


def normalize_spaces_dashes(s: str) -> str:
    """
    Remove spaces and dashes from a string.

    Lets rules accept user-friendly formats (hyphenated card numbers, spaced
    IMEIs) while the engines operate on a canonical representation.
    """
    return s.replace(" ", "").replace("-", "")


def normalize_upper(s: str) -> str:
    return s.upper()


def normalize_strip(s: str) -> str:
    return s.strip()


# Map normalizer names (as used in config) to callables.
NORMALIZERS: Dict[str, Callable[[str], str]] = {
    "strip": normalize_strip,
    "strip_spaces_dashes": normalize_spaces_dashes,
    "upper": normalize_upper,
}


def apply_normalizers(text: str, names: List[str]) -> str:
    """
    Apply 0..N normalizers in order. Unknown names are ignored (for forward-compat).
    """
    for n in names:
        func = NORMALIZERS.get(n)
        if func:
            text = func(text)
    return text
