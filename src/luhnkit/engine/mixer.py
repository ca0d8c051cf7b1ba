"""
Streaming Luhn accumulator for input that arrives one digit at a time.

Useful when the number is embedded in formatting ("4111 1111 1111 1111") and
you would rather not build a cleaned-up copy first: push the digits you care
about and ask for the result at the end.

Luhn weights depend on the distance from the *right* end, which is unknown
while digits are still arriving. The mixer therefore keeps two running tallies,
one per parity, and swaps them on every push. At any point the tally holding
the most recent digit is "position 0", so both the validation reading (double
the other tally) and the checksum reading (double this one) are available.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class _Tally:
    total: int = 0
    five_or_higher: int = 0  # digits that overflow past 9 when doubled

    def doubled(self) -> int:
        # 2*d - 9 for every d >= 5
        return self.total * 2 - self.five_or_higher * 9


@dataclass
class Mixer:
    """
    Push decimal digits left to right, read ``valid()`` or ``checksum()``.

    Letters of an alphanumeric identifier are pushed as the two digits of
    their base-36 value: ``'A'`` is ``1`` then ``0``.
    """

    _current: _Tally = field(default_factory=_Tally)
    _previous: _Tally = field(default_factory=_Tally)
    _count: int = 0

    def push(self, digit: int) -> None:
        if not 0 <= digit <= 9:
            raise ValueError(f"digit out of range 0..9: {digit!r}")
        if digit >= 5:
            self._current.five_or_higher += 1
        self._current.total += digit
        self._current, self._previous = self._previous, self._current
        self._count += 1

    def __len__(self) -> int:
        return self._count

    def valid(self) -> bool:
        """True if the pushed digits end in a correct check digit."""
        if not self._count:
            return False
        return (self._current.doubled() + self._previous.total) % 10 == 0

    def checksum(self) -> Optional[str]:
        """The digit to append to what has been pushed, or None if nothing was."""
        if not self._count:
            return None
        total = self._previous.doubled() + self._current.total
        return chr(48 + (10 - total % 10) % 10)

    @classmethod
    def from_text(cls, text: str, separators: str = " -") -> Optional["Mixer"]:
        """
        Push every digit of ``text``, skipping ``separators``.

        Returns None if ``text`` holds anything else.
        """
        mixer = cls()
        for ch in text:
            if "0" <= ch <= "9":
                mixer.push(ord(ch) - 48)
            elif ch not in separators:
                return None
        return mixer
