"""
BrailleDots: the raised-dot pattern of a single Braille cell.

Positions are numbered the standard way: 1-2-3 down the left column, 4-5-6
down the right column, and 7/8 for the bottom row of an eight-dot cell.
BrailleDots is frozen; two instances compare equal iff the same positions are
raised, which is exactly the comparison the checker performs.

Unicode rendering follows the U+2800 block layout:
    dot:  1  2  3  4  5  6  7  8
    bit:  0  1  2  3  4  5  6  7
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

MAX_POSITION: Final[int] = 8
BRAILLE_RANGE_START: Final[int] = 0x2800

_SPELLING_SEPARATOR: Final[str] = "-"


@dataclass(frozen=True)
class BrailleDots:
    """
    Immutable set of raised dot positions.

    Attributes:
        raised: Raised positions, each in 1..8.
    """

    raised: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        # Accept any iterable at construction but always store a frozenset.
        if not isinstance(self.raised, frozenset):
            object.__setattr__(self, "raised", frozenset(self.raised))
        for pos in self.raised:
            if not isinstance(pos, int) or isinstance(pos, bool):
                raise ValueError(f"dot position must be an int, got {pos!r}")
            if not 1 <= pos <= MAX_POSITION:
                raise ValueError(f"dot position must be in 1..{MAX_POSITION}, got {pos}")

    @classmethod
    def of(cls, *positions: int) -> BrailleDots:
        return cls(frozenset(positions))

    @classmethod
    def from_spelling(cls, spelling: str) -> BrailleDots:
        """Parse a spelling such as ``"1-2-5"``; the empty string is an empty cell."""
        spelling = spelling.strip()
        if not spelling:
            return cls()
        positions: list[int] = []
        for part in spelling.split(_SPELLING_SEPARATOR):
            part = part.strip()
            if not part.isdigit():
                raise ValueError(f"Invalid dots spelling {spelling!r}: {part!r} is not a position")
            positions.append(int(part))
        return cls(frozenset(positions))

    @classmethod
    def from_unicode(cls, char: str) -> BrailleDots:
        """Decode one character from the Braille Patterns block."""
        if len(char) != 1:
            raise ValueError(f"Expected a single Braille character, got {char!r}")
        offset = ord(char) - BRAILLE_RANGE_START
        if not 0 <= offset <= 0xFF:
            raise ValueError(f"{char!r} is outside the Braille Patterns block")
        return cls(frozenset(bit + 1 for bit in range(MAX_POSITION) if offset & (1 << bit)))

    @property
    def spelling(self) -> str:
        """Positions in ascending order, e.g. ``"1-2-5"``."""
        return _SPELLING_SEPARATOR.join(str(pos) for pos in sorted(self.raised))

    def to_unicode(self) -> str:
        mask = 0
        for pos in self.raised:
            mask |= 1 << (pos - 1)
        return chr(BRAILLE_RANGE_START + mask)

    def __contains__(self, position: object) -> bool:
        return position in self.raised

    def __len__(self) -> int:
        return len(self.raised)

    def __str__(self) -> str:
        return self.spelling
