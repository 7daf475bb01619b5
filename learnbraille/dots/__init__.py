from .types import BRAILLE_RANGE_START, MAX_POSITION, BrailleDots

__all__ = [
    "BrailleDots",
    "MAX_POSITION",
    "BRAILLE_RANGE_START",
]
