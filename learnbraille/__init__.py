"""
learnbraille: dots-input checking for Braille practice and lessons.

    from learnbraille import BrailleDots, DotsChecker

    checker = DotsChecker(
        get_entered_dots=lambda: dots_state.braille_dots,
        get_expected_dots=lambda: BrailleDots.from_spelling("1-2"),
    )
"""

from learnbraille.checker import CheckerState, DotsChecker, Lifecycle
from learnbraille.dots import BrailleDots
from learnbraille.preferences import PreferenceRepository, get_preferences

__all__ = [
    "BrailleDots",
    "DotsChecker",
    "CheckerState",
    "Lifecycle",
    "PreferenceRepository",
    "get_preferences",
]

__version__ = "0.1.0"
