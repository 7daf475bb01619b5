"""
BrailleDotsState: in-memory model of the on-screen dot toggles.

One toggle per cell position. ``toggle()`` is the user interaction: it is the
only method that notifies subscribers, so programmatic updates (display,
uncheck) never trigger a soft check. ``display()`` shows dots the user did not
enter, so it locks the toggles until ``clickable(True)``.
"""

from __future__ import annotations

from collections.abc import Callable

from learnbraille.dots.types import BrailleDots

_CELL_SIZES = (6, 8)


class BrailleDotsState:
    def __init__(self, cell_size: int = 6) -> None:
        if cell_size not in _CELL_SIZES:
            raise ValueError(f"cell_size must be one of {_CELL_SIZES}, got {cell_size}")
        self.cell_size = cell_size
        self._checked: set[int] = set()
        self._clickable = True
        self._listeners: list[Callable[[], None]] = []

    def __repr__(self) -> str:
        return f"BrailleDotsState(cell_size={self.cell_size}, dots={self.spelling!r})"

    @property
    def braille_dots(self) -> BrailleDots:
        return BrailleDots(frozenset(self._checked))

    @property
    def spelling(self) -> str:
        return self.braille_dots.spelling

    @property
    def is_clickable(self) -> bool:
        return self._clickable

    def is_checked(self, position: int) -> bool:
        self._check_position(position)
        return position in self._checked

    def display(self, dots: BrailleDots) -> None:
        """Check exactly the raised positions of *dots* and lock the toggles."""
        for pos in dots.raised:
            self._check_position(pos)
        self._checked = set(dots.raised)
        self._clickable = False

    def uncheck(self) -> None:
        self._checked.clear()

    def clickable(self, flag: bool) -> None:
        self._clickable = flag

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Call *listener* after every user toggle."""
        self._listeners.append(listener)

    def toggle(self, position: int) -> None:
        """User tap on one toggle. Ignored while the surface is not clickable."""
        self._check_position(position)
        if not self._clickable:
            return
        if position in self._checked:
            self._checked.remove(position)
        else:
            self._checked.add(position)
        for listener in list(self._listeners):
            listener()

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= self.cell_size:
            raise ValueError(f"position must be in 1..{self.cell_size}, got {position}")
