"""
CardSession: drives a deck of practice cards through DotsChecker.

Every card gets a fresh checker and a fresh Lifecycle for its observers; the
previous lifecycle is destroyed when the card changes. A card is left only by
a correct check. When the deck is exhausted ``current`` is None and every
check is incorrect.

The deck is read up front and every card must fit the surface cell: an 8-dot
card on a 6-dot surface raises ValueError before anything is shown.

Counters:
    n_tries    checks made while entering (dismissing a hint is not a try)
    n_correct  correct checks
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from learnbraille.checker.dots_checker import CheckerState, DotsChecker
from learnbraille.checker.events import Lifecycle
from learnbraille.checker.observers import (
    DotsDisplay,
    observe_checked_on_fly,
    observe_event_hint,
    observe_event_incorrect,
    observe_event_pass_hint,
)
from learnbraille.devices.buzzer import Buzzer
from learnbraille.devices.signal import SignalPort
from learnbraille.dots.types import BrailleDots
from learnbraille.preferences.registry import PreferenceRepository, get_preferences

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card:
    """One practice item: what is shown to the user and the dots to enter."""

    label: str
    dots: BrailleDots


def _ignore_card(card: Card | None) -> None:
    pass


def _check_cell_size(cards: list[Card], cell_size: int) -> None:
    """Raise ValueError listing every card with dots outside a *cell_size* cell."""
    errors = [
        f"card {card.label!r} raises {card.dots.spelling}"
        for card in cards
        if card.dots.raised and max(card.dots.raised) > cell_size
    ]
    if errors:
        raise ValueError(
            f"Cards do not fit a {cell_size}-dot cell:\n"
            + "\n".join(f"  • {e}" for e in errors)
        )


class CardSession:
    def __init__(
        self,
        cards: Iterable[Card],
        get_dots_state: Callable[[], DotsDisplay],
        *,
        buzzer: Buzzer | None = None,
        preferences: PreferenceRepository | None = None,
        signal_port: SignalPort | None = None,
        on_card: Callable[[Card | None], None] = _ignore_card,
        on_incorrect: Callable[[Card | None], None] = _ignore_card,
    ) -> None:
        deck = list(cards)
        _check_cell_size(deck, get_dots_state().cell_size)
        self._cards = iter(deck)
        self._get_dots_state = get_dots_state
        self._buzzer = buzzer
        self._preferences = preferences or get_preferences()
        self._signal_port = signal_port
        self._on_card = on_card
        self._on_incorrect = on_incorrect

        self.n_tries = 0
        self.n_correct = 0
        self.current: Card | None = None
        self.checker: DotsChecker
        self._lifecycle: Lifecycle | None = None
        self._closed = False

        get_dots_state().subscribe(self.soft_check)
        self._next_card()

    def __repr__(self) -> str:
        return (
            f"CardSession(current={self.current!r}, "
            f"n_correct={self.n_correct}, n_tries={self.n_tries})"
        )

    @property
    def closed(self) -> bool:
        return self._closed

    # ── User actions ──────────────────────────────────────────────────────────

    def check(self) -> None:
        if not self._closed:
            self.checker.check()

    def soft_check(self) -> None:
        if not self._closed:
            self.checker.soft_check()

    def hint(self) -> None:
        if not self._closed:
            self.checker.hint()

    def close(self) -> None:
        """Detach all observers; later actions are ignored."""
        if self._lifecycle is not None:
            self._lifecycle.destroy()
        self._closed = True

    # ── Internals ─────────────────────────────────────────────────────────────

    def _next_card(self) -> None:
        self.current = next(self._cards, None)
        logger.info("Next card: %s", self.current.label if self.current else None)
        self.checker = self._build_checker()
        self._bind(self.checker)
        dots_state = self._get_dots_state()
        dots_state.uncheck()
        dots_state.clickable(True)
        self._on_card(self.current)

    def _build_checker(self) -> DotsChecker:
        card = self.current
        checker = DotsChecker(
            get_entered_dots=lambda: self._get_dots_state().braille_dots,
            get_expected_dots=lambda: card.dots if card is not None else None,
        )

        def on_check() -> None:
            # Handlers see the pre-transition state.
            if checker.state == CheckerState.INPUT:
                self.n_tries += 1

        def on_correct() -> None:
            self.n_correct += 1

        checker.on_check = on_check
        checker.on_correct = on_correct
        return checker

    def _bind(self, checker: DotsChecker) -> None:
        if self._lifecycle is not None:
            self._lifecycle.destroy()
        label = self.current.label if self.current else "end"
        lifecycle = self._lifecycle = Lifecycle(f"card:{label}")

        observe_checked_on_fly(
            checker,
            lifecycle,
            self._get_dots_state,
            buzzer=self._buzzer,
            preferences=self._preferences,
            block=self._next_card,
        )
        observe_event_incorrect(
            checker,
            lifecycle,
            self._get_dots_state,
            buzzer=self._buzzer,
            preferences=self._preferences,
            block=lambda: self._on_incorrect(self.current),
        )
        observe_event_hint(checker, lifecycle, self._get_dots_state, signal_port=self._signal_port)
        observe_event_pass_hint(checker, lifecycle, self._get_dots_state)
