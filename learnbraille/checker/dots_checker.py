"""
DotsChecker: the state machine that serves one dots-input task.

States:
    INPUT  the user is entering dots (initial)
    HINT   the expected dots are being shown

Transitions:
    check()       INPUT -> INPUT  arms correct | incorrect
                  HINT  -> INPUT  arms pass_hint (dismisses the hint, no check)
    soft_check()  INPUT -> INPUT  arms soft_correct on a match, nothing otherwise
                  HINT  -> HINT   nothing
    hint()        INPUT -> HINT   arms hint with the expected dots (may be None)
                  HINT  -> INPUT  arms pass_hint

Handlers run before any state change, so they observe the previous state
(the next one is implied by the transition table). A checker is never reset:
the owner builds a new one for every practice item.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from learnbraille.checker.events import EventChannel
from learnbraille.dots.types import BrailleDots

logger = logging.getLogger(__name__)

Handler = Callable[[], None]


def _noop() -> None:
    pass


class CheckerConfigurationError(Exception):
    """Raised when a checker is assembled without its mandatory collaborators."""


class CheckerState(str, Enum):
    INPUT = "INPUT"
    HINT = "HINT"


class DotsChecker:
    """
    Input-checking state machine with five acknowledged event channels.

    Parameters
    ----------
    get_entered_dots:
        Returns the dots currently entered by the user. Queried lazily, only
        when a comparison is made.
    get_expected_dots:
        Returns the expected answer, or None when none is available yet.
        None never equals any entry.
    on_check, on_soft_check, on_correct, on_soft_correct, on_incorrect,
    on_hint, on_pass_hint:
        Optional handlers, called synchronously right before the matching
        event is armed. They stay assignable after construction.
    """

    def __init__(
        self,
        get_entered_dots: Callable[[], BrailleDots],
        get_expected_dots: Callable[[], BrailleDots | None],
        *,
        on_check: Handler = _noop,
        on_soft_check: Handler = _noop,
        on_correct: Handler = _noop,
        on_soft_correct: Handler = _noop,
        on_incorrect: Handler = _noop,
        on_hint: Handler = _noop,
        on_pass_hint: Handler = _noop,
    ) -> None:
        if not callable(get_entered_dots):
            raise CheckerConfigurationError(
                f"get_entered_dots must be callable, got {get_entered_dots!r}"
            )
        if not callable(get_expected_dots):
            raise CheckerConfigurationError(
                f"get_expected_dots must be callable, got {get_expected_dots!r}"
            )
        self.get_entered_dots = get_entered_dots
        self.get_expected_dots = get_expected_dots

        self.on_check = on_check
        self.on_soft_check = on_soft_check
        self.on_correct = on_correct
        self.on_soft_correct = on_soft_correct
        self.on_incorrect = on_incorrect
        self.on_hint = on_hint
        self.on_pass_hint = on_pass_hint

        self._state = CheckerState.INPUT

        self.event_correct: EventChannel[None] = EventChannel("correct")
        self.event_soft_correct: EventChannel[None] = EventChannel("soft_correct")
        self.event_incorrect: EventChannel[None] = EventChannel("incorrect")
        self.event_hint: EventChannel[BrailleDots] = EventChannel("hint")
        self.event_pass_hint: EventChannel[None] = EventChannel("pass_hint")

    @property
    def state(self) -> CheckerState:
        return self._state

    # ── Actions ───────────────────────────────────────────────────────────────

    def check(self) -> None:
        """The user submitted the entry (next button, joystick right)."""
        self.on_check()
        if self._state == CheckerState.HINT:
            self._set_state(CheckerState.INPUT)
            self._pass_hint()
        elif self._is_correct():
            self.on_correct()
            self.event_correct.arm()
        else:
            self.on_incorrect()
            self.event_incorrect.arm()

    def soft_check(self) -> None:
        """Check on the fly, typically after every dot toggle. Silent on mismatch."""
        self.on_soft_check()
        if self._state != CheckerState.INPUT:
            return
        if self._is_correct():
            self.on_soft_correct()
            self.event_soft_correct.arm()

    def hint(self) -> None:
        """Show the expected dots, or dismiss the hint if one is shown."""
        self.on_hint()
        if self._state == CheckerState.HINT:
            self._set_state(CheckerState.INPUT)
            self._pass_hint()
        else:
            self._set_state(CheckerState.HINT)
            self.event_hint.arm(self.get_expected_dots())

    # ── Acknowledgment ────────────────────────────────────────────────────────

    def complete_correct(self) -> None:
        self.event_correct.disarm()

    def complete_soft_correct(self) -> None:
        self.event_soft_correct.disarm()

    def complete_incorrect(self) -> None:
        self.event_incorrect.disarm()

    def complete_hint(self) -> None:
        self.event_hint.disarm()

    def complete_pass_hint(self) -> None:
        self.event_pass_hint.disarm()

    # ── Internals ─────────────────────────────────────────────────────────────

    def _pass_hint(self) -> None:
        self.on_pass_hint()
        self.event_pass_hint.arm()

    def _set_state(self, state: CheckerState) -> None:
        logger.debug("DotsChecker state %s -> %s", self._state.value, state.value)
        self._state = state

    def _is_correct(self) -> bool:
        entered = self.get_entered_dots()
        expected = self.get_expected_dots()
        correct = expected is not None and entered == expected
        if correct:
            logger.info("Correct")
        else:
            logger.info(
                "Incorrect: entered = %s, expected = %s",
                entered.spelling,
                expected.spelling if expected is not None else None,
            )
        return correct
