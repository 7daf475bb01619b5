"""
Event-to-effect bindings for DotsChecker.

Each ``observe_event_*`` function attaches one observer to one checker channel
for the lifetime of a Lifecycle. When the event fires, the observer runs the
canonical side effects in a fixed order, then the caller's block, then
acknowledges the event:

    correct        buzz(correct)    uncheck              block()          complete
    soft_correct   buzz(correct)                         block()          complete
    incorrect      buzz(incorrect)  uncheck              block()          complete
    hint           display(dots)    signal_port.try_send block(dots)      complete
    pass_hint      uncheck          clickable(True)      block()          complete

``get_dots_state`` is a getter rather than a surface because the surface can
be re-created while the checker survives; the observer always acts on the
current one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from learnbraille.checker.dots_checker import DotsChecker
from learnbraille.checker.events import Lifecycle, Pending
from learnbraille.devices.buzzer import Buzzer, checked_buzz
from learnbraille.devices.signal import SignalPort
from learnbraille.dots.types import BrailleDots
from learnbraille.preferences.registry import PreferenceRepository, get_preferences

logger = logging.getLogger(__name__)

Block = Callable[[], None]


def _noop() -> None:
    pass


def _noop_dots(dots: BrailleDots) -> None:
    pass


@runtime_checkable
class DotsDisplay(Protocol):
    """
    The on-screen dot toggles, as seen by the binding layer.

    ``display()`` locks the toggles; ``clickable(True)`` unlocks them. Dots
    outside ``cell_size`` cannot be displayed, so callers must not expect them.
    """

    cell_size: int

    @property
    def braille_dots(self) -> BrailleDots: ...

    @property
    def spelling(self) -> str: ...

    def display(self, dots: BrailleDots) -> None: ...

    def uncheck(self) -> None: ...

    def clickable(self, flag: bool) -> None: ...

    def subscribe(self, listener: Callable[[], None]) -> None: ...


def observe_checked_on_fly(
    checker: DotsChecker,
    lifecycle: Lifecycle,
    get_dots_state: Callable[[], DotsDisplay],
    buzzer: Buzzer | None = None,
    preferences: PreferenceRepository | None = None,
    block: Block = _noop,
    soft_block: Block = _noop,
) -> None:
    """
    Attach correct and soft-correct observers according to the check-on-the-fly mode.

    On: soft_correct buzzes and runs *soft_block* as soon as the entry matches;
    correct (reachable only through check()) runs *block* without buzzing again.

    Off: correct buzzes and runs *soft_block* then *block*; soft_correct is
    acknowledged without any feedback.
    """
    preferences = preferences or get_preferences()
    if preferences.input_on_fly_check:
        observe_event_correct(
            checker, lifecycle, get_dots_state, buzzer=None, preferences=preferences, block=block
        )
        observe_event_soft_correct(
            checker, lifecycle, buzzer=buzzer, preferences=preferences, block=soft_block
        )
    else:

        def on_correct() -> None:
            soft_block()
            block()

        observe_event_correct(
            checker, lifecycle, get_dots_state, buzzer=buzzer, preferences=preferences, block=on_correct
        )
        _silence_soft_correct(checker, lifecycle)


def observe_event_correct(
    checker: DotsChecker,
    lifecycle: Lifecycle,
    get_dots_state: Callable[[], DotsDisplay],
    buzzer: Buzzer | None = None,
    preferences: PreferenceRepository | None = None,
    block: Block = _noop,
) -> None:
    preferences = preferences or get_preferences()

    def observer(pending: Pending[None]) -> None:
        logger.info("Handle correct")
        checked_buzz(buzzer, preferences.correct_buzz_pattern)
        get_dots_state().uncheck()
        block()
        checker.complete_correct()

    checker.event_correct.observe(lifecycle, observer)


def observe_event_soft_correct(
    checker: DotsChecker,
    lifecycle: Lifecycle,
    buzzer: Buzzer | None = None,
    preferences: PreferenceRepository | None = None,
    block: Block = _noop,
) -> None:
    """The entry is left on screen: the user is still mid-entry."""
    preferences = preferences or get_preferences()

    def observer(pending: Pending[None]) -> None:
        logger.info("Handle soft correct")
        checked_buzz(buzzer, preferences.correct_buzz_pattern)
        block()
        checker.complete_soft_correct()

    checker.event_soft_correct.observe(lifecycle, observer)


def observe_event_incorrect(
    checker: DotsChecker,
    lifecycle: Lifecycle,
    get_dots_state: Callable[[], DotsDisplay],
    buzzer: Buzzer | None = None,
    preferences: PreferenceRepository | None = None,
    block: Block = _noop,
) -> None:
    preferences = preferences or get_preferences()

    def observer(pending: Pending[None]) -> None:
        logger.info("Handle incorrect: entered = %s", get_dots_state().spelling)
        checked_buzz(buzzer, preferences.incorrect_buzz_pattern)
        get_dots_state().uncheck()
        block()
        checker.complete_incorrect()

    checker.event_incorrect.observe(lifecycle, observer)


def observe_event_hint(
    checker: DotsChecker,
    lifecycle: Lifecycle,
    get_dots_state: Callable[[], DotsDisplay],
    signal_port: SignalPort | None = None,
    block: Callable[[BrailleDots], None] = _noop_dots,
) -> None:
    """
    Show the expected dots over the user's entry and mirror them to *signal_port*.

    A hint armed without expected dots (nothing loaded yet) is acknowledged
    without showing anything. Expected dots must fit the surface cell;
    CardSession checks this before a card is played.
    """

    def observer(pending: Pending[BrailleDots]) -> None:
        expected = pending.payload
        if expected is None:
            logger.info("Hint requested with no expected dots")
            checker.complete_hint()
            return
        logger.info("Handle hint")
        get_dots_state().display(expected)
        _send_signal(signal_port, expected)
        block(expected)
        checker.complete_hint()

    checker.event_hint.observe(lifecycle, observer)


def observe_event_pass_hint(
    checker: DotsChecker,
    lifecycle: Lifecycle,
    get_dots_state: Callable[[], DotsDisplay],
    block: Block = _noop,
) -> None:
    def observer(pending: Pending[None]) -> None:
        logger.info("Handle pass hint")
        dots_state = get_dots_state()
        dots_state.uncheck()
        dots_state.clickable(True)
        block()
        checker.complete_pass_hint()

    checker.event_pass_hint.observe(lifecycle, observer)


def _silence_soft_correct(checker: DotsChecker, lifecycle: Lifecycle) -> None:
    def observer(pending: Pending[None]) -> None:
        checker.complete_soft_correct()

    checker.event_soft_correct.observe(lifecycle, observer)


def _send_signal(signal_port: SignalPort | None, dots: BrailleDots) -> None:
    if signal_port is None:
        return
    try:
        sent = signal_port.try_send(dots)
    except Exception:
        logger.exception("Signal port failed to send %s", dots.spelling)
        return
    if not sent:
        logger.debug("Signal port dropped %s", dots.spelling)
