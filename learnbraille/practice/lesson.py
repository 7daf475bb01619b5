"""
LessonInputStep: one "enter these dots" step of a lesson.

The step shows its expected dots, then clears and unlocks the surface for the
user's entry. Unlike a practice card there is no soft check: the entry is
judged only when the user checks. ``user_touched_dots`` records whether the
user tapped any toggle, so the owner can tell an untouched "next" from a
wrong answer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from learnbraille.checker.dots_checker import DotsChecker
from learnbraille.checker.events import Lifecycle
from learnbraille.checker.observers import (
    DotsDisplay,
    observe_event_correct,
    observe_event_hint,
    observe_event_incorrect,
    observe_event_pass_hint,
)
from learnbraille.devices.buzzer import Buzzer
from learnbraille.devices.signal import SignalPort
from learnbraille.dots.types import BrailleDots
from learnbraille.preferences.registry import PreferenceRepository, get_preferences

logger = logging.getLogger(__name__)

INFO_TEMPLATE = "Enter dots {spelling}"


@dataclass(frozen=True)
class InputDotsStep:
    title: str
    dots: BrailleDots
    text: str | None = None

    @property
    def info(self) -> str:
        """The step text, or a prompt spelling out the dots."""
        if self.text is not None:
            return self.text
        return INFO_TEMPLATE.format(spelling=self.dots.spelling)


def _ignore() -> None:
    pass


def _ignore_touched(user_touched_dots: bool) -> None:
    pass


class LessonInputStep:
    def __init__(
        self,
        step: InputDotsStep,
        get_dots_state: Callable[[], DotsDisplay],
        *,
        buzzer: Buzzer | None = None,
        preferences: PreferenceRepository | None = None,
        signal_port: SignalPort | None = None,
        on_correct: Callable[[], None] = _ignore,
        on_incorrect: Callable[[bool], None] = _ignore_touched,
    ) -> None:
        dots_state = get_dots_state()
        if step.dots.raised and max(step.dots.raised) > dots_state.cell_size:
            raise ValueError(
                f"Step {step.title!r} raises {step.dots.spelling}, "
                f"which does not fit a {dots_state.cell_size}-dot cell"
            )

        self.step = step
        self._get_dots_state = get_dots_state
        self._on_correct = on_correct
        self._on_incorrect = on_incorrect
        self.passed = False
        self.user_touched_dots = False
        self._closed = False

        logger.info("Start input dots step: %s", step.title)
        dots_state.display(step.dots)
        dots_state.uncheck()
        dots_state.clickable(True)
        dots_state.subscribe(self._touch)

        self.checker = DotsChecker(
            get_entered_dots=lambda: self._get_dots_state().braille_dots,
            get_expected_dots=lambda: step.dots,
        )
        self._lifecycle = Lifecycle(f"lesson:{step.title}")
        preferences = preferences or get_preferences()
        observe_event_correct(
            self.checker,
            self._lifecycle,
            get_dots_state,
            buzzer=buzzer,
            preferences=preferences,
            block=self._handle_correct,
        )
        observe_event_incorrect(
            self.checker,
            self._lifecycle,
            get_dots_state,
            buzzer=buzzer,
            preferences=preferences,
            block=lambda: self._on_incorrect(self.user_touched_dots),
        )
        observe_event_hint(self.checker, self._lifecycle, get_dots_state, signal_port=signal_port)
        observe_event_pass_hint(self.checker, self._lifecycle, get_dots_state)

    def __repr__(self) -> str:
        return (
            f"LessonInputStep(title={self.step.title!r}, passed={self.passed}, "
            f"user_touched_dots={self.user_touched_dots})"
        )

    @property
    def info(self) -> str:
        return self.step.info

    @property
    def closed(self) -> bool:
        return self._closed

    def check(self) -> None:
        if not self._closed:
            self.checker.check()

    def hint(self) -> None:
        if not self._closed:
            self.checker.hint()

    def close(self) -> None:
        """Detach all observers; later actions and toggles are ignored."""
        self._lifecycle.destroy()
        self._closed = True

    def _touch(self) -> None:
        if not self._closed:
            self.user_touched_dots = True

    def _handle_correct(self) -> None:
        self.passed = True
        self._on_correct()
