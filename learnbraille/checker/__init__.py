"""
Dots checker: the input-checking state machine and its event bindings.

DotsChecker owns the INPUT/HINT state and five acknowledged event channels.
The observers module wires those channels to haptics and the dots surface.
"""

from .dots_checker import CheckerConfigurationError, CheckerState, DotsChecker
from .events import EventChannel, Lifecycle, Pending
from .observers import (
    DotsDisplay,
    observe_checked_on_fly,
    observe_event_correct,
    observe_event_hint,
    observe_event_incorrect,
    observe_event_pass_hint,
    observe_event_soft_correct,
)

__all__ = [
    # State machine
    "DotsChecker",
    "CheckerState",
    "CheckerConfigurationError",
    # Channels
    "EventChannel",
    "Pending",
    "Lifecycle",
    # Bindings
    "DotsDisplay",
    "observe_checked_on_fly",
    "observe_event_correct",
    "observe_event_soft_correct",
    "observe_event_incorrect",
    "observe_event_hint",
    "observe_event_pass_hint",
]
