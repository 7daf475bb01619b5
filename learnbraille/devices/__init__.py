from .buzzer import Buzzer, checked_buzz
from .signal import QueueSignalPort, SignalPort

__all__ = [
    "Buzzer",
    "checked_buzz",
    "SignalPort",
    "QueueSignalPort",
]
