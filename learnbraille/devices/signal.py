"""
Signal port towards an auxiliary Braille trainer device.

The hint binding mirrors the revealed dots to the port. Sending is
best-effort: ``try_send`` never blocks and reports failure by returning
False.
"""

from __future__ import annotations

import queue
from typing import Protocol, runtime_checkable

from learnbraille.dots.types import BrailleDots


@runtime_checkable
class SignalPort(Protocol):
    def try_send(self, dots: BrailleDots) -> bool: ...


class QueueSignalPort:
    """
    SignalPort backed by a bounded queue, drained by whatever talks to the device.

    ``maxsize`` of 0 means unbounded, as with queue.Queue.
    """

    def __init__(self, maxsize: int = 16) -> None:
        self._queue: queue.Queue[BrailleDots] = queue.Queue(maxsize=maxsize)

    def try_send(self, dots: BrailleDots) -> bool:
        try:
            self._queue.put_nowait(dots)
        except queue.Full:
            return False
        return True

    def drain(self) -> list[BrailleDots]:
        """Return every queued value in send order and empty the queue."""
        sent: list[BrailleDots] = []
        while True:
            try:
                sent.append(self._queue.get_nowait())
            except queue.Empty:
                return sent
