"""
Single-slot event channels with explicit acknowledgment.

An EventChannel holds at most one Pending trigger. Arming it delivers the
trigger synchronously to every live observer; the observer that handles it
acknowledges by calling the checker's matching ``complete_*`` operation,
which empties the slot. Observers attached while a trigger is still pending
receive it immediately, so a re-created screen picks up an event that was
never handled, and never sees one that was.

Observers are bound to a Lifecycle. Destroying the lifecycle detaches all of
its observers; whatever is still pending stays in the slot and is discarded
together with the checker.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Pending(Generic[T]):
    """An armed trigger. ``payload`` is only meaningful for the hint channel."""

    payload: T | None = None


Observer = Callable[[Pending[T]], None]


class Lifecycle:
    """Owner of a group of observer subscriptions (one per screen instance)."""

    def __init__(self, name: str = "lifecycle") -> None:
        self.name = name
        self._destroyed = False
        self._detachers: list[Callable[[], None]] = []

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def bind(self, detach: Callable[[], None]) -> None:
        """Register *detach* to run when this lifecycle is destroyed."""
        if self._destroyed:
            detach()
            return
        self._detachers.append(detach)

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        detachers, self._detachers = self._detachers, []
        for detach in detachers:
            detach()
        logger.debug("Lifecycle %r destroyed, %d subscriptions detached", self.name, len(detachers))


class EventChannel(Generic[T]):
    """
    One observable slot holding a Pending trigger or nothing.

    Arming while a trigger is already pending overwrites it. Delivery of one
    trigger stops as soon as it has been acknowledged, so handling code runs at
    most once per arming even with several observers attached.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._pending: Pending[T] | None = None
        self._observers: list[tuple[Lifecycle, Observer[T]]] = []

    def __repr__(self) -> str:
        return f"EventChannel({self.name!r}, pending={self._pending!r})"

    @property
    def pending(self) -> Pending[T] | None:
        return self._pending

    @property
    def armed(self) -> bool:
        return self._pending is not None

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def observe(self, lifecycle: Lifecycle, observer: Observer[T]) -> None:
        """Attach *observer* for the lifetime of *lifecycle*."""
        if lifecycle.destroyed:
            logger.debug("Ignoring observer for %r: lifecycle %r is destroyed", self.name, lifecycle.name)
            return
        entry = (lifecycle, observer)
        self._observers.append(entry)
        lifecycle.bind(lambda: self._detach(entry))
        if self._pending is not None:
            observer(self._pending)

    def arm(self, payload: T | None = None) -> None:
        pending: Pending[T] = Pending(payload)
        self._pending = pending
        self._dispatch(pending)

    def disarm(self) -> None:
        self._pending = None

    def _dispatch(self, pending: Pending[T]) -> None:
        for lifecycle, observer in list(self._observers):
            # Acknowledged (or re-armed) by an earlier observer.
            if self._pending is not pending:
                break
            if lifecycle.destroyed:
                continue
            observer(pending)

    def _detach(self, entry: tuple[Lifecycle, Observer[T]]) -> None:
        if entry in self._observers:
            self._observers.remove(entry)
