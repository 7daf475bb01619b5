"""Tests for checker.events: EventChannel delivery, acknowledgment, and Lifecycle."""

from learnbraille.checker.events import EventChannel, Lifecycle, Pending


class TestPending:
    def test_payload_defaults_to_none(self):
        assert Pending().payload is None

    def test_carries_payload(self):
        assert Pending("x").payload == "x"


class TestEventChannel:
    def test_starts_disarmed(self):
        channel: EventChannel[None] = EventChannel("correct")
        assert not channel.armed
        assert channel.pending is None

    def test_arm_delivers_to_observer(self):
        channel: EventChannel[str] = EventChannel("hint")
        received = []
        channel.observe(Lifecycle(), received.append)
        channel.arm("1-2")
        assert received == [Pending("1-2")]
        assert channel.armed

    def test_disarm_clears_slot(self):
        channel: EventChannel[None] = EventChannel("correct")
        channel.arm()
        channel.disarm()
        assert not channel.armed

    def test_last_write_wins(self):
        channel: EventChannel[str] = EventChannel("hint")
        channel.arm("first")
        channel.arm("second")
        assert channel.pending == Pending("second")

    def test_late_observer_receives_pending_value(self):
        channel: EventChannel[None] = EventChannel("incorrect")
        channel.arm()
        received = []
        channel.observe(Lifecycle(), received.append)
        assert received == [Pending()]

    def test_late_observer_gets_nothing_after_acknowledgment(self):
        channel: EventChannel[None] = EventChannel("incorrect")
        first = Lifecycle("first")
        channel.observe(first, lambda pending: channel.disarm())
        channel.arm()
        first.destroy()

        received = []
        channel.observe(Lifecycle("second"), received.append)
        assert received == []

    def test_delivery_stops_after_acknowledgment(self):
        channel: EventChannel[None] = EventChannel("correct")
        calls = []

        def acknowledging(pending):
            calls.append("first")
            channel.disarm()

        channel.observe(Lifecycle(), acknowledging)
        channel.observe(Lifecycle(), lambda pending: calls.append("second"))
        channel.arm()
        assert calls == ["first"]

    def test_unacknowledged_value_reaches_every_observer(self):
        channel: EventChannel[None] = EventChannel("correct")
        calls = []
        channel.observe(Lifecycle(), lambda pending: calls.append("first"))
        channel.observe(Lifecycle(), lambda pending: calls.append("second"))
        channel.arm()
        assert calls == ["first", "second"]


class TestLifecycle:
    def test_destroy_detaches_observers(self):
        channel: EventChannel[None] = EventChannel("correct")
        lifecycle = Lifecycle()
        received = []
        channel.observe(lifecycle, received.append)
        assert channel.observer_count == 1

        lifecycle.destroy()
        channel.arm()
        assert received == []
        assert channel.observer_count == 0

    def test_destroy_keeps_pending_value(self):
        channel: EventChannel[None] = EventChannel("correct")
        lifecycle = Lifecycle()
        channel.observe(lifecycle, lambda pending: None)
        channel.arm()
        lifecycle.destroy()
        assert channel.armed

    def test_observe_on_destroyed_lifecycle_is_ignored(self):
        channel: EventChannel[None] = EventChannel("correct")
        lifecycle = Lifecycle()
        lifecycle.destroy()
        received = []
        channel.observe(lifecycle, received.append)
        channel.arm()
        assert received == []
        assert channel.observer_count == 0

    def test_destroy_is_idempotent(self):
        lifecycle = Lifecycle()
        lifecycle.destroy()
        lifecycle.destroy()
        assert lifecycle.destroyed

    def test_bind_after_destroy_detaches_immediately(self):
        lifecycle = Lifecycle()
        lifecycle.destroy()
        detached = []
        lifecycle.bind(lambda: detached.append(True))
        assert detached == [True]

    def test_only_own_observers_detached(self):
        channel: EventChannel[None] = EventChannel("correct")
        doomed, kept = Lifecycle("doomed"), Lifecycle("kept")
        received = []
        channel.observe(doomed, lambda pending: received.append("doomed"))
        channel.observe(kept, lambda pending: received.append("kept"))
        doomed.destroy()
        channel.arm()
        assert received == ["kept"]
