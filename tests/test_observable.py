"""
Module: test_observable.py

Author: Michael Economou
Date: 2026-10-18

Tests for the pure Python Signal/Observable implementation.
"""

from colorpick.utils.events import Observable, Signal


class Counter(Observable):
    value_changed = Signal(int)
    reset = Signal()

    def __init__(self):
        super().__init__()
        self.value = 0

    def increment(self):
        self.value += 1
        self.value_changed.emit(self.value)


class TestSignal:
    """connect/disconnect/emit behaviour."""

    def test_emit_calls_connected_callbacks_in_order(self):
        counter = Counter()
        calls = []
        counter.value_changed.connect(lambda v: calls.append(("a", v)))
        counter.value_changed.connect(lambda v: calls.append(("b", v)))

        counter.increment()

        assert calls == [("a", 1), ("b", 1)]

    def test_connect_same_callback_twice_is_noop(self):
        counter = Counter()
        calls = []
        counter.value_changed.connect(calls.append)
        counter.value_changed.connect(calls.append)

        counter.increment()

        assert calls == [1]
        assert counter.value_changed.receiver_count() == 1

    def test_disconnect(self):
        counter = Counter()
        calls = []
        counter.value_changed.connect(calls.append)
        counter.value_changed.disconnect(calls.append)

        counter.increment()

        assert calls == []

    def test_disconnect_all(self):
        counter = Counter()
        counter.value_changed.connect(print)
        counter.value_changed.connect(repr)
        counter.value_changed.disconnect()
        assert counter.value_changed.receiver_count() == 0

    def test_signals_are_per_instance(self):
        first, second = Counter(), Counter()
        calls = []
        first.value_changed.connect(calls.append)

        second.increment()

        assert calls == []

    def test_failing_callback_does_not_block_others(self):
        counter = Counter()
        calls = []

        def broken(_value):
            raise RuntimeError("callback failure")

        counter.value_changed.connect(broken)
        counter.value_changed.connect(calls.append)

        counter.increment()

        assert calls == [1]

    def test_signal_without_arguments(self):
        counter = Counter()
        calls = []
        counter.reset.connect(lambda: calls.append("reset"))
        counter.reset.emit()
        assert calls == ["reset"]
