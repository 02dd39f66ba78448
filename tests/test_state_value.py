"""
Module: test_state_value.py

Author: Michael Economou
Date: 2026-10-18

Tests for observable state cells and their combinations.
"""

import pytest

from colorpick.utils.events import StateValue, combine_states, map_state


class TestStateValue:
    """StateValue emits on real changes only."""

    def test_initial_value(self):
        assert StateValue(3).value == 3

    def test_assignment_emits_new_value(self):
        state = StateValue(1)
        received = []
        state.value_changed.connect(received.append)

        state.value = 2

        assert state.value == 2
        assert received == [2]

    def test_equal_assignment_does_not_emit(self):
        state = StateValue((1, 2))
        received = []
        state.value_changed.connect(received.append)

        state.value = (1, 2)

        assert received == []


class TestCombineStates:
    """Derived cells recompute from a snapshot of every source."""

    def test_initial_value_is_computed(self):
        a, b = StateValue(1), StateValue(2)
        total = combine_states((a, b), lambda x, y: x + y)
        assert total.value == 3

    def test_recomputes_on_any_source_change(self):
        a, b, c = StateValue(1), StateValue(2), StateValue(3)
        total = combine_states((a, b, c), lambda x, y, z: x + y + z)
        received = []
        total.value_changed.connect(received.append)

        a.value = 10
        c.value = 30

        assert total.value == 42
        assert received == [15, 42]

    def test_unchanged_result_does_not_emit(self):
        a, b = StateValue(1), StateValue(2)
        larger = combine_states((a, b), max)
        received = []
        larger.value_changed.connect(received.append)

        a.value = 0

        assert larger.value == 2
        assert received == []

    def test_derived_state_is_read_only(self):
        derived = combine_states((StateValue(1),), lambda x: x)
        with pytest.raises(AttributeError):
            derived.value = 5

    def test_chained_map(self):
        source = StateValue("red")
        upper = map_state(source, str.upper)
        title = map_state(upper, lambda name: f"Color: {name}")

        source.value = "blue"

        assert title.value == "Color: BLUE"
