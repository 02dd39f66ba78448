"""
Module: test_string_resources.py

Author: Michael Economou
Date: 2026-10-18

Tests for the string resources service.
"""

import pytest

from colorpick.app.services.resources import StringResources


class TestStringResources:
    def test_plain_string(self):
        assert StringResources().get_string("error_happened") == "Error happened!"

    def test_formatted_string(self):
        resources = StringResources()
        assert resources.get_string("change_color_screen_title", "Red") == "Change color: Red"
        assert resources.get_string("percentage_value", 55) == "55%"

    def test_custom_table(self):
        resources = StringResources({"greeting": "Hello {}"})
        assert resources.get_string("greeting", "world") == "Hello world"

    def test_unknown_key(self):
        with pytest.raises(KeyError, match="missing_key"):
            StringResources().get_string("missing_key")
