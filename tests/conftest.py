"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-18

Global pytest configuration and fixtures for the colorpick test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import sys

# Add project root to sys.path so colorpick can be imported from a checkout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from colorpick.app.services.resources import StringResources
from colorpick.app.state import SavedStateStore
from colorpick.domain.named_color import NamedColor
from mocks import FakeColorsRepository, RecordingNavigator, RecordingToasts


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ

    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")

        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture
def red():
    return NamedColor(1, "Red", 0xFFFF0000)


@pytest.fixture
def blue():
    return NamedColor(2, "Blue", 0xFF0000FF)


@pytest.fixture
def colors(red, blue):
    return [red, blue]


@pytest.fixture
def repository(colors):
    """Fake repository answering immediately with Red and Blue."""
    return FakeColorsRepository(colors)


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def toasts():
    return RecordingToasts()


@pytest.fixture
def resources():
    return StringResources()


@pytest.fixture
def saved_state():
    """In-memory saved state store."""
    return SavedStateStore()
