"""Module: __init__.py.

Author: Michael Economou
Date: 2026-10-18

Persisted screen state.
"""

from colorpick.app.state.saved_state import SavedStateStore

__all__ = ["SavedStateStore"]
