"""Module: __init__.py.

Author: Michael Economou
Date: 2026-10-18

Event System.

Pure Python signals and observable state cells. View models are built from
these so they stay independent of Qt; the UI layer bridges them to Qt signals.
"""

from colorpick.utils.events.observable import Observable, Signal, SignalInstance
from colorpick.utils.events.state_value import StateValue, combine_states, map_state

__all__ = ["Observable", "Signal", "SignalInstance", "StateValue", "combine_states", "map_state"]
