from blinker import Signal
from typing import Dict


class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so bound methods of short-lived owners still fire.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# NAVIGATION
# ============================================================================
EVENT_NAVIGATE_REQUEST = "navigate_request"        # payload: direction=NavigationDirection, source=str
EVENT_PANEL_TRANSITION = "panel_transition"        # payload: transition=PanelTransition


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_TRANSITION_COMPLETE = "transition_complete"  # payload: from_scene=str, to_scene=str, edge=Edge
