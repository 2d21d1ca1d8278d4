"""
Navigator Module
================
Turns previous/next requests into panel transitions.

Each move advances the circular selector, picks the edge the outgoing
panel leaves through, and publishes exactly one PanelTransition on the
event bus. The renderer animates whatever it receives.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from .events import EventBus, EVENT_NAVIGATE_REQUEST, EVENT_PANEL_TRANSITION
from .selector import CircularSelector

logger = logging.getLogger(__name__)


class NavigationDirection(Enum):
    """Direction of a navigation request."""
    FORWARD = auto()
    BACKWARD = auto()


class Edge(Enum):
    """Layout-relative screen edge."""
    LEADING = auto()
    TRAILING = auto()

    @property
    def opposite(self) -> 'Edge':
        return Edge.TRAILING if self is Edge.LEADING else Edge.LEADING

    def screen_sign(self, right_to_left: bool = False) -> int:
        """-1 for the left side of the screen, +1 for the right side."""
        sign = -1 if self is Edge.LEADING else 1
        return -sign if right_to_left else sign


def edge_for(direction: NavigationDirection) -> Edge:
    """Forward moves exit through the trailing edge, backward through the leading edge."""
    if direction is NavigationDirection.FORWARD:
        return Edge.TRAILING
    return Edge.LEADING


@dataclass(frozen=True)
class PanelTransition:
    """A single one-shot move between two panels."""
    from_panel: str
    to_panel: str
    direction: NavigationDirection
    edge: Edge

    @property
    def exit_edge(self) -> Edge:
        return self.edge

    @property
    def entry_edge(self) -> Edge:
        return self.edge.opposite


class PanelNavigator:
    """
    Owns the selection and publishes a transition for every move.

    Input sources do not call this directly; they emit
    EVENT_NAVIGATE_REQUEST and the navigator reacts.
    """

    def __init__(self, selector: CircularSelector, bus: EventBus):
        self.selector = selector
        self.bus = bus
        self.bus.subscribe(EVENT_NAVIGATE_REQUEST, self._on_navigate_request)

    @property
    def current(self) -> str:
        return self.selector.current

    def navigate(self, direction: NavigationDirection) -> PanelTransition:
        from_panel = self.selector.current
        steps = 1 if direction is NavigationDirection.FORWARD else -1
        to_panel = self.selector.step(steps)

        transition = PanelTransition(
            from_panel=from_panel,
            to_panel=to_panel,
            direction=direction,
            edge=edge_for(direction),
        )
        logger.debug("Navigate %s: %s -> %s (exit %s)",
                     direction.name, from_panel, to_panel, transition.edge.name)

        self.bus.emit(EVENT_PANEL_TRANSITION, transition=transition)
        return transition

    def next(self) -> PanelTransition:
        return self.navigate(NavigationDirection.FORWARD)

    def prev(self) -> PanelTransition:
        return self.navigate(NavigationDirection.BACKWARD)

    def _on_navigate_request(self, sender, direction: NavigationDirection, source: str = "", **_):
        self.navigate(direction)
