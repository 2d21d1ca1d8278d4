"""
Scene Manager Module
====================
Panel carousel with directional slide transitions.

Features:
- Circular panel order, driven by transition events from the navigator
- One-shot slide animation per transition
- Linear or ease-out timing curves
- Page indicator dots under the stage
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import cv2
import numpy as np

from .events import EventBus, EVENT_PANEL_TRANSITION, EVENT_TRANSITION_COMPLETE
from .navigator import Edge, PanelTransition

logger = logging.getLogger(__name__)


def linear(t: float) -> float:
    return t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out for smooth deceleration."""
    return 1 - pow(1 - t, 3)


EASING_CURVES: Dict[str, Callable[[float], float]] = {
    'linear': linear,
    'ease_out_cubic': ease_out_cubic,
}


@dataclass
class SceneTransition:
    """Holds slide animation state."""
    active: bool = False
    edge: Edge = Edge.TRAILING
    progress: float = 0.0  # 0 to 1
    duration: float = 0.35  # Seconds
    from_scene: Optional[str] = None
    to_scene: Optional[str] = None


class NavigableScene(ABC):
    """Base class for panels shown by the carousel."""

    def __init__(self):
        self.scene_manager: Optional['SceneCarouselManager'] = None
        self.name: str = ""

    def on_enter(self, from_scene: Optional[str] = None, edge: Optional[Edge] = None):
        """Called when this panel starts sliding in."""
        pass

    def on_exit(self, to_scene: Optional[str] = None, edge: Optional[Edge] = None):
        """Called when this panel starts sliding out."""
        pass

    def update(self, delta_time: float):
        pass

    @abstractmethod
    def render(self, frame: np.ndarray):
        """Render the panel onto a stage-sized frame."""
        pass

    def get_indicator_label(self) -> str:
        """Override to provide a custom indicator label."""
        return self.name.upper()


class SceneCarouselManager:
    """
    Draws the current panel and animates moves between panels.

    The manager never decides where to go. It listens for
    EVENT_PANEL_TRANSITION and plays the slide it describes: the
    outgoing panel leaves toward the transition edge and the incoming
    panel arrives from the opposite one.
    """

    def __init__(self, width: int, height: int, bus: EventBus,
                 duration: float = 0.35, easing: str = 'linear',
                 right_to_left: bool = False,
                 background: Tuple[int, int, int] = (247, 242, 242)):
        self.width = width
        self.height = height
        self.bus = bus

        self.scenes: Dict[str, NavigableScene] = {}
        self.scene_order: List[str] = []
        self.current_scene: Optional[str] = None

        self.transition = SceneTransition(duration=duration)
        self.right_to_left = right_to_left
        self.background = background

        if easing not in EASING_CURVES:
            logger.warning("Unknown easing '%s', using linear", easing)
            easing = 'linear'
        self.easing = easing

        # Visual settings
        self.show_indicators = True
        self.indicator_height = 40

        self.bus.subscribe(EVENT_PANEL_TRANSITION, self._on_panel_transition)

    def add_scene(self, name: str, scene: NavigableScene, position: Optional[int] = None):
        """
        Add a panel to the carousel.

        Args:
            name: Unique panel identifier
            scene: The panel instance
            position: Optional position in order (default: append to end)
        """
        if name in self.scenes:
            raise ValueError(f"Scene '{name}' already registered")

        scene.scene_manager = self
        scene.name = name
        self.scenes[name] = scene

        if position is not None:
            self.scene_order.insert(position, name)
        else:
            self.scene_order.append(name)

    def set_scene(self, name: str):
        """Set the current panel without transition."""
        if name not in self.scenes:
            raise ValueError(f"Scene '{name}' not found")

        if self.current_scene:
            self.scenes[self.current_scene].on_exit(name)

        prev = self.current_scene
        self.current_scene = name
        self.scenes[name].on_enter(prev)

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height

    def _on_panel_transition(self, sender, transition: PanelTransition, **_):
        self._start_transition(transition.from_panel, transition.to_panel, transition.exit_edge)

    def _start_transition(self, from_scene: str, to_scene: str, edge: Edge):
        """Start a slide animation, finishing any slide still in flight."""
        if to_scene not in self.scenes:
            raise ValueError(f"Scene '{to_scene}' not found")

        if self.transition.active:
            self._finish_transition()

        self.transition.active = True
        self.transition.edge = edge
        self.transition.progress = 0.0
        self.transition.from_scene = from_scene
        self.transition.to_scene = to_scene

        # Notify panels
        if from_scene in self.scenes:
            self.scenes[from_scene].on_exit(to_scene, edge)
        self.scenes[to_scene].on_enter(from_scene, edge.opposite)

        if self.transition.duration <= 0:
            self._finish_transition()

    def _finish_transition(self):
        t = self.transition
        self.current_scene = t.to_scene
        t.active = False
        t.progress = 0.0
        logger.debug("Transition complete: %s -> %s", t.from_scene, t.to_scene)
        self.bus.emit(EVENT_TRANSITION_COMPLETE,
                      from_scene=t.from_scene, to_scene=t.to_scene, edge=t.edge)

    def update(self, delta_time: float):
        """Advance the slide animation and the visible panels."""
        if self.transition.active:
            self.transition.progress += delta_time / self.transition.duration
            if self.transition.progress >= 1.0:
                self._finish_transition()

        if self.transition.active:
            for name in (self.transition.from_scene, self.transition.to_scene):
                if name in self.scenes:
                    self.scenes[name].update(delta_time)
        elif self.current_scene:
            self.scenes[self.current_scene].update(delta_time)

    def slide_offsets(self) -> Tuple[int, int]:
        """Horizontal pixel offsets of the outgoing and incoming panels."""
        progress = EASING_CURVES[self.easing](min(self.transition.progress, 1.0))
        offset = int(self.width * progress)
        exit_sign = self.transition.edge.screen_sign(self.right_to_left)

        from_offset = exit_sign * offset
        to_offset = -exit_sign * (self.width - offset)
        return from_offset, to_offset

    def render(self, frame: np.ndarray):
        """Render the current panel(s) with transitions."""
        frame[:] = self.background

        if self.transition.active:
            self._render_transition(frame)
        elif self.current_scene:
            self.scenes[self.current_scene].render(frame)

        if self.show_indicators:
            self._render_indicators(frame)

    def _render_transition(self, frame: np.ndarray):
        """Render the slide between the outgoing and incoming panels."""
        from_frame = np.empty_like(frame)
        to_frame = np.empty_like(frame)
        from_frame[:] = self.background
        to_frame[:] = self.background

        if self.transition.from_scene in self.scenes:
            self.scenes[self.transition.from_scene].render(from_frame)
        self.scenes[self.transition.to_scene].render(to_frame)

        from_offset, to_offset = self.slide_offsets()

        self._blit_with_offset(frame, from_frame, from_offset)
        self._blit_with_offset(frame, to_frame, to_offset)

    def _blit_with_offset(self, dest: np.ndarray, src: np.ndarray, x_offset: int):
        """Blit source onto destination with horizontal offset."""
        h, w = dest.shape[:2]

        if x_offset >= w or x_offset <= -w:
            return

        if x_offset >= 0:
            src_start = 0
            src_end = w - x_offset
            dest_start = x_offset
            dest_end = w
        else:
            src_start = -x_offset
            src_end = w
            dest_start = 0
            dest_end = w + x_offset

        dest[:, dest_start:dest_end] = src[:, src_start:src_end]

    def _render_indicators(self, frame: np.ndarray):
        """Render panel position dots and the current label."""
        if not self.scene_order or not self.current_scene:
            return

        # While sliding, the dots already point at the destination
        shown = self.transition.to_scene if self.transition.active else self.current_scene
        current_idx = self.scene_order.index(shown)
        num_scenes = len(self.scene_order)

        h, w = frame.shape[:2]
        y = h - 12

        dot_radius = 5
        dot_spacing = 22
        total_width = (num_scenes - 1) * dot_spacing
        start_x = (w - total_width) // 2

        label = self.scenes[shown].get_indicator_label()
        font = cv2.FONT_HERSHEY_SIMPLEX
        (tw, th), _ = cv2.getTextSize(label, font, 0.45, 1)
        cv2.putText(frame, label, ((w - tw) // 2, y - 14),
                   font, 0.45, (90, 90, 90), 1)

        for i in range(num_scenes):
            x = start_x + i * dot_spacing
            if i == current_idx:
                cv2.circle(frame, (x, y), dot_radius, (40, 40, 40), -1)
            else:
                cv2.circle(frame, (x, y), dot_radius, (160, 160, 160), 1)
