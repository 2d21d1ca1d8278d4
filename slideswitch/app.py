"""
SlideSwitch
===========
Five panels, two arrow buttons, one slide per move.

Core features:
- Previous/next buttons with wraparound
- Directional slide transitions
- Keyboard and mouse swipe navigation
- Debug overlay (press F3)
"""

import logging
from typing import Optional

import cv2
import numpy as np
import pygame

from slideswitch.core.display import AppDisplay, normalize
from slideswitch.core.events import (
    EventBus, EVENT_NAVIGATE_REQUEST, EVENT_PANEL_TRANSITION, EVENT_TRANSITION_COMPLETE
)
from slideswitch.core.navigator import NavigationDirection, PanelNavigator, edge_for
from slideswitch.core.scene_manager import SceneCarouselManager
from slideswitch.core.selector import CircularSelector
from slideswitch.scenes.panels import build_panels
from slideswitch.ui.buttons import layout_buttons
from slideswitch.ui.input import SwipeTracker
from slideswitch.ui.settings import AppSettings

logger = logging.getLogger(__name__)


# =====================
# DEBUG UI
# =====================
class DebugUI:
    """Debug overlay - toggle with F3."""

    def __init__(self, bus: EventBus):
        self.enabled = False
        self.events = []
        self.now = 0.0

        bus.subscribe(EVENT_NAVIGATE_REQUEST, self._on_navigate_request)
        bus.subscribe(EVENT_PANEL_TRANSITION, self._on_panel_transition)
        bus.subscribe(EVENT_TRANSITION_COMPLETE, self._on_transition_complete)

    def toggle(self):
        self.enabled = not self.enabled

    def log(self, msg: str):
        self.events.append((self.now, msg))
        if len(self.events) > 8:
            self.events.pop(0)

    def _on_navigate_request(self, sender, direction, source="", **_):
        self.log(f"{direction.name} ({source})")

    def _on_panel_transition(self, sender, transition, **_):
        self.log(f"{transition.from_panel} -> {transition.to_panel} [{transition.edge.name}]")

    def _on_transition_complete(self, sender, to_scene=None, **_):
        self.log(f"DONE {to_scene}")

    def render(self, frame: np.ndarray, current: str, progress: float, fps: float):
        if not self.enabled:
            return

        font = cv2.FONT_HERSHEY_SIMPLEX

        overlay = frame.copy()
        cv2.rectangle(overlay, (10, 10), (260, 230), (20, 20, 20), -1)
        cv2.addWeighted(overlay, 0.8, frame, 0.2, 0, frame)

        y = 30
        cv2.putText(frame, "DEBUG [F3]", (20, y), font, 0.5, (0, 255, 255), 1)
        y += 25
        cv2.putText(frame, f"Panel: {current}", (20, y), font, 0.45, (180, 180, 180), 1)
        y += 22
        cv2.putText(frame, f"Slide: {progress:.2f}", (20, y), font, 0.45, (180, 180, 180), 1)
        y += 22
        cv2.putText(frame, f"FPS: {fps:.0f}", (20, y), font, 0.45, (180, 180, 180), 1)
        y += 28

        cv2.putText(frame, "Events:", (20, y), font, 0.45, (200, 200, 200), 1)
        y += 20

        for evt_t, evt_msg in reversed(self.events[-5:]):
            age = self.now - evt_t
            alpha = max(0.3, 1.0 - age / 3.0)
            col = tuple(int(c * alpha) for c in (150, 255, 150))
            cv2.putText(frame, f"  {evt_msg}", (20, y), font, 0.35, col, 1)
            y += 16


# =====================
# APP
# =====================
class SlideSwitcherApp:
    """Panel switcher with settings, controls and the frame loop."""

    CONTROL_BAR_HEIGHT = 90
    BACKGROUND = (247, 242, 242)

    def __init__(self, settings: Optional[AppSettings] = None, title: str = "SlideSwitch"):
        self.settings = settings or AppSettings()
        self.title = title
        self.width, self.height = self.settings.graphics.resolution

        self.bus = EventBus()

        panels = build_panels()
        self.selector = CircularSelector([name for name, _ in panels])
        self.navigator = PanelNavigator(self.selector, self.bus)

        graphics = self.settings.graphics
        animation = self.settings.animation
        self.carousel = SceneCarouselManager(
            self.width, self.stage_height, self.bus,
            duration=animation.duration,
            easing=animation.easing,
            right_to_left=graphics.right_to_left,
            background=self.BACKGROUND,
        )
        self.carousel.show_indicators = graphics.show_indicators
        for name, scene in panels:
            self.carousel.add_scene(name, scene)
        self.carousel.set_scene(self.selector.current)

        self.swipe = SwipeTracker(self.settings.controls)
        self.prev_button, self.next_button = layout_buttons(
            self.width, self.stage_height, self.CONTROL_BAR_HEIGHT)

        self.debug = DebugUI(self.bus)
        self.display: Optional[AppDisplay] = None

    @property
    def stage_height(self) -> int:
        return max(1, self.height - self.CONTROL_BAR_HEIGHT)

    @property
    def current_panel(self) -> str:
        return self.navigator.current

    def request(self, direction: NavigationDirection, source: str):
        """Ask for a move. The navigator and the renderer react via the bus."""
        self.bus.emit(EVENT_NAVIGATE_REQUEST, direction=direction, source=source)

    def swipe_direction(self, swipe: str) -> NavigationDirection:
        """A drag follows the outgoing panel: it points at the exit edge."""
        sign = -1 if swipe == 'LEFT' else 1
        rtl = self.settings.graphics.right_to_left
        if edge_for(NavigationDirection.FORWARD).screen_sign(rtl) == sign:
            return NavigationDirection.FORWARD
        return NavigationDirection.BACKWARD

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height
        self.carousel.resize(width, self.stage_height)
        self.prev_button, self.next_button = layout_buttons(
            width, self.stage_height, self.CONTROL_BAR_HEIGHT)

    def handle_events(self, events: dict) -> bool:
        """Apply one frame of input. Returns False to quit."""
        if events['quit']:
            return False

        if events['resized']:
            self.resize(*events['resized'])

        controls = self.settings.controls
        for key in events['key_down']:
            if key in (pygame.K_ESCAPE, pygame.K_q):
                return False
            elif key in (controls.key_next, controls.key_next_alt):
                self.request(NavigationDirection.FORWARD, 'key')
            elif key in (controls.key_prev, controls.key_prev_alt):
                self.request(NavigationDirection.BACKWARD, 'key')
            elif key == controls.key_debug:
                self.debug.toggle()

        mouse_pos = events['mouse_pos']
        mouse_down = events['mouse_down']
        mouse_up = events['mouse_up']

        clicked = False
        if self.prev_button.update(mouse_pos, mouse_down):
            self.request(NavigationDirection.BACKWARD, 'button')
            clicked = True
        if self.next_button.update(mouse_pos, mouse_down):
            self.request(NavigationDirection.FORWARD, 'button')
            clicked = True

        if clicked:
            self.swipe.cancel()
        elif mouse_down is not None and mouse_down[1] < self.stage_height:
            self.swipe.press(*normalize(mouse_down, self.width, self.height))

        if mouse_up is not None:
            swipe = self.swipe.release(*normalize(mouse_up, self.width, self.height))
            if swipe:
                self.request(self.swipe_direction(swipe), 'swipe')

        return True

    def step(self, delta_time: float):
        self.debug.now += delta_time
        self.carousel.update(delta_time)
        self.prev_button.tick(delta_time)
        self.next_button.tick(delta_time)

    def render(self) -> np.ndarray:
        frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        frame[:] = self.BACKGROUND

        self.carousel.render(frame[:self.stage_height])

        self.prev_button.draw(frame)
        self.next_button.draw(frame)

        fps = self.display.get_fps() if self.display else 0.0
        self.debug.render(frame, self.current_panel, self.carousel.transition.progress, fps)
        return frame

    def run(self):
        graphics = self.settings.graphics
        self.display = AppDisplay(self.width, self.height, self.title, graphics.fullscreen)
        self.display.set_target_fps(graphics.max_fps)
        if graphics.fullscreen:
            self.resize(*self.display.get_size())

        logger.info("Starting on %s", self.current_panel)
        try:
            while self.display.running:
                events = self.display.process_events()
                if not self.handle_events(events):
                    break

                self.step(self.display.tick())
                self.display.show_frame(self.render())
        finally:
            self.display.close()
