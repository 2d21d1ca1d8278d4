"""
Display Module
==============
Pygame window that shows OpenCV-style BGR frames and collects input.
"""

import logging
from typing import Optional, Tuple

import numpy as np
import pygame

logger = logging.getLogger(__name__)


class AppDisplay:
    """
    Pygame-based display for the panel switcher.

    Features:
    - Windowed or fullscreen (F11 toggles)
    - Resizable window
    - Frame rate capping
    """

    def __init__(self,
                 width: int = 480,
                 height: int = 640,
                 title: str = "SlideSwitch",
                 fullscreen: bool = False):
        pygame.init()
        pygame.display.set_caption(title)

        self.width = width
        self.height = height
        self.windowed_size = (width, height)
        self.title = title
        self._fullscreen = fullscreen
        self._running = True

        info = pygame.display.Info()
        self.screen_width = info.current_w
        self.screen_height = info.current_h

        self._create_window(fullscreen)

        self.clock = pygame.time.Clock()
        self.target_fps = 60  # 0 = uncapped
        self.actual_fps = 0.0

    def set_target_fps(self, fps: int):
        """Set target FPS. Use 0 for uncapped."""
        self.target_fps = fps

    def _create_window(self, fullscreen: bool):
        """Create or recreate the window."""
        if fullscreen:
            self.screen = pygame.display.set_mode(
                (self.screen_width, self.screen_height),
                pygame.FULLSCREEN
            )
            self.width, self.height = self.screen_width, self.screen_height
        else:
            self.width, self.height = self.windowed_size
            self.screen = pygame.display.set_mode(
                (self.width, self.height),
                pygame.RESIZABLE
            )
        self._fullscreen = fullscreen
        logger.debug("Window %dx%d (fullscreen=%s)", self.width, self.height, fullscreen)

    def toggle_fullscreen(self) -> bool:
        """Toggle between fullscreen and windowed mode."""
        self._create_window(not self._fullscreen)
        return self._fullscreen

    def get_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def process_events(self) -> dict:
        """
        Process pygame events and return what the app cares about.

        Returns:
            Dictionary with:
            - 'quit': True if window should close
            - 'key_down': List of keys just pressed this frame
            - 'mouse_pos': (x, y) in pixels
            - 'mouse_down': (x, y) of a left press this frame, or None
            - 'mouse_up': (x, y) of a left release this frame, or None
            - 'resized': New size if window was resized, None otherwise
        """
        events = {
            'quit': False,
            'key_down': [],
            'mouse_pos': pygame.mouse.get_pos(),
            'mouse_down': None,
            'mouse_up': None,
            'resized': None,
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events['quit'] = True
                self._running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_F11:
                    self.toggle_fullscreen()
                    events['resized'] = (self.width, self.height)
                else:
                    events['key_down'].append(event.key)

            elif event.type == pygame.VIDEORESIZE:
                self.width = event.w
                self.height = event.h
                if not self._fullscreen:
                    self.windowed_size = (event.w, event.h)
                events['resized'] = (event.w, event.h)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                events['mouse_down'] = event.pos

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                events['mouse_up'] = event.pos

        return events

    def show_frame(self, frame: np.ndarray):
        """
        Display a BGR frame, scaled to the window if sizes differ.
        """
        # BGR to RGB, and (h, w, c) to pygame's (w, h, c)
        frame_rgb = frame[:, :, ::-1]
        surface = pygame.surfarray.make_surface(frame_rgb.swapaxes(0, 1))

        if surface.get_size() != self.screen.get_size():
            surface = pygame.transform.scale(surface, self.screen.get_size())

        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def tick(self) -> float:
        """Cap the frame rate. Returns seconds since the previous tick."""
        if self.target_fps > 0:
            ms = self.clock.tick(self.target_fps)
        else:
            ms = self.clock.tick()
        self.actual_fps = self.clock.get_fps()
        return ms / 1000.0

    def get_fps(self) -> float:
        return self.actual_fps

    @property
    def running(self) -> bool:
        return self._running

    def close(self):
        """Close the display and clean up pygame."""
        self._running = False
        pygame.quit()


def normalize(pos: Optional[Tuple[int, int]], width: int, height: int) -> Optional[Tuple[float, float]]:
    """Pixel position to 0-1 range."""
    if pos is None:
        return None
    return (pos[0] / width if width > 0 else 0.0,
            pos[1] / height if height > 0 else 0.0)
