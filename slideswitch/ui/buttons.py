"""
Arrow Buttons
=============
The previous/next controls drawn under the panel stage.
"""

from typing import Optional, Tuple

import cv2
import numpy as np


class ArrowButton:
    """Filled square with an arrow, activated by a click inside it."""

    def __init__(self, x: int, y: int, size: int, direction: str,
                 color: Tuple[int, int, int] = (0, 0, 0),
                 arrow_color: Tuple[int, int, int] = (255, 255, 255)):
        if direction not in ("left", "right"):
            raise ValueError(f"direction must be 'left' or 'right', got {direction!r}")
        self.x = x
        self.y = y
        self.size = size
        self.direction = direction
        self.color = color
        self.arrow_color = arrow_color

        self.is_hovered = False
        self.flash_time = 0.0

    def contains(self, px: int, py: int) -> bool:
        return (self.x <= px <= self.x + self.size and
                self.y <= py <= self.y + self.size)

    def update(self, mouse_pos: Optional[Tuple[int, int]], clicked_at: Optional[Tuple[int, int]]) -> bool:
        """Update hover state. Returns True if clicked this frame."""
        self.is_hovered = mouse_pos is not None and self.contains(*mouse_pos)

        if clicked_at is not None and self.contains(*clicked_at):
            self.flash_time = 0.15
            return True
        return False

    def tick(self, delta_time: float):
        self.flash_time = max(0.0, self.flash_time - delta_time)

    def draw(self, frame: np.ndarray):
        """Draw the button."""
        x, y, s = self.x, self.y, self.size

        color = self.color
        if self.flash_time > 0:
            color = tuple(min(255, c + 90) for c in self.color)
        elif self.is_hovered:
            color = tuple(min(255, c + 45) for c in self.color)

        cv2.rectangle(frame, (x, y), (x + s, y + s), color, -1)

        # Arrow: shaft plus head
        cy = y + s // 2
        pad = s // 4
        head = s // 4
        cv2.line(frame, (x + pad, cy), (x + s - pad, cy), self.arrow_color, max(2, s // 10))

        if self.direction == "left":
            tip = x + pad
            pts = np.array([[tip + head, cy - head], [tip, cy], [tip + head, cy + head]], np.int32)
        else:
            tip = x + s - pad
            pts = np.array([[tip - head, cy - head], [tip, cy], [tip - head, cy + head]], np.int32)

        cv2.polylines(frame, [pts], False, self.arrow_color, max(2, s // 10), cv2.LINE_AA)


def layout_buttons(width: int, bar_top: int, bar_height: int, size: int = 40) -> Tuple[ArrowButton, ArrowButton]:
    """Place the previous/next buttons evenly across the control bar."""
    y = bar_top + (bar_height - size) // 2
    prev_x = width // 3 - size // 2
    next_x = 2 * width // 3 - size // 2
    return ArrowButton(prev_x, y, size, "left"), ArrowButton(next_x, y, size, "right")
