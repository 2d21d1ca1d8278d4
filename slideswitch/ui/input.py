"""
Mouse swipe detection: press, drag horizontally, release.
"""

from typing import Optional

from slideswitch.ui.settings import ControlSettings


class SwipeTracker:
    """Tracks a mouse drag and reports it as a swipe on release."""

    def __init__(self, controls: ControlSettings):
        self.controls = controls
        self.start_x: Optional[float] = None
        self.start_y: Optional[float] = None

    @property
    def is_tracking(self) -> bool:
        return self.start_x is not None

    def press(self, x: float, y: float):
        """Start tracking at a normalized (0-1) position."""
        self.start_x = x
        self.start_y = y

    def cancel(self):
        self.start_x = None
        self.start_y = None

    def release(self, x: float, y: float) -> Optional[str]:
        """
        Finish the drag at a normalized position.

        Returns 'LEFT' or 'RIGHT' for a horizontal swipe, or None.
        """
        if self.start_x is None:
            return None

        dx = x - self.start_x
        dy = y - self.start_y
        self.cancel()

        if abs(dx) < self.controls.swipe_min_distance:
            return None
        if abs(dx) < abs(dy) * self.controls.swipe_directional_ratio:
            return None

        return 'LEFT' if dx < 0 else 'RIGHT'
