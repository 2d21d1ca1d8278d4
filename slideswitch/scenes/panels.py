"""
Panels
======
The five static demo panels: a filled shape with a centred label.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import cv2
import numpy as np

from slideswitch.core.scene_manager import NavigableScene
from slideswitch.core.selector import Panel


@dataclass(frozen=True)
class PanelStyle:
    """How a panel is drawn. Colors are BGR."""
    fill: Tuple[int, int, int]
    corner_radius: int = 0
    font: int = cv2.FONT_HERSHEY_SIMPLEX
    font_scale: float = 1.2
    thickness: int = 2
    text_color: Tuple[int, int, int] = (255, 255, 255)


PANEL_STYLES = {
    Panel.VIEW_A: PanelStyle(fill=(48, 59, 255)),     # red
    Panel.VIEW_B: PanelStyle(fill=(89, 199, 52)),     # green
    Panel.VIEW_C: PanelStyle(fill=(255, 122, 0)),     # blue
    Panel.VIEW_D: PanelStyle(fill=(0, 204, 255), corner_radius=20),  # yellow
    # cyan; bold stand-in for a monospaced label, no Hershey face is fixed-width
    Panel.VIEW_E: PanelStyle(fill=(230, 173, 50),
                             font=cv2.FONT_HERSHEY_PLAIN, font_scale=2.4, thickness=4),
}


def draw_rounded_rect(frame: np.ndarray, x: int, y: int, w: int, h: int,
                      radius: int, color: Tuple[int, int, int]):
    """Filled rectangle with rounded corners."""
    radius = max(0, min(radius, w // 2, h // 2))
    if radius == 0:
        cv2.rectangle(frame, (x, y), (x + w - 1, y + h - 1), color, -1)
        return

    cv2.rectangle(frame, (x + radius, y), (x + w - 1 - radius, y + h - 1), color, -1)
    cv2.rectangle(frame, (x, y + radius), (x + w - 1, y + h - 1 - radius), color, -1)
    for cx, cy in ((x + radius, y + radius),
                   (x + w - 1 - radius, y + radius),
                   (x + radius, y + h - 1 - radius),
                   (x + w - 1 - radius, y + h - 1 - radius)):
        cv2.circle(frame, (cx, cy), radius, color, -1, lineType=cv2.LINE_AA)


class ColorPanel(NavigableScene):
    """A square of solid color with a label in the middle."""

    def __init__(self, label: str, style: PanelStyle, margin: int = 20):
        super().__init__()
        self.label = label
        self.style = style
        self.margin = margin

    def get_indicator_label(self) -> str:
        return self.label.upper()

    def square(self, width: int, height: int) -> Tuple[int, int, int]:
        """Top-left corner and side length of the panel within the stage."""
        reserved = 0
        if self.scene_manager and self.scene_manager.show_indicators:
            reserved = self.scene_manager.indicator_height

        usable_h = height - reserved
        side = max(0, min(width, usable_h) - 2 * self.margin)
        x = (width - side) // 2
        y = (usable_h - side) // 2
        return x, y, side

    def render(self, frame: np.ndarray):
        h, w = frame.shape[:2]
        x, y, side = self.square(w, h)
        if side == 0:
            return

        draw_rounded_rect(frame, x, y, side, side, self.style.corner_radius, self.style.fill)

        s = self.style
        (tw, th), _ = cv2.getTextSize(self.label, s.font, s.font_scale, s.thickness)
        cv2.putText(frame, self.label, (x + (side - tw) // 2, y + (side + th) // 2),
                    s.font, s.font_scale, s.text_color, s.thickness, cv2.LINE_AA)


def panel_name(panel: Panel) -> str:
    return panel.name.lower()


def build_panels(panels: Optional[List[Panel]] = None) -> List[Tuple[str, ColorPanel]]:
    """Create (name, scene) pairs for the demo panels in swipe order."""
    panels = list(Panel) if panels is None else panels
    return [
        (panel_name(p), ColorPanel(f"View {p.letter}", PANEL_STYLES[p]))
        for p in panels
    ]
