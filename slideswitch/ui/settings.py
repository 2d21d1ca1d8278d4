"""
Settings Module
================
Application settings and configuration management.

Features:
- Keyboard bindings for previous/next
- Mouse swipe sensitivity
- Window size, fullscreen and layout direction
- Slide duration and timing curve
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from typing import Tuple

import pygame

logger = logging.getLogger(__name__)


# =====================================================
# SETTINGS DATA
# =====================================================

@dataclass
class ControlSettings:
    """Settings for input controls."""
    # Keyboard bindings (pygame key codes)
    key_prev: int = pygame.K_LEFT
    key_next: int = pygame.K_RIGHT
    key_prev_alt: int = pygame.K_a
    key_next_alt: int = pygame.K_d
    key_debug: int = pygame.K_F3

    # Mouse swipe
    swipe_min_distance: float = 0.08      # Fraction of window width (0.02 - 0.3)
    swipe_directional_ratio: float = 2.0  # X movement must be 2x Y movement


@dataclass
class GraphicsSettings:
    """Settings for display."""
    resolution: Tuple[int, int] = (480, 640)
    fullscreen: bool = False
    max_fps: int = 60                     # 0 for uncapped
    show_indicators: bool = True
    right_to_left: bool = False           # Mirror leading/trailing edges


@dataclass
class AnimationSettings:
    """Settings for the slide transition."""
    duration: float = 0.35                # Seconds
    easing: str = "linear"                # "linear" or "ease_out_cubic"


@dataclass
class AppSettings:
    """Complete application settings."""
    controls: ControlSettings = field(default_factory=ControlSettings)
    graphics: GraphicsSettings = field(default_factory=GraphicsSettings)
    animation: AnimationSettings = field(default_factory=AnimationSettings)

    def save(self, path: str = "settings.json"):
        """Save settings to file."""
        data = {
            'controls': asdict(self.controls),
            'graphics': {
                **asdict(self.graphics),
                'resolution': list(self.graphics.resolution),
            },
            'animation': asdict(self.animation),
        }
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load(cls, path: str = "settings.json") -> 'AppSettings':
        """Load settings from file, falling back to defaults."""
        if not os.path.exists(path):
            return cls()

        try:
            with open(path, 'r') as f:
                data = json.load(f)

            settings = cls()

            for section in ('controls', 'graphics', 'animation'):
                target = getattr(settings, section)
                values = data.get(section, {})
                if not isinstance(values, dict):
                    logger.warning("Ignoring settings section '%s': expected an object", section)
                    continue

                for key, value in values.items():
                    if not hasattr(target, key):
                        continue
                    if section == 'graphics' and key == 'resolution':
                        if _valid_resolution(value):
                            target.resolution = tuple(value)
                        else:
                            logger.warning("Ignoring graphics.resolution=%r: expected two positive ints", value)
                    elif _matches_type(getattr(target, key), value):
                        setattr(target, key, value)
                    else:
                        logger.warning("Ignoring %s.%s=%r: expected %s",
                                       section, key, value, type(getattr(target, key)).__name__)

            return settings
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("Error loading settings from %s: %s", path, e)
            return cls()


def _matches_type(default, value) -> bool:
    """Whether a loaded value can replace a field holding `default`."""
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if isinstance(default, float):
        return isinstance(value, (int, float))
    return isinstance(value, type(default))


def _valid_resolution(value) -> bool:
    return (isinstance(value, list) and len(value) == 2 and
            all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in value))
