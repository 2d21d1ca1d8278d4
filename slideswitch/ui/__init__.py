"""
Controls and settings for SlideSwitch.
"""

from .buttons import ArrowButton, layout_buttons
from .input import SwipeTracker
from .settings import AnimationSettings, AppSettings, ControlSettings, GraphicsSettings

__all__ = [
    'ArrowButton', 'layout_buttons',
    'SwipeTracker',
    'AppSettings', 'ControlSettings', 'GraphicsSettings', 'AnimationSettings',
]
