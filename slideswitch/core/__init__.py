"""
Core components for SlideSwitch.
"""

from .events import EventBus
from .navigator import Edge, NavigationDirection, PanelNavigator, PanelTransition, edge_for
from .scene_manager import NavigableScene, SceneCarouselManager, SceneTransition
from .selector import CircularSelector, Panel, advance

__all__ = [
    'EventBus',
    'Edge',
    'NavigationDirection',
    'PanelNavigator',
    'PanelTransition',
    'edge_for',
    'NavigableScene',
    'SceneCarouselManager',
    'SceneTransition',
    'CircularSelector',
    'Panel',
    'advance',
]
