"""
Panels shown by SlideSwitch.
"""

from .panels import ColorPanel, PanelStyle, PANEL_STYLES, build_panels, panel_name

__all__ = [
    'ColorPanel',
    'PanelStyle',
    'PANEL_STYLES',
    'build_panels',
    'panel_name',
]
