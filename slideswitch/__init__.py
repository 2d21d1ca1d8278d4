"""
SlideSwitch: a swipeable five-panel view switcher with slide transitions.
"""

__version__ = "0.1.0"
