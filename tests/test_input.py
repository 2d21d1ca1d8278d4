import numpy as np
import pytest

from slideswitch.ui.buttons import ArrowButton, layout_buttons
from slideswitch.ui.input import SwipeTracker
from slideswitch.ui.settings import ControlSettings


def test_horizontal_drag_is_a_swipe():
    tracker = SwipeTracker(ControlSettings())
    tracker.press(0.8, 0.5)
    assert tracker.is_tracking
    assert tracker.release(0.3, 0.52) == 'LEFT'
    assert not tracker.is_tracking

    tracker.press(0.2, 0.5)
    assert tracker.release(0.6, 0.5) == 'RIGHT'


def test_short_or_vertical_drag_is_ignored():
    tracker = SwipeTracker(ControlSettings())
    tracker.press(0.5, 0.5)
    assert tracker.release(0.55, 0.5) is None

    tracker.press(0.5, 0.2)
    assert tracker.release(0.7, 0.8) is None


def test_release_without_press_is_ignored():
    tracker = SwipeTracker(ControlSettings())
    assert tracker.release(0.1, 0.1) is None


def test_layout_buttons_split_the_bar_in_thirds():
    prev_btn, next_btn = layout_buttons(300, 500, 90, size=40)
    assert (prev_btn.x, prev_btn.y) == (80, 525)
    assert (next_btn.x, next_btn.y) == (180, 525)
    assert prev_btn.direction == "left"
    assert next_btn.direction == "right"


def test_button_click_and_hover():
    button = ArrowButton(10, 10, 40, "right")
    assert button.update((20, 20), None) is False
    assert button.is_hovered
    assert button.update((20, 20), (30, 30)) is True
    assert button.update((0, 0), (0, 0)) is False
    assert not button.is_hovered


def test_button_draws_inside_its_square():
    frame = np.full((60, 60, 3), 255, dtype=np.uint8)
    ArrowButton(10, 10, 40, "left").draw(frame)
    assert tuple(frame[12, 12]) == (0, 0, 0)
    assert tuple(frame[5, 5]) == (255, 255, 255)


def test_button_direction_validated():
    with pytest.raises(ValueError):
        ArrowButton(0, 0, 40, "up")
