from types import SimpleNamespace

import pygame
import pytest

from slideswitch.core.display import AppDisplay, normalize


@pytest.fixture
def modes(monkeypatch):
    """Record window sizes instead of opening a real window."""
    opened = []

    def set_mode(size, flags=0):
        opened.append((tuple(size), flags))
        return SimpleNamespace(get_size=lambda: tuple(size))

    monkeypatch.setattr(pygame, "init", lambda: None)
    monkeypatch.setattr(pygame.display, "set_caption", lambda title: None)
    monkeypatch.setattr(pygame.display, "Info", lambda: SimpleNamespace(current_w=1920, current_h=1080))
    monkeypatch.setattr(pygame.display, "set_mode", set_mode)
    monkeypatch.setattr(pygame.time, "Clock", lambda: SimpleNamespace())
    return opened


def test_fullscreen_toggle_restores_window_size(modes):
    display = AppDisplay(480, 640)
    assert display.get_size() == (480, 640)

    display.toggle_fullscreen()
    assert display.get_size() == (1920, 1080)

    display.toggle_fullscreen()
    assert display.get_size() == (480, 640)
    assert [size for size, _ in modes] == [(480, 640), (1920, 1080), (480, 640)]


def test_resized_window_is_restored_after_fullscreen(modes, monkeypatch):
    display = AppDisplay(480, 640)
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: (0, 0))
    monkeypatch.setattr(pygame.event, "get",
                        lambda: [SimpleNamespace(type=pygame.VIDEORESIZE, w=600, h=500)])

    events = display.process_events()
    assert events['resized'] == (600, 500)

    display.toggle_fullscreen()
    display.toggle_fullscreen()
    assert display.get_size() == (600, 500)


def test_normalize():
    assert normalize((240, 160), 480, 640) == (0.5, 0.25)
    assert normalize(None, 480, 640) is None
