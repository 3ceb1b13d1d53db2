"""Unit tests for toolbar Button."""

from unittest.mock import Mock

import pygame
import pytest
from pygame import Rect

from choreo.ui.widgets import Button

SCREEN_SIZE = (1000, 500)


class MockEvent:
    """Mock pygame event."""

    def __init__(self, type, **kwargs):
        self.type = type
        for k, v in kwargs.items():
            setattr(self, k, v)


@pytest.fixture
def callback():
    return Mock()


@pytest.fixture
def button(callback):
    """A 60x30 button at (100, 5)."""
    return Button(Rect(100, 5, 60, 30), "Grid", callback)


class TestMouse:
    """Mouse clicks and hover."""

    def test_left_click_fires(self, button, callback):
        event = MockEvent(pygame.MOUSEBUTTONDOWN, pos=(120, 20), button=1)
        assert button.handle_event(event, SCREEN_SIZE) is True
        callback.assert_called_once()

    def test_right_click_ignored(self, button, callback):
        event = MockEvent(pygame.MOUSEBUTTONDOWN, pos=(120, 20), button=3)
        assert button.handle_event(event, SCREEN_SIZE) is False
        callback.assert_not_called()

    def test_click_outside_ignored(self, button, callback):
        event = MockEvent(pygame.MOUSEBUTTONDOWN, pos=(300, 20), button=1)
        assert button.handle_event(event, SCREEN_SIZE) is False
        callback.assert_not_called()

    def test_hover(self, button):
        button.handle_event(MockEvent(pygame.MOUSEMOTION, pos=(120, 20)), SCREEN_SIZE)
        assert button.hovered is True
        button.handle_event(MockEvent(pygame.MOUSEMOTION, pos=(500, 300)), SCREEN_SIZE)
        assert button.hovered is False


class TestFingerTap:
    """Finger positions arrive normalized to the window size."""

    def test_tap_on_button_fires(self, button, callback):
        event = MockEvent(pygame.FINGERDOWN, x=130 / 1000, y=20 / 500, finger_id=0, touch_id=0)
        assert button.handle_event(event, SCREEN_SIZE) is True
        callback.assert_called_once()

    def test_tap_elsewhere_ignored(self, button, callback):
        event = MockEvent(pygame.FINGERDOWN, x=0.5, y=0.5, finger_id=0, touch_id=0)
        assert button.handle_event(event, SCREEN_SIZE) is False
        callback.assert_not_called()

    def test_tap_uses_screen_size(self, button, callback):
        """The same normalized point lands elsewhere on a different window."""
        event = MockEvent(pygame.FINGERDOWN, x=130 / 1000, y=20 / 500, finger_id=0, touch_id=0)
        assert button.handle_event(event, (2000, 1000)) is False
        callback.assert_not_called()


class TestActive:
    """Toggle state is read from the setting it controls."""

    def test_plain_button_never_active(self, button):
        assert button.active is False

    def test_follows_is_active(self, callback):
        setting = {"on": True}
        button = Button(Rect(0, 0, 10, 10), "Grid", callback, is_active=lambda: setting["on"])
        assert button.active is True
        setting["on"] = False
        assert button.active is False
