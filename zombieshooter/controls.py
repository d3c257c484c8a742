"""Keyboard and mouse state gathered from window events."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from .defs import MAX_KEYBOARD_KEYS, MAX_MOUSE_BUTTONS


@dataclass
class InputState:
    """Which keys and mouse buttons are held down right now."""

    _keys: set[int] = field(default_factory=set)
    _previous: set[int] = field(default_factory=set)
    _buttons: set[int] = field(default_factory=set)

    def key_down(self, key: int) -> None:
        if 0 <= key < MAX_KEYBOARD_KEYS:
            self._keys.add(key)

    def key_up(self, key: int) -> None:
        if 0 <= key < MAX_KEYBOARD_KEYS:
            self._keys.discard(key)

    def mouse_down(self, button: int) -> None:
        if button < MAX_MOUSE_BUTTONS:
            self._buttons.add(button)

    def mouse_up(self, button: int) -> None:
        if button < MAX_MOUSE_BUTTONS:
            self._buttons.discard(button)

    def is_down(self, key: int) -> bool:
        return key in self._keys

    def is_mouse_down(self, button: int) -> bool:
        return button in self._buttons

    def pressed_once(self, key: int) -> bool:
        """True only on the first check after the key went down."""
        if self.is_down(key):
            if key in self._previous:
                return False
            self._previous.add(key)
            return True
        self._previous.discard(key)
        return False

    def handle_event(self, event) -> None:
        """Update the state from one window event; a quit event exits."""
        if event.type == pygame.QUIT:
            raise SystemExit(0)
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.key_up(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.mouse_down(event.button)
        elif event.type == pygame.MOUSEBUTTONUP:
            self.mouse_up(event.button)