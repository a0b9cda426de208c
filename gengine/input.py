"""Keyboard and mouse state gathered from pygame events, frame by frame."""

from __future__ import annotations

from typing import Iterable, Set

import pygame

from .vecmath import Vec2


class InputModule:
    """Tracks held keys and buttons plus what changed during the last frame."""

    def __init__(self) -> None:
        self._keys_down: Set[int] = set()
        self._keys_pressed: Set[int] = set()
        self._keys_released: Set[int] = set()
        self._buttons_down: Set[int] = set()
        self._buttons_pressed: Set[int] = set()
        self._buttons_released: Set[int] = set()
        self._mouse_position = Vec2()

    def process_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Start a new frame and apply this frame's events."""
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._buttons_pressed.clear()
        self._buttons_released.clear()

        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key not in self._keys_down:
                    self._keys_pressed.add(event.key)
                self._keys_down.add(event.key)
            elif event.type == pygame.KEYUP:
                if event.key in self._keys_down:
                    self._keys_released.add(event.key)
                self._keys_down.discard(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button not in self._buttons_down:
                    self._buttons_pressed.add(event.button)
                self._buttons_down.add(event.button)
                self._update_position(event)
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button in self._buttons_down:
                    self._buttons_released.add(event.button)
                self._buttons_down.discard(event.button)
                self._update_position(event)
            elif event.type == pygame.MOUSEMOTION:
                self._update_position(event)

    def _update_position(self, event: pygame.event.Event) -> None:
        pos = getattr(event, "pos", None)
        if pos is not None:
            self._mouse_position = Vec2(float(pos[0]), float(pos[1]))

    def is_key_pressed(self, key: int) -> bool:
        return key in self._keys_pressed

    def is_key_down(self, key: int) -> bool:
        return key in self._keys_down

    def is_key_released(self, key: int) -> bool:
        return key in self._keys_released

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._buttons_pressed

    def is_mouse_button_down(self, button: int) -> bool:
        return button in self._buttons_down

    def is_mouse_button_released(self, button: int) -> bool:
        return button in self._buttons_released

    @property
    def mouse_position(self) -> Vec2:
        return self._mouse_position