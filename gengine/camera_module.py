"""Owns the scene cameras and the free-flying editor camera."""

from __future__ import annotations

import math
from typing import List, Optional

import pygame

from .camera import Camera, CameraProjection
from .input import InputModule
from .vecmath import Quat, Vec2, Vec3

_LOOK_SENSITIVITY = 0.1
_PITCH_LIMIT = math.pi / 2 - 0.01


class CameraModule:
    """Keeps track of game cameras and which camera the frame is drawn with."""

    def __init__(self, input_module: Optional[InputModule] = None) -> None:
        self._input = input_module if input_module is not None else InputModule()
        self._cameras: List[Camera] = []
        self._editor_camera = Camera(
            position=Vec3(0.0, 0.0, -500.0), projection=CameraProjection.PERSPECTIVE
        )
        self._current_camera: Optional[Camera] = None
        self._using_editor_camera = False
        self._last_mouse_position = Vec2()

    def tick(self, delta_time: float) -> None:
        self._tick_editor_camera(delta_time)

    def create_camera(self) -> Camera:
        """Create a camera and make it the current one."""
        camera = Camera()
        self._cameras.append(camera)
        self._current_camera = camera
        return camera

    def remove_camera(self, camera: Optional[Camera]) -> None:
        if camera is None:
            return
        self._cameras = [c for c in self._cameras if c is not camera]
        if self._cameras:
            self._current_camera = self._cameras[-1]
        elif self._current_camera is camera:
            self._current_camera = None

    @property
    def cameras(self) -> tuple:
        return tuple(self._cameras)

    @property
    def editor_camera(self) -> Camera:
        return self._editor_camera

    @property
    def current_camera(self) -> Optional[Camera]:
        return self._current_camera

    @property
    def current_rendering_camera(self) -> Optional[Camera]:
        return self._editor_camera if self._using_editor_camera else self._current_camera

    @property
    def using_editor_camera(self) -> bool:
        return self._using_editor_camera

    @using_editor_camera.setter
    def using_editor_camera(self, value: bool) -> None:
        self._using_editor_camera = value

    def _tick_editor_camera(self, delta_time: float) -> None:
        if not self._using_editor_camera:
            return

        inp = self._input
        camera = self._editor_camera
        step = (400.0 if inp.is_key_down(pygame.K_LSHIFT) else 100.0) * delta_time

        forward = camera.forward_direction
        right = camera.right_direction
        position = camera.position

        if inp.is_key_down(pygame.K_w):
            position = position - forward * step
        if inp.is_key_down(pygame.K_s):
            position = position + forward * step
        if inp.is_key_down(pygame.K_d):
            position = position + right * step
        if inp.is_key_down(pygame.K_a):
            position = position - right * step
        camera.position = position

        mouse = inp.mouse_position
        delta = mouse - self._last_mouse_position
        self._last_mouse_position = mouse

        if inp.is_mouse_button_down(pygame.BUTTON_RIGHT):
            yaw = delta.x * _LOOK_SENSITIVITY * delta_time
            pitch = delta.y * _LOOK_SENSITIVITY * delta_time
            euler = camera.rotation.to_euler()
            new_pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, euler.x + pitch))
            camera.rotation = Quat.from_euler(Vec3(new_pitch, euler.y + yaw, euler.z))