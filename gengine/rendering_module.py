"""Draws each frame: the 2D queue seen through the current camera."""

from __future__ import annotations

import math
from typing import Optional

import pygame

from .camera import Camera, CameraProjection, RawCamera
from .render_queue import Renderer2d

_CLEAR_COLOR = (0, 0, 0, 0)
_EPSILON = 1e-6


def _view_height(raw: RawCamera) -> float:
    """Height of the world plane z = 0 that the camera sees."""
    fovy = abs(raw.fovy)
    if raw.projection == CameraProjection.ORTHOGRAPHIC:
        return fovy
    distance = abs(raw.position.z)
    return 2.0 * distance * math.tan(math.radians(fovy) * 0.5)


class RenderingModule:
    """Renders the 2D queue each frame with the camera module's rendering camera.

    Queued draw callbacks paint in world units onto a canvas the size of the
    target; the canvas is then zoomed so that the camera's view height fills
    the target, centred on the camera.
    """

    def __init__(self, camera_module: Optional[object] = None) -> None:
        self._camera_module = camera_module
        self._renderer_2d = Renderer2d()
        self._surface: Optional[pygame.Surface] = None

    @property
    def renderer_2d(self) -> Renderer2d:
        return self._renderer_2d

    @property
    def surface(self) -> Optional[pygame.Surface]:
        """The surface drawn to; the display surface when unset."""
        return self._surface

    @surface.setter
    def surface(self, value: Optional[pygame.Surface]) -> None:
        self._surface = value

    def init(self) -> None:
        pass

    def tick(self) -> None:
        camera = None
        if self._camera_module is not None:
            camera = self._camera_module.current_rendering_camera
        self.render(camera)

    def dispose(self) -> None:
        self._surface = None

    def render(self, camera: Optional[Camera]) -> None:
        """Clear the target and draw the queued 2D callbacks through ``camera``.

        Without a camera nothing is drawn, but the queue is still emptied.
        """
        target = self._surface if self._surface is not None else pygame.display.get_surface()

        if target is None or camera is None:
            if target is not None:
                target.fill(_CLEAR_COLOR)
            self._renderer_2d.render(pygame.Surface((1, 1), pygame.SRCALPHA))
            return

        target.fill(_CLEAR_COLOR)
        width, height = target.get_size()
        canvas = pygame.Surface((width, height), pygame.SRCALPHA)
        canvas.fill(_CLEAR_COLOR)
        self._renderer_2d.render(canvas)

        raw = camera.raw_camera
        view_height = _view_height(raw)
        zoom = height / view_height if view_height > _EPSILON else 1.0
        self._composite(target, canvas, raw.position.x, raw.position.y, zoom)

    @staticmethod
    def _composite(
        target: pygame.Surface, canvas: pygame.Surface, centre_x: float, centre_y: float, zoom: float
    ) -> None:
        width, height = target.get_size()
        view_width = width / zoom
        view_height = height / zoom
        left = centre_x - view_width * 0.5
        top = centre_y - view_height * 0.5

        source = pygame.Rect(
            math.floor(left),
            math.floor(top),
            math.ceil(view_width) + 1,
            math.ceil(view_height) + 1,
        ).clip(canvas.get_rect())
        if source.width <= 0 or source.height <= 0:
            return

        scaled_size = (max(1, round(source.width * zoom)), max(1, round(source.height * zoom)))
        piece = pygame.transform.scale(canvas.subsurface(source), scaled_size)
        destination = (round((source.x - left) * zoom), round((source.y - top) * zoom))
        target.blit(piece, destination)